#!/usr/bin/env python3
"""Verify a decider proof bundle from the command line.

Usage:
    nova-decider-verify --vk decider_vk.json --proof decider_proof.json [--opaque]

Exit status: 0 if the proof is accepted, 1 if it is rejected, 2 if the input
files cannot be loaded.
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from nova_decider.primitives.curve import MalformedPointError
from nova_decider.protocol.decider import NovaDecider
from nova_decider.protocol.errors import DeciderError
from nova_decider.protocol.proof import load_proof_from_json
from nova_decider.protocol.verifying_key import DeciderVerifyingKey

EXIT_ACCEPT = 0
EXIT_REJECT = 1
EXIT_BAD_INPUT = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Verify a Nova + CycleFold decider proof (KZG openings + Groth16 on BN254)'
    )
    parser.add_argument(
        '--vk',
        required=True,
        help='Path to the decider verifying key JSON'
    )
    parser.add_argument(
        '--proof',
        required=True,
        help='Path to the decider proof bundle JSON'
    )
    parser.add_argument(
        '--opaque',
        action='store_true',
        help='Verify through the flat proof[26 + 2z] entry point'
    )
    args = parser.parse_args(argv)

    try:
        vk = DeciderVerifyingKey.from_json(args.vk)
        proof = load_proof_from_json(args.proof)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"Error: Could not load input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    print(f"Loaded verifying key: state_len={vk.state_len}, nPublic={vk.n_public_inputs}")
    decider = NovaDecider(vk)

    print(f"Verifying decider proof for {proof.steps} folded steps")
    try:
        if args.opaque:
            decider.verify_opaque_nova_proof(proof.to_words())
        else:
            decider.verify(proof)
    except DeciderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_REJECT
    except MalformedPointError as e:
        print(f"ERROR: Malformed point: {e}", file=sys.stderr)
        return EXIT_REJECT
    except ValueError as e:
        print(f"Error: Proof does not match verifying key: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    print("Proof verified")
    return EXIT_ACCEPT


if __name__ == '__main__':
    sys.exit(main())
