"""Opaque calling conventions.

Callers that cannot pass grouped arguments hand over flat word arrays instead.
These helpers only reshape. Values are never reduced or reordered.

    proof[25]       = folded_commitments[4] | fresh_cm_w[2] | cm_t_and_r[3]
                      | groth16_proof[8] | challenges_and_evals[4] | kzg_proofs[2][2]
    proof[26 + 2z]  = steps | z_0[z] | z_i[z] | proof[25]
"""

from typing import Sequence

import numpy as np

# --- Layout ---

OPAQUE_PROOF_LEN = 25

_FOLDED = slice(0, 4)
_FRESH_CM_W = slice(4, 6)
_CM_T_AND_R = slice(6, 9)
_GROTH16 = slice(9, 17)
_CHALLENGES_AND_EVALS = slice(17, 21)
_KZG_PROOFS = slice(21, 25)


def flat_proof_len(state_len: int) -> int:
    """Length of the flat proof array for a state arity z: 26 + 2z."""
    return 1 + 2 * state_len + OPAQUE_PROOF_LEN


def _as_words(values, n: int, what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=object)
    if arr.shape != (n,):
        raise ValueError(f"{what}: expected {n} words, got shape {arr.shape}")
    return arr


def _ints(arr: np.ndarray) -> list[int]:
    return [int(v) for v in arr]


# --- Opaque -> Grouped ---


def split_opaque_proof(proof: Sequence[int]) -> tuple:
    """Split proof[25] into the six grouped arguments of the structured entry point.

    Returns:
        (folded_commitments[4], fresh_cm_w[2], cm_t_and_r[3], groth16_proof[8],
         challenges_and_evals[4], kzg_proofs[2][2])
    """
    arr = _as_words(proof, OPAQUE_PROOF_LEN, "proof")
    kzg = arr[_KZG_PROOFS]
    return (
        _ints(arr[_FOLDED]),
        _ints(arr[_FRESH_CM_W]),
        _ints(arr[_CM_T_AND_R]),
        _ints(arr[_GROTH16]),
        _ints(arr[_CHALLENGES_AND_EVALS]),
        [_ints(kzg[0:2]), _ints(kzg[2:4])],
    )


def split_opaque_proof_with_inputs(proof: Sequence[int], state_len: int) -> tuple:
    """Split proof[26 + 2z] into (steps, z_0[z], z_i[z], proof[25])."""
    arr = _as_words(proof, flat_proof_len(state_len), "flat proof")
    z = state_len
    return (
        int(arr[0]),
        _ints(arr[1 : 1 + z]),
        _ints(arr[1 + z : 1 + 2 * z]),
        _ints(arr[1 + 2 * z :]),
    )


# --- Grouped -> Opaque ---


def pack_opaque_proof(
    folded_commitments: Sequence[int],
    fresh_cm_w: Sequence[int],
    cm_t_and_r: Sequence[int],
    groth16_proof: Sequence[int],
    challenges_and_evals: Sequence[int],
    kzg_proofs: Sequence[Sequence[int]],
) -> list[int]:
    """Concatenate the grouped arguments into proof[25]."""
    kzg = np.asarray(kzg_proofs, dtype=object)
    if kzg.shape != (2, 2):
        raise ValueError(f"kzg_proofs: expected shape (2, 2), got {kzg.shape}")
    parts = [
        _as_words(folded_commitments, 4, "folded_commitments"),
        _as_words(fresh_cm_w, 2, "fresh_cm_w"),
        _as_words(cm_t_and_r, 3, "cm_t_and_r"),
        _as_words(groth16_proof, 8, "groth16_proof"),
        _as_words(challenges_and_evals, 4, "challenges_and_evals"),
        kzg.reshape(4),
    ]
    return _ints(np.concatenate(parts))


def pack_opaque_proof_with_inputs(
    steps: int,
    initial_state: Sequence[int],
    final_state: Sequence[int],
    proof: Sequence[int],
) -> list[int]:
    """Concatenate steps, z_0, z_i and proof[25] into proof[26 + 2z]."""
    if len(initial_state) != len(final_state):
        raise ValueError("initial_state and final_state must have the same length")
    z = len(initial_state)
    parts = [
        np.asarray([steps], dtype=object),
        _as_words(initial_state, z, "initial_state"),
        _as_words(final_state, z, "final_state"),
        _as_words(proof, OPAQUE_PROOF_LEN, "proof"),
    ]
    return _ints(np.concatenate(parts))
