"""Decider verification protocol: keys, proofs, KZG, Groth16 and the combiner."""

from nova_decider.protocol.calldata import (
    pack_opaque_proof,
    pack_opaque_proof_with_inputs,
    split_opaque_proof,
    split_opaque_proof_with_inputs,
)
from nova_decider.protocol.decider import NovaDecider, PublicInputLayout, assemble_public_inputs
from nova_decider.protocol.errors import (
    DeciderError,
    Groth16VerificationError,
    KzgOpeningError,
    StepCountError,
)
from nova_decider.protocol.groth16 import Groth16Verifier
from nova_decider.protocol.kzg import KZG10Verifier
from nova_decider.protocol.proof import (
    CommitmentPair,
    DeciderProof,
    Groth16Proof,
    load_proof_from_json,
    save_proof_to_json,
)
from nova_decider.protocol.verifying_key import (
    DeciderVerifyingKey,
    Groth16VerifyingKey,
    KzgVerifyingKey,
)

__all__ = [
    "NovaDecider",
    "PublicInputLayout",
    "assemble_public_inputs",
    "KZG10Verifier",
    "Groth16Verifier",
    "DeciderVerifyingKey",
    "Groth16VerifyingKey",
    "KzgVerifyingKey",
    "CommitmentPair",
    "DeciderProof",
    "Groth16Proof",
    "load_proof_from_json",
    "save_proof_to_json",
    "split_opaque_proof",
    "split_opaque_proof_with_inputs",
    "pack_opaque_proof",
    "pack_opaque_proof_with_inputs",
    "DeciderError",
    "StepCountError",
    "KzgOpeningError",
    "Groth16VerificationError",
]
