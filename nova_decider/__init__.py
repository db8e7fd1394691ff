"""Reference verifier for Nova + CycleFold decider proofs on BN254."""

from nova_decider.primitives.curve import MalformedPointError
from nova_decider.protocol import (
    DeciderError,
    DeciderProof,
    DeciderVerifyingKey,
    Groth16VerificationError,
    KzgOpeningError,
    NovaDecider,
    StepCountError,
)

__version__ = "0.1.0"

__all__ = [
    "NovaDecider",
    "DeciderProof",
    "DeciderVerifyingKey",
    "DeciderError",
    "StepCountError",
    "KzgOpeningError",
    "Groth16VerificationError",
    "MalformedPointError",
]
