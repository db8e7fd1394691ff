"""Rejection reasons raised by the decider verifier."""


class DeciderError(Exception):
    """Base class for every proof rejection."""


class StepCountError(DeciderError):
    def __init__(self) -> None:
        super().__init__("Folding: the number of folded steps should be at least 2")


class KzgOpeningError(DeciderError):
    """A KZG opening did not verify. `commitment` is "W" or "E"."""

    def __init__(self, commitment: str) -> None:
        self.commitment = commitment
        super().__init__(f"KZG: verifying proof for challenge {commitment} failed")


class Groth16VerificationError(DeciderError):
    def __init__(self) -> None:
        super().__init__("Groth16: verifying proof failed")
