"""Groth16 proof verifier over BN254."""

from typing import Sequence

from nova_decider.primitives import curve
from nova_decider.primitives.curve import G1Point, G2Point
from nova_decider.primitives.field import check_field
from nova_decider.protocol.verifying_key import Groth16VerifyingKey


class Groth16Verifier:
    """Verifies Groth16 proofs for one fixed circuit.

    The public-input count N is fixed by the key (len(IC) - 1). A call with a
    different number of inputs is a calling-convention error and raises
    ValueError; it is not a proof rejection.
    """

    def __init__(self, vk: Groth16VerifyingKey):
        self.vk = vk

    @property
    def n_public_inputs(self) -> int:
        return self.vk.n_public_inputs

    def compute_vk_x(self, public_inputs: Sequence[int]) -> G1Point:
        """vk_x = IC[0] + sum(input_i * IC[i + 1])."""
        vk_x = self.vk.ic[0]
        for v, ic in zip(public_inputs, self.vk.ic[1:]):
            vk_x = curve.add(vk_x, curve.mul_scalar(ic, v))
        return vk_x

    def verify_proof(
        self, a: G1Point, b: G2Point, c: G1Point, public_inputs: Sequence[int]
    ) -> bool:
        """Return True iff (A, B, C) is a valid proof for `public_inputs`.

        Inputs outside [0, r) make the call return False before any curve
        arithmetic. A malformed point raises MalformedPointError.
        """
        if len(public_inputs) != self.n_public_inputs:
            raise ValueError(
                f"Expected {self.n_public_inputs} public inputs, got {len(public_inputs)}"
            )
        if not check_field(public_inputs):
            return False

        vk_x = self.compute_vk_x(public_inputs)

        # e(-A, B) * e(alpha, beta) * e(vk_x, gamma) * e(C, delta) == 1
        return curve.pairing_check(
            [
                (curve.negate(a), b),
                (self.vk.alpha1, self.vk.beta2),
                (vk_x, self.vk.gamma2),
                (c, self.vk.delta2),
            ]
        )
