"""KZG10 opening verifier.

Checks that a committed polynomial p satisfies p(x) = y given an opening
proof pi = [(p(tau) - y) / (tau - x)]_1. The pairing equation is arranged so
that every scalar multiplication happens in G1:

    rhs = (r - x) * pi - C + y * G1
    e(pi, [tau]_2) * e(rhs, [1]_2) == 1

which holds iff pi * (tau - x) == C - y * G1.
"""

from typing import Sequence

import galois

from nova_decider.primitives import curve
from nova_decider.primitives.curve import G1Point
from nova_decider.primitives.field import BN254_SCALAR_PRIME, Fr, neg
from nova_decider.protocol.verifying_key import KzgVerifyingKey


class KZG10Verifier:
    """Verifies single-point KZG openings against a fixed key."""

    def __init__(self, vk: KzgVerifyingKey):
        self.vk = vk

    def check(self, commitment: G1Point, proof: G1Point, x: int, y: int) -> bool:
        """Return True iff `proof` opens `commitment` to `y` at `x`.

        A failed pairing check returns False. A malformed point raises
        MalformedPointError.
        """
        rhs = curve.mul_scalar(proof, neg(x, BN254_SCALAR_PRIME))
        rhs = curve.add(rhs, curve.negate(commitment))
        rhs = curve.add(rhs, curve.mul_scalar(self.vk.g1, y))
        return curve.pairing(proof, self.vk.vk, rhs, self.vk.g2)

    @staticmethod
    def eval_poly_at(coefficients: Sequence[int], index: int) -> int:
        """Evaluate sum(c_i * index^i) in Fr. Coefficients are lowest degree first."""
        if len(coefficients) == 0:
            return 0
        coeffs = Fr([c % BN254_SCALAR_PRIME for c in coefficients])
        poly = galois.Poly(coeffs, order="asc")
        return int(poly(Fr(index % BN254_SCALAR_PRIME)))
