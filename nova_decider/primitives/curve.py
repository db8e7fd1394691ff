"""BN254 group operations and pairing checks.

Uses py_ecc (optimized_bn128, projective coordinates) for the group law and the
optimal-ate pairing. Points cross this module's API in affine integer form:

    G1Point = (x, y)                         identity encoded as (0, 0)
    G2Point = ((x_c0, x_c1), (y_c0, y_c1))   identity encoded as ((0, 0), (0, 0))

Every operation that consumes a point validates it first, the way the EVM
precompiles do: coordinates must be below q, the point must satisfy the curve
equation, and G2 points must lie in the prime-order subgroup. A failed check
raises MalformedPointError and aborts the whole verification.
"""

from typing import Sequence

from py_ecc.optimized_bn128 import (
    FQ,
    FQ2,
    FQ12,
    G1,
    G2,
    Z1,
    Z2,
    add as _add,
    b as _b,
    b2 as _b2,
    curve_order,
    final_exponentiate,
    is_inf,
    is_on_curve,
    multiply,
    normalize,
    pairing as _pairing,
)

from nova_decider.primitives.field import BN254_BASE_PRIME, BN254_SCALAR_PRIME, neg

# --- Type Aliases ---

G1Point = tuple[int, int]
G2Point = tuple[tuple[int, int], tuple[int, int]]

assert curve_order == BN254_SCALAR_PRIME


class MalformedPointError(ValueError):
    """A supplied coordinate pair is not a valid group element."""


# --- Affine <-> Projective Conversion ---


def _check_coordinates(coords: Sequence[int], what: str) -> None:
    for c in coords:
        if not 0 <= c < BN254_BASE_PRIME:
            raise MalformedPointError(f"{what}: coordinate out of range")


def _to_projective_g1(P: G1Point):
    x, y = P
    _check_coordinates((x, y), "G1")
    if x == 0 and y == 0:
        return Z1
    pt = (FQ(x), FQ(y), FQ.one())
    if not is_on_curve(pt, _b):
        raise MalformedPointError("G1: point is not on curve")
    return pt


def _to_projective_g2(Q: G2Point):
    (x0, x1), (y0, y1) = Q
    _check_coordinates((x0, x1, y0, y1), "G2")
    if x0 == 0 and x1 == 0 and y0 == 0 and y1 == 0:
        return Z2
    pt = (FQ2([x0, x1]), FQ2([y0, y1]), FQ2.one())
    if not is_on_curve(pt, _b2):
        raise MalformedPointError("G2: point is not on twisted curve")
    # The twist has a large cofactor; only the r-torsion is a valid G2 element.
    if not is_inf(multiply(pt, curve_order)):
        raise MalformedPointError("G2: point is not in the prime-order subgroup")
    return pt


def _to_affine_g1(pt) -> G1Point:
    if is_inf(pt):
        return (0, 0)
    x, y = normalize(pt)
    return (int(x), int(y))


def _to_affine_g2(pt) -> G2Point:
    if is_inf(pt):
        return ((0, 0), (0, 0))
    x, y = normalize(pt)
    return (
        (int(x.coeffs[0]), int(x.coeffs[1])),
        (int(y.coeffs[0]), int(y.coeffs[1])),
    )


G1_IDENTITY: G1Point = (0, 0)
G2_IDENTITY: G2Point = ((0, 0), (0, 0))
G1_GENERATOR: G1Point = _to_affine_g1(G1)
G2_GENERATOR: G2Point = _to_affine_g2(G2)


def validate_g1(P: G1Point) -> G1Point:
    """Return P unchanged if it is a valid G1 element, else raise MalformedPointError."""
    _to_projective_g1(P)
    return P


def validate_g2(Q: G2Point) -> G2Point:
    """Return Q unchanged if it is a valid G2 element, else raise MalformedPointError."""
    _to_projective_g2(Q)
    return Q


# --- G1 Group Law ---


def negate(P: G1Point) -> G1Point:
    """Return -P = (x, q - y mod q). The identity maps to itself."""
    x, y = validate_g1(P)
    if x == 0 and y == 0:
        return G1_IDENTITY
    return (x, neg(y, BN254_BASE_PRIME))


def add(P: G1Point, Q: G1Point) -> G1Point:
    """P + Q in G1."""
    return _to_affine_g1(_add(_to_projective_g1(P), _to_projective_g1(Q)))


def mul_scalar(P: G1Point, s: int) -> G1Point:
    """s * P in G1. The scalar is taken modulo the group order."""
    return _to_affine_g1(multiply(_to_projective_g1(P), s % curve_order))


# --- Pairing ---


def pairing_check(pairs: Sequence[tuple[G1Point, G2Point]]) -> bool:
    """Return True iff prod_i e(P_i, Q_i) == 1 in GT.

    All inputs are validated before any Miller loop runs. The Miller loop
    outputs are multiplied together and a single final exponentiation is
    applied to the product.
    """
    points = [(_to_projective_g1(P), _to_projective_g2(Q)) for P, Q in pairs]
    acc = FQ12.one()
    for P, Q in points:
        # py_ecc takes (Q, P) and returns one for either identity input
        acc = acc * _pairing(Q, P, final_exponentiate=False)
    return final_exponentiate(acc) == FQ12.one()


def pairing(a1: G1Point, a2: G2Point, b1: G1Point, b2: G2Point) -> bool:
    """Two-pair check: e(a1, a2) * e(b1, b2) == 1."""
    return pairing_check([(a1, a2), (b1, b2)])


# --- Wire Encoding ---
# The EVM pairing precompile orders each Fq2 coordinate imaginary part first.


def g2_from_words(words: Sequence[int]) -> G2Point:
    """Decode [x_c1, x_c0, y_c1, y_c0] into ((x_c0, x_c1), (y_c0, y_c1))."""
    if len(words) != 4:
        raise ValueError(f"G2 point takes 4 words, got {len(words)}")
    x1, x0, y1, y0 = (int(w) for w in words)
    return ((x0, x1), (y0, y1))


def g2_to_words(Q: G2Point) -> list[int]:
    """Encode ((x_c0, x_c1), (y_c0, y_c1)) as [x_c1, x_c0, y_c1, y_c0]."""
    (x0, x1), (y0, y1) = Q
    return [x1, x0, y1, y0]
