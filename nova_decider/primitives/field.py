"""BN254 base field GF(q) and scalar field GF(r).

Uses galois library for all field arithmetic. Fq and Fr are the field types.

Both fields are built with their known multiplicative generators and
verify=False: galois would otherwise factor p - 1 to find a primitive root,
which is needless for add/mul/pow over a 254-bit prime.

The free functions below take plain integers and a modulus, mirroring the
EVM addmod/mulmod primitives the decider was written against: operands are
reduced modulo p rather than rejected. Range checks on circuit-visible values
happen once, at the boundary (see check_field).
"""

from typing import Sequence

import galois
import numpy as np

# --- Field Construction ---

BN254_BASE_PRIME = 21888242871839275222246405745257275088696311157297823662689037894645226208583
BN254_SCALAR_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

Fq = galois.GF(BN254_BASE_PRIME, primitive_element=3, verify=False)
"""Base field GF(q) - curve point coordinates."""

Fr = galois.GF(BN254_SCALAR_PRIME, primitive_element=5, verify=False)
"""Scalar field GF(r) - group scalars and circuit public inputs."""

_FIELDS = {
    BN254_BASE_PRIME: Fq,
    BN254_SCALAR_PRIME: Fr,
}


def field_for(p: int) -> type[galois.FieldArray]:
    """Return the galois field class for modulus p (base or scalar prime)."""
    try:
        return _FIELDS[p]
    except KeyError:
        raise ValueError(f"Unsupported modulus: {p}") from None


# --- Modular Arithmetic ---


def add(a: int, b: int, p: int) -> int:
    """(a + b) mod p."""
    F = field_for(p)
    return int(F(a % p) + F(b % p))


def mul(a: int, b: int, p: int) -> int:
    """(a * b) mod p."""
    F = field_for(p)
    return int(F(a % p) * F(b % p))


def neg(a: int, p: int) -> int:
    """(-a) mod p. Zero maps to zero."""
    F = field_for(p)
    return int(-F(a % p))


def exp(a: int, e: int, p: int) -> int:
    """a^e mod p (square-and-multiply inside galois)."""
    F = field_for(p)
    return int(F(a % p) ** e)


# --- Boundary Checks ---


def in_scalar_field(v: int) -> bool:
    """True iff 0 <= v < r."""
    return 0 <= v < BN254_SCALAR_PRIME


def check_field(values: Sequence[int]) -> bool:
    """True iff every value is a canonical scalar-field element.

    Values are NOT reduced: r itself, or anything above it, fails.
    """
    arr = np.asarray([int(v) for v in values], dtype=object)
    if arr.size == 0:
        return True
    return bool(np.all((arr >= 0) & (arr < BN254_SCALAR_PRIME)))
