"""Field, curve and limb primitives over BN254."""

from nova_decider.primitives.curve import (
    G1_GENERATOR,
    G1_IDENTITY,
    G2_GENERATOR,
    G2_IDENTITY,
    G1Point,
    G2Point,
    MalformedPointError,
    pairing,
    pairing_check,
)
from nova_decider.primitives.field import BN254_BASE_PRIME, BN254_SCALAR_PRIME, Fq, Fr, check_field
from nova_decider.primitives.limbs import LIMB_BITS, N_LIMBS, decompose, recompose

__all__ = [
    "BN254_BASE_PRIME",
    "BN254_SCALAR_PRIME",
    "Fq",
    "Fr",
    "check_field",
    "G1Point",
    "G2Point",
    "G1_GENERATOR",
    "G1_IDENTITY",
    "G2_GENERATOR",
    "G2_IDENTITY",
    "MalformedPointError",
    "pairing",
    "pairing_check",
    "N_LIMBS",
    "LIMB_BITS",
    "decompose",
    "recompose",
]
