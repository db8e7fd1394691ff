"""Non-native limb decomposition.

Base-field coordinates (q > r) cannot be placed in a single SNARK public
input, so each one is split into N_LIMBS limbs of LIMB_BITS bits, least
significant first. Every limb is < 2^55 and therefore a canonical Fr element.
"""

from typing import Sequence

from nova_decider.primitives.field import Fq

N_LIMBS = 5
LIMB_BITS = 55
LIMB_MASK = (1 << LIMB_BITS) - 1


def decompose(x: int) -> list[int]:
    """Split x into N_LIMBS limbs: limbs[i] = (x >> 55*i) & (2^55 - 1)."""
    return [(x >> (LIMB_BITS * i)) & LIMB_MASK for i in range(N_LIMBS)]


def recompose(limbs: Sequence[int]) -> int:
    """Inverse of decompose: sum(limb_i * 2^(55*i)) mod q."""
    if len(limbs) != N_LIMBS:
        raise ValueError(f"Expected {N_LIMBS} limbs, got {len(limbs)}")
    acc = Fq(0)
    for i, limb in enumerate(limbs):
        acc += Fq(limb) * Fq(1 << (LIMB_BITS * i))
    return int(acc)
