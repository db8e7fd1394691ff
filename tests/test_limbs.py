"""Tests for non-native limb decomposition."""

import random

import pytest

from nova_decider.primitives.field import BN254_BASE_PRIME, BN254_SCALAR_PRIME
from nova_decider.primitives.limbs import LIMB_BITS, N_LIMBS, decompose, recompose


class TestDecompose:
    """Test splitting base-field elements into 55-bit limbs."""

    def test_capacity_covers_base_field(self) -> None:
        """5 x 55 bits hold any base-field element."""
        assert N_LIMBS * LIMB_BITS >= BN254_BASE_PRIME.bit_length()

    def test_zero(self) -> None:
        """Zero decomposes to all-zero limbs."""
        assert decompose(0) == [0] * N_LIMBS

    def test_least_significant_first(self) -> None:
        """Limb i holds bits [55i, 55i + 55)."""
        assert decompose(1) == [1, 0, 0, 0, 0]
        assert decompose(1 << LIMB_BITS) == [0, 1, 0, 0, 0]
        assert decompose((1 << LIMB_BITS) - 1) == [(1 << LIMB_BITS) - 1, 0, 0, 0, 0]
        assert decompose(3 << (4 * LIMB_BITS)) == [0, 0, 0, 0, 3]

    def test_limbs_are_scalar_field_elements(self) -> None:
        """Every limb of q - 1 is below 2^55 < r."""
        for limb in decompose(BN254_BASE_PRIME - 1):
            assert 0 <= limb < 1 << LIMB_BITS
            assert limb < BN254_SCALAR_PRIME


class TestRecompose:
    """Test the limb round-trip property."""

    @pytest.mark.parametrize("x", [0, 1, 2**55, 2**254 - 1, BN254_BASE_PRIME - 1])
    def test_round_trip_edges(self, x: int) -> None:
        """recompose(decompose(x)) == x at boundary values."""
        assert recompose(decompose(x)) == x % BN254_BASE_PRIME

    def test_round_trip_random(self) -> None:
        """recompose(decompose(x)) == x for random base-field elements."""
        rng = random.Random(55)
        for _ in range(50):
            x = rng.randrange(BN254_BASE_PRIME)
            assert recompose(decompose(x)) == x

    def test_wrong_limb_count(self) -> None:
        """recompose insists on exactly 5 limbs."""
        with pytest.raises(ValueError):
            recompose([1, 2, 3])
