"""Tests for BN254 field arithmetic helpers."""

import pytest

from nova_decider.primitives.field import (
    BN254_BASE_PRIME,
    BN254_SCALAR_PRIME,
    Fq,
    Fr,
    add,
    check_field,
    exp,
    field_for,
    in_scalar_field,
    mul,
    neg,
)

Q = BN254_BASE_PRIME
R = BN254_SCALAR_PRIME


class TestFieldConstruction:
    """Test the galois field types."""

    def test_field_orders(self) -> None:
        """Field orders match the BN254 primes."""
        assert Fq.order == Q
        assert Fr.order == R

    def test_scalar_prime_below_base_prime(self) -> None:
        """r < q, which is why coordinates need limbs."""
        assert R < Q

    def test_field_for(self) -> None:
        """field_for dispatches on modulus."""
        assert field_for(Q) is Fq
        assert field_for(R) is Fr

    def test_field_for_unknown_modulus(self) -> None:
        """An unsupported modulus raises ValueError."""
        with pytest.raises(ValueError):
            field_for(101)


class TestModularArithmetic:
    """Test add/mul/neg/exp modulo a supplied prime."""

    @pytest.mark.parametrize("p", [Q, R])
    def test_add_wraps(self, p: int) -> None:
        """(p - 1) + 2 wraps to 1."""
        assert add(p - 1, 2, p) == 1

    @pytest.mark.parametrize("p", [Q, R])
    def test_mul_minus_one_squared(self, p: int) -> None:
        """(-1)^2 = 1."""
        assert mul(p - 1, p - 1, p) == 1

    @pytest.mark.parametrize("p", [Q, R])
    def test_neg(self, p: int) -> None:
        """neg(a) + a = 0 and neg(0) = 0."""
        assert neg(0, p) == 0
        assert neg(5, p) == p - 5
        assert add(neg(12345, p), 12345, p) == 0

    def test_exp_fermat(self) -> None:
        """a^(p-1) = 1 for nonzero a."""
        assert exp(7, R - 1, R) == 1
        assert exp(7, Q - 1, Q) == 1

    def test_operands_are_reduced(self) -> None:
        """Operands >= p are reduced like EVM addmod/mulmod."""
        assert add(R + 3, 4, R) == 7
        assert mul(R + 2, 3, R) == 6
        assert neg(R, R) == 0


class TestFieldMembership:
    """Test the boundary check applied to public inputs."""

    def test_in_scalar_field_boundary(self) -> None:
        """r - 1 is in the field, r is not."""
        assert in_scalar_field(R - 1)
        assert not in_scalar_field(R)
        assert not in_scalar_field(-1)

    def test_check_field_accepts_canonical(self) -> None:
        """All-canonical vector passes."""
        assert check_field([0, 1, R - 1, 2**200])

    def test_check_field_rejects_modulus(self) -> None:
        """A single value equal to r fails the whole vector."""
        assert not check_field([0, 1, R, 2])

    def test_check_field_rejects_above_base_prime(self) -> None:
        """Values are never reduced before the check."""
        assert not check_field([Q])
        assert not check_field([2**256 - 1])

    def test_check_field_empty(self) -> None:
        """The empty vector trivially passes."""
        assert check_field([])
