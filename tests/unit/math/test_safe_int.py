"""Tests for SafeInt safe arithmetic wrapper."""

import pytest

from cpamm.constants import U64_MAX
from cpamm.errors import DivisionByZero, Overflow, SwapMathError, Underflow
from cpamm.safe_int import S, SafeInt


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_negative(self):
        """SafeInt can hold negative values (validated on conversion)."""
        assert SafeInt(-10).value == -10

    def test_from_large(self):
        """SafeInt holds values far beyond u64."""
        assert SafeInt(10**50).value == 10**50

    def test_from_invalid_type_raises(self):
        """SafeInt rejects non-integers, including bools."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt

    def test_u64_constructor(self):
        assert SafeInt.u64(0).value == 0
        assert SafeInt.u64(U64_MAX).value == U64_MAX

    def test_u64_constructor_rejects_negative(self):
        with pytest.raises(Underflow):
            SafeInt.u64(-1)

    def test_u64_constructor_rejects_above_max(self):
        with pytest.raises(Overflow):
            SafeInt.u64(U64_MAX + 1)


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_sub(self):
        assert (S(10) - S(3)).value == 7
        assert (10 - S(3)).value == 7
        assert (S(5) - S(5)).value == 0

    def test_sub_underflow_raises(self):
        """Subtraction underflow raises Underflow."""
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)
        with pytest.raises(Underflow):
            5 - S(10)

    def test_mul_is_exact_beyond_u128(self):
        """Products of u64 values are exact."""
        assert (S(U64_MAX) * S(U64_MAX)).value == U64_MAX * U64_MAX

    def test_floordiv(self):
        assert (S(7) // S(2)).value == 3
        assert (7 // S(2)).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(7) // 0
        with pytest.raises(DivisionByZero):
            7 // S(0)

    def test_ceiling_div(self):
        assert S(7).ceiling_div(2).value == 4
        assert S(8).ceiling_div(2).value == 4
        with pytest.raises(DivisionByZero):
            S(8).ceiling_div(0)

    def test_min(self):
        assert S(3).min(5).value == 3
        assert S(5).min(S(3)).value == 3

    def test_errors_share_base(self):
        """Arithmetic errors are SwapMathErrors and ArithmeticErrors."""
        assert issubclass(Underflow, SwapMathError)
        assert issubclass(DivisionByZero, ArithmeticError)


class TestSafeIntComparison:
    """Tests for comparisons against ints and SafeInts."""

    def test_equality(self):
        assert S(5) == S(5)
        assert S(5) == 5
        assert S(5) != 6
        assert S(5) != "5"

    def test_ordering(self):
        assert S(3) < 5
        assert S(5) <= S(5)
        assert S(6) > 5
        assert S(5) >= 5

    def test_bool_and_int(self):
        assert not S(0)
        assert S(1)
        assert int(S(42)) == 42


class TestSafeIntU64:
    """Tests for the u64 bound check."""

    def test_to_u64_bounds(self):
        assert S(0).to_u64() == 0
        assert S(U64_MAX).to_u64() == U64_MAX

    def test_to_u64_overflow(self):
        with pytest.raises(Overflow):
            S(U64_MAX + 1).to_u64()

    def test_to_u64_negative(self):
        with pytest.raises(Overflow):
            S(-1).to_u64()

    def test_is_u64(self):
        assert S(U64_MAX).is_u64()
        assert not S(U64_MAX + 1).is_u64()
        assert not S(-1).is_u64()
