"""Tests for fixed-point parsing and Bfp arithmetic."""

from decimal import Decimal

import pytest

from pooldata.math.fixed_point import (
    ONE_18,
    UINT256_MAX,
    Bfp,
    FixedPointParseError,
    parse_fixed,
)


class TestParseFixed:
    """Tests for exact decimal-string scaling."""

    def test_integer_string(self) -> None:
        """Whole numbers are shifted by the precision."""
        assert parse_fixed("100", 18) == 100 * 10**18
        assert parse_fixed("200", 6) == 200 * 10**6

    def test_fraction(self) -> None:
        """A 0.3% fee at 18 decimals."""
        assert parse_fixed("0.003", 18) == 3 * 10**15

    def test_amp_precision(self) -> None:
        """Amplification parameters use 3 decimals."""
        assert parse_fixed("500", 3) == 500_000
        assert parse_fixed("0.5", 3) == 500

    def test_zero_precision(self) -> None:
        assert parse_fixed("42", 0) == 42

    def test_trailing_zeros_beyond_precision_allowed(self) -> None:
        """Insignificant fractional zeros don't count against the precision."""
        assert parse_fixed("1.500000", 1) == 15

    def test_too_many_fractional_digits(self) -> None:
        """Digits that would be lost raise instead of rounding."""
        with pytest.raises(FixedPointParseError):
            parse_fixed("1.0000001", 6)

    def test_large_value_is_exact(self) -> None:
        """No precision loss beyond the default Decimal context."""
        value = "5192296858534827.628530496329"
        assert parse_fixed(value, 18) == 5192296858534827628530496329000000

    def test_exponent_notation(self) -> None:
        assert parse_fixed("1e-3", 18) == 10**15
        assert parse_fixed("1E+2", 0) == 100

    @pytest.mark.parametrize("value", ["-1.5", "-100", -7, Decimal("-0.001")])
    def test_negative_rejected(self, value: str | int | Decimal) -> None:
        """Amounts, fees and rates are unsigned."""
        with pytest.raises(FixedPointParseError, match="negative"):
            parse_fixed(value, 18)

    def test_negative_zero_is_zero(self) -> None:
        assert parse_fixed("-0", 18) == 0
        assert parse_fixed("0e30000000", 18) == 0

    def test_uint256_max_accepted(self) -> None:
        assert parse_fixed(str(UINT256_MAX), 0) == UINT256_MAX

    def test_above_uint256_max_rejected(self) -> None:
        with pytest.raises(FixedPointParseError, match="overflows uint256"):
            parse_fixed(str(UINT256_MAX + 1), 0)

    def test_scaled_result_above_uint256_max_rejected(self) -> None:
        """The bound applies after scaling: 1e60 fits, 1e60 at 18 decimals does not."""
        assert parse_fixed("1e60", 0) == 10**60
        with pytest.raises(FixedPointParseError, match="overflows uint256"):
            parse_fixed("1e60", 18)

    @pytest.mark.parametrize("value", ["1e30000000", "9E+999999999"])
    def test_huge_exponent_rejected_without_expanding(self, value: str) -> None:
        """The exponent is checked before any power of ten is built."""
        with pytest.raises(FixedPointParseError, match="overflows uint256"):
            parse_fixed(value, 18)

    def test_tiny_exponent_rejected_without_expanding(self) -> None:
        with pytest.raises(FixedPointParseError, match="exceeds 18 decimals"):
            parse_fixed("1e-30000000", 18)

    def test_int_and_decimal_inputs(self) -> None:
        assert parse_fixed(7, 2) == 700
        assert parse_fixed(Decimal("0.25"), 2) == 25

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "NaN", "Infinity"])
    def test_invalid_input(self, value: str) -> None:
        with pytest.raises(FixedPointParseError):
            parse_fixed(value, 18)

    def test_negative_precision(self) -> None:
        with pytest.raises(FixedPointParseError):
            parse_fixed("1", -1)


class TestBfp:
    """Tests for the Bfp operations used by normalization."""

    def test_mul_down(self) -> None:
        """Multiplication rounds down."""
        a = Bfp.from_wei(ONE_18 + 1)
        b = Bfp.from_wei(ONE_18 + 1)
        # (10^18 + 1)^2 / 10^18 = 10^18 + 2 + 1/10^18, floored
        assert a.mul_down(b).value == ONE_18 + 2

    def test_div_down(self) -> None:
        """Division rounds down."""
        result = Bfp.from_wei(ONE_18).div_down(Bfp.from_wei(3 * ONE_18))
        assert result.value == 333_333_333_333_333_333

    def test_div_down_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Bfp.from_wei(ONE_18).div_down(Bfp.from_wei(0))

    def test_to_decimal(self) -> None:
        assert Bfp.from_wei(15 * 10**17).to_decimal() == Decimal("1.5")
        assert str(Bfp.from_wei(15 * 10**17)) == "1.5"

    def test_equality(self) -> None:
        assert Bfp.from_wei(5) == Bfp.from_wei(5)
        assert Bfp.from_wei(5) != Bfp.from_wei(6)
