"""Balancer Fixed Point (Bfp) helpers.

This module implements the subset of Balancer's 18-decimal fixed-point
arithmetic needed to normalize subgraph data, plus an exact parser that turns
decimal strings into scaled integers (the equivalent of ethers' parseFixed).

All Bfp values are stored as integers scaled by 10^18.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import ClassVar

__all__ = [
    # Classes
    "Bfp",
    # Errors
    "FixedPointParseError",
    # Functions
    "parse_fixed",
    # Constants
    "ONE_18",
    "ONE_36",
    "UINT256_MAX",
]

# =============================================================================
# Constants
# =============================================================================

ONE_18 = 10**18
ONE_36 = 10**36

# Maximum uint256 value
UINT256_MAX = 2**256 - 1
UINT256_DIGITS = len(str(UINT256_MAX))


class FixedPointParseError(ValueError):
    """Decimal string cannot be represented at the requested precision."""

    pass


def parse_fixed(value: str | int | Decimal, decimals: int) -> int:
    """Parse a decimal string into an integer scaled by 10^decimals.

    The conversion is exact: the digits of the input are shifted, never
    rounded. Trailing fractional zeros are ignored, so "1.500" parses at
    1 decimal, but "1.55" does not. Results must fit in a uint256.

    Args:
        value: Non-negative decimal string (e.g., "0.003"), int or Decimal
        decimals: Target precision (number of fractional digits)

    Returns:
        value * 10^decimals as int

    Raises:
        FixedPointParseError: If the input is not a finite decimal, is
            negative, has more significant fractional digits than
            ``decimals``, or scales beyond 2^256-1

    Examples:
        parse_fixed("0.003", 18) == 3 * 10**15
        parse_fixed("100", 6) == 100_000_000
    """
    if decimals < 0:
        raise FixedPointParseError(f"Precision must be non-negative, got {decimals}")

    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as err:
        raise FixedPointParseError(f"Invalid decimal string: {value!r}") from err

    if not d.is_finite():
        raise FixedPointParseError(f"Decimal must be finite, got {value!r}")

    sign, digits, exponent = d.as_tuple()
    if not isinstance(exponent, int):
        raise FixedPointParseError(f"Decimal must be finite, got {value!r}")
    coefficient = int("".join(str(digit) for digit in digits)) if digits else 0
    if coefficient == 0:
        return 0
    if sign:
        raise FixedPointParseError(f"Value cannot be negative: {value!r}")

    # Bound the shift by the digit count before building 10**shift
    shift = exponent + decimals
    if len(digits) + shift > UINT256_DIGITS:
        raise FixedPointParseError(f"{value!r} at {decimals} decimals overflows uint256")
    if shift >= 0:
        scaled = coefficient * 10**shift
    else:
        if -shift >= len(digits):
            raise FixedPointParseError(
                f"Fractional component of {value!r} exceeds {decimals} decimals"
            )
        scaled, remainder = divmod(coefficient, 10**-shift)
        if remainder:
            raise FixedPointParseError(
                f"Fractional component of {value!r} exceeds {decimals} decimals"
            )

    if scaled > UINT256_MAX:
        raise FixedPointParseError(f"{value!r} at {decimals} decimals overflows uint256")
    return scaled


# =============================================================================
# Bfp class (wrapper for convenient usage)
# =============================================================================


class Bfp:
    """18-decimal fixed-point number stored as int.

    All values are stored as integers scaled by 10^18.
    Example: 1.5 is stored as 1_500_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, value: int) -> None:
        """Create Bfp from raw scaled value."""
        self.value = value

    @classmethod
    def from_wei(cls, wei: int) -> Bfp:
        """Create from raw wei value (already scaled to 18 decimals)."""
        return cls(wei)

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return Decimal(self.value) / Decimal(self.ONE)

    def mul_down(self, other: Bfp) -> Bfp:
        """Multiply with floor rounding: (a * b) // 10^18"""
        return Bfp((self.value * other.value) // self.ONE)

    def div_down(self, other: Bfp) -> Bfp:
        """Divide with floor rounding: (a * 10^18) // b"""
        if other.value == 0:
            raise ZeroDivisionError("Bfp division by zero")
        return Bfp((self.value * self.ONE) // other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Bfp({self.value})"

    def __str__(self) -> str:
        return str(self.to_decimal())
