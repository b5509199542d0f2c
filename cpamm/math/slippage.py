"""Slippage bounds for quoted amounts.

A quote is only valid for the reserve snapshot it was computed from. Before
an amount is embedded in a transaction it is widened by a slippage tolerance:
- minimums (outputs the caller receives): floor(amount * (1 - slippage))
- maximums (inputs the caller pays): ceil(amount / (1 - slippage))

Slippage is handled as Decimal so that 0.05 means exactly 5/100. Floats are
converted through str() to avoid binary representation error. The bounds are
computed on the exact integer ratio of 1 - slippage, so no decimal precision
limit applies.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from cpamm.errors import InvalidSlippage
from cpamm.safe_int import S

SlippageLike = Decimal | str | int | float


def validate_slippage(slippage: SlippageLike) -> Decimal:
    """Parse a slippage tolerance and check it is in [0, 1).

    Args:
        slippage: Tolerance as a fraction (0.05 = 5%)

    Returns:
        The tolerance as a Decimal

    Raises:
        InvalidSlippage: If the value is not a finite number in [0, 1)
    """
    if isinstance(slippage, bool):
        raise InvalidSlippage(f"Slippage must be a number, got {slippage!r}")
    try:
        value = Decimal(str(slippage)) if isinstance(slippage, float) else Decimal(slippage)
    except (InvalidOperation, TypeError, ValueError) as err:
        raise InvalidSlippage(f"Slippage must be a number, got {slippage!r}") from err

    if not value.is_finite():
        raise InvalidSlippage(f"Slippage must be finite, got {slippage!r}")
    if value < 0:
        raise InvalidSlippage(f"Slippage cannot be negative: {slippage}")
    if value >= 1:
        raise InvalidSlippage(f"Slippage must be less than 100%: {slippage}")
    return value


def _kept_ratio(slippage: SlippageLike) -> tuple[int, int]:
    """1 - slippage as an exact (numerator, denominator) pair, numerator > 0."""
    numerator, denominator = validate_slippage(slippage).as_integer_ratio()
    return denominator - numerator, denominator


def min_amount_with_slippage(amount: int, slippage: SlippageLike) -> int:
    """Lowest acceptable amount: floor(amount * (1 - slippage))."""
    kept, denominator = _kept_ratio(slippage)
    return ((S.u64(amount) * kept) // denominator).to_u64()


def max_amount_with_slippage(amount: int, slippage: SlippageLike) -> int:
    """Highest acceptable amount: ceil(amount / (1 - slippage)).

    Raises:
        InvalidSlippage: If slippage is outside [0, 1)
        Overflow: If the widened amount exceeds U64_MAX
    """
    kept, denominator = _kept_ratio(slippage)
    return (S.u64(amount) * denominator).ceiling_div(kept).to_u64()


__all__ = [
    "SlippageLike",
    "validate_slippage",
    "min_amount_with_slippage",
    "max_amount_with_slippage",
]
