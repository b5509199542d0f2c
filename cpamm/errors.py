"""Error classes for the AMM math engine and quote planners.

Every failure of the math engine and the quote planners is one of these
exceptions. Each carries an ErrorKind so callers can branch or log on a
stable identifier instead of the exception type.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable identifiers for AMM math failures."""

    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    ZERO_AMOUNT = "zero_amount"
    EMPTY_RESERVES = "empty_reserves"
    INVALID_FEE_RATE = "invalid_fee_rate"
    INSUFFICIENT_LIQUIDITY = "insufficient_liquidity"
    OVER_LIMIT = "over_limit"
    INVARIANT_VIOLATION = "invariant_violation"
    INVALID_SLIPPAGE = "invalid_slippage"
    LIQUIDITY_BELOW_MINIMUM = "liquidity_below_minimum"
    PROTOCOL_PAUSED = "protocol_paused"


class SwapMathError(ArithmeticError):
    """Base error for AMM math operations."""

    kind: ErrorKind


class DivisionByZero(SwapMathError):
    """A divisor resolved to zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class Overflow(SwapMathError):
    """Result does not fit in the u64 domain."""

    kind = ErrorKind.OVERFLOW


class Underflow(SwapMathError):
    """Subtraction would produce a negative result."""

    kind = ErrorKind.UNDERFLOW


class ZeroAmount(SwapMathError):
    """An amount that must be strictly positive was zero."""

    kind = ErrorKind.ZERO_AMOUNT


class EmptyReserves(SwapMathError):
    """One or both pool reserves are zero."""

    kind = ErrorKind.EMPTY_RESERVES


class InvalidFeeRate(SwapMathError):
    """Fee rate is negative or above MAX_FEE_RATE."""

    kind = ErrorKind.INVALID_FEE_RATE


class InsufficientLiquidity(SwapMathError):
    """Requested amount meets or exceeds what the pool can provide."""

    kind = ErrorKind.INSUFFICIENT_LIQUIDITY


class OverLimit(SwapMathError):
    """Optimal contribution exceeded the desired amount."""

    kind = ErrorKind.OVER_LIMIT


class InvariantViolation(SwapMathError):
    """Constant product k decreased."""

    kind = ErrorKind.INVARIANT_VIOLATION


class InvalidSlippage(SwapMathError):
    """Slippage tolerance must be in [0, 1)."""

    kind = ErrorKind.INVALID_SLIPPAGE


class LiquidityBelowMinimum(SwapMathError):
    """LP amount is below the pool's configured minimum."""

    kind = ErrorKind.LIQUIDITY_BELOW_MINIMUM


class ProtocolPaused(SwapMathError):
    """The protocol is paused; no pool operation can be quoted."""

    kind = ErrorKind.PROTOCOL_PAUSED


__all__ = [
    "ErrorKind",
    "SwapMathError",
    "DivisionByZero",
    "Overflow",
    "Underflow",
    "ZeroAmount",
    "EmptyReserves",
    "InvalidFeeRate",
    "InsufficientLiquidity",
    "OverLimit",
    "InvariantViolation",
    "InvalidSlippage",
    "LiquidityBelowMinimum",
    "ProtocolPaused",
]
