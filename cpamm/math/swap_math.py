"""Constant-product AMM math.

Integer arithmetic for a two-asset pool with x * y = k, matching the on-chain
Move contract bit for bit:
- fee rates are integers over FEE_SCALE, taken from the input side
- every division floors, except get_amount_in which rounds up by adding 1
- intermediate products are exact (Python ints), results are bounded to u64

All functions are pure. They either return a bounds-checked amount or raise
one of the errors in cpamm.errors; nothing is clamped.
"""

from __future__ import annotations

import math

import structlog

from cpamm.constants import (
    FEE_SCALE,
    MAX_FEE_RATE,
    MINIMUM_LIQUIDITY_LOCK,
    PROTOCOL_FEE_DIVISOR,
)
from cpamm.errors import (
    EmptyReserves,
    InsufficientLiquidity,
    InvalidFeeRate,
    InvariantViolation,
    OverLimit,
    Underflow,
    ZeroAmount,
)
from cpamm.safe_int import S

logger = structlog.get_logger()


def mul_to_u128(x: int, y: int) -> int:
    """Full-width product of two amounts.

    Both operands must be u64; their product always fits in 128 bits, so the
    result is not bounded. Used where products are compared rather than
    returned (e.g. k values).
    """
    return (S.u64(x) * S.u64(y)).value


def sqrt_floor(y: int) -> int:
    """Integer square root, rounded down.

    Raises:
        Underflow: If y is negative
    """
    value = S(y)
    if value < 0:
        raise Underflow(f"Square root of negative value: {value}")
    return math.isqrt(value.value)


def mul_div(x: int, y: int, z: int) -> int:
    """Compute floor(x * y / z) bounded to u64.

    The product is computed at full precision before dividing, so no
    intermediate value is bounded; only the operands and the quotient are.

    Raises:
        DivisionByZero: If z is zero
        Underflow: If an operand is negative
        Overflow: If an operand or the result exceeds U64_MAX
    """
    return ((S.u64(x) * S.u64(y)) // S.u64(z)).to_u64()


def _require_u64(*values: int) -> None:
    for value in values:
        S.u64(value)


def calc_optimal_coin_values(
    x_desired: int,
    y_desired: int,
    x_reserve: int,
    y_reserve: int,
) -> tuple[int, int]:
    """Calculate the amounts actually accepted when adding liquidity.

    The returned pair keeps the pool's current price ratio and never exceeds
    the desired amounts on either side. An empty pool accepts the desired
    amounts unchanged, since the first deposit sets the initial price.

    Args:
        x_desired: Amount of coin X the caller is willing to add
        y_desired: Amount of coin Y the caller is willing to add
        x_reserve: Current pool reserve of coin X
        y_reserve: Current pool reserve of coin Y

    Returns:
        Tuple of (x_optimal, y_optimal)

    Raises:
        DivisionByZero: If exactly one reserve is zero on the path taken
        Overflow: If a proportional amount exceeds U64_MAX
        OverLimit: If the proportional X amount exceeds x_desired
    """
    _require_u64(x_desired, y_desired, x_reserve, y_reserve)
    if x_reserve == 0 and y_reserve == 0:
        return x_desired, y_desired

    y_returned = mul_div(x_desired, y_reserve, x_reserve)
    if y_returned <= y_desired:
        return x_desired, y_returned

    x_returned = mul_div(y_desired, x_reserve, y_reserve)
    if x_returned > x_desired:
        raise OverLimit(f"Optimal X amount {x_returned} exceeds desired {x_desired}")
    return x_returned, y_desired


def get_expected_liquidity_amount(
    x_optimal: int,
    y_optimal: int,
    x_reserve: int,
    y_reserve: int,
    lp_supply: int,
) -> int:
    """Calculate the LP shares minted for a deposit.

    First deposit (empty pool, no supply): the geometric mean of the two
    amounts minus MINIMUM_LIQUIDITY_LOCK, which stays locked forever.

    Later deposits: each side is valued against its reserve and the smaller
    share wins, so an unbalanced deposit cannot dilute existing LPs.

    Args:
        x_optimal: Amount of coin X being added (from calc_optimal_coin_values)
        y_optimal: Amount of coin Y being added
        x_reserve: Current pool reserve of coin X
        y_reserve: Current pool reserve of coin Y
        lp_supply: Current LP supply

    Returns:
        Number of LP shares to mint

    Raises:
        InsufficientLiquidity: If a first deposit does not clear the lock
        DivisionByZero: If a reserve is zero while the pool has supply
        Overflow: If the minted amount exceeds U64_MAX
    """
    _require_u64(x_optimal, y_optimal, x_reserve, y_reserve, lp_supply)
    if x_reserve == 0 and y_reserve == 0 and lp_supply == 0:
        root = sqrt_floor(mul_to_u128(x_optimal, y_optimal))
        if root < MINIMUM_LIQUIDITY_LOCK:
            raise InsufficientLiquidity(
                f"First deposit too small: sqrt({x_optimal} * {y_optimal}) = {root} "
                f"< minimum liquidity {MINIMUM_LIQUIDITY_LOCK}"
            )
        return (S(root) - MINIMUM_LIQUIDITY_LOCK).to_u64()

    x_liquidity = (S(lp_supply) * S(x_optimal)) // S(x_reserve)
    y_liquidity = (S(lp_supply) * S(y_optimal)) // S(y_reserve)
    return x_liquidity.min(y_liquidity).to_u64()


def _check_swap_inputs(fee_rate: int, amount: int, reserve_in: int, reserve_out: int) -> None:
    if fee_rate < 0 or fee_rate > MAX_FEE_RATE:
        raise InvalidFeeRate(f"Fee rate {fee_rate} outside [0, {MAX_FEE_RATE}]")
    _require_u64(amount, reserve_in, reserve_out)
    if amount == 0:
        raise ZeroAmount("Swap amount must be greater than zero")
    if reserve_in == 0 or reserve_out == 0:
        raise EmptyReserves(f"Reserves empty: reserve_in={reserve_in}, reserve_out={reserve_out}")


def get_amount_out(
    fee_rate: int,
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
) -> int:
    """Calculate swap output for an exact input.

    Formula: out = (in * m * res_out) / (res_in * FEE_SCALE + in * m)
    where m = FEE_SCALE - fee_rate.

    Args:
        fee_rate: Pool fee rate over FEE_SCALE (30 = 0.3%)
        amount_in: Input coin amount
        reserve_in: Pool reserve of the input coin
        reserve_out: Pool reserve of the output coin

    Returns:
        Output coin amount, rounded down

    Raises:
        InvalidFeeRate: If fee_rate is outside [0, MAX_FEE_RATE]
        Underflow: If the amount or a reserve is negative
        ZeroAmount: If amount_in is zero
        EmptyReserves: If either reserve is zero
        Overflow: If an input or the result exceeds U64_MAX
    """
    _check_swap_inputs(fee_rate, amount_in, reserve_in, reserve_out)

    if fee_rate == 0:
        logger.debug(
            "swap_math_zero_fee",
            amount_in=amount_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )

    fee_multiplier = S(FEE_SCALE) - S(fee_rate)
    amount_in_after_fee = S(amount_in) * fee_multiplier
    new_reserve_in = S(reserve_in) * FEE_SCALE + amount_in_after_fee
    numerator = amount_in_after_fee * S(reserve_out)

    return (numerator // new_reserve_in).to_u64()


def get_amount_in(
    fee_rate: int,
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
) -> int:
    """Calculate the input required for an exact output.

    Formula: in = (res_in * out * FEE_SCALE) / ((res_out - out) * m) + 1

    The +1 rounds in the pool's favour: the trader never pays less than the
    exact amount the invariant requires.

    Raises:
        InvalidFeeRate: If fee_rate is outside [0, MAX_FEE_RATE]
        Underflow: If the amount or a reserve is negative
        ZeroAmount: If amount_out is zero
        EmptyReserves: If either reserve is zero
        InsufficientLiquidity: If amount_out >= reserve_out
        Overflow: If an input or the result exceeds U64_MAX
    """
    _check_swap_inputs(fee_rate, amount_out, reserve_in, reserve_out)
    if reserve_out <= amount_out:
        raise InsufficientLiquidity(
            f"Requested output {amount_out} not below reserve {reserve_out}"
        )

    fee_multiplier = S(FEE_SCALE) - S(fee_rate)
    numerator = S(reserve_in) * S(amount_out) * FEE_SCALE
    denominator = (S(reserve_out) - S(amount_out)) * fee_multiplier

    return ((numerator // denominator) + 1).to_u64()


def get_fee_to_team(fee_rate: int, coin_in: int) -> int:
    """Protocol team's share of the fee on a swap input.

    The team receives 1/PROTOCOL_FEE_DIVISOR of the total fee; the rest stays
    in the pool and accrues to LPs.
    """
    return (S(mul_div(coin_in, fee_rate, FEE_SCALE)) // PROTOCOL_FEE_DIVISOR).value


def assert_lp_value_is_increased(
    old_reserve_x: int,
    old_reserve_y: int,
    new_reserve_x: int,
    new_reserve_y: int,
) -> None:
    """Verify that k = x * y did not decrease.

    Must be checked on the resulting reserves of every swap, deposit and
    withdrawal, independently of how they were computed.

    Reserves are only required to be non-negative, so callers may pass
    reserves scaled by an LP supply.

    Raises:
        Underflow: If a reserve is negative
        InvariantViolation: If old k > new k
    """
    for reserve in (old_reserve_x, old_reserve_y, new_reserve_x, new_reserve_y):
        if S(reserve) < 0:
            raise Underflow(f"Reserve cannot be negative: {reserve}")
    old_k = (S(old_reserve_x) * S(old_reserve_y)).value
    new_k = (S(new_reserve_x) * S(new_reserve_y)).value
    if old_k > new_k:
        logger.warning(
            "constant_product_decreased",
            old_k=str(old_k),
            new_k=str(new_k),
        )
        raise InvariantViolation(f"Constant product decreased: {old_k} > {new_k}")


__all__ = [
    "mul_to_u128",
    "sqrt_floor",
    "mul_div",
    "calc_optimal_coin_values",
    "get_expected_liquidity_amount",
    "get_amount_out",
    "get_amount_in",
    "get_fee_to_team",
    "assert_lp_value_is_increased",
]
