"""Mathematical primitives for the constant-product AMM.

This package provides:
- swap_math: swap, liquidity and fee arithmetic bounded to u64
- slippage: slippage bounds for quoted amounts
"""

from cpamm.math.slippage import (
    max_amount_with_slippage,
    min_amount_with_slippage,
    validate_slippage,
)
from cpamm.math.swap_math import (
    assert_lp_value_is_increased,
    calc_optimal_coin_values,
    get_amount_in,
    get_amount_out,
    get_expected_liquidity_amount,
    get_fee_to_team,
    mul_div,
    mul_to_u128,
    sqrt_floor,
)

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
    "validate_slippage",
    "min_amount_with_slippage",
    "max_amount_with_slippage",
]
