"""Constant-product AMM math engine."""

from cpamm.coin_types import get_lp_name, get_lp_type, order_amounts, order_types
from cpamm.errors import ErrorKind, SwapMathError
from cpamm.math import (
    assert_lp_value_is_increased,
    calc_optimal_coin_values,
    get_amount_in,
    get_amount_out,
    get_expected_liquidity_amount,
    get_fee_to_team,
    mul_div,
)
from cpamm.models import GlobalConfig, Pool
from cpamm.quotes import QuoteCalculator, QuoteConfig

__version__ = "0.1.0"
__all__ = [
    "mul_div",
    "calc_optimal_coin_values",
    "get_expected_liquidity_amount",
    "get_amount_out",
    "get_amount_in",
    "get_fee_to_team",
    "assert_lp_value_is_increased",
    "Pool",
    "GlobalConfig",
    "QuoteCalculator",
    "QuoteConfig",
    "order_types",
    "order_amounts",
    "get_lp_type",
    "get_lp_name",
    "SwapMathError",
    "ErrorKind",
    "__version__",
]
