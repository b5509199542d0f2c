"""Quote planning for pool operations.

Usage:
    from cpamm.quotes import QuoteCalculator, QuoteConfig

    calculator = QuoteCalculator(QuoteConfig(default_slippage=Decimal("0.01")))
    quote = calculator.quote_swap_exact_in(pool, amount_in=1_000_000)
    # pass quote.amount_in and quote.limit (min out) to the transaction builder

Module-level shortcuts use DEFAULT_QUOTE_CONFIG:
    from cpamm.quotes import quote_add_liquidity
"""

from cpamm.quotes.calculator import (
    DEFAULT_QUOTE_CALCULATOR,
    QuoteCalculator,
    quote_add_liquidity,
    quote_add_liquidity_for_types,
    quote_remove_liquidity,
    quote_swap_exact_in,
    quote_swap_exact_in_for_types,
    quote_swap_exact_out,
    quote_swap_exact_out_for_types,
)
from cpamm.quotes.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from cpamm.quotes.result import AddLiquidityQuote, RemoveLiquidityQuote, SwapQuote

__all__ = [
    # Calculator
    "QuoteCalculator",
    "DEFAULT_QUOTE_CALCULATOR",
    "quote_add_liquidity",
    "quote_remove_liquidity",
    "quote_swap_exact_in",
    "quote_swap_exact_out",
    "quote_add_liquidity_for_types",
    "quote_swap_exact_in_for_types",
    "quote_swap_exact_out_for_types",
    # Config
    "QuoteConfig",
    "DEFAULT_QUOTE_CONFIG",
    # Results
    "AddLiquidityQuote",
    "RemoveLiquidityQuote",
    "SwapQuote",
]
