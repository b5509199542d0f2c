"""Quote configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from cpamm.constants import DEFAULT_SLIPPAGE
from cpamm.math.slippage import validate_slippage

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for quote planning.

    Attributes:
        default_slippage: Tolerance applied when a quote call passes no
            slippage (default: 5%)
        check_invariant: If True, every quote verifies its projected
            reserves with assert_lp_value_is_increased
        enforce_min_lp_amount: If True, deposits and withdrawals below the
            pool's min_add_liquidity_lp_amount are rejected before the chain
            would reject them
    """

    default_slippage: Decimal = Decimal(DEFAULT_SLIPPAGE)
    check_invariant: bool = True
    enforce_min_lp_amount: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_slippage", validate_slippage(self.default_slippage))

    @classmethod
    def from_env(cls) -> QuoteConfig:
        """Build a config from environment variables.

        - CPAMM_DEFAULT_SLIPPAGE: default slippage fraction (default: 0.05)
        - CPAMM_CHECK_INVARIANT: verify projected reserves (default: true)
        - CPAMM_ENFORCE_MIN_LP: enforce pool LP minimums (default: true)
        """
        return cls(
            default_slippage=validate_slippage(
                os.environ.get("CPAMM_DEFAULT_SLIPPAGE", DEFAULT_SLIPPAGE)
            ),
            check_invariant=os.environ.get("CPAMM_CHECK_INVARIANT", "true").lower()
            in _TRUE_VALUES,
            enforce_min_lp_amount=os.environ.get("CPAMM_ENFORCE_MIN_LP", "true").lower()
            in _TRUE_VALUES,
        )


# Default configuration instance
DEFAULT_QUOTE_CONFIG = QuoteConfig()
