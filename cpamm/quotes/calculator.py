"""Quote planning for pool operations.

Chains the swap math the way a transaction builder needs it: take a fresh
pool snapshot, compute the exact amounts, verify the projected reserves and
widen the result by a slippage tolerance. No I/O happens here; a quote is
only as fresh as the snapshot it was computed from.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from cpamm.coin_types import is_sorted_types, order_amounts
from cpamm.constants import (
    MIN_REMOVE_LIQUIDITY_DIVISOR,
    SWAP_EXACT_X_TO_Y,
    SWAP_EXACT_Y_TO_X,
    SWAP_X_TO_EXACT_Y,
    SWAP_Y_TO_EXACT_X,
)
from cpamm.errors import (
    InsufficientLiquidity,
    InvariantViolation,
    LiquidityBelowMinimum,
    ProtocolPaused,
    ZeroAmount,
)
from cpamm.math.slippage import (
    SlippageLike,
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
)
from cpamm.models.pool import GlobalConfig, Pool
from cpamm.quotes.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from cpamm.quotes.result import AddLiquidityQuote, RemoveLiquidityQuote, SwapQuote
from cpamm.safe_int import S

logger = structlog.get_logger()


class QuoteCalculator:
    """Plans deposits, withdrawals and swaps against a pool snapshot.

    Attributes:
        config: Quote configuration settings
    """

    def __init__(self, config: QuoteConfig | None = None):
        self.config = config or DEFAULT_QUOTE_CONFIG

    def quote_add_liquidity(
        self,
        pool: Pool,
        amount_x: int,
        amount_y: int,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> AddLiquidityQuote:
        """Plan a deposit of up to (amount_x, amount_y).

        Args:
            pool: Current pool snapshot
            amount_x: Desired coin X amount, in pool order
            amount_y: Desired coin Y amount, in pool order
            slippage: Tolerance for the minimums (default from config)
            global_config: Protocol state, checked for a pause

        Returns:
            AddLiquidityQuote with the accepted amounts and their minimums

        Raises:
            ZeroAmount: If either desired amount is zero
            LiquidityBelowMinimum: If the deposit mints fewer LP shares than
                the pool accepts
            SwapMathError: Any failure of the underlying math
        """
        _check_not_paused(global_config, "add_liquidity")
        tolerance = self._resolve_slippage(slippage)
        if amount_x <= 0 or amount_y <= 0:
            raise ZeroAmount(f"Deposit amounts must be greater than 0: x={amount_x}, y={amount_y}")

        optimal_x, optimal_y = calc_optimal_coin_values(amount_x, amount_y, pool.bal_x, pool.bal_y)
        expected_lp = get_expected_liquidity_amount(
            optimal_x, optimal_y, pool.bal_x, pool.bal_y, pool.lp_supply
        )

        if self.config.enforce_min_lp_amount and expected_lp < pool.min_add_liquidity_lp_amount:
            logger.warning(
                "add_liquidity_rejected",
                pool_id=pool.id,
                reason="below_min_add_liquidity_lp_amount",
                expected_lp=expected_lp,
                min_lp=pool.min_add_liquidity_lp_amount,
            )
            raise LiquidityBelowMinimum(
                f"Deposit mints {expected_lp} LP, less than "
                f"min_add_liquidity_lp_amount {pool.min_add_liquidity_lp_amount}"
            )

        if self.config.check_invariant and not pool.is_empty:
            _assert_share_value_kept(
                pool,
                pool.bal_x + optimal_x,
                pool.bal_y + optimal_y,
                pool.lp_supply + expected_lp,
            )

        quote = AddLiquidityQuote(
            amount_x=optimal_x,
            amount_y=optimal_y,
            expected_lp=expected_lp,
            min_amount_x=min_amount_with_slippage(optimal_x, tolerance),
            min_amount_y=min_amount_with_slippage(optimal_y, tolerance),
            slippage=tolerance,
        )
        logger.debug(
            "add_liquidity_quoted",
            pool_id=pool.id,
            amount_x=quote.amount_x,
            amount_y=quote.amount_y,
            expected_lp=quote.expected_lp,
        )
        return quote

    def quote_remove_liquidity(
        self,
        pool: Pool,
        lp_amount: int,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> RemoveLiquidityQuote:
        """Plan burning lp_amount LP shares for their share of the reserves.

        Raises:
            ZeroAmount: If lp_amount is zero
            LiquidityBelowMinimum: If lp_amount is below
                min_add_liquidity_lp_amount / MIN_REMOVE_LIQUIDITY_DIVISOR
            InsufficientLiquidity: If lp_amount exceeds the LP supply
        """
        _check_not_paused(global_config, "remove_liquidity")
        tolerance = self._resolve_slippage(slippage)
        if lp_amount <= 0:
            raise ZeroAmount("LP amount must be greater than 0")

        # lp_amount < min / divisor, compared without truncating the minimum
        if (
            self.config.enforce_min_lp_amount
            and S(lp_amount) * MIN_REMOVE_LIQUIDITY_DIVISOR < pool.min_add_liquidity_lp_amount
        ):
            logger.warning(
                "remove_liquidity_rejected",
                pool_id=pool.id,
                reason="below_min_remove_liquidity_lp_amount",
                lp_amount=lp_amount,
                min_add_lp=pool.min_add_liquidity_lp_amount,
            )
            raise LiquidityBelowMinimum(
                f"LP amount {lp_amount} is less than min_remove_liquidity_lp_amount "
                f"{pool.min_add_liquidity_lp_amount}/{MIN_REMOVE_LIQUIDITY_DIVISOR}"
            )

        if lp_amount > pool.lp_supply:
            raise InsufficientLiquidity(f"LP amount {lp_amount} exceeds supply {pool.lp_supply}")

        amount_x = mul_div(pool.bal_x, lp_amount, pool.lp_supply)
        amount_y = mul_div(pool.bal_y, lp_amount, pool.lp_supply)

        if self.config.check_invariant:
            _assert_share_value_kept(
                pool,
                pool.bal_x - amount_x,
                pool.bal_y - amount_y,
                pool.lp_supply - lp_amount,
            )

        quote = RemoveLiquidityQuote(
            lp_amount=lp_amount,
            amount_x=amount_x,
            amount_y=amount_y,
            min_amount_x=min_amount_with_slippage(amount_x, tolerance),
            min_amount_y=min_amount_with_slippage(amount_y, tolerance),
            slippage=tolerance,
        )
        logger.debug(
            "remove_liquidity_quoted",
            pool_id=pool.id,
            lp_amount=lp_amount,
            amount_x=amount_x,
            amount_y=amount_y,
        )
        return quote

    def quote_swap_exact_in(
        self,
        pool: Pool,
        amount_in: int,
        x_to_y: bool = True,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> SwapQuote:
        """Plan a swap of exactly amount_in; the limit is the minimum output."""
        _check_not_paused(global_config, "swap_exact_in")
        tolerance = self._resolve_slippage(slippage)
        reserve_in, reserve_out = pool.reserves(x_to_y)

        amount_out = get_amount_out(pool.fee_rate, amount_in, reserve_in, reserve_out)
        protocol_fee = self._protocol_fee(pool, amount_in, global_config)
        self._check_swap_invariant(pool, reserve_in, reserve_out, amount_in, amount_out, protocol_fee)

        quote = SwapQuote(
            function_name=SWAP_EXACT_X_TO_Y if x_to_y else SWAP_EXACT_Y_TO_X,
            x_to_y=x_to_y,
            amount_in=amount_in,
            amount_out=amount_out,
            limit=min_amount_with_slippage(amount_out, tolerance),
            protocol_fee=protocol_fee,
            slippage=tolerance,
        )
        logger.debug(
            "swap_quoted",
            pool_id=pool.id,
            function_name=quote.function_name,
            amount_in=amount_in,
            amount_out=amount_out,
            min_amount_out=quote.limit,
        )
        return quote

    def quote_swap_exact_out(
        self,
        pool: Pool,
        amount_out: int,
        x_to_y: bool = True,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> SwapQuote:
        """Plan a swap receiving exactly amount_out; the limit is the maximum input."""
        _check_not_paused(global_config, "swap_exact_out")
        tolerance = self._resolve_slippage(slippage)
        reserve_in, reserve_out = pool.reserves(x_to_y)

        amount_in = get_amount_in(pool.fee_rate, amount_out, reserve_in, reserve_out)
        protocol_fee = self._protocol_fee(pool, amount_in, global_config)
        self._check_swap_invariant(pool, reserve_in, reserve_out, amount_in, amount_out, protocol_fee)

        quote = SwapQuote(
            function_name=SWAP_X_TO_EXACT_Y if x_to_y else SWAP_Y_TO_EXACT_X,
            x_to_y=x_to_y,
            amount_in=amount_in,
            amount_out=amount_out,
            limit=max_amount_with_slippage(amount_in, tolerance),
            protocol_fee=protocol_fee,
            slippage=tolerance,
        )
        logger.debug(
            "swap_quoted",
            pool_id=pool.id,
            function_name=quote.function_name,
            amount_in=amount_in,
            amount_out=amount_out,
            max_amount_in=quote.limit,
        )
        return quote

    # --- coin-type entry points ---

    def quote_add_liquidity_for_types(
        self,
        pool: Pool,
        type_a: str,
        type_b: str,
        amount_a: int,
        amount_b: int,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> AddLiquidityQuote:
        """Plan a deposit given amounts keyed by coin type, in any order.

        The amounts are put in pool order first, so the returned quote is in
        pool order (amount_x belongs to the smaller type).

        Raises:
            ValueError: If both types are the same
        """
        amount_x, amount_y = order_amounts(type_a, type_b, amount_a, amount_b)
        return self.quote_add_liquidity(pool, amount_x, amount_y, slippage, global_config)

    def quote_swap_exact_in_for_types(
        self,
        pool: Pool,
        type_in: str,
        type_out: str,
        amount_in: int,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> SwapQuote:
        """Plan an exact-input swap from type_in to type_out.

        The direction is X to Y when type_in sorts before type_out.
        """
        x_to_y = is_sorted_types(type_in, type_out)
        return self.quote_swap_exact_in(pool, amount_in, x_to_y, slippage, global_config)

    def quote_swap_exact_out_for_types(
        self,
        pool: Pool,
        type_in: str,
        type_out: str,
        amount_out: int,
        slippage: SlippageLike | None = None,
        global_config: GlobalConfig | None = None,
    ) -> SwapQuote:
        """Plan an exact-output swap from type_in to type_out."""
        x_to_y = is_sorted_types(type_in, type_out)
        return self.quote_swap_exact_out(pool, amount_out, x_to_y, slippage, global_config)

    # --- helpers ---

    def _resolve_slippage(self, slippage: SlippageLike | None) -> Decimal:
        if slippage is None:
            return self.config.default_slippage
        return validate_slippage(slippage)

    @staticmethod
    def _protocol_fee(pool: Pool, amount_in: int, global_config: GlobalConfig | None) -> int:
        if global_config is None or not global_config.is_open_protocol_fee:
            return 0
        return get_fee_to_team(pool.fee_rate, amount_in)

    def _check_swap_invariant(
        self,
        pool: Pool,
        reserve_in: int,
        reserve_out: int,
        amount_in: int,
        amount_out: int,
        protocol_fee: int,
    ) -> None:
        if not self.config.check_invariant:
            return
        # The team's fee leaves the pool with the input; the rest stays in reserve
        new_reserve_in = S(reserve_in) + amount_in - protocol_fee
        new_reserve_out = S(reserve_out) - amount_out
        try:
            assert_lp_value_is_increased(
                reserve_in, reserve_out, new_reserve_in.value, new_reserve_out.value
            )
        except InvariantViolation:
            logger.warning(
                "swap_rejected",
                pool_id=pool.id,
                reason="constant_product_decreased",
                amount_in=amount_in,
                amount_out=amount_out,
            )
            raise


def _check_not_paused(global_config: GlobalConfig | None, operation: str) -> None:
    if global_config is not None and global_config.has_paused:
        logger.warning("quote_rejected", operation=operation, reason="protocol_paused")
        raise ProtocolPaused(f"Protocol is paused, cannot quote {operation}")


def _assert_share_value_kept(pool: Pool, new_x: int, new_y: int, new_supply: int) -> None:
    """Check that k per LP share squared does not decrease.

    Deposits and withdrawals change k on purpose, so the reserves are scaled
    by the opposite supply: x * y * new_supply^2 <= new_x * new_y * supply^2.
    """
    assert_lp_value_is_increased(
        (S(pool.bal_x) * new_supply).value,
        (S(pool.bal_y) * new_supply).value,
        (S(new_x) * pool.lp_supply).value,
        (S(new_y) * pool.lp_supply).value,
    )


# Default calculator instance and module-level shortcuts
DEFAULT_QUOTE_CALCULATOR = QuoteCalculator()

quote_add_liquidity = DEFAULT_QUOTE_CALCULATOR.quote_add_liquidity
quote_remove_liquidity = DEFAULT_QUOTE_CALCULATOR.quote_remove_liquidity
quote_swap_exact_in = DEFAULT_QUOTE_CALCULATOR.quote_swap_exact_in
quote_swap_exact_out = DEFAULT_QUOTE_CALCULATOR.quote_swap_exact_out
quote_add_liquidity_for_types = DEFAULT_QUOTE_CALCULATOR.quote_add_liquidity_for_types
quote_swap_exact_in_for_types = DEFAULT_QUOTE_CALCULATOR.quote_swap_exact_in_for_types
quote_swap_exact_out_for_types = DEFAULT_QUOTE_CALCULATOR.quote_swap_exact_out_for_types
