"""Quote result types.

Each quote holds the engine's exact result and the slippage-widened bound a
transaction builder should pass on-chain.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AddLiquidityQuote:
    """Planned deposit into a pool.

    Attributes:
        amount_x: Coin X accepted at the current ratio
        amount_y: Coin Y accepted at the current ratio
        expected_lp: LP shares the deposit mints
        min_amount_x: Lowest X the contract may take
        min_amount_y: Lowest Y the contract may take
        slippage: Tolerance used for the minimums
    """

    amount_x: int
    amount_y: int
    expected_lp: int
    min_amount_x: int
    min_amount_y: int
    slippage: Decimal


@dataclass(frozen=True)
class RemoveLiquidityQuote:
    """Planned withdrawal of LP shares."""

    lp_amount: int
    amount_x: int
    amount_y: int
    min_amount_x: int
    min_amount_y: int
    slippage: Decimal


@dataclass(frozen=True)
class SwapQuote:
    """Planned swap.

    For exact-input swaps `limit` is the minimum output; for exact-output
    swaps it is the maximum input.

    Attributes:
        function_name: Router entry function implementing this swap
        x_to_y: Swap direction in pool order
        amount_in: Input amount (exact, or required for the output)
        amount_out: Output amount (exact, or expected for the input)
        limit: Slippage-widened bound on the non-exact side
        protocol_fee: Team's share of the fee, 0 when protocol fees are off
        slippage: Tolerance used for the limit
    """

    function_name: str
    x_to_y: bool
    amount_in: int
    amount_out: int
    limit: int
    protocol_fee: int
    slippage: Decimal

    @property
    def is_exact_in(self) -> bool:
        return self.function_name.startswith("swap_exact_")
