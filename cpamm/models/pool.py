"""Pydantic models for pool and protocol state snapshots.

These mirror the on-chain Pool and Global objects. The math never fetches
them; a caller decodes chain state into these models and passes them in.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from cpamm.constants import MAX_FEE_RATE
from cpamm.models.types import U64


class Pool(BaseModel):
    """Snapshot of a two-asset constant-product pool."""

    id: str = Field(description="Pool object ID.")
    bal_x: U64 = Field(description="Reserve of coin X.")
    bal_y: U64 = Field(description="Reserve of coin Y.")
    fee_bal_x: U64 = Field(default=0, description="Protocol fees accrued in coin X.")
    fee_bal_y: U64 = Field(default=0, description="Protocol fees accrued in coin Y.")
    lp_supply: U64 = Field(description="Total LP shares minted.")
    fee_rate: Annotated[U64, Field(le=MAX_FEE_RATE)] = Field(
        description="Swap fee over FEE_SCALE (30 = 0.3%)."
    )
    min_liquidity: U64 = Field(
        default=0,
        description="Liquidity locked by the first deposit.",
    )
    min_add_liquidity_lp_amount: U64 = Field(
        default=0,
        description="Smallest LP amount a deposit may mint.",
    )

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """True before the first deposit."""
        return self.bal_x == 0 and self.bal_y == 0 and self.lp_supply == 0

    def reserves(self, x_to_y: bool = True) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out) for a swap direction."""
        if x_to_y:
            return self.bal_x, self.bal_y
        return self.bal_y, self.bal_x


class GlobalConfig(BaseModel):
    """Snapshot of the protocol-wide Global object."""

    id: str = Field(description="Global config object ID.")
    has_paused: bool = Field(default=False, description="Whether the protocol is paused.")
    is_open_protocol_fee: bool = Field(
        default=False,
        description="Whether the team's share of swap fees is collected.",
    )

    model_config = {"frozen": True}
