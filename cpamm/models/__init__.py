"""Pool and protocol state snapshots."""

from cpamm.models.pool import GlobalConfig, Pool
from cpamm.models.types import U64, validate_u64

__all__ = ["Pool", "GlobalConfig", "U64", "validate_u64"]
