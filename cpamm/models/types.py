"""Shared type definitions for pool snapshot models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from cpamm.constants import U64_MAX


def validate_u64(value: Any) -> int:
    """Validate that a value is a valid u64.

    On-chain u64 fields arrive either as ints or as decimal strings (JSON
    RPC responses serialize them as strings).

    Args:
        value: Value to validate (int or decimal string)

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err
    elif not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")

    return value


# 64-bit unsigned integer, accepted as int or decimal string
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer"),
]
