"""Canonical ordering of coin types.

A pool stores its two coins in a fixed (X, Y) order decided by comparing the
BCS encodings of their Move type names. The same order decides the swap
direction for a caller-supplied pair and the LP coin type.
"""

from __future__ import annotations


def _uleb128(value: int) -> bytes:
    """Encode a non-negative int as ULEB128."""
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def serialize_type_name(type_name: str) -> bytes:
    """BCS-encode a type name as vector<u8> (length prefix + UTF-8 bytes)."""
    raw = type_name.encode("utf-8")
    return _uleb128(len(raw)) + raw


def is_sorted_types(type_x: str, type_y: str) -> bool:
    """Check whether type_x sorts strictly before type_y.

    Raises:
        ValueError: If both types are the same
    """
    if type_x == type_y:
        raise ValueError(f"Type X and type Y cannot be the same: {type_x}")
    # bytes comparison is lexicographic with the shorter prefix first
    return serialize_type_name(type_x) < serialize_type_name(type_y)


def order_types(type_x: str, type_y: str) -> tuple[str, str]:
    """Return the two coin types in pool order (smaller first)."""
    return (type_x, type_y) if is_sorted_types(type_x, type_y) else (type_y, type_x)


def order_amounts(type_a: str, type_b: str, amount_a: int, amount_b: int) -> tuple[int, int]:
    """Return the amounts of a type pair in pool order (X amount, Y amount)."""
    return (amount_a, amount_b) if is_sorted_types(type_a, type_b) else (amount_b, amount_a)


def get_lp_type(package_id: str, type_x: str, type_y: str) -> tuple[str, str, str]:
    """Build the LP coin type for a pair.

    Example:
        get_lp_type("0x123", "0x456::coin::USDC", "0x789::coin::WBTC")
        -> ("0x456::coin::USDC", "0x789::coin::WBTC",
            "0x123::manage::LP<0x456::coin::USDC, 0x789::coin::WBTC>")
    """
    sorted_x, sorted_y = order_types(type_x, type_y)
    return sorted_x, sorted_y, f"{package_id}::manage::LP<{sorted_x}, {sorted_y}>"


def get_lp_name(type_x: str, type_y: str) -> str:
    """LP coin display name, e.g. "LP-456::coin::USDC-789::coin::WSOL"."""
    sorted_x, sorted_y = order_types(type_x, type_y)
    return f"LP-{sorted_x.removeprefix('0x')}-{sorted_y.removeprefix('0x')}"


__all__ = [
    "serialize_type_name",
    "is_sorted_types",
    "order_types",
    "order_amounts",
    "get_lp_type",
    "get_lp_name",
]
