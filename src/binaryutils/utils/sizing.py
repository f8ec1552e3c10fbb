"""Encoded size calculation utilities.

This module provides the wire widths of the fixed-size types and functions to
calculate the encoded size of variable-length integers without encoding them.
"""

from __future__ import annotations

from ..exceptions import ValueTooLargeError

BOOL_SIZE = 1
BYTE_SIZE = 1
SHORT_SIZE = 2
TRIAD_SIZE = 3
INT_SIZE = 4
LONG_SIZE = 8
FLOAT_SIZE = 4
DOUBLE_SIZE = 8
UUID_SIZE = 16

_UINT64_MASK = (1 << 64) - 1


def unsigned_varint_size(value: int) -> int:
    """Calculate the encoded size of an unsigned varint in bytes.

    Args:
        value: Value that would be passed to write_unsigned_varint

    Returns:
        Size in bytes (1-10)

    Raises:
        ValueTooLargeError: If the value does not fit in 64 bits

    Example:
        >>> unsigned_varint_size(127)
        1
        >>> unsigned_varint_size(300)
        2
        >>> unsigned_varint_size(-1)
        10
    """
    if value < 0:
        value &= _UINT64_MASK
    elif value > _UINT64_MASK:
        raise ValueTooLargeError(f"Value {value} does not fit in 64 bits")

    # One byte per started 7-bit group, and at least one byte for zero
    return max(1, (value.bit_length() + 6) // 7)


def varint_size(value: int) -> int:
    """Calculate the encoded size of a signed (zig-zag) varint in bytes.

    Example:
        >>> varint_size(-1)
        1
        >>> varint_size(64)
        2
    """
    value = ((value + (1 << 63)) & _UINT64_MASK) - (1 << 63)
    return unsigned_varint_size(((value << 1) ^ (value >> 63)) & _UINT64_MASK)
