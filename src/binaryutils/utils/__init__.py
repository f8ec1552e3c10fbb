"""Utility modules for binaryutils."""

from __future__ import annotations

from .sizing import (
    BOOL_SIZE,
    BYTE_SIZE,
    DOUBLE_SIZE,
    FLOAT_SIZE,
    INT_SIZE,
    LONG_SIZE,
    SHORT_SIZE,
    TRIAD_SIZE,
    UUID_SIZE,
    unsigned_varint_size,
    varint_size,
)

__all__ = [
    "BOOL_SIZE",
    "BYTE_SIZE",
    "SHORT_SIZE",
    "TRIAD_SIZE",
    "INT_SIZE",
    "LONG_SIZE",
    "FLOAT_SIZE",
    "DOUBLE_SIZE",
    "UUID_SIZE",
    "unsigned_varint_size",
    "varint_size",
]
