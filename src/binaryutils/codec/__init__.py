"""Stateless byte-level codec for binaryutils.

This module provides the fixed-width numeric encode/decode functions and the
variable-length integer algorithm used by BinaryStream.
"""

from __future__ import annotations

from .binary import (
    print_float,
    read_bool,
    read_byte,
    read_double,
    read_float,
    read_int,
    read_ldouble,
    read_lfloat,
    read_lint,
    read_llong,
    read_long,
    read_lshort,
    read_ltriad,
    read_short,
    read_signed_byte,
    read_signed_lshort,
    read_signed_short,
    read_triad,
    write_bool,
    write_byte,
    write_double,
    write_float,
    write_int,
    write_ldouble,
    write_lfloat,
    write_lint,
    write_llong,
    write_long,
    write_lshort,
    write_ltriad,
    write_short,
    write_triad,
)
from .varint import (
    ByteSource,
    BytesSource,
    decode_unsigned_varint,
    decode_varint,
    read_unsigned_varint,
    read_varint,
    write_unsigned_varint,
    write_varint,
)

__all__ = [
    # Fixed width
    "read_bool",
    "write_bool",
    "read_byte",
    "read_signed_byte",
    "write_byte",
    "read_short",
    "read_lshort",
    "read_signed_short",
    "read_signed_lshort",
    "write_short",
    "write_lshort",
    "read_triad",
    "read_ltriad",
    "write_triad",
    "write_ltriad",
    "read_int",
    "read_lint",
    "write_int",
    "write_lint",
    "read_long",
    "read_llong",
    "write_long",
    "write_llong",
    # Floating point
    "read_float",
    "read_lfloat",
    "write_float",
    "write_lfloat",
    "read_double",
    "read_ldouble",
    "write_double",
    "write_ldouble",
    "print_float",
    # Variable length
    "ByteSource",
    "BytesSource",
    "read_unsigned_varint",
    "read_varint",
    "write_unsigned_varint",
    "write_varint",
    "decode_unsigned_varint",
    "decode_varint",
]
