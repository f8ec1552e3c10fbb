"""binaryutils: Byte-level Binary Codec

A Python library of primitives for producing and consuming exact byte layouts
in network protocols and file formats.

Key Features:
- Big-endian and little-endian integers (8/16/24/32/64 bits)
- IEEE-754 floats and doubles with a fixed wire order on any host
- LEB128 variable-length integers with zig-zag signed encoding
- BinaryStream cursor for sequencing typed reads and writes

Quick Start:
    >>> from binaryutils import BinaryStream
    >>>
    >>> stream = BinaryStream()
    >>> stream.put_ltriad(0x123456)
    >>> stream.put_varint(-1)
    >>> stream.get_buffer()
    b'V4\\x12\\x01'
    >>> stream.get_ltriad(), stream.get_varint()
    (1193046, -1)
"""

from __future__ import annotations

from .codec import (
    ByteSource,
    BytesSource,
    decode_unsigned_varint,
    decode_varint,
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
    read_unsigned_varint,
    read_varint,
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
    write_unsigned_varint,
    write_varint,
)
from .config import ByteOrder, CodecConfig, default_config, host_byte_order
from .exceptions import (
    BinaryUtilsError,
    DecodeError,
    EncodeError,
    InvalidInputError,
    MalformedVarIntError,
    UnexpectedEndOfBufferError,
    ValueTooLargeError,
)
from .stream import BinaryStream
from .utils import unsigned_varint_size, varint_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BinaryStream",
    # Configuration
    "ByteOrder",
    "CodecConfig",
    "default_config",
    "host_byte_order",
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
    # Sizing
    "unsigned_varint_size",
    "varint_size",
    # Exceptions
    "BinaryUtilsError",
    "DecodeError",
    "EncodeError",
    "InvalidInputError",
    "UnexpectedEndOfBufferError",
    "MalformedVarIntError",
    "ValueTooLargeError",
    # Version
    "__version__",
]
