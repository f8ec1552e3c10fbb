"""Fixed-width numeric codec.

Stateless functions converting between exact-width byte slices and Python
values. Every multi-byte type has a big-endian accessor and an ``l``-prefixed
little-endian accessor.

Decoding is always a bit reinterpretation: a decode function checks only the
slice length, never the value. Encoding never validates range either; values
that do not fit are truncated with two's-complement wraparound, the same way
native fixed-width arithmetic behaves.
"""

from __future__ import annotations

import math
import struct
from typing import Optional

from ..config import ByteOrder, CodecConfig, default_config
from ..exceptions import InvalidInputError

INT64_MAX = (1 << 63) - 1


def _check_length(data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise InvalidInputError(f"Expected {expected} bytes, got {len(data)}")


def read_bool(data: bytes) -> bool:
    """Decode a boolean from 1 byte. Any non-zero byte is True."""
    _check_length(data, 1)
    return data[0] != 0


def write_bool(value: bool) -> bytes:
    """Encode a boolean as ``0x01`` or ``0x00``."""
    return b"\x01" if value else b"\x00"


def read_byte(data: bytes) -> int:
    """Decode an unsigned byte (0-255)."""
    _check_length(data, 1)
    return data[0]


def read_signed_byte(data: bytes) -> int:
    """Decode a sign-extended byte (-128 to 127)."""
    _check_length(data, 1)
    return struct.unpack("b", data)[0]


def write_byte(value: int) -> bytes:
    """Encode a signed or unsigned byte."""
    return bytes((value & 0xFF,))


def read_short(data: bytes) -> int:
    """Decode a 16-bit unsigned big-endian number."""
    _check_length(data, 2)
    return struct.unpack(">H", data)[0]


def read_lshort(data: bytes) -> int:
    """Decode a 16-bit unsigned little-endian number."""
    _check_length(data, 2)
    return struct.unpack("<H", data)[0]


def read_signed_short(data: bytes) -> int:
    """Decode a 16-bit signed big-endian number."""
    _check_length(data, 2)
    return struct.unpack(">h", data)[0]


def read_signed_lshort(data: bytes) -> int:
    """Decode a 16-bit signed little-endian number."""
    _check_length(data, 2)
    return struct.unpack("<h", data)[0]


def write_short(value: int) -> bytes:
    """Encode a 16-bit signed or unsigned big-endian number."""
    return struct.pack(">H", value & 0xFFFF)


def write_lshort(value: int) -> bytes:
    """Encode a 16-bit signed or unsigned little-endian number."""
    return struct.pack("<H", value & 0xFFFF)


def read_triad(data: bytes) -> int:
    """Decode a 24-bit big-endian number.

    The missing high byte is zero-padded, so the result is always 0-16777215.
    """
    _check_length(data, 3)
    return struct.unpack(">I", b"\x00" + bytes(data))[0]


def read_ltriad(data: bytes) -> int:
    """Decode a 24-bit little-endian number."""
    _check_length(data, 3)
    return struct.unpack("<I", bytes(data) + b"\x00")[0]


def write_triad(value: int) -> bytes:
    """Encode a 24-bit big-endian number.

    This is a 4-byte big-endian encoding with its most significant byte
    dropped, so 16777216 wraps to 0.
    """
    return struct.pack(">I", value & 0xFFFFFFFF)[1:]


def write_ltriad(value: int) -> bytes:
    """Encode a 24-bit little-endian number (4-byte encoding minus the last byte)."""
    return struct.pack("<I", value & 0xFFFFFFFF)[:-1]


def read_int(data: bytes) -> int:
    """Decode a 32-bit signed big-endian number."""
    _check_length(data, 4)
    return struct.unpack(">i", data)[0]


def read_lint(data: bytes) -> int:
    """Decode a 32-bit signed little-endian number."""
    _check_length(data, 4)
    return struct.unpack("<i", data)[0]


def write_int(value: int) -> bytes:
    """Encode a 32-bit big-endian number."""
    return struct.pack(">I", value & 0xFFFFFFFF)


def write_lint(value: int) -> bytes:
    """Encode a 32-bit little-endian number."""
    return struct.pack("<I", value & 0xFFFFFFFF)


def read_long(data: bytes) -> int:
    """Decode a 64-bit signed big-endian number.

    The two 32-bit halves are combined as ``(high << 32) | low`` and the
    unsigned result is reinterpreted as two's complement.

    Args:
        data: Exactly 8 bytes

    Returns:
        Signed integer in the range -2**63 to 2**63 - 1

    Raises:
        InvalidInputError: If data is not 8 bytes long
    """
    _check_length(data, 8)
    high, low = struct.unpack(">II", data)
    value = (high << 32) | low
    if value > INT64_MAX:
        value -= 1 << 64
    return value


def read_llong(data: bytes) -> int:
    """Decode a 64-bit signed little-endian number."""
    _check_length(data, 8)
    return read_long(bytes(data)[::-1])


def write_long(value: int) -> bytes:
    """Encode a 64-bit big-endian number.

    Args:
        value: Integer to encode; anything outside 64 bits is truncated

    Returns:
        8 bytes, most significant first
    """
    return struct.pack(">II", (value >> 32) & 0xFFFFFFFF, value & 0xFFFFFFFF)


def write_llong(value: int) -> bytes:
    """Encode a 64-bit little-endian number."""
    return write_long(value)[::-1]


def _unpack_native(fmt: str, data: bytes, wire_order: ByteOrder, config: Optional[CodecConfig]) -> float:
    if config is None:
        config = default_config()
    if wire_order is not config.host_order:
        data = bytes(data)[::-1]
    return struct.unpack("=" + fmt, data)[0]


def _pack_native(fmt: str, value: float, wire_order: ByteOrder, config: Optional[CodecConfig]) -> bytes:
    if config is None:
        config = default_config()
    try:
        packed = struct.pack("=" + fmt, value)
    except OverflowError:
        # Too large for single precision: saturate like a C float cast
        packed = struct.pack("=" + fmt, math.copysign(math.inf, value))
    if wire_order is not config.host_order:
        packed = packed[::-1]
    return packed


def read_float(data: bytes, accuracy: int = -1, *, config: Optional[CodecConfig] = None) -> float:
    """Decode a 32-bit big-endian IEEE float.

    Args:
        data: Exactly 4 bytes
        accuracy: Number of decimal places to round to; negative means no rounding
        config: Codec configuration (defaults to the detected host order)

    Returns:
        Decoded float value

    Raises:
        InvalidInputError: If data is not 4 bytes long
    """
    _check_length(data, 4)
    value = _unpack_native("f", data, ByteOrder.BIG_ENDIAN, config)
    return round(value, accuracy) if accuracy > -1 else value


def read_lfloat(data: bytes, accuracy: int = -1, *, config: Optional[CodecConfig] = None) -> float:
    """Decode a 32-bit little-endian IEEE float, optionally rounded."""
    _check_length(data, 4)
    value = _unpack_native("f", data, ByteOrder.LITTLE_ENDIAN, config)
    return round(value, accuracy) if accuracy > -1 else value


def write_float(value: float, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a 32-bit big-endian IEEE float."""
    return _pack_native("f", value, ByteOrder.BIG_ENDIAN, config)


def write_lfloat(value: float, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a 32-bit little-endian IEEE float."""
    return _pack_native("f", value, ByteOrder.LITTLE_ENDIAN, config)


def read_double(data: bytes, *, config: Optional[CodecConfig] = None) -> float:
    """Decode a 64-bit big-endian IEEE double."""
    _check_length(data, 8)
    return _unpack_native("d", data, ByteOrder.BIG_ENDIAN, config)


def read_ldouble(data: bytes, *, config: Optional[CodecConfig] = None) -> float:
    """Decode a 64-bit little-endian IEEE double."""
    _check_length(data, 8)
    return _unpack_native("d", data, ByteOrder.LITTLE_ENDIAN, config)


def write_double(value: float, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a 64-bit big-endian IEEE double."""
    return _pack_native("d", value, ByteOrder.BIG_ENDIAN, config)


def write_ldouble(value: float, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a 64-bit little-endian IEEE double."""
    return _pack_native("d", value, ByteOrder.LITTLE_ENDIAN, config)


def print_float(value: float) -> str:
    """Format a float for human-readable output with trailing zeros stripped.

    Example:
        >>> print_float(1.5)
        '1.5'
        >>> print_float(2.0)
        '2'
    """
    text = "%f" % value
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")
