"""Variable-length integer codec.

Unsigned values are written as LEB128: 7-bit groups, least significant group
first, with the high bit of each byte set while more groups follow. Signed
values are zig-zag mapped onto unsigned ones first, so that small negative
and small positive numbers both stay short (-1 -> 1, 1 -> 2, -2 -> 3, ...).

Decoding reads one byte at a time from a ByteSource, since the encoded length
is only known once the terminating byte has been seen.
"""

from __future__ import annotations

from typing import Protocol

from ..exceptions import MalformedVarIntError, UnexpectedEndOfBufferError, ValueTooLargeError

MAX_VARINT_BYTES = 10
VARINT_BIT_WIDTH = 64
_UINT64_MASK = (1 << VARINT_BIT_WIDTH) - 1
_INT64_BIAS = 1 << (VARINT_BIT_WIDTH - 1)


class ByteSource(Protocol):
    """Anything that yields the next unsigned byte of an input."""

    def get_byte(self) -> int: ...


class BytesSource:
    """ByteSource over an in-memory slice.

    Example:
        >>> source = BytesSource(b"\\xac\\x02")
        >>> read_unsigned_varint(source)
        300
        >>> source.offset
        2
    """

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = data
        self.offset = offset

    def get_byte(self) -> int:
        if self.offset >= len(self._data):
            raise UnexpectedEndOfBufferError(
                f"Not enough bytes: need 1, have {len(self._data) - self.offset}"
            )
        value = self._data[self.offset]
        self.offset += 1
        return value


def read_unsigned_varint(source: ByteSource) -> int:
    """Decode an unsigned variable-length integer of up to 10 bytes.

    Args:
        source: Byte source positioned at the first byte of the varint

    Returns:
        Decoded value, truncated to 64 bits

    Raises:
        MalformedVarIntError: If 10 bytes are read without a terminating byte
        UnexpectedEndOfBufferError: If the source runs out first
    """
    value = 0
    shift = 0
    for _ in range(MAX_VARINT_BYTES):
        b = source.get_byte()
        value |= (b & 0x7F) << shift
        shift += 7
        if not b & 0x80:
            return value & _UINT64_MASK
    raise MalformedVarIntError(f"VarInt did not terminate after {MAX_VARINT_BYTES} bytes")


def read_varint(source: ByteSource) -> int:
    """Decode a signed (zig-zag) variable-length integer."""
    raw = read_unsigned_varint(source)
    return (raw >> 1) ^ -(raw & 1)


def write_unsigned_varint(value: int) -> bytes:
    """Encode a value as an unsigned variable-length integer.

    Negative values are encoded as their 64-bit two's-complement bit pattern,
    which always takes the full 10 bytes.

    Args:
        value: Integer to encode

    Returns:
        1 to 10 encoded bytes

    Raises:
        ValueTooLargeError: If the value needs more than 64 bits
    """
    if value < 0:
        value &= _UINT64_MASK
    elif value > _UINT64_MASK:
        raise ValueTooLargeError(f"Value {value} does not fit in {VARINT_BIT_WIDTH} bits")

    buf = bytearray()
    for _ in range(MAX_VARINT_BYTES):
        if value >> 7:
            buf.append((value & 0x7F) | 0x80)
            value >>= 7
        else:
            buf.append(value)
            return bytes(buf)
    raise ValueTooLargeError(f"Value too large to be encoded in {MAX_VARINT_BYTES} bytes")


def write_varint(value: int) -> bytes:
    """Encode a signed value as a zig-zag variable-length integer.

    The value is wrapped to 64 bits before the zig-zag mapping.
    """
    value = ((value + _INT64_BIAS) & _UINT64_MASK) - _INT64_BIAS
    return write_unsigned_varint(((value << 1) ^ (value >> (VARINT_BIT_WIDTH - 1))) & _UINT64_MASK)


def decode_unsigned_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned varint from a slice.

    Returns:
        Tuple of (value, offset just past the varint)
    """
    source = BytesSource(data, offset)
    value = read_unsigned_varint(source)
    return value, source.offset


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a signed varint from a slice. Returns (value, next offset)."""
    source = BytesSource(data, offset)
    value = read_varint(source)
    return value, source.offset
