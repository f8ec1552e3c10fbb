"""Cursor over a growable byte buffer.

BinaryStream sequences typed reads and writes over one owned bytearray. Reads
consume from the current offset; writes always append to the end of the
buffer and never move the offset. Every typed accessor is a thin wrapper over
one codec call.
"""

from __future__ import annotations

import uuid
from typing import Optional

from structlog import get_logger

from .codec import binary, varint
from .config import CodecConfig
from .exceptions import DecodeError, InvalidInputError, UnexpectedEndOfBufferError
from .utils.sizing import (
    BOOL_SIZE,
    BYTE_SIZE,
    DOUBLE_SIZE,
    FLOAT_SIZE,
    INT_SIZE,
    LONG_SIZE,
    SHORT_SIZE,
    TRIAD_SIZE,
    UUID_SIZE,
)

logger = get_logger()


class BinaryStream:
    """Reads and writes typed values over an owned byte buffer.

    A stream is not safe for concurrent use; each encode or decode session
    should own its own instance.

    Example:
        >>> stream = BinaryStream()
        >>> stream.put_byte(1)
        >>> stream.put_short(2)
        >>> stream.put_int(3)
        >>> stream.get_byte(), stream.get_short(), stream.get_int()
        (1, 2, 3)
        >>> stream.feof()
        True
    """

    def __init__(self, buffer: bytes = b"", offset: int = 0, *, config: Optional[CodecConfig] = None) -> None:
        """Initialize a stream over a copy of the given bytes.

        Args:
            buffer: Initial content
            offset: Initial read offset (0 <= offset <= len(buffer))
            config: Codec configuration for float/double accessors

        Raises:
            InvalidInputError: If offset is outside the buffer
        """
        self.log = logger.new()
        self.config = config
        self._buffer = bytearray()
        self._offset = 0
        self._replace(buffer, offset)

    def _replace(self, buffer: bytes, offset: int) -> None:
        if not 0 <= offset <= len(buffer):
            raise InvalidInputError(f"Offset {offset} outside buffer of {len(buffer)} bytes")
        self._buffer = bytearray(buffer)
        self._offset = offset

    @property
    def offset(self) -> int:
        """Current read offset."""
        return self._offset

    @offset.setter
    def offset(self, value: int) -> None:
        if not 0 <= value <= len(self._buffer):
            raise InvalidInputError(f"Offset {value} outside buffer of {len(self._buffer)} bytes")
        self._offset = value

    @property
    def buffer(self) -> bytes:
        """Snapshot of the full buffer."""
        return bytes(self._buffer)

    def get_offset(self) -> int:
        """Return the stream pointer."""
        return self._offset

    def get_buffer(self) -> bytes:
        """Return the full raw binary buffer."""
        return bytes(self._buffer)

    def reset(self) -> None:
        """Discard the buffer and rewind to offset 0."""
        self.log.debug("reset", discarded=len(self._buffer))
        self._buffer = bytearray()
        self._offset = 0

    def set_buffer(self, buffer: bytes = b"", offset: int = 0) -> None:
        """Replace the buffer and offset, discarding prior content.

        Raises:
            InvalidInputError: If offset is outside the new buffer
        """
        self._replace(buffer, offset)
        self.log.debug("set buffer", length=len(self._buffer), offset=offset)

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return max(0, len(self._buffer) - self._offset)

    def feof(self) -> bool:
        """Return True if there is no more data left to read."""
        return self._offset >= len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def get(self, length: int) -> bytes:
        """Read the next ``length`` bytes and advance the offset.

        Args:
            length: Number of bytes to read

        Returns:
            Bytes read from the buffer

        Raises:
            InvalidInputError: If length is negative
            UnexpectedEndOfBufferError: If fewer than ``length`` bytes remain
        """
        if length < 0:
            raise InvalidInputError(f"Cannot read a negative number of bytes: {length}")
        if length > self.remaining():
            raise UnexpectedEndOfBufferError(
                f"Not enough bytes: need {length}, have {self.remaining()}"
            )
        data = bytes(self._buffer[self._offset : self._offset + length])
        self._offset += length
        return data

    def get_remaining(self) -> bytes:
        """Read everything from the offset to the end of the buffer."""
        data = bytes(self._buffer[self._offset :])
        self._offset = len(self._buffer)
        return data

    def put(self, data: bytes) -> None:
        """Append bytes to the end of the buffer."""
        self._buffer += data

    def get_bool(self) -> bool:
        return binary.read_bool(self.get(BOOL_SIZE))

    def put_bool(self, value: bool) -> None:
        self.put(binary.write_bool(value))

    def get_byte(self) -> int:
        """Read an unsigned byte. Also makes the stream a varint ByteSource."""
        return binary.read_byte(self.get(BYTE_SIZE))

    def get_signed_byte(self) -> int:
        return binary.read_signed_byte(self.get(BYTE_SIZE))

    def put_byte(self, value: int) -> None:
        self.put(binary.write_byte(value))

    def get_short(self) -> int:
        return binary.read_short(self.get(SHORT_SIZE))

    def get_lshort(self) -> int:
        return binary.read_lshort(self.get(SHORT_SIZE))

    def get_signed_short(self) -> int:
        return binary.read_signed_short(self.get(SHORT_SIZE))

    def get_signed_lshort(self) -> int:
        return binary.read_signed_lshort(self.get(SHORT_SIZE))

    def put_short(self, value: int) -> None:
        self.put(binary.write_short(value))

    def put_lshort(self, value: int) -> None:
        self.put(binary.write_lshort(value))

    def get_triad(self) -> int:
        return binary.read_triad(self.get(TRIAD_SIZE))

    def get_ltriad(self) -> int:
        return binary.read_ltriad(self.get(TRIAD_SIZE))

    def put_triad(self, value: int) -> None:
        self.put(binary.write_triad(value))

    def put_ltriad(self, value: int) -> None:
        self.put(binary.write_ltriad(value))

    def get_int(self) -> int:
        return binary.read_int(self.get(INT_SIZE))

    def get_lint(self) -> int:
        return binary.read_lint(self.get(INT_SIZE))

    def put_int(self, value: int) -> None:
        self.put(binary.write_int(value))

    def put_lint(self, value: int) -> None:
        self.put(binary.write_lint(value))

    def get_long(self) -> int:
        return binary.read_long(self.get(LONG_SIZE))

    def get_llong(self) -> int:
        return binary.read_llong(self.get(LONG_SIZE))

    def put_long(self, value: int) -> None:
        self.put(binary.write_long(value))

    def put_llong(self, value: int) -> None:
        self.put(binary.write_llong(value))

    def get_float(self, accuracy: int = -1) -> float:
        """Read a big-endian float, rounded to ``accuracy`` decimal places when >= 0."""
        return binary.read_float(self.get(FLOAT_SIZE), accuracy, config=self.config)

    def get_lfloat(self, accuracy: int = -1) -> float:
        """Read a little-endian float, rounded to ``accuracy`` decimal places when >= 0."""
        return binary.read_lfloat(self.get(FLOAT_SIZE), accuracy, config=self.config)

    def put_float(self, value: float) -> None:
        self.put(binary.write_float(value, config=self.config))

    def put_lfloat(self, value: float) -> None:
        self.put(binary.write_lfloat(value, config=self.config))

    def get_double(self) -> float:
        return binary.read_double(self.get(DOUBLE_SIZE), config=self.config)

    def get_ldouble(self) -> float:
        return binary.read_ldouble(self.get(DOUBLE_SIZE), config=self.config)

    def put_double(self, value: float) -> None:
        self.put(binary.write_double(value, config=self.config))

    def put_ldouble(self, value: float) -> None:
        self.put(binary.write_ldouble(value, config=self.config))

    def get_uuid(self) -> uuid.UUID:
        """Read a UUID from the next 16 bytes (RFC 4122 byte order)."""
        return uuid.UUID(bytes=self.get(UUID_SIZE))

    def get_luuid(self) -> uuid.UUID:
        """Read a UUID from the next 16 bytes in little-endian field order."""
        return uuid.UUID(bytes_le=self.get(UUID_SIZE))

    def put_uuid(self, value: uuid.UUID) -> None:
        self.put(value.bytes)

    def put_luuid(self, value: uuid.UUID) -> None:
        self.put(value.bytes_le)

    def get_unsigned_varint(self) -> int:
        """Read an unsigned variable-length integer.

        Raises:
            MalformedVarIntError: If the varint does not terminate within 10 bytes
            UnexpectedEndOfBufferError: If the buffer ends inside the varint
        """
        start = self._offset
        try:
            return varint.read_unsigned_varint(self)
        except DecodeError:
            self._offset = start
            raise

    def get_varint(self) -> int:
        """Read a signed (zig-zag) variable-length integer."""
        start = self._offset
        try:
            return varint.read_varint(self)
        except DecodeError:
            self._offset = start
            raise

    def put_unsigned_varint(self, value: int) -> None:
        self.put(varint.write_unsigned_varint(value))

    def put_varint(self, value: int) -> None:
        self.put(varint.write_varint(value))
