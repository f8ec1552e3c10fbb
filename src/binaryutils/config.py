"""Codec configuration.

The host byte order only matters to the floating-point functions, which pack
values with the native IEEE layout and then normalize them to a fixed wire
order. It is detected once per process and carried in an immutable
CodecConfig that callers may pass explicitly.
"""

from __future__ import annotations

import enum
import struct
from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from structlog import get_logger

logger = get_logger()

# 1.0 as an IEEE double, most significant byte first
_BIG_ENDIAN_ONE = b"\x3f\xf0\x00\x00\x00\x00\x00\x00"


class ByteOrder(enum.Enum):
    """Byte order of a multi-byte value."""

    BIG_ENDIAN = 0x00
    LITTLE_ENDIAN = 0x01


@lru_cache(maxsize=None)
def host_byte_order() -> ByteOrder:
    """Detect the native byte order by inspecting the layout of a known double.

    The result is cached, so detection runs at most once per process.
    """
    order = ByteOrder.BIG_ENDIAN if struct.pack("=d", 1.0) == _BIG_ENDIAN_ONE else ByteOrder.LITTLE_ENDIAN
    logger.debug("detected host byte order", byte_order=order.name)
    return order


class CodecConfig(BaseModel):
    """Immutable settings injected into the floating-point codec functions.

    Attributes:
        host_order: Native byte order of the machine packing the values.

    Example:
        >>> from binaryutils import CodecConfig, ByteOrder, write_float
        >>> config = CodecConfig(host_order=ByteOrder.BIG_ENDIAN)
        >>> write_float(1.0, config=config)
        b'?\\x80\\x00\\x00'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    host_order: ByteOrder


@lru_cache(maxsize=None)
def default_config() -> CodecConfig:
    """Return the process-wide configuration built from the detected host order."""
    return CodecConfig(host_order=host_byte_order())
