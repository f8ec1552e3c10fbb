"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from binaryutils import BinaryStream, ByteOrder, CodecConfig, host_byte_order


@pytest.fixture
def stream() -> BinaryStream:
    """Empty stream for testing."""
    return BinaryStream()


@pytest.fixture
def swapped_config() -> CodecConfig:
    """Config claiming the opposite of the real host byte order."""
    if host_byte_order() is ByteOrder.BIG_ENDIAN:
        return CodecConfig(host_order=ByteOrder.LITTLE_ENDIAN)
    return CodecConfig(host_order=ByteOrder.BIG_ENDIAN)
