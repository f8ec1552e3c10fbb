"""Unit tests for the fixed-width integer codec."""

from __future__ import annotations

import pytest

from binaryutils import InvalidInputError
from binaryutils.codec.binary import (
    read_bool,
    read_byte,
    read_int,
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
    write_int,
    write_lint,
    write_llong,
    write_long,
    write_lshort,
    write_ltriad,
    write_short,
    write_triad,
)


class TestBool:
    """Test boolean encoding."""

    def test_write_bool(self) -> None:
        assert write_bool(True) == b"\x01"
        assert write_bool(False) == b"\x00"

    def test_read_bool_any_nonzero(self) -> None:
        """Any byte other than 0x00 decodes as True."""
        assert read_bool(b"\x00") is False
        assert read_bool(b"\x01") is True
        assert read_bool(b"\x7f") is True
        assert read_bool(b"\xff") is True


class TestByte:
    """Test byte encoding."""

    def test_unsigned_and_signed(self) -> None:
        assert read_byte(b"\xff") == 255
        assert read_signed_byte(b"\xff") == -1
        assert read_signed_byte(b"\x80") == -128
        assert read_signed_byte(b"\x7f") == 127

    def test_write_byte_wraps(self) -> None:
        assert write_byte(-1) == b"\xff"
        assert write_byte(256) == b"\x00"
        assert write_byte(0x1ff) == b"\xff"


class TestShort:
    """Test 16-bit encoding."""

    def test_endianness(self) -> None:
        """Big-endian and little-endian byte layouts."""
        assert write_short(0x1234) == b"\x12\x34"
        assert write_lshort(0x1234) == b"\x34\x12"
        assert read_short(b"\x12\x34") == 0x1234
        assert read_lshort(b"\x34\x12") == 0x1234

    def test_sign_extension(self) -> None:
        assert read_signed_short(b"\xff\xfe") == -2
        assert read_signed_lshort(b"\xfe\xff") == -2
        assert read_signed_short(b"\x7f\xff") == 32767

    def test_unsigned_read_of_negative_write(self) -> None:
        """Unsigned decode reinterprets the two's-complement bit pattern."""
        assert read_short(write_short(-1)) == 0xFFFF
        assert read_lshort(write_lshort(-32768)) == 0x8000


class TestTriad:
    """Test 24-bit encoding."""

    def test_layouts(self) -> None:
        assert write_triad(0x123456) == b"\x12\x34\x56"
        assert write_ltriad(0x123456) == b"\x56\x34\x12"
        assert read_triad(b"\x12\x34\x56") == 0x123456
        assert read_ltriad(b"\x56\x34\x12") == 0x123456

    @pytest.mark.parametrize("value", [0, 1, 0x7FFFFF, 16777215])
    def test_range_roundtrip(self, value: int) -> None:
        assert read_triad(write_triad(value)) == value
        assert read_ltriad(write_ltriad(value)) == value

    def test_overflow_wraps(self) -> None:
        """16777216 needs a fourth byte, which is dropped."""
        assert write_triad(16777216) == b"\x00\x00\x00"
        assert write_ltriad(16777216) == b"\x00\x00\x00"
        assert read_triad(write_triad(16777216)) == 0

    def test_no_sign_extension(self) -> None:
        assert read_triad(b"\xff\xff\xff") == 16777215
        assert read_triad(write_triad(-1)) == 16777215


class TestInt:
    """Test 32-bit encoding."""

    def test_layouts(self) -> None:
        assert write_int(0x01020304) == b"\x01\x02\x03\x04"
        assert write_lint(0x01020304) == b"\x04\x03\x02\x01"

    def test_signed_decode(self) -> None:
        assert read_int(b"\xff\xff\xff\xff") == -1
        assert read_lint(b"\x00\x00\x00\x80") == -2147483648
        assert read_int(write_int(2147483647)) == 2147483647

    def test_write_wraps(self) -> None:
        assert write_int(0xFFFFFFFF) == b"\xff\xff\xff\xff"
        assert read_int(write_int(0x80000000)) == -2147483648
        assert write_int(1 << 32) == b"\x00\x00\x00\x00"


class TestLong:
    """Test 64-bit encoding."""

    def test_minus_one(self) -> None:
        assert write_long(-1) == b"\xff" * 8
        assert read_long(b"\xff" * 8) == -1
        assert write_llong(-1) == b"\xff" * 8
        assert read_llong(b"\xff" * 8) == -1

    def test_layouts(self) -> None:
        assert write_long(0x0102030405060708) == bytes(range(1, 9))
        assert write_llong(0x0102030405060708) == bytes(range(8, 0, -1))
        assert read_llong(bytes(range(8, 0, -1))) == 0x0102030405060708

    def test_extremes(self) -> None:
        assert read_long(write_long(9223372036854775807)) == 9223372036854775807
        assert read_long(write_long(-9223372036854775808)) == -9223372036854775808
        assert write_long(-9223372036854775808) == b"\x80" + b"\x00" * 7

    def test_high_half_combines(self) -> None:
        """High and low 32-bit halves combine without sign bleed from the low half."""
        assert read_long(b"\x00\x00\x00\x01\xff\xff\xff\xff") == 0x1FFFFFFFF

    def test_unsigned_wraps_to_negative(self) -> None:
        assert read_long(write_long(1 << 63)) == -(1 << 63)
        assert read_long(write_long((1 << 64) + 5)) == 5


class TestLengthChecks:
    """Decode functions require exact input widths."""

    @pytest.mark.parametrize(
        "func,width",
        [
            (read_bool, 1),
            (read_byte, 1),
            (read_signed_byte, 1),
            (read_short, 2),
            (read_signed_lshort, 2),
            (read_triad, 3),
            (read_ltriad, 3),
            (read_int, 4),
            (read_lint, 4),
            (read_long, 8),
            (read_llong, 8),
        ],
    )
    def test_wrong_length(self, func, width: int) -> None:
        with pytest.raises(InvalidInputError, match=f"Expected {width} bytes"):
            func(b"\x00" * (width + 1))
        with pytest.raises(InvalidInputError):
            func(b"\x00" * (width - 1))

    def test_accepts_bytearray(self) -> None:
        assert read_triad(bytearray(b"\x00\x01\x00")) == 256
        assert read_int(bytearray(b"\x00\x00\x01\x00")) == 256
