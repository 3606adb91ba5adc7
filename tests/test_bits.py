# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for bit-level buffer helpers."""

import pytest
from leb_codec.bits import get_sign, high_order, extract, inject


class TestGetSign:
    """Tests for get_sign function."""

    def test_positive(self):
        assert get_sign(b"\x00") == 0
        assert get_sign(b"\xFF\x7F") == 0

    def test_negative(self):
        assert get_sign(b"\x80") == 1
        assert get_sign(b"\x00\xFF") == 1

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty buffer"):
            get_sign(b"")


class TestHighOrder:
    """Tests for high_order function."""

    def test_no_match(self):
        """No bit with the requested value."""
        assert high_order(1, b"\x00\x00") == -1
        assert high_order(0, b"\xFF") == -1
        assert high_order(1, b"") == -1

    def test_highest_one(self):
        assert high_order(1, b"\x01") == 0
        assert high_order(1, b"\x53\x18") == 12
        assert high_order(1, b"\xFF\x00") == 7

    def test_highest_zero(self):
        """Docstring example 11111011 01110101: bit #10 is the top 0."""
        assert high_order(0, b"\x75\xFB") == 10
        assert high_order(0, b"\x7F") == 7
        assert high_order(0, b"\x00\xFF") == 7


class TestExtract:
    """Tests for extract function."""

    def test_aligned(self):
        assert extract(b"\xAB\xCD", 0, 8, 0) == 0xAB
        assert extract(b"\xAB\xCD", 8, 8, 0) == 0xCD

    def test_unaligned(self):
        # 0xCDAB = 1100 1101 1010 1011
        assert extract(b"\xAB\xCD", 4, 8, 0) == 0xDA
        assert extract(b"\xAB\xCD", 7, 7, 0) == 0b0011011

    def test_past_end_uses_default(self):
        assert extract(b"\x80", 7, 7, 0) == 0b0000001
        assert extract(b"\x80", 7, 7, 1) == 0b1111111
        assert extract(b"\x00", 14, 7, 1) == 0x7F

    @pytest.mark.parametrize("bit_index, bit_length", [(0, 0), (0, -1), (-7, 7)])
    def test_bad_field_raises(self, bit_index, bit_length):
        with pytest.raises(ValueError):
            extract(b"\xFF", bit_index, bit_length, 0)


class TestInject:
    """Tests for inject function."""

    def test_sets_and_clears(self):
        buffer = bytearray(b"\xFF\x00")
        inject(buffer, 4, 8, 0x0F)
        assert buffer == bytearray(b"\xFF\x00")

        inject(buffer, 4, 8, 0xF0)
        assert buffer == bytearray(b"\x0F\x0F")

    def test_ignores_high_bits(self):
        buffer = bytearray(2)
        inject(buffer, 7, 7, 0xFF)
        assert buffer == bytearray(b"\x80\x3F")

    def test_overflow_raises(self):
        with pytest.raises(IndexError):
            inject(bytearray(1), 4, 7, 0x7F)

    def test_overflow_leaves_buffer_untouched(self):
        """A field that does not fit is rejected before any bit is written."""
        buffer = bytearray(1)
        with pytest.raises(IndexError, match="does not fit"):
            inject(buffer, 4, 8, 0xFF)
        assert buffer == bytearray(1)

    def test_exact_fit(self):
        buffer = bytearray(2)
        inject(buffer, 9, 7, 0x7F)
        assert buffer == bytearray(b"\x00\xFE")

    @pytest.mark.parametrize("bit_index, bit_length", [(0, 0), (0, -3), (-1, 7)])
    def test_bad_field_raises(self, bit_index, bit_length):
        buffer = bytearray(b"\x5A")
        with pytest.raises(ValueError):
            inject(buffer, bit_index, bit_length, 0xFF)
        assert buffer == bytearray(b"\x5A")

    def test_extract_inverse(self):
        """Injected fields read back unchanged."""
        buffer = bytearray(4)
        for offset, value in [(0, 0x55), (7, 0x2A), (14, 0x7F), (21, 0x01)]:
            inject(buffer, offset, 7, value)
        assert [extract(buffer, o, 7, 0) for o in (0, 7, 14, 21)] == [0x55, 0x2A, 0x7F, 0x01]
