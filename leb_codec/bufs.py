# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte buffer helpers.

Allocation, resizing and conversion between Python integers and
little-endian two's-complement buffers.
"""

import struct
from typing import Tuple

from .errors import RangeError

MIN_INT32 = -0x8000_0000
MAX_INT32 = 0x7FFF_FFFF
MAX_UINT32 = 0xFFFF_FFFF
MIN_INT64 = -0x8000_0000_0000_0000
MAX_INT64 = 0x7FFF_FFFF_FFFF_FFFF
MAX_UINT64 = 0xFFFF_FFFF_FFFF_FFFF

# Mantissa width of an IEEE-754 double, the number type of JS/JSON peers.
DOUBLE_MANTISSA_BITS = 53
DOUBLE_MAX_EXPONENT = 1024


def alloc(length: int) -> bytearray:
    """Allocate a zero-filled buffer."""
    return bytearray(length)


def resize(buffer: bytes, length: int) -> bytearray:
    """
    Resize a buffer, truncating or zero-extending it.

    Args:
        buffer: Source buffer (left untouched)
        length: New length in bytes

    Returns:
        A new buffer of the requested length
    """
    result = bytearray(buffer[:length])
    result.extend(bytes(length - len(result)))
    return result


def _write(fmt: str, value: int, buffer: bytearray, low: int, high: int) -> None:
    if not low <= value <= high:
        raise RangeError(f"Value {value} out of range [{low}, {high}]")
    struct.pack_into(fmt, buffer, 0, value)


def write_int32(value: int, buffer: bytearray) -> None:
    """Write a signed 32-bit integer into a 4-byte buffer."""
    _write("<i", value, buffer, MIN_INT32, MAX_INT32)


def write_uint32(value: int, buffer: bytearray) -> None:
    """Write an unsigned 32-bit integer into a 4-byte buffer."""
    _write("<I", value, buffer, 0, MAX_UINT32)


def write_int64(value: int, buffer: bytearray) -> None:
    """Write a signed 64-bit integer into an 8-byte buffer."""
    _write("<q", value, buffer, MIN_INT64, MAX_INT64)


def write_uint64(value: int, buffer: bytearray) -> None:
    """Write an unsigned 64-bit integer into an 8-byte buffer."""
    _write("<Q", value, buffer, 0, MAX_UINT64)


def fits_double(value: int) -> bool:
    """Check whether an integer survives conversion to a float unchanged."""
    magnitude = abs(value)
    if magnitude == 0:
        return True
    if magnitude.bit_length() > DOUBLE_MAX_EXPONENT:
        return False
    # drop trailing zero bits, what remains must fit the mantissa
    trailing = (magnitude & -magnitude).bit_length() - 1
    return (magnitude >> trailing).bit_length() <= DOUBLE_MANTISSA_BITS


def read_int(buffer: bytes) -> Tuple[int, bool]:
    """
    Read a signed little-endian buffer.

    Args:
        buffer: Signed little-endian buffer

    Returns:
        Tuple of (exact value, lossy) where lossy is True if the value
        cannot be held exactly by a double
    """
    value = to_int(buffer, signed=True)
    return value, not fits_double(value)


def read_uint(buffer: bytes) -> Tuple[int, bool]:
    """
    Read an unsigned little-endian buffer.

    Args:
        buffer: Unsigned little-endian buffer

    Returns:
        Tuple of (exact value, lossy), see read_int
    """
    value = to_int(buffer, signed=False)
    return value, not fits_double(value)


def to_int(buffer: bytes, signed: bool = True) -> int:
    """Convert a little-endian buffer to an integer."""
    return int.from_bytes(bytes(buffer), "little", signed=signed)


def from_int(value: int, signed: bool = True) -> bytes:
    """
    Convert an integer to its canonical little-endian buffer.

    Args:
        value: Integer to convert
        signed: Produce a two's-complement buffer (with room for the sign bit)

    Returns:
        The shortest buffer holding the value, at least one byte long

    Raises:
        ValueError: If value is negative and signed is False
    """
    if signed:
        bit_count = (~value if value < 0 else value).bit_length() + 1
    else:
        if value < 0:
            raise ValueError("Cannot convert negative value to unsigned buffer")
        bit_count = value.bit_length()

    length = max(1, (bit_count + 7) // 8)
    return value.to_bytes(length, "little", signed=signed)
