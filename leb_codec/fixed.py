# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 encoding/decoding of fixed-width 32-bit and 64-bit integers.

Thin wrappers that go through a 4 or 8 byte buffer and the
arbitrary-precision codec in leb128.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from . import bufs
from .bufs import MAX_INT32, MAX_INT64, MAX_UINT32, MAX_UINT64, MIN_INT32, MIN_INT64
from .errors import RangeError
from .leb128 import (
    BufferResult,
    decode_signed_buffer,
    decode_unsigned_buffer,
    encode_signed_buffer,
    encode_unsigned_buffer,
)


@dataclass(frozen=True)
class IntResult:
    """A decoded integer and the index just past the bytes it came from."""
    value: int
    end_index: int
    lossy: bool = False


def _encode(value: int, size: int, write: Callable[[int, bytearray], None],
            encode: Callable[[bytes], bytes]) -> bytes:
    buffer = bufs.alloc(size)
    write(value, buffer)
    return encode(buffer)


def _decode(data: bytes, index: int, decode: Callable[[bytes, int], BufferResult],
            read: Callable[[bytes], Tuple[int, bool]],
            low: int, high: int) -> Tuple[int, int, bool]:
    result = decode(data, index)
    value, lossy = read(result.value)
    if not low <= value <= high:
        raise RangeError(f"Decoded value {value} out of range [{low}, {high}]")
    return value, result.end_index, lossy


def encode_int32(value: int) -> bytes:
    """
    Encode a signed 32-bit integer as LEB128.

    Raises:
        RangeError: If value does not fit in 32 bits
    """
    return _encode(value, 4, bufs.write_int32, encode_signed_buffer)


def decode_int32(data: bytes, index: int = 0) -> IntResult:
    """
    Decode a signed 32-bit integer.

    Args:
        data: Bytes containing the encoded value
        index: Starting offset in data

    Returns:
        IntResult with the value and the offset past the encoding

    Raises:
        DecodeError: If the encoding is truncated
        RangeError: If the value does not fit in a signed 32-bit integer
    """
    value, end_index, _ = _decode(data, index, decode_signed_buffer, bufs.read_int,
                                  MIN_INT32, MAX_INT32)
    return IntResult(value, end_index)


def encode_uint32(value: int) -> bytes:
    """
    Encode an unsigned 32-bit integer as LEB128.

    Raises:
        RangeError: If value is negative or does not fit in 32 bits
    """
    return _encode(value, 4, bufs.write_uint32, encode_unsigned_buffer)


def decode_uint32(data: bytes, index: int = 0) -> IntResult:
    """
    Decode an unsigned 32-bit integer.

    Raises:
        DecodeError: If the encoding is truncated
        RangeError: If the value does not fit in an unsigned 32-bit integer
    """
    value, end_index, _ = _decode(data, index, decode_unsigned_buffer, bufs.read_uint,
                                  0, MAX_UINT32)
    return IntResult(value, end_index)


def encode_int64(value: int) -> bytes:
    """
    Encode a signed 64-bit integer as LEB128.

    Raises:
        RangeError: If value does not fit in 64 bits
    """
    return _encode(value, 8, bufs.write_int64, encode_signed_buffer)


def decode_int64(data: bytes, index: int = 0) -> IntResult:
    """
    Decode a signed 64-bit integer.

    The returned value is always exact. lossy is set when it cannot be
    represented by a double, i.e. when a peer using JS/JSON numbers
    would not see the same value.

    Raises:
        DecodeError: If the encoding is truncated
        RangeError: If the value does not fit in a signed 64-bit integer
    """
    return IntResult(*_decode(data, index, decode_signed_buffer, bufs.read_int,
                              MIN_INT64, MAX_INT64))


def encode_uint64(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as LEB128.

    Raises:
        RangeError: If value is negative or does not fit in 64 bits
    """
    return _encode(value, 8, bufs.write_uint64, encode_unsigned_buffer)


def decode_uint64(data: bytes, index: int = 0) -> IntResult:
    """
    Decode an unsigned 64-bit integer, see decode_int64 for lossy.

    Raises:
        DecodeError: If the encoding is truncated
        RangeError: If the value does not fit in an unsigned 64-bit integer
    """
    return IntResult(*_decode(data, index, decode_unsigned_buffer, bufs.read_uint,
                              0, MAX_UINT64))
