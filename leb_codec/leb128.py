# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 encoding/decoding of arbitrary-precision integer buffers.

Values are passed around as little-endian two's-complement buffers, so
there is no limit on their size. Each LEB128 byte carries 7 bits of the
value in its low bits, and its top bit is set when more bytes follow.
Encoders always produce the shortest encoding; decoders accept padded
encodings and return the canonical (shortest) buffer.
"""

from dataclasses import dataclass

from structlog import get_logger

from . import bits, bufs
from .errors import DecodeError

logger = get_logger()


@dataclass(frozen=True)
class BufferResult:
    """A decoded buffer and the index just past the bytes it came from."""
    value: bytes
    end_index: int


def _signed_bit_count(buffer: bytes) -> int:
    """
    Number of bits needed to encode a signed buffer.

    This is the bit number of the highest bit that differs from the sign,
    plus one for that bit and one for the sign itself. For example:

        11111011 01110101
        high          low

    The sign is 1 and bit #10 is the highest 0 bit, so 12 bits are needed.
    0 and -1 both come out as 1 bit.
    """
    return bits.high_order(bits.get_sign(buffer) ^ 1, buffer) + 2


def _unsigned_bit_count(buffer: bytes) -> int:
    """Number of bits needed to encode an unsigned buffer (at least 1)."""
    return max(1, bits.high_order(1, buffer) + 1)


def encoded_length(data: bytes, index: int = 0) -> int:
    """
    Get the length of the LEB128 value starting at index.

    Args:
        data: Bytes containing the encoded value
        index: Starting offset in data

    Returns:
        Number of bytes in the encoding, terminator included

    Raises:
        DecodeError: If index is outside data or the encoding is truncated
    """
    if not 0 <= index < len(data):
        raise DecodeError(f"LEB128 decode: index {index} outside data of length {len(data)}")

    end = index
    while data[end] & 0x80:
        end += 1
        if end >= len(data):
            raise DecodeError("LEB128 decode: unexpected end of data")

    return end - index + 1


def _encode(buffer: bytes, bit_count: int, fill_bit: int) -> bytes:
    byte_count = (bit_count + 6) // 7
    result = bufs.alloc(byte_count)

    for i in range(byte_count):
        result[i] = bits.extract(buffer, i * 7, 7, fill_bit) | 0x80

    # last byte ends the encoding
    result[-1] &= 0x7F
    return bytes(result)


def _inject_groups(data: bytes, index: int, length: int) -> bytearray:
    """Unpack length 7-bit groups from data[index:] into a new buffer."""
    result = bufs.alloc((length * 7 + 7) // 8)
    for i in range(length):
        bits.inject(result, i * 7, 7, data[index + i])
    return result


def _canonical(result: bytearray, byte_length: int, bit_count: int,
               length: int, index: int) -> bytes:
    """Cut result down to byte_length; bit_count is what the value needs."""
    if (bit_count + 6) // 7 < length:
        logger.debug("non-minimal LEB128 input", index=index, length=length)
    return bytes(bufs.resize(result, byte_length))


def encode_signed_buffer(buffer: bytes) -> bytes:
    """
    Encode a signed little-endian buffer as LEB128.

    Args:
        buffer: Non-empty two's-complement little-endian buffer

    Returns:
        Minimal LEB128 encoding of the value
    """
    sign = bits.get_sign(buffer)
    return _encode(buffer, _signed_bit_count(buffer), sign)


def decode_signed_buffer(data: bytes, index: int = 0) -> BufferResult:
    """
    Decode a signed LEB128 value into a canonical buffer.

    Args:
        data: Bytes containing the encoded value
        index: Starting offset in data

    Returns:
        BufferResult with the shortest two's-complement buffer for the
        value and the offset just past the encoding

    Raises:
        DecodeError: If the encoding is truncated
    """
    length = encoded_length(data, index)
    result = _inject_groups(data, index, length)
    byte_length = len(result)

    # sign-extend the partially filled last byte
    end_bit = (length * 7) % 8
    if end_bit and result[-1] & (1 << (end_bit - 1)):
        result[-1] |= (0xFF << end_bit) & 0xFF

    # drop bytes that only repeat the sign
    sign_bit = result[-1] >> 7
    sign_byte = sign_bit * 0xFF
    while (byte_length > 1
           and result[byte_length - 1] == sign_byte
           and result[byte_length - 2] >> 7 == sign_bit):
        byte_length -= 1

    # the top byte holds the last bit differing from the sign, plus the sign
    top = result[byte_length - 1] ^ sign_byte
    bit_count = (byte_length - 1) * 8 + top.bit_length() + 1
    value = _canonical(result, byte_length, bit_count, length, index)
    return BufferResult(value, index + length)


def encode_unsigned_buffer(buffer: bytes) -> bytes:
    """
    Encode an unsigned little-endian buffer as LEB128.

    Args:
        buffer: Non-empty little-endian buffer

    Returns:
        Minimal LEB128 encoding of the value

    Raises:
        ValueError: If the buffer is empty
    """
    if not buffer:
        raise ValueError("Cannot encode an empty buffer")
    return _encode(buffer, _unsigned_bit_count(buffer), 0)


def decode_unsigned_buffer(data: bytes, index: int = 0) -> BufferResult:
    """
    Decode an unsigned LEB128 value into a canonical buffer.

    Args:
        data: Bytes containing the encoded value
        index: Starting offset in data

    Returns:
        BufferResult with the shortest buffer for the value (no zero
        top bytes, at least one byte) and the offset just past the encoding

    Raises:
        DecodeError: If the encoding is truncated
    """
    length = encoded_length(data, index)
    result = _inject_groups(data, index, length)

    byte_length = len(result)
    while byte_length > 1 and result[byte_length - 1] == 0:
        byte_length -= 1

    bit_count = max(1, (byte_length - 1) * 8 + result[byte_length - 1].bit_length())
    value = _canonical(result, byte_length, bit_count, length, index)
    return BufferResult(value, index + length)
