# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bit-level helpers for little-endian byte buffers.

A buffer is treated as a bit vector where bit 0 is the least significant
bit of byte 0, and the top bit of the last byte is the sign bit of a
signed value. Bits past the end of a buffer read as a caller-chosen
default, which gives sign or zero extension for free.
"""


def get_sign(buffer: bytes) -> int:
    """
    Get the sign bit of a signed little-endian buffer.

    Args:
        buffer: Non-empty little-endian buffer

    Returns:
        1 for a negative value, 0 otherwise

    Raises:
        ValueError: If the buffer is empty
    """
    if not buffer:
        raise ValueError("Cannot take the sign of an empty buffer")
    return buffer[-1] >> 7


def high_order(bit: int, buffer: bytes) -> int:
    """
    Find the highest-order bit that has the given value.

    Args:
        bit: Bit value to look for (0 or 1)
        buffer: Little-endian buffer

    Returns:
        Zero-based bit index, or -1 if no bit has that value
    """
    # a byte made only of the other bit value can be skipped whole
    filler = 0x00 if bit else 0xFF
    index = len(buffer) - 1
    while index >= 0 and buffer[index] == filler:
        index -= 1

    if index < 0:
        return -1

    byte = buffer[index] if bit else buffer[index] ^ 0xFF
    return index * 8 + byte.bit_length() - 1


def _get_bit(buffer: bytes, index: int, default_bit: int) -> int:
    byte_index = index >> 3
    if byte_index >= len(buffer):
        return default_bit
    return (buffer[byte_index] >> (index & 7)) & 1


def _check_field(bit_index: int, bit_length: int) -> None:
    if bit_length <= 0:
        raise ValueError(f"Field width must be positive, got {bit_length}")
    if bit_index < 0:
        raise ValueError(f"Bit index must not be negative, got {bit_index}")


def extract(buffer: bytes, bit_index: int, bit_length: int, default_bit: int) -> int:
    """
    Extract a bit field from a buffer.

    Args:
        buffer: Little-endian buffer to read from
        bit_index: Offset of the lowest bit of the field
        bit_length: Width of the field in bits
        default_bit: Value of bits lying past the end of the buffer

    Returns:
        The field as a non-negative integer

    Raises:
        ValueError: If bit_length is not positive or bit_index is negative
    """
    _check_field(bit_index, bit_length)
    result = 0
    for i in range(bit_length):
        result |= _get_bit(buffer, bit_index + i, default_bit) << i
    return result


def inject(buffer: bytearray, bit_index: int, bit_length: int, value: int) -> None:
    """
    Write the low bits of a value into a buffer, in place.

    Args:
        buffer: Mutable little-endian buffer to write into
        bit_index: Offset of the lowest bit of the field
        bit_length: Number of bits of value to write
        value: Field value; bits above bit_length are ignored

    Raises:
        ValueError: If bit_length is not positive or bit_index is negative
        IndexError: If the field does not fit in the buffer
    """
    _check_field(bit_index, bit_length)
    if (bit_index + bit_length + 7) // 8 > len(buffer):
        raise IndexError(f"Field of {bit_length} bits at bit {bit_index} does not fit "
                         f"in a {len(buffer)}-byte buffer")

    for i in range(bit_length):
        index = bit_index + i
        mask = 1 << (index & 7)
        if (value >> i) & 1:
            buffer[index >> 3] |= mask
        else:
            buffer[index >> 3] &= ~mask & 0xFF
