# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 (Little-Endian Base-128) codec.

This package encodes and decodes integers in the variable-length
LEB128 format used by WebAssembly and DWARF, either as arbitrary-precision
little-endian buffers or as fixed-width 32/64-bit integers.

Example usage:
    from leb_codec import encode_int32, decode_uint32, decode_signed_buffer

    encode_int32(-1)                       # b"\\x7f"
    decode_uint32(b"\\xac\\x02")             # IntResult(value=300, end_index=2)

    # Buffers are little-endian two's complement of any length
    result = decode_signed_buffer(b"\\xfb\\x75")
    print(result.value.hex(), result.end_index)
"""

from .errors import LebError, DecodeError, RangeError
from .leb128 import (
    BufferResult,
    encoded_length,
    encode_signed_buffer,
    decode_signed_buffer,
    encode_unsigned_buffer,
    decode_unsigned_buffer,
)
from .fixed import (
    IntResult,
    encode_int32,
    decode_int32,
    encode_uint32,
    decode_uint32,
    encode_int64,
    decode_int64,
    encode_uint64,
    decode_uint64,
)
from .bufs import (
    MIN_INT32,
    MAX_INT32,
    MAX_UINT32,
    MIN_INT64,
    MAX_INT64,
    MAX_UINT64,
    from_int,
    to_int,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "LebError",
    "DecodeError",
    "RangeError",
    # Buffer codec
    "BufferResult",
    "encoded_length",
    "encode_signed_buffer",
    "decode_signed_buffer",
    "encode_unsigned_buffer",
    "decode_unsigned_buffer",
    # Fixed-width codec
    "IntResult",
    "encode_int32",
    "decode_int32",
    "encode_uint32",
    "decode_uint32",
    "encode_int64",
    "decode_int64",
    "encode_uint64",
    "decode_uint64",
    # Limits
    "MIN_INT32",
    "MAX_INT32",
    "MAX_UINT32",
    "MIN_INT64",
    "MAX_INT64",
    "MAX_UINT64",
    # Conversions
    "from_int",
    "to_int",
]
