#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command line tool for encoding and decoding LEB128 values.

Usage:
    python leb_tool.py encode -- -1                     # 7f
    python leb_tool.py encode 300 --unsigned --width 32 # ac02
    python leb_tool.py decode ac02 --unsigned
    python leb_tool.py decode "7f ac02 00" --all
"""

import argparse
import logging
import sys
from typing import List, Optional

import structlog
from structlog import get_logger

from leb_codec import bufs, fixed
from leb_codec.errors import LebError
from leb_codec.leb128 import (
    decode_signed_buffer,
    decode_unsigned_buffer,
    encode_signed_buffer,
    encode_unsigned_buffer,
)

logger = get_logger()

ENCODERS = {
    (True, 32): fixed.encode_int32,
    (False, 32): fixed.encode_uint32,
    (True, 64): fixed.encode_int64,
    (False, 64): fixed.encode_uint64,
}

DECODERS = {
    (True, 32): fixed.decode_int32,
    (False, 32): fixed.decode_uint32,
    (True, 64): fixed.decode_int64,
    (False, 64): fixed.decode_uint64,
}


def configure_logging(verbose: bool) -> None:
    """Send log events to stderr, debug level only when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def encode_value(value: int, signed: bool, width: Optional[int]) -> bytes:
    """Encode a value with the codec selected by signedness and width."""
    if width is not None:
        return ENCODERS[(signed, width)](value)

    buffer = bufs.from_int(value, signed=signed)
    if signed:
        return encode_signed_buffer(buffer)
    return encode_unsigned_buffer(buffer)


def decode_value(data: bytes, index: int, signed: bool, width: Optional[int]) -> fixed.IntResult:
    """Decode one value at index with the codec selected by signedness and width."""
    if width is not None:
        return DECODERS[(signed, width)](data, index)

    decode = decode_signed_buffer if signed else decode_unsigned_buffer
    result = decode(data, index)
    return fixed.IntResult(bufs.to_int(result.value, signed=signed), result.end_index)


def cmd_encode(value: int, signed: bool, width: Optional[int]):
    """Print the encoding of a value as hex."""
    encoded = encode_value(value, signed, width)
    logger.debug("encoded", value=value, signed=signed, width=width, length=len(encoded))
    print(encoded.hex())


def cmd_decode(data: bytes, index: int, signed: bool, width: Optional[int], all_values: bool):
    """Print decoded values with the index past each one."""
    while True:
        result = decode_value(data, index, signed, width)
        logger.debug("decoded", index=index, end_index=result.end_index)
        line = f"{result.value} {result.end_index}"
        if result.lossy:
            line += " lossy"
        print(line)

        index = result.end_index
        if not all_values or index >= len(data):
            break


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Encode and decode LEB128 integers"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # shared options
    codec_parser = argparse.ArgumentParser(add_help=False)
    codec_parser.add_argument("--unsigned", "-u", action="store_true",
                              help="Use unsigned LEB128 (default: signed)")
    codec_parser.add_argument("--width", "-w", type=int, choices=[32, 64], default=None,
                              help="Fixed integer width (default: arbitrary precision)")

    # encode command
    encode_parser = subparsers.add_parser("encode", parents=[codec_parser],
                                          help="Encode an integer")
    encode_parser.add_argument("value", help="Integer literal (e.g. 300, -1, 0xff)")

    # decode command
    decode_parser = subparsers.add_parser("decode", parents=[codec_parser],
                                          help="Decode hex-encoded LEB128 bytes")
    decode_parser.add_argument("data", help="Encoded bytes as hex (spaces allowed)")
    decode_parser.add_argument("--index", "-i", type=int, default=0,
                               help="Offset of the first value (default 0)")
    decode_parser.add_argument("--all", "-a", action="store_true", dest="all_values",
                               help="Decode consecutive values until the end of data")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    signed = not args.unsigned

    try:
        if args.command == "encode":
            cmd_encode(int(args.value, 0), signed, args.width)
        elif args.command == "decode":
            data = bytes.fromhex(args.data)
            cmd_decode(data, args.index, signed, args.width, args.all_values)
    except (LebError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
