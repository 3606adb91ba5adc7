# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the LEB128 codec.

Both concrete errors also derive from ValueError, so callers that only
care about "bad input" can catch that.
"""


class LebError(Exception):
    """Base exception for codec errors."""
    pass


class DecodeError(LebError, ValueError):
    """Truncated or malformed LEB128 encoding."""
    pass


class RangeError(LebError, ValueError):
    """Value does not fit the requested fixed-width integer type."""
    pass
