# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import pytest
import structlog


class Randomish:
    """
    A (very) pseudo-random generator.

    Deterministic for a given seed, so bulk round-trip tests always see
    the same values.
    """

    MASK = 0xFFFF_FFFF

    def __init__(self, seed: int):
        self.x = 12345
        self.y = 1
        self.z = seed

    def next_byte(self) -> int:
        self.x = (self.x * 31 + self.y) & self.MASK
        self.y = (self.y * 2 + self.z + 1) & self.MASK
        self.z = (self.x + self.y + self.z) & self.MASK
        z = self.z
        return (z + (z >> 8) + (z >> 16) + (z >> 24)) & 0xFF

    def next_bytes(self, length: int) -> bytes:
        return bytes(self.next_byte() for _ in range(length))

    def next_uint32(self) -> int:
        return int.from_bytes(self.next_bytes(4), "big")

    def next_uint64(self) -> int:
        return int.from_bytes(self.next_bytes(8), "big")


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test (e.g. the CLI) applied."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def randomish():
    """Seeded pseudo-random generator."""
    return Randomish(123)
