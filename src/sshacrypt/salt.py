# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Salt generation for password hashing.

Salts are drawn from an explicitly supplied random source, one byte per draw,
folded into the 96 printable values starting at space (0x20-0x7F).

WARNING: LinearRandomSource reproduces the classic C library rand(). It is
fast and deterministic, which makes it useful for tests and for reproducing
legacy records, but salts are predictable to anyone who can guess the seed.
Use SystemRandomSource for new records.
"""

import logging
import secrets
import time
from typing import Optional, Protocol

from .config import Settings, settings

logger = logging.getLogger(__name__)

# Salts are restricted to this many values starting at SALT_BASE
SALT_BAND = 96
SALT_BASE = 0x20

RAND_MAX = 32767


class RandomSource(Protocol):
    """Anything that can hand out non-negative integers."""

    def next_int(self) -> int:
        ...


class LinearRandomSource:
    """
    Linear congruential generator matching the portable C rand().

    Not thread-safe; callers sharing an instance must serialize access.

    Example:
        >>> source = LinearRandomSource(1)
        >>> source.next_int()
        16838
    """

    def __init__(self, seed: int):
        self.seed(seed)

    @classmethod
    def from_clock(cls) -> "LinearRandomSource":
        """Seed from wall-clock seconds, as srand(time(0)) would."""
        return cls(int(time.time()))

    def seed(self, seed: int) -> None:
        self._next = seed & 0xFFFFFFFF

    def next_int(self) -> int:
        self._next = (self._next * 1103515245 + 12345) & 0xFFFFFFFF
        return (self._next // 65536) % (RAND_MAX + 1)


class SystemRandomSource:
    """Random source backed by the operating system CSPRNG."""

    def next_int(self) -> int:
        return secrets.randbits(31)


def generate_salt(length: int, source: RandomSource) -> bytes:
    """
    Generate ``length`` printable salt bytes from ``source``.

    Args:
        length: Number of salt bytes
        source: Random source to draw from

    Returns:
        Salt bytes, each in the range 0x20-0x7F

    Raises:
        ValueError: If length is negative

    Example:
        >>> salt = generate_salt(6, LinearRandomSource(42))
        >>> len(salt)
        6
    """
    if length < 0:
        raise ValueError(f"Salt length must be non-negative, got {length}")

    return bytes((source.next_int() % SALT_BAND) + SALT_BASE for _ in range(length))


def source_from_settings(config: Settings) -> RandomSource:
    """
    Build the random source selected by configuration.

    Args:
        config: Settings instance

    Returns:
        LinearRandomSource when salt_source is 'linear', else SystemRandomSource
    """
    if config.salt_source == "linear":
        if config.salt_seed is None:
            logger.warning("Linear salt source seeded from the clock; salts are predictable")
            return LinearRandomSource.from_clock()
        return LinearRandomSource(config.salt_seed)

    return SystemRandomSource()


_default_source: Optional[RandomSource] = None


def default_source() -> RandomSource:
    """Return the process-wide source configured by ``sshacrypt.config.settings``."""
    global _default_source
    if _default_source is None:
        _default_source = source_from_settings(settings)
    return _default_source
