# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for salt generation and random sources.
"""

import pytest
from sshacrypt.config import Settings
from sshacrypt.salt import (
    LinearRandomSource,
    SystemRandomSource,
    generate_salt,
    source_from_settings,
)


class TestLinearRandomSource:
    """Test the legacy C-library generator."""

    def test_known_sequence(self):
        """Test the classic rand() sequence for seed 1."""
        source = LinearRandomSource(1)

        assert [source.next_int() for _ in range(5)] == [16838, 5758, 10113, 17515, 31051]

    def test_reseed_restarts_sequence(self):
        """Test that seeding again replays the sequence."""
        source = LinearRandomSource(99)
        first = [source.next_int() for _ in range(10)]
        source.seed(99)

        assert [source.next_int() for _ in range(10)] == first

    def test_different_seeds_differ(self):
        """Test that different seeds give different sequences."""
        a = LinearRandomSource(1)
        b = LinearRandomSource(2)

        assert [a.next_int() for _ in range(5)] != [b.next_int() for _ in range(5)]

    def test_from_clock(self):
        """Test clock seeding yields a working source."""
        source = LinearRandomSource.from_clock()

        assert 0 <= source.next_int() <= 32767


def test_generate_salt_deterministic():
    """Test a known salt from a seeded source."""
    salt = generate_salt(8, LinearRandomSource(42))

    assert salt == bytes.fromhex("6949253540454d24")


def test_generate_salt_printable_band():
    """Test every salt byte falls in 0x20-0x7F."""
    salt = generate_salt(2000, LinearRandomSource(7))

    assert len(salt) == 2000
    assert all(0x20 <= b <= 0x7F for b in salt)


def test_generate_salt_system_source():
    """Test salts from the OS source."""
    source = SystemRandomSource()
    salts = {generate_salt(16, source) for _ in range(10)}

    assert len(salts) == 10
    for salt in salts:
        assert all(0x20 <= b <= 0x7F for b in salt)


def test_generate_salt_zero_length():
    """Test that zero length yields an empty salt."""
    assert generate_salt(0, SystemRandomSource()) == b""


def test_generate_salt_negative_length():
    """Test error on negative length."""
    with pytest.raises(ValueError):
        generate_salt(-1, SystemRandomSource())


def test_source_from_settings_linear_seeded():
    """Test a seeded linear source from configuration."""
    config = Settings(salt_source="linear", salt_seed=42)
    source = source_from_settings(config)

    assert isinstance(source, LinearRandomSource)
    assert generate_salt(8, source) == bytes.fromhex("6949253540454d24")


def test_source_from_settings_linear_clock():
    """Test an unseeded linear source falls back to the clock."""
    config = Settings(salt_source="linear")

    assert isinstance(source_from_settings(config), LinearRandomSource)


def test_source_from_settings_system():
    """Test the default source is the OS CSPRNG."""
    config = Settings(salt_source="system")

    assert isinstance(source_from_settings(config), SystemRandomSource)
