# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for fixed-size password records.

Tests creation, verification and serialization of salted SHA-1 records.
"""

import hashlib

import pytest
from sshacrypt.passwd import (
    RECORD_LENGTH,
    PasswordRecord,
    check_password,
    gensalt,
    make_password,
)
from sshacrypt.salt import LinearRandomSource

FIXED_SALT = bytes(range(1, 9))
HUNTER2_DIGEST = "b46ca0dccfe3f635367d7e12c4e40f22a94c623f"


def test_make_password_fixed_scenario():
    """Test the fixed salt 0x01..0x08 with plaintext 'hunter2'."""
    record = make_password(FIXED_SALT, "hunter2")

    assert record.salt == FIXED_SALT
    assert record.digest.hex() == HUNTER2_DIGEST
    assert check_password(record, record)


def test_make_password_deterministic():
    """Test that same inputs produce same outputs."""
    first = make_password(FIXED_SALT, "hunter2")
    second = make_password(FIXED_SALT, "hunter2")

    assert first == second


def test_make_password_salt_first():
    """Test the digest covers salt then plaintext."""
    record = make_password(b"12345678", "pw")

    assert record.digest == hashlib.sha1(b"12345678pw").digest()


def test_make_password_bytes_plaintext():
    """Test bytes and str plaintexts agree."""
    assert make_password(FIXED_SALT, b"hunter2") == make_password(FIXED_SALT, "hunter2")


def test_make_password_unicode_plaintext():
    """Test str plaintexts are UTF-8 encoded."""
    record = make_password(FIXED_SALT, "pässwörd")

    assert record.digest == hashlib.sha1(FIXED_SALT + "pässwörd".encode("utf-8")).digest()


def test_make_password_int_plaintext():
    """Test an int plaintext is rejected, not hashed as null bytes."""
    with pytest.raises(ValueError):
        make_password(FIXED_SALT, 3)


def test_make_password_lone_surrogate():
    """Test error on a str that cannot be UTF-8 encoded."""
    with pytest.raises(ValueError):
        make_password(FIXED_SALT, "\ud800")


def test_make_password_wrong_salt_length():
    """Test error on a salt that is not 8 bytes."""
    with pytest.raises(ValueError):
        make_password(b"short", "hunter2")


def test_check_password_mismatch():
    """Test different plaintexts with the same salt do not verify."""
    stored = make_password(FIXED_SALT, "hunter2")
    candidate = make_password(FIXED_SALT, "hunter3")

    assert check_password(stored, candidate) is False


def test_login_flow():
    """Test account creation followed by login with the stored salt."""
    source = LinearRandomSource(2024)
    stored = make_password(gensalt(source), "correct horse")

    assert check_password(stored, make_password(stored.salt, "correct horse"))
    assert not check_password(stored, make_password(stored.salt, "wrong horse"))


def test_gensalt_length():
    """Test record salts default to 8 bytes."""
    assert len(gensalt(LinearRandomSource(1))) == 8


class TestPasswordRecord:
    """Test record layout and serialization."""

    def test_binary_layout(self):
        """Test salt-then-digest 28-byte layout."""
        record = make_password(FIXED_SALT, "hunter2")
        data = record.to_bytes()

        assert len(data) == RECORD_LENGTH == 28
        assert data[:8] == FIXED_SALT
        assert data[8:].hex() == HUNTER2_DIGEST

    def test_from_bytes(self):
        """Test parsing a serialized record."""
        record = make_password(FIXED_SALT, "hunter2")

        assert PasswordRecord.from_bytes(record.to_bytes()) == record

    def test_from_bytes_wrong_length(self):
        """Test error on truncated input."""
        with pytest.raises(ValueError):
            PasswordRecord.from_bytes(b"\x00" * 27)

    def test_to_hex(self):
        """Test the mkpass output format."""
        record = make_password(FIXED_SALT, "hunter2")

        assert record.to_hex() == "0102030405060708 " + HUNTER2_DIGEST.upper()

    def test_from_hex(self):
        """Test parsing the hex format."""
        record = make_password(FIXED_SALT, "hunter2")

        assert PasswordRecord.from_hex(record.to_hex()) == record

    def test_from_hex_malformed(self):
        """Test error on a single field."""
        with pytest.raises(ValueError):
            PasswordRecord.from_hex("0102030405060708")

    def test_invalid_field_sizes(self):
        """Test construction rejects wrong sizes."""
        with pytest.raises(ValueError):
            PasswordRecord(salt=b"\x00" * 7, digest=b"\x00" * 20)
        with pytest.raises(ValueError):
            PasswordRecord(salt=b"\x00" * 8, digest=b"\x00" * 19)

    def test_immutable(self):
        """Test records cannot be modified."""
        record = make_password(FIXED_SALT, "hunter2")

        with pytest.raises(AttributeError):
            record.salt = b"\x00" * 8

    def test_bytearray_fields_are_copied(self):
        """Test that mutable inputs do not leak into the record."""
        salt = bytearray(FIXED_SALT)
        record = PasswordRecord(salt=salt, digest=bytearray(20))
        salt[0] = 0xFF

        assert record.salt == FIXED_SALT
        assert isinstance(record.digest, bytes)
