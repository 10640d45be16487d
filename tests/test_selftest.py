# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for the built-in known-answer tests.
"""

import hashlib

import pytest
from sshacrypt.selftest import (
    CRYPT_EXAMPLES,
    TEST_VECTORS,
    generate_test_vectors,
    print_test_vectors,
    reference_sha1,
    validate_implementation,
)


def test_generate_test_vectors():
    """Test vector generation."""
    vectors = generate_test_vectors()

    assert len(vectors) == len(TEST_VECTORS)
    for vector in vectors:
        assert vector["computed"] == vector["digest"]
        assert vector["reference"] == vector["digest"]


def test_reference_matches_hashlib():
    """Test the cryptography reference against hashlib."""
    for vector in TEST_VECTORS:
        assert reference_sha1(vector["message"]) == hashlib.sha1(vector["message"]).digest()


def test_validate_implementation(capsys):
    """Test implementation validation."""
    assert validate_implementation()
    assert "test vectors" in capsys.readouterr().out


def test_validate_implementation_detects_bad_vector(monkeypatch, capsys):
    """Test a wrong expected digest is reported."""
    broken = [dict(TEST_VECTORS[0], digest="00" * 20)]
    monkeypatch.setattr("sshacrypt.selftest.TEST_VECTORS", broken)

    assert not validate_implementation()
    assert "failed" in capsys.readouterr().out


def test_validate_implementation_detects_bad_crypt(monkeypatch):
    """Test a wrong crypt expectation is reported."""
    monkeypatch.setattr(
        "sshacrypt.selftest.CRYPT_EXAMPLES",
        [("wrong", CRYPT_EXAMPLES[0][1], True)],
    )

    assert not validate_implementation()


def test_print_test_vectors(capsys):
    """Test printed output uses the colon digest format."""
    print_test_vectors()
    out = capsys.readouterr().out

    assert "A9:99:3E:36" in out
    assert "DA:39:A3:EE" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
