# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Fixed-size salted SHA-1 password records.

A record pairs an 8-byte salt with the 20-byte SHA-1 digest of
(salt || plaintext). Its binary form is exactly 28 bytes: salt first, then
digest, no header.

Typical flow:
    >>> from sshacrypt.salt import LinearRandomSource
    >>> source = LinearRandomSource(7)
    >>> stored = make_password(gensalt(source), "hunter2")
    >>> candidate = make_password(stored.salt, "hunter2")
    >>> check_password(stored, candidate)
    True
"""

import logging
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import constant_time

from .salt import RandomSource, generate_salt
from .hashing import DIGEST_SIZE, salted_digest

logger = logging.getLogger(__name__)

RECORD_SALT_LENGTH = 8
RECORD_LENGTH = RECORD_SALT_LENGTH + DIGEST_SIZE


@dataclass(frozen=True)
class PasswordRecord:
    """Salt and digest of one stored password."""
    salt: bytes  # 8 bytes
    digest: bytes  # 20 bytes, SHA-1(salt || plaintext)

    def __post_init__(self):
        if len(self.salt) != RECORD_SALT_LENGTH:
            raise ValueError(
                f"Salt must be {RECORD_SALT_LENGTH} bytes, got {len(self.salt)}"
            )
        if len(self.digest) != DIGEST_SIZE:
            raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(self.digest)}")
        # Keep the record immutable even when built from bytearrays
        object.__setattr__(self, "salt", bytes(self.salt))
        object.__setattr__(self, "digest", bytes(self.digest))

    def to_bytes(self) -> bytes:
        """Serialize as salt || digest (28 bytes)."""
        return bytes(self.salt) + bytes(self.digest)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PasswordRecord":
        """
        Parse a 28-byte record.

        Raises:
            ValueError: If data is not exactly RECORD_LENGTH bytes
        """
        if len(data) != RECORD_LENGTH:
            raise ValueError(f"Record must be {RECORD_LENGTH} bytes, got {len(data)}")
        return cls(
            salt=bytes(data[:RECORD_SALT_LENGTH]),
            digest=bytes(data[RECORD_SALT_LENGTH:]),
        )

    def to_hex(self) -> str:
        """Format as uppercase salt hex, a space, uppercase digest hex."""
        return f"{self.salt.hex().upper()} {self.digest.hex().upper()}"

    @classmethod
    def from_hex(cls, text: str) -> "PasswordRecord":
        """
        Parse the output of ``to_hex``.

        Raises:
            ValueError: If the text is not two hex fields of the right sizes
        """
        fields = text.split()
        if len(fields) != 2:
            raise ValueError("Expected salt and digest separated by whitespace")
        return cls(salt=bytes.fromhex(fields[0]), digest=bytes.fromhex(fields[1]))


def gensalt(source: RandomSource, length: int = RECORD_SALT_LENGTH) -> bytes:
    """Generate a salt for a password record."""
    return generate_salt(length, source)


def make_password(salt: bytes, plaintext: Union[str, bytes]) -> PasswordRecord:
    """
    Hash a plaintext password with an 8-byte salt.

    The salt is fed to the hash before the plaintext. The same salt and
    plaintext always yield the same record.

    Args:
        salt: 8-byte salt (generated once per password change)
        plaintext: Password as str (UTF-8 encoded) or bytes

    Returns:
        PasswordRecord holding a copy of the salt and the digest

    Raises:
        ValueError: If salt is not 8 bytes
        HashInputError: If plaintext is neither str nor bytes-like, or
            cannot be UTF-8 encoded
    """
    if len(salt) != RECORD_SALT_LENGTH:
        raise ValueError(f"Salt must be {RECORD_SALT_LENGTH} bytes, got {len(salt)}")

    digest = salted_digest(salt, plaintext)

    logger.debug(f"Password record created (salt={bytes(salt).hex()})")

    return PasswordRecord(salt=bytes(salt), digest=digest)


def check_password(a: PasswordRecord, b: PasswordRecord) -> bool:
    """
    Compare the digests of two records built with the same salt.

    The salts are not checked; comparing records with different salts is
    meaningless. The comparison runs in constant time.
    """
    return constant_time.bytes_eq(a.digest, b.digest)


__all__ = [
    "RECORD_SALT_LENGTH",
    "RECORD_LENGTH",
    "PasswordRecord",
    "gensalt",
    "make_password",
    "check_password",
]
