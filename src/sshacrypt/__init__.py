# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
sshacrypt - Salted SHA-1 Password Hashing

This package provides:
- A from-scratch, streaming SHA-1 engine
- Fixed-size salted password records (8-byte salt, 20-byte digest)
- {SSHA} encoded password strings for text credential stores

Modules:
    hashing: SHA-1 engine and zeroization helpers
    salt: Injectable random sources and salt generation
    passwd: Password records and the hash/verify protocol
    crypt: {SSHA} string encoding and checking
    config: Environment-driven settings
    selftest: Known-answer tests

Example Usage:
    >>> from sshacrypt import sha1, make_crypt, check_crypt
    >>>
    >>> sha1(b"abc").hex()
    'a9993e364706816aba3e25717850c26c9cd0d89d'
    >>>
    >>> stored = make_crypt("hunter2")
    >>> check_crypt(stored, "hunter2")
    True
"""

__version__ = "0.1.0"
__author__ = "The Birthmark Standard Foundation"

# Import hashing utilities
from .hashing import (
    SHA1,
    DIGEST_SIZE,
    BLOCK_SIZE,
    MAX_MESSAGE_BYTES,
    HashInputError,
    sha1,
    sha1_hex,
    format_digest,
    wipe,
    scrubbed,
    salted_digest,
)

# Import salt utilities
from .salt import (
    RandomSource,
    LinearRandomSource,
    SystemRandomSource,
    generate_salt,
    source_from_settings,
)

# Import password record utilities
from .passwd import (
    RECORD_SALT_LENGTH,
    RECORD_LENGTH,
    PasswordRecord,
    gensalt,
    make_password,
    check_password,
)

# Import encoded string utilities
from .crypt import (
    SSHA_MAGIC,
    SSHA_MAGIC_LEN,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SSHA_MAX,
    create_crypt,
    make_crypt,
    check_crypt,
    is_crypt,
)

# Define public API
__all__ = [
    # Hashing
    "SHA1",
    "DIGEST_SIZE",
    "BLOCK_SIZE",
    "MAX_MESSAGE_BYTES",
    "HashInputError",
    "sha1",
    "sha1_hex",
    "format_digest",
    "wipe",
    "scrubbed",
    "salted_digest",
    # Salts
    "RandomSource",
    "LinearRandomSource",
    "SystemRandomSource",
    "generate_salt",
    "source_from_settings",
    # Password records
    "RECORD_SALT_LENGTH",
    "RECORD_LENGTH",
    "PasswordRecord",
    "gensalt",
    "make_password",
    "check_password",
    # Encoded strings
    "SSHA_MAGIC",
    "SSHA_MAGIC_LEN",
    "SALT_LENGTH_DEFAULT",
    "SALT_LENGTH_MAX",
    "SSHA_MAX",
    "create_crypt",
    "make_crypt",
    "check_crypt",
    "is_crypt",
]
