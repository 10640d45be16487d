# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
{SSHA} encoded password strings.

Format:
    "{SSHA}" + base64(SHA-1(salt || plaintext) || salt)

The digest comes first in the encoded payload so the salt length can be
recovered as whatever remains after 20 bytes. Salts are 1-16 bytes; new
strings use SALT_LENGTH_DEFAULT unless configured otherwise. This is the
same layout LDAP servers and the classic ``passwd.pl`` helper produce, so
strings interoperate with those tools.

Verification never says why it failed: a bad prefix, broken base64, a
payload of the wrong size and a wrong password all return False.

Example:
    >>> check_crypt("{SSHA}2gDsLm/57U00KyShbiYsgvPIsQtzYWx0", "secret")
    True
"""

import base64
import binascii
import logging
from typing import Optional, Union

from cryptography.hazmat.primitives import constant_time

from .config import settings
from .salt import RandomSource, default_source, generate_salt
from .hashing import DIGEST_SIZE, HashInputError, salted_digest, scrubbed

logger = logging.getLogger(__name__)

# Prefix identifying a salted SHA-1 string
SSHA_MAGIC = "{SSHA}"
SSHA_MAGIC_LEN = len(SSHA_MAGIC)

# Default and maximum salt sizes in bytes
SALT_LENGTH_DEFAULT = 6
SALT_LENGTH_MAX = 16

# Maximum length of an encoded string, counting one terminator slot.
# Base64 size is computed from the payload rounded up to a multiple of 4.
SSHA_MAX = SSHA_MAGIC_LEN + ((DIGEST_SIZE + SALT_LENGTH_MAX + 3) // 4 * 4) * 4 // 3 + 1


def create_crypt(
    plaintext: Union[str, bytes],
    salt: bytes,
    max_length: int = SSHA_MAX
) -> Optional[str]:
    """
    Encode a plaintext with a caller-supplied salt.

    Args:
        plaintext: Password as str (UTF-8 encoded) or bytes
        salt: 1-16 salt bytes
        max_length: Capacity of the destination, terminator slot included

    Returns:
        The {SSHA} string, or None if the salt size is out of range, the
        plaintext cannot be hashed (not str or bytes-like, or not UTF-8
        encodable) or the result would not fit in max_length

    Example:
        >>> create_crypt("secret", b"salt")
        '{SSHA}2gDsLm/57U00KyShbiYsgvPIsQtzYWx0'
    """
    if not 1 <= len(salt) <= SALT_LENGTH_MAX:
        logger.error(f"Salt length {len(salt)} outside 1-{SALT_LENGTH_MAX}")
        return None

    try:
        digest = salted_digest(salt, plaintext)
    except HashInputError as e:
        logger.error(f"Cannot hash plaintext: {e}")
        return None

    payload = bytearray(digest + bytes(salt))
    with scrubbed(payload):
        encoded = SSHA_MAGIC + base64.b64encode(payload).decode("ascii")

    if len(encoded) >= max_length:
        logger.error(f"Buffer of {max_length} cannot hold a {len(encoded)} character password")
        return None

    logger.debug(f"Password hash created (salt={bytes(salt).hex()})")
    return encoded


def make_crypt(
    plaintext: Union[str, bytes],
    max_length: int = SSHA_MAX,
    salt_length: Optional[int] = None,
    source: Optional[RandomSource] = None
) -> Optional[str]:
    """
    Hash a plaintext with a freshly generated salt.

    Args:
        plaintext: Password as str (UTF-8 encoded) or bytes
        max_length: Capacity of the destination, terminator slot included
        salt_length: Salt size in bytes (default: settings.salt_length).
            Values outside 1-16 are rejected, never clamped.
        source: Random source for the salt (default: configured source)

    Returns:
        The {SSHA} string, or None on any capacity violation
    """
    if salt_length is None:
        salt_length = settings.salt_length

    if not 1 <= salt_length <= SALT_LENGTH_MAX:
        logger.error(f"Salt length {salt_length} outside 1-{SALT_LENGTH_MAX}")
        return None

    if source is None:
        source = default_source()

    return create_crypt(plaintext, generate_salt(salt_length, source), max_length)


def is_crypt(text: str) -> bool:
    """Check whether text carries the {SSHA} prefix."""
    return isinstance(text, str) and text.startswith(SSHA_MAGIC)


def check_crypt(crypttext: str, plaintext: Union[str, bytes]) -> bool:
    """
    Verify a plaintext against a stored {SSHA} string.

    Args:
        crypttext: Stored string produced by make_crypt or a compatible tool
        plaintext: Candidate password

    Returns:
        True if the plaintext matches, False otherwise (including any
        malformed or non-canonical crypttext and any unhashable plaintext)
    """
    if not is_crypt(crypttext) or len(crypttext) <= SSHA_MAGIC_LEN:
        logger.debug("Not a salted SHA-1 crypt")
        return False

    try:
        payload = base64.b64decode(crypttext[SSHA_MAGIC_LEN:], validate=True)
    except (binascii.Error, ValueError):
        logger.debug("Crypt decode error")
        return False

    if not DIGEST_SIZE < len(payload) <= DIGEST_SIZE + SALT_LENGTH_MAX:
        logger.debug(f"Crypt payload of {len(payload)} bytes has no usable salt")
        return False

    # Padded base64 has spare low bits in its last character; only the
    # canonical encoding of the payload is accepted
    if base64.b64encode(payload).decode("ascii") != crypttext[SSHA_MAGIC_LEN:]:
        logger.debug("Crypt is not canonically encoded")
        return False

    expected = payload[:DIGEST_SIZE]
    salt = payload[DIGEST_SIZE:]

    try:
        digest = salted_digest(salt, plaintext)
    except HashInputError as e:
        logger.debug(f"Cannot hash candidate plaintext: {e}")
        return False

    return constant_time.bytes_eq(digest, expected)
