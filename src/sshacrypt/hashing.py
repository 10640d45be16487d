# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
SHA-1 hash engine implemented from first principles.

The engine is a Merkle-Damgard construction: input is staged into 64-byte
blocks, each block is folded into five 32-bit accumulators by an 80-round
compression function, and the final block carries the message length.

CRITICAL: Output must match FIPS 180-4 SHA-1 byte-for-byte. Password records
and {SSHA} strings stored by other tools depend on it.

Limits:
- Total input per hash is capped at MAX_MESSAGE_BYTES (just under 4 GiB).
  Exceeding it raises HashInputError instead of wrapping the bit counter.

Example:
    >>> ctx = SHA1()
    >>> ctx.update(b"ab")
    True
    >>> ctx.update(b"c")
    True
    >>> ctx.final().hex()
    'a9993e364706816aba3e25717850c26c9cd0d89d'
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Union


# Size of a SHA-1 digest in bytes (160 bits)
DIGEST_SIZE = 20

# Size of a message block in bytes (512 bits)
BLOCK_SIZE = 64

# Number of 32-bit words in a block
BLOCK_WORDS = 16

# Largest input accepted by one hash computation
MAX_MESSAGE_BYTES = 2**32 - 1

MASK32 = 0xFFFFFFFF

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Additive constants for rounds 0-19, 20-39, 40-59, 60-79
K0 = 0x5A827999
K1 = 0x6ED9EBA1
K2 = 0x8F1BBCDC
K3 = 0xCA62C1D6

BytesLike = Union[bytes, bytearray, memoryview]


class HashInputError(ValueError):
    """Raised when data handed to the engine violates its preconditions."""


def wipe(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place."""
    buffer[:] = bytes(len(buffer))


@contextmanager
def scrubbed(buffer: bytearray) -> Iterator[bytearray]:
    """
    Yield ``buffer`` and zero it on exit, including exits by exception.

    Example:
        >>> secret = bytearray(b"hunter2")
        >>> with scrubbed(secret) as data:
        ...     len(data)
        7
        >>> bytes(secret)
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    try:
        yield buffer
    finally:
        wipe(buffer)


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & MASK32


class SHA1:
    """
    Incremental SHA-1 computation.

    An instance holds the running state of exactly one hash. It is not safe
    for concurrent use; give every thread its own instance.
    """

    name = "sha1"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: Optional[BytesLike] = None):
        self._block = bytearray(BLOCK_SIZE)
        self.init()
        if data is not None:
            self.update(data)

    def init(self) -> None:
        """Reset the state so a new message can be hashed."""
        self._h = list(INITIAL_STATE)
        self._bit_count = 0
        self._data_len = 0
        wipe(self._block)

    @property
    def bit_count(self) -> int:
        """Number of message bits absorbed since the last reset."""
        return self._bit_count

    @property
    def buffered(self) -> int:
        """Number of bytes waiting in the block buffer (0-63)."""
        return self._data_len

    def update(self, data: Optional[BytesLike], length: Optional[int] = None) -> bool:
        """
        Absorb ``length`` bytes of ``data`` into the hash.

        Args:
            data: Bytes-like input. None is only accepted with no length.
            length: Number of leading bytes of ``data`` to use (default: all)

        Returns:
            True when data was absorbed, False when there was nothing to do
            (``data`` is None and ``length`` is zero or omitted)

        Raises:
            HashInputError: If ``data`` is None with a positive length, is not
                bytes-like, if ``length`` is negative or longer than ``data``,
                or if the total input would exceed MAX_MESSAGE_BYTES
        """
        if data is None:
            if not length:
                return False
            raise HashInputError(f"No data supplied for a length of {length} bytes")

        if isinstance(data, str):
            raise HashInputError("Data must be bytes-like, not str")

        try:
            view = memoryview(data).cast("B")
        except TypeError as e:
            raise HashInputError(f"Data must be bytes-like: {e}") from e

        if length is None:
            length = len(view)
        elif length < 0:
            raise HashInputError(f"Length must be non-negative, got {length}")
        elif length > len(view):
            raise HashInputError(
                f"Length {length} exceeds the {len(view)} bytes supplied"
            )

        if self._bit_count // 8 + length > MAX_MESSAGE_BYTES:
            raise HashInputError(
                f"Input exceeds the {MAX_MESSAGE_BYTES} byte limit of one hash"
            )

        self._absorb(view[:length])
        return True

    def _absorb(self, view: memoryview) -> None:
        pos = 0
        remaining = len(view)
        while remaining > 0:
            take = min(BLOCK_SIZE - self._data_len, remaining)
            self._block[self._data_len:self._data_len + take] = view[pos:pos + take]
            self._data_len += take
            self._bit_count += take * 8
            pos += take
            remaining -= take
            if self._data_len == BLOCK_SIZE:
                self._compress()
                self._data_len = 0

    def _compress(self) -> None:
        """Fold the full block buffer into the accumulators."""
        w = [
            int.from_bytes(self._block[i:i + 4], byteorder="big")
            for i in range(0, BLOCK_SIZE, 4)
        ]
        a, b, c, d, e = self._h

        for i in range(80):
            t = i & 15
            if i >= 16:
                w[t] = _rol(w[(t + 13) & 15] ^ w[(t + 8) & 15] ^ w[(t + 2) & 15] ^ w[t], 1)

            if i < 20:
                f = (b & c) | (~b & d)
                k = K0
            elif i < 40:
                f = b ^ c ^ d
                k = K1
            elif i < 60:
                f = (b & c) | (b & d) | (c & d)
                k = K2
            else:
                f = b ^ c ^ d
                k = K3

            tmp = (_rol(a, 5) + f + e + k + w[t]) & MASK32
            e = d
            d = c
            c = _rol(b, 30)
            b = a
            a = tmp

        self._h = [
            (h + v) & MASK32 for h, v in zip(self._h, (a, b, c, d, e))
        ]

        # Do not leave the message schedule behind
        w[:] = [0] * BLOCK_WORDS
        wipe(self._block)

    def final(self) -> bytes:
        """
        Pad the message, emit the 20-byte digest and reset the state.

        The state never survives this call; reuse the instance for the next
        message or discard it.
        """
        bit_length = self._bit_count
        padding = bytearray(
            b"\x80"
            + bytes((55 - self._data_len) % BLOCK_SIZE)
            + bit_length.to_bytes(8, byteorder="big")
        )
        with scrubbed(padding), memoryview(padding) as view:
            self._absorb(view)

        digest = b"".join(h.to_bytes(4, byteorder="big") for h in self._h)
        self.init()
        return digest

    def hexfinal(self) -> str:
        """Finalize and return the digest as lowercase hex."""
        return self.final().hex()


def sha1(data: BytesLike) -> bytes:
    """
    Compute the SHA-1 digest of ``data`` in one call.

    Example:
        >>> sha1(b"").hex()
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    return SHA1(data).final()


def sha1_hex(data: BytesLike) -> str:
    """Compute the SHA-1 digest of ``data`` as lowercase hex."""
    return sha1(data).hex()


def format_digest(digest: bytes, sep: str = ":") -> str:
    """
    Format a digest as uppercase octets joined by ``sep``.

    Example:
        >>> format_digest(bytes.fromhex("a9993e36"))
        'A9:99:3E:36'
    """
    return sep.join(f"{octet:02X}" for octet in digest)


def salted_digest(salt: bytes, plaintext: Union[str, BytesLike]) -> bytes:
    """
    Compute SHA-1(salt || plaintext).

    A str plaintext is UTF-8 encoded. The working copy of the plaintext is
    zeroed before returning.

    Raises:
        HashInputError: If plaintext is neither str nor bytes-like, or is a
            str that cannot be UTF-8 encoded (e.g. a lone surrogate)

    Example:
        >>> salted_digest(b"salt", "secret").hex()
        'da00ec2e6ff9ed4d342b24a16e262c82f3c8b10b'
    """
    if isinstance(plaintext, str):
        try:
            secret = bytearray(plaintext.encode("utf-8"))
        except UnicodeEncodeError as e:
            raise HashInputError(f"Plaintext is not valid UTF-8 text: {e.reason}") from e
    else:
        try:
            secret = bytearray(memoryview(plaintext).cast("B"))
        except TypeError as e:
            raise HashInputError(
                f"Plaintext must be str or bytes-like, not {type(plaintext).__name__}"
            ) from e

    ctx = SHA1()
    with scrubbed(secret):
        ctx.update(salt)
        ctx.update(secret)
        return ctx.final()
