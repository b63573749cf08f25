"""Salt generation and salted-buffer helpers.

A salt produced here carries its own length: the length byte is split into
four 2-bit pieces merged into the low/high bits of ``salt[0..3]``. A consumer
holding only ``salt + plaintext`` can therefore find where the salt ends
without a separate length field. The encoding costs 2 bits of randomness in
each of the first four bytes.
"""

from __future__ import annotations

import logging
from typing import Tuple, Union

from .constants import LENGTH_BYTES, LENGTH_MASKS, MAX_SALT_LENGTH, MIN_SALT_LENGTH
from .entropy import EntropySource
from .errors import InvalidSaltLength


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
_BYTES_TYPES = (bytes, bytearray, memoryview)


def _check_salt_length(salt_length: int) -> None:
    if isinstance(salt_length, bool) or not isinstance(salt_length, int):
        raise TypeError(f"salt length must be an int, got {type(salt_length).__name__}")
    if not MIN_SALT_LENGTH <= salt_length <= MAX_SALT_LENGTH:
        raise InvalidSaltLength(
            f"salt length must be between {MIN_SALT_LENGTH} and {MAX_SALT_LENGTH}, got {salt_length}"
        )


def encode_salt_length(buf: bytearray, salt_length: int) -> None:
    """Merge ``salt_length`` into ``buf[0..3]`` in place, 2 bits per byte.

    The other 6 bits of each byte are left untouched.
    """
    _check_salt_length(salt_length)
    if len(buf) < LENGTH_BYTES:
        raise InvalidSaltLength(f"salt buffer must hold at least {LENGTH_BYTES} bytes, got {len(buf)}")
    for i, mask in enumerate(LENGTH_MASKS):
        buf[i] = (buf[i] & (~mask & 0xFF)) | (salt_length & mask)


def decode_salt_length(salt: BytesLike) -> int:
    """Recover the length embedded by :func:`generate_salt`.

    Accepts a bare salt or a salted buffer; only the first four bytes are read.
    """
    if len(salt) < LENGTH_BYTES:
        raise InvalidSaltLength(f"need at least {LENGTH_BYTES} bytes to decode a salt length, got {len(salt)}")
    length = 0
    for i, mask in enumerate(LENGTH_MASKS):
        length |= salt[i] & mask
    return length


def generate_salt(salt_length: int) -> bytes:
    """Generate ``salt_length`` cryptographically strong bytes.

    Every byte is drawn non-zero; bytes 0-3 then have the salt length merged
    into them (see :func:`encode_salt_length`) and may end up zero.

    Raises:
        InvalidSaltLength: ``salt_length`` is outside ``[4, 255]``.
        EntropyUnavailable: The system CSPRNG failed.
    """
    _check_salt_length(salt_length)
    with EntropySource() as source:
        buf = source.read_nonzero(salt_length)
    encode_salt_length(buf, salt_length)
    logger.debug("Generated %d-byte salt", salt_length)
    return bytes(buf)


def add_salt_to_bytes(plain_text_bytes: BytesLike, salt: Union[int, BytesLike]) -> bytes:
    """Return ``salt + plain_text_bytes`` as a new ``bytes`` object.

    ``salt`` is either a length, in which case a fresh salt is generated with
    :func:`generate_salt`, or an explicit salt which is used as-is (it may be
    empty). Neither input is modified.
    """
    if not isinstance(plain_text_bytes, _BYTES_TYPES):
        raise TypeError(f"plain text must be bytes-like, got {type(plain_text_bytes).__name__}")
    if isinstance(salt, int):
        salt = generate_salt(salt)
    elif not isinstance(salt, _BYTES_TYPES):
        raise TypeError(f"salt must be an int or bytes-like, got {type(salt).__name__}")
    return bytes(salt) + bytes(plain_text_bytes)


def split_salted_bytes(salted: BytesLike) -> Tuple[bytes, bytes]:
    """Split a buffer built by :func:`add_salt_to_bytes` into ``(salt, plain_text)``.

    Uses the length embedded in the salt, so only salts from
    :func:`generate_salt` can be recovered this way.
    """
    salt_length = decode_salt_length(salted)
    if salt_length < MIN_SALT_LENGTH:
        raise InvalidSaltLength(f"embedded salt length {salt_length} is below {MIN_SALT_LENGTH}")
    if salt_length > len(salted):
        raise InvalidSaltLength(f"embedded salt length {salt_length} exceeds buffer of {len(salted)} bytes")
    data = bytes(salted)
    return data[:salt_length], data[salt_length:]
