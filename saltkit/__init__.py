"""
saltkit: byte-level building blocks for salted password/value obfuscation.

Features:

- ``generate_random_number``: an integer in an inclusive range from a PRNG seeded
  by the system CSPRNG. Only the seed is cryptographic; see its docstring.
- ``generate_salt``: non-zero secure random bytes whose first four bytes also
  carry the salt length (2 bits per byte), recoverable with ``decode_salt_length``.
- ``add_salt_to_bytes`` / ``split_salted_bytes``: prepend a salt to plain text
  bytes and cut it off again.

Hashing and encryption of the salted bytes are left to the caller.
"""

from .errors import SaltKitError, InvalidRange, InvalidSaltLength, EntropyUnavailable
from .prng import generate_random_number
from .salt import add_salt_to_bytes, decode_salt_length, generate_salt, split_salted_bytes

__version__ = "0.1"

__all__ = [
    "SaltKitError",
    "InvalidRange",
    "InvalidSaltLength",
    "EntropyUnavailable",
    "generate_random_number",
    "generate_salt",
    "decode_salt_length",
    "add_salt_to_bytes",
    "split_salted_bytes",
]
