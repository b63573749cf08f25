from __future__ import annotations

import random

from .constants import SEED_BYTES, SEED_HIGH_MASK
from .entropy import EntropySource
from .errors import InvalidRange


def derive_seed(raw: bytes) -> int:
    """Fold four secure bytes into a non-negative 31-bit seed (big-endian)."""
    if len(raw) != SEED_BYTES:
        raise ValueError(f"seed material must be {SEED_BYTES} bytes, got {len(raw)}")
    return ((raw[0] & SEED_HIGH_MASK) << 24) | (raw[1] << 16) | (raw[2] << 8) | raw[3]


def generate_random_number(min_value: int, max_value: int) -> int:
    """Return a random integer in ``[min_value, max_value]``, both inclusive.

    A fresh ``random.Random`` is seeded from four bytes of the system CSPRNG on
    every call, so repeated calls in a tight loop never share a seed the way
    clock-seeded generators do.

    Only the seed is cryptographically strong. The draw itself comes from a
    Mersenne Twister and must not be used where the value has to be
    unpredictable to an attacker; use ``secrets`` for that.

    Raises:
        InvalidRange: ``min_value`` is greater than ``max_value``.
        EntropyUnavailable: The system CSPRNG failed.
    """
    if min_value > max_value:
        raise InvalidRange(f"min_value ({min_value}) is greater than max_value ({max_value})")
    with EntropySource() as source:
        raw = source.read(SEED_BYTES)
    rng = random.Random(derive_seed(raw))
    return rng.randint(min_value, max_value)
