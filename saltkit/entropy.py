"""Scoped access to the platform's cryptographically secure byte source.

Each operation in saltkit opens its own :class:`EntropySource` in a ``with``
block so the underlying ``Cryptodome.Random`` handle never outlives the call.
Reads may block briefly on systems starved of entropy; no timeout is applied.
"""

from __future__ import annotations

import logging
from typing import Optional

from Cryptodome import Random

from .errors import EntropyUnavailable


logger = logging.getLogger(__name__)


class EntropySource:
    """Short-lived handle on the system CSPRNG."""

    def __init__(self):
        self._rng: Optional[object] = None

    def __enter__(self) -> "EntropySource":
        try:
            self._rng = Random.new()
        except OSError as exc:
            logger.error("Secure random source could not be opened: %s", exc)
            raise EntropyUnavailable("secure random source could not be opened") from exc
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self) -> None:
        rng, self._rng = self._rng, None
        if rng is not None:
            rng.close()

    def read(self, n: int) -> bytes:
        """Return ``n`` cryptographically strong bytes.

        Raises:
            EntropyUnavailable: The source is closed, failed, or returned a
                short read.
        """
        if self._rng is None:
            raise EntropyUnavailable("entropy source is not open")
        try:
            data = self._rng.read(n)
        except OSError as exc:
            logger.error("Secure random source failed: %s", exc)
            raise EntropyUnavailable("secure random source failed") from exc
        if len(data) != n:
            logger.error("Secure random source returned %d of %d bytes", len(data), n)
            raise EntropyUnavailable(f"short read from secure random source ({len(data)} of {n} bytes)")
        return data

    def next_nonzero_byte(self) -> int:
        while True:
            b = self.read(1)[0]
            if b != 0:
                return b

    def read_nonzero(self, n: int) -> bytearray:
        """Return ``n`` secure bytes, none of them zero.

        Zero bytes are redrawn one at a time, independently per position.
        """
        buf = bytearray(self.read(n))
        redrawn = 0
        for i, b in enumerate(buf):
            if b == 0:
                buf[i] = self.next_nonzero_byte()
                redrawn += 1
        if redrawn:
            logger.debug("Redrew %d zero byte(s) out of %d", redrawn, n)
        return buf
