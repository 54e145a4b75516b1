"""Identifier pools and CPF generation.

``UUIDPool`` is the default internal id generator for new accounts::

    pool = UUIDPool()
    internal_id = pool.next()   # e.g. "9b2f4c1e-7a0d-4e8b-9f6a-0c3d2e1b5a47"
"""

from __future__ import annotations

import os
import random
import threading
import uuid as _uuid


class UUIDPool:
    """Batch-generated random (version 4) UUIDs.

    Pre-generates batches by reading ``os.urandom(16 * batch_size)`` once and
    slicing it into UUID strings. ``next()`` is safe to call from several
    threads.

    Parameters
    ----------
    batch_size : int
        Number of UUIDs to generate per batch (default 1024).
    """

    __slots__ = ("_batch_size", "_pool", "_index", "_lock")

    def __init__(self, batch_size: int = 1024) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self._batch_size = batch_size
        self._pool: list[str] = []
        self._index = 0
        self._lock = threading.Lock()
        self._refill()

    def _refill(self) -> None:
        """Generate a new batch of UUIDs."""
        raw = os.urandom(16 * self._batch_size)
        self._pool = [
            str(_uuid.UUID(bytes=raw[i : i + 16], version=4))
            for i in range(0, len(raw), 16)
        ]
        self._index = 0

    def next(self) -> str:
        """Return next UUID string, refilling pool when exhausted."""
        with self._lock:
            if self._index >= len(self._pool):
                self._refill()
            val = self._pool[self._index]
            self._index += 1
            return val

    __call__ = next


def generate_cpf(rng: random.Random | None = None) -> str:
    """Generate a valid Brazilian CPF (11 digits) using pure arithmetic."""
    rng = rng or random
    digits = [rng.randint(0, 9) for _ in range(9)]
    # First check digit
    total = sum(d * w for d, w in zip(digits, range(10, 1, -1)))
    d1 = 11 - (total % 11)
    digits.append(0 if d1 >= 10 else d1)
    # Second check digit
    total = sum(d * w for d, w in zip(digits, range(11, 1, -1)))
    d2 = 11 - (total % 11)
    digits.append(0 if d2 >= 10 else d2)
    return "".join(str(d) for d in digits)


def format_cpf(raw: str) -> str:
    """Format an 11-digit CPF as XXX.XXX.XXX-XX."""
    return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"


def is_valid_cpf(cpf: str) -> bool:
    """Check the two CPF verification digits (punctuation is ignored)."""
    digits = [int(c) for c in cpf if c.isdigit()]
    if len(digits) != 11 or len(set(digits)) == 1:
        return False
    for size in (9, 10):
        total = sum(d * w for d, w in zip(digits[:size], range(size + 1, 1, -1)))
        check = 11 - (total % 11)
        if digits[size] != (0 if check >= 10 else check):
            return False
    return True
