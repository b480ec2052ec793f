"""Abstract base class for all random sources.

Every selector owns one random source and draws its uniform values from it.
The ABC provides a default ``random_array()`` that loops over ``random()``
and a ``spawn_seed()`` helper used when a caller asks for a fresh seed.
Subclasses must implement ``name`` and ``random()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

# Upper bound (exclusive) for seeds handed out by spawn_seed().
_SEED_LIMIT = 2**31 - 1


class RandomSource(ABC):
    """Abstract base for uniform random sources.

    Not thread-safe: concurrent draws on the same instance race on the
    generator state and must be serialized by the caller.

    Args:
        seed: Seed for reproducible output. ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'seeded'``, ``'system'``)."""

    @property
    def seed(self) -> int | None:
        """Seed this source was constructed with, if any."""
        return self._seed

    @abstractmethod
    def random(self) -> float:
        """Return one float in [0, 1)."""

    def random_array(self, n: int) -> np.ndarray:
        """Return *n* floats in [0, 1) as a float64 array.

        Subclasses may override for a vectorized implementation.
        """
        return np.fromiter((self.random() for _ in range(n)), dtype=np.float64, count=n)

    def spawn_seed(self) -> int:
        """Draw a new non-negative seed from this source."""
        return int(self.random() * _SEED_LIMIT)
