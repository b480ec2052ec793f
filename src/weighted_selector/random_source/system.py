"""System random source using ``os.urandom()``.

Cryptographically secure and always available, but never reproducible:
the seed is accepted for interface compatibility and ignored.
"""

from __future__ import annotations

import os

import numpy as np

from weighted_selector.random_source.base import RandomSource
from weighted_selector.random_source.registry import register_random_source

# 53 random mantissa bits give every representable multiple of 2**-53 in [0, 1).
_MANTISSA_SHIFT = 11
_MANTISSA_SCALE = 1.0 / (1 << 53)


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper producing 53-bit uniform floats."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def random(self) -> float:
        """Return a float in [0, 1) from 8 bytes of OS entropy."""
        raw = int.from_bytes(os.urandom(8), "little")
        return (raw >> _MANTISSA_SHIFT) * _MANTISSA_SCALE

    def random_array(self, n: int) -> np.ndarray:
        """Return *n* floats in [0, 1) from a single ``os.urandom()`` call."""
        raw = np.frombuffer(os.urandom(8 * n), dtype=np.uint64)
        return (raw >> np.uint64(_MANTISSA_SHIFT)).astype(np.float64) * _MANTISSA_SCALE
