"""Seeded pseudo-random source backed by numpy's PCG64 generator.

The default source for every selector: two sources built with the same seed
produce the same sequence of draws.
"""

from __future__ import annotations

import numpy as np

from weighted_selector.random_source.base import _SEED_LIMIT, RandomSource
from weighted_selector.random_source.registry import register_random_source


@register_random_source("seeded")
class SeededRandomSource(RandomSource):
    """``numpy.random.default_rng(seed)`` wrapper.

    Args:
        seed: RNG seed for reproducible output. ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    def random(self) -> float:
        """Return the next float in [0, 1) from the generator."""
        return float(self._rng.random())

    def random_array(self, n: int) -> np.ndarray:
        """Return *n* floats in [0, 1) in one vectorized draw."""
        return self._rng.random(n)

    def spawn_seed(self) -> int:
        """Draw a new seed with the generator's integer sampler."""
        return int(self._rng.integers(0, _SEED_LIMIT))
