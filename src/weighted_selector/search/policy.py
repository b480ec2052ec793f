"""Search strategy variants and the item-count policy that picks one."""

from __future__ import annotations

import enum

import numpy as np

from weighted_selector.search.strategies import select_index_binary, select_index_linear


class SearchStrategy(enum.Enum):
    """Tagged variant over the two search strategies.

    Members dispatch to the matching search function, so a selector binds a
    strategy once at build time and calls ``strategy.select_index()``.
    """

    LINEAR = "linear"
    BINARY = "binary"

    def select_index(self, cda: np.ndarray, u: float) -> int:
        """Map uniform value *u* to an index of *cda* with this strategy."""
        if self is SearchStrategy.LINEAR:
            return select_index_linear(cda, u)
        return select_index_binary(cda, u)


def choose_strategy(count: int, threshold: int) -> SearchStrategy:
    """Pick linear search below *threshold* items, binary search at or above.

    Args:
        count: Number of items in the distribution.
        threshold: Crossover item count.

    Returns:
        The strategy to bind.
    """
    if count < threshold:
        return SearchStrategy.LINEAR
    return SearchStrategy.BINARY
