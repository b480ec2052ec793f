"""Immutable selectors over a finalized cumulative distribution.

Two variants differ only in the search strategy they bind: linear search for
small item counts, binary search for large ones. Both are built by
:class:`~weighted_selector.selection.builder.RandomSelectorBuilder` and never
change afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np

from weighted_selector.exceptions import SelectorBuildError
from weighted_selector.random_source import RandomSourceRegistry
from weighted_selector.search.policy import SearchStrategy
from weighted_selector.search.strategies import select_indices
from weighted_selector.selection.base import RandomSelector, T

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weighted_selector.random_source.base import RandomSource


class StaticRandomSelector(RandomSelector[T]):
    """Immutable item/CDA pair with an owned random source.

    The pure ``select_random_item(random_value)`` touches no mutable state
    and is safe to call from several threads. The no-argument form advances
    the random source and must be serialized by the caller.

    Args:
        items: Items returned by selection, index-aligned with *cda*.
        cda: Cumulative distribution array (copied and made read-only).
        seed: Seed for the internal random source.
        random_source_type: Registry key of the random source to create.
    """

    strategy: ClassVar[SearchStrategy]

    def __init__(
        self,
        items: Sequence[T],
        cda: np.ndarray,
        seed: int,
        random_source_type: str = "seeded",
    ) -> None:
        if len(items) == 0:
            raise SelectorBuildError("Cannot build a selector with no items")
        if len(items) != len(cda):
            raise SelectorBuildError(
                f"Items and distribution differ in length: {len(items)} != {len(cda)}"
            )

        self._items: tuple[T, ...] = tuple(items)
        self._cda = np.array(cda, dtype=np.float64)
        self._cda.flags.writeable = False
        self._random: RandomSource = RandomSourceRegistry.create(random_source_type, seed)

    @property
    def items(self) -> tuple[T, ...]:
        """Selectable items in distribution order."""
        return self._items

    @property
    def cda(self) -> np.ndarray:
        """Read-only cumulative distribution array."""
        return self._cda

    @property
    def seed(self) -> int | None:
        """Seed of the internal random source."""
        return self._random.seed

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self._items)}, source={self._random.name!r})"

    def select_random_item(self, random_value: float | None = None) -> T:
        """Select one item, drawing from the internal source if no value is given.

        Args:
            random_value: Uniform value in [0, 1]. ``None`` draws one.

        Returns:
            The item whose probability interval contains the value.
        """
        if random_value is None:
            random_value = self._random.random()
        return self._items[self.strategy.select_index(self._cda, random_value)]

    def select_random_items(self, count: int) -> list[T]:
        """Select *count* items with one vectorized draw and lookup.

        Raises:
            ValueError: If *count* is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        indices = select_indices(self._cda, self._random.random_array(count))
        return [self._items[i] for i in indices]


class StaticRandomSelectorLinear(StaticRandomSelector[T]):
    """Static selector using linear search. Good for small item counts."""

    strategy = SearchStrategy.LINEAR


class StaticRandomSelectorBinary(StaticRandomSelector[T]):
    """Static selector using binary search. Good for large item counts."""

    strategy = SearchStrategy.BINARY


_VARIANTS: dict[SearchStrategy, type[StaticRandomSelector]] = {
    SearchStrategy.LINEAR: StaticRandomSelectorLinear,
    SearchStrategy.BINARY: StaticRandomSelectorBinary,
}


def static_selector_class(strategy: SearchStrategy) -> type[StaticRandomSelector]:
    """Return the static selector variant bound to *strategy*."""
    return _VARIANTS[strategy]
