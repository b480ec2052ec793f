"""Mutable selector with an explicit stale/ready lifecycle.

Items can be added and removed freely. Any mutation marks the selector
stale; ``build()`` recomputes the cumulative distribution, rebinds the
search strategy for the new item count and makes it ready again. Selecting
from a stale selector raises :class:`SelectorNotBuiltError` rather than
reading a distribution that no longer matches the items.

Duplicate items are accepted, but ``remove()`` only drops the first equal
match, so each duplicate needs its own ``remove()`` call.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import numpy as np

from weighted_selector.config import SelectorConfig
from weighted_selector.distribution import build_cumulative_distribution, check_weight
from weighted_selector.exceptions import SelectorBuildError, SelectorNotBuiltError
from weighted_selector.logging.logger import BuildLogger
from weighted_selector.random_source import RandomSourceRegistry
from weighted_selector.search.policy import SearchStrategy, choose_strategy
from weighted_selector.search.strategies import select_indices
from weighted_selector.selection.base import (
    KEEP_SEED,
    RANDOM_SEED,
    RandomSelector,
    T,
    check_seed,
    make_build_record,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weighted_selector.random_source.base import RandomSource

logger = logging.getLogger("weighted_selector")


class DynamicRandomSelector(RandomSelector[T]):
    """Weighted selector supporting ``add``/``remove`` between rebuilds.

    Not thread-safe: mutation, ``build()`` and selection must be fully
    serialized by the caller.

    Args:
        seed: Seed for the internal random source. Negative values
            (``KEEP_SEED``/``RANDOM_SEED``) seed from the OS.
        config: Thresholds, random source and logging settings.
            Defaults to ``SelectorConfig()``.
    """

    def __init__(self, seed: int = KEEP_SEED, config: SelectorConfig | None = None) -> None:
        check_seed(seed)
        self._config = config if config is not None else SelectorConfig()
        self._random: RandomSource = RandomSourceRegistry.create(
            self._config.random_source_type, seed if seed >= 0 else None
        )
        self._build_logger = BuildLogger(self._config)

        self._items: list[T] = []
        self._weights: list[float] = []
        self._cda: np.ndarray | None = None
        self._strategy: SearchStrategy | None = None

    @classmethod
    def from_items(
        cls,
        items: Sequence[T],
        weights: Sequence[float],
        seed: int = KEEP_SEED,
        config: SelectorConfig | None = None,
    ) -> DynamicRandomSelector[T]:
        """Create a selector preloaded with *items* and built, ready to select.

        Raises:
            ValueError: If *items* and *weights* differ in length.
            SelectorBuildError: If every weight is zero.
        """
        if len(items) != len(weights):
            raise ValueError(
                f"items and weights must have the same length: {len(items)} != {len(weights)}"
            )
        selector: DynamicRandomSelector[T] = cls(seed=seed, config=config)
        for item, weight in zip(items, weights):
            selector.add(item, weight)
        return selector.build()

    # --- Mutation ---

    def add(self, item: T, weight: float) -> None:
        """Append *item* with *weight* and mark the selector stale.

        A zero weight is ignored: nothing is stored and a ready selector
        stays ready (a stale one stays stale).

        Raises:
            InvalidWeightError: If *weight* is negative or non-finite.
        """
        check_weight(weight)
        if weight == 0:
            return
        self._items.append(item)
        self._weights.append(float(weight))
        self._mark_stale()

    def remove(self, item: T) -> None:
        """Remove the first item equal to *item* and its weight, marking the selector stale.

        If no item is equal to *item* nothing changes, and the selector keeps
        its current ready or stale state.
        """
        try:
            index = self._items.index(item)
        except ValueError:
            return
        del self._items[index]
        del self._weights[index]
        self._mark_stale()

    def clear(self) -> None:
        """Remove all items, returning to the freshly constructed state."""
        self._items.clear()
        self._weights.clear()
        self._mark_stale()

    def _mark_stale(self) -> None:
        self._cda = None
        self._strategy = None

    # --- Build ---

    def build(self, seed: int = KEEP_SEED) -> DynamicRandomSelector[T]:
        """Rebuild the distribution and rebind the search strategy.

        Args:
            seed: ``KEEP_SEED`` keeps the current random source untouched,
                ``RANDOM_SEED`` reseeds with a seed drawn from it, and any
                non-negative value reseeds deterministically.

        Returns:
            ``self``, now ready for selection.

        Raises:
            SelectorBuildError: If the selector holds no items.
            ValueError: If *seed* is negative and not a sentinel.
        """
        check_seed(seed)
        if not self._items:
            raise SelectorBuildError("Cannot build with no items")

        started = time.perf_counter_ns()
        cda = np.array(self._weights, dtype=np.float64)
        total_weight = float(cda.sum())
        build_cumulative_distribution(cda)
        cda.flags.writeable = False

        applied_seed: int | None = None
        if seed != KEEP_SEED:
            applied_seed = self._random.spawn_seed() if seed == RANDOM_SEED else seed
            self._random = RandomSourceRegistry.create(
                self._config.random_source_type, applied_seed
            )
            logger.debug("Reseeded %s random source with %d", self._random.name, applied_seed)

        self._cda = cda
        self._strategy = choose_strategy(len(cda), self._config.dynamic_threshold)

        self._build_logger.log_build(
            make_build_record(
                started_ns=started,
                selector_kind="dynamic",
                strategy=self._strategy,
                item_count=len(cda),
                total_weight=total_weight,
                threshold=self._config.dynamic_threshold,
                seed=applied_seed,
                random_source=self._random.name,
            )
        )
        return self

    # --- State ---

    @property
    def is_built(self) -> bool:
        """True when the distribution matches the current items."""
        return self._cda is not None

    @property
    def cda(self) -> np.ndarray:
        """Read-only cumulative distribution from the last build."""
        return self._ready()[0]

    @property
    def strategy(self) -> SearchStrategy:
        """Search strategy bound by the last build."""
        return self._ready()[1]

    @property
    def build_logger(self) -> BuildLogger:
        """Logger receiving one record per build."""
        return self._build_logger

    def _ready(self) -> tuple[np.ndarray, SearchStrategy]:
        if self._cda is None or self._strategy is None:
            raise SelectorNotBuiltError(
                "Selector was modified since the last build(); call build() before selecting"
            )
        return self._cda, self._strategy

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        state = "ready" if self.is_built else "stale"
        return f"DynamicRandomSelector(items={len(self._items)}, {state})"

    def get_items(self) -> dict[T, float]:
        """Return a snapshot mapping each item to its weight.

        O(n); not meant for hot paths. Duplicate items report the sum of
        their weights.
        """
        snapshot: dict[T, float] = {}
        for item, weight in zip(self._items, self._weights):
            snapshot[item] = snapshot.get(item, 0.0) + weight
        return snapshot

    # --- Selection ---

    def select_random_item(self, random_value: float | None = None) -> T:
        """Select one item through the strategy bound at build time.

        Args:
            random_value: Uniform value in [0, 1]. ``None`` draws one from
                the internal random source.

        Raises:
            SelectorNotBuiltError: If the selector is stale.
        """
        cda, strategy = self._ready()
        if random_value is None:
            random_value = self._random.random()
        return self._items[strategy.select_index(cda, random_value)]

    def select_random_items(self, count: int) -> list[T]:
        """Select *count* items with one vectorized draw and lookup.

        Raises:
            SelectorNotBuiltError: If the selector is stale.
            ValueError: If *count* is negative.
        """
        cda, _ = self._ready()
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        indices = select_indices(cda, self._random.random_array(count))
        return [self._items[i] for i in indices]
