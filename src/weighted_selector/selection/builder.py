"""Builder for immutable static selectors.

``RandomSelectorBuilder`` buffers (item, weight) pairs, normalizes them into
a cumulative distribution and instantiates the static selector variant whose
search strategy suits the item count. Each builder owns its buffers; it is
not meant to be shared between threads. ``build_selector()`` is the one-call
factory and uses a fresh builder per call, so it is reentrant.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Generic

import numpy as np

from weighted_selector.config import SelectorConfig
from weighted_selector.distribution import build_cumulative_distribution, check_weight
from weighted_selector.exceptions import SelectorBuildError
from weighted_selector.logging.logger import BuildLogger
from weighted_selector.random_source import RandomSourceRegistry
from weighted_selector.search.policy import choose_strategy
from weighted_selector.selection.base import KEEP_SEED, RANDOM_SEED, T, check_seed, make_build_record
from weighted_selector.selection.static import static_selector_class

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weighted_selector.selection.static import StaticRandomSelector

logger = logging.getLogger("weighted_selector")


class RandomSelectorBuilder(Generic[T]):
    """Accumulates weighted items and builds static selectors from them.

    Args:
        config: Thresholds, random source and logging settings.
            Defaults to ``SelectorConfig()``.
    """

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self._config = config if config is not None else SelectorConfig()
        # Source of automatic seeds for selectors built without one.
        self._random = RandomSourceRegistry.create(self._config.random_source_type)
        self._build_logger = BuildLogger(self._config)
        self._item_buffer: list[T] = []
        self._weight_buffer: list[float] = []

    @property
    def build_logger(self) -> BuildLogger:
        """Logger receiving one record per build."""
        return self._build_logger

    def __len__(self) -> int:
        return len(self._item_buffer)

    def add(self, item: T, weight: float) -> None:
        """Buffer *item* with *weight*. Zero weights are silently ignored.

        Raises:
            InvalidWeightError: If *weight* is negative or non-finite.
        """
        check_weight(weight)
        if weight == 0:
            return
        self._item_buffer.append(item)
        self._weight_buffer.append(float(weight))

    def clear(self) -> None:
        """Discard all buffered items."""
        self._item_buffer.clear()
        self._weight_buffer.clear()

    def build(self, seed: int = KEEP_SEED) -> StaticRandomSelector[T]:
        """Build an immutable selector from the buffered items and clear the buffers.

        Args:
            seed: Seed for the selector's random source. ``KEEP_SEED`` or
                ``RANDOM_SEED`` draw one from the builder's own source.

        Returns:
            A ``StaticRandomSelectorLinear`` below the configured threshold,
            a ``StaticRandomSelectorBinary`` at or above it.

        Raises:
            SelectorBuildError: If no items were added.
            ValueError: If *seed* is negative and not a sentinel.
        """
        check_seed(seed)
        if not self._item_buffer:
            raise SelectorBuildError("Cannot build with no items")

        started = time.perf_counter_ns()
        items = list(self._item_buffer)
        cda = np.array(self._weight_buffer, dtype=np.float64)
        self.clear()

        total_weight = float(cda.sum())
        build_cumulative_distribution(cda)

        if seed in (KEEP_SEED, RANDOM_SEED):
            seed = self._random.spawn_seed()

        threshold = self._config.threshold
        strategy = choose_strategy(len(cda), threshold)
        selector_cls = static_selector_class(strategy)
        selector: StaticRandomSelector[T] = selector_cls(
            items, cda, seed, random_source_type=self._config.random_source_type
        )

        self._build_logger.log_build(
            make_build_record(
                started_ns=started,
                selector_kind="static",
                strategy=strategy,
                item_count=len(items),
                total_weight=total_weight,
                threshold=threshold,
                seed=seed,
                random_source=self._config.random_source_type,
            )
        )
        logger.debug("Built %s with %d items", selector_cls.__name__, len(items))
        return selector


def build_selector(
    items: Sequence[T],
    weights: Sequence[float],
    seed: int = KEEP_SEED,
    config: SelectorConfig | None = None,
) -> StaticRandomSelector[T]:
    """Build an immutable selector from parallel item and weight sequences.

    Zero-weight items are skipped. Uses a fresh builder for every call.

    Raises:
        ValueError: If *items* and *weights* differ in length.
        SelectorBuildError: If no item has a positive weight.
        InvalidWeightError: If any weight is negative or non-finite.
    """
    if len(items) != len(weights):
        raise ValueError(
            f"items and weights must have the same length: {len(items)} != {len(weights)}"
        )
    builder: RandomSelectorBuilder[T] = RandomSelectorBuilder(config)
    for item, weight in zip(items, weights):
        builder.add(item, weight)
    return builder.build(seed)
