"""Base class and seed conventions shared by all selectors."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from weighted_selector.logging.types import BuildRecord

if TYPE_CHECKING:
    from weighted_selector.search.policy import SearchStrategy

T = TypeVar("T")

KEEP_SEED = -1
"""Seed sentinel: keep the current random source (or pick a seed automatically)."""

RANDOM_SEED = -2
"""Seed sentinel: reseed with a fresh seed drawn from the current source."""


def check_seed(seed: int) -> None:
    """Reject negative seeds other than the two sentinels.

    Raises:
        ValueError: If *seed* is negative and not a sentinel.
    """
    if seed < 0 and seed not in (KEEP_SEED, RANDOM_SEED):
        raise ValueError(
            f"Seed must be non-negative, KEEP_SEED ({KEEP_SEED}) or "
            f"RANDOM_SEED ({RANDOM_SEED}), got {seed}"
        )


class RandomSelector(ABC, Generic[T]):
    """Abstract base for weighted random selectors.

    ``select_random_item()`` with no argument consumes the selector's own
    random source. Passing *random_value* makes the call pure, so the same
    value against the same distribution always returns the same item.
    """

    @abstractmethod
    def select_random_item(self, random_value: float | None = None) -> T:
        """Select one item with probability proportional to its weight.

        Args:
            random_value: Uniform value in [0, 1] from an external generator.
                ``None`` draws one from the internal random source.

        Returns:
            The selected item.
        """

    @abstractmethod
    def select_random_items(self, count: int) -> list[T]:
        """Select *count* items independently using the internal random source."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of selectable items."""


def make_build_record(
    *,
    started_ns: int,
    selector_kind: str,
    strategy: SearchStrategy,
    item_count: int,
    total_weight: float,
    threshold: int,
    seed: int | None,
    random_source: str,
) -> BuildRecord:
    """Assemble a BuildRecord, timing the build from *started_ns*."""
    now = time.perf_counter_ns()
    return BuildRecord(
        timestamp_ns=time.time_ns(),
        build_ms=(now - started_ns) / 1e6,
        selector_kind=selector_kind,
        strategy=strategy.value,
        item_count=item_count,
        total_weight=total_weight,
        threshold=threshold,
        seed=seed,
        random_source=random_source,
    )
