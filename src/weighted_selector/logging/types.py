"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuildRecord:
    """Immutable record of a single selector build.

    Attributes:
        timestamp_ns: Wall-clock time of the build (nanoseconds since epoch).
        build_ms: Time spent building the distribution (milliseconds).
        selector_kind: ``'static'`` or ``'dynamic'``.
        strategy: Bound search strategy (``'linear'`` or ``'binary'``).
        item_count: Number of items in the distribution.
        total_weight: Sum of the raw weights.
        threshold: Crossover item count used to pick the strategy.
        seed: Seed applied to the random source, or ``None`` if unchanged.
        random_source: Name of the random source used for draws.
    """

    timestamp_ns: int
    build_ms: float

    selector_kind: str
    strategy: str
    item_count: int
    total_weight: float
    threshold: int

    seed: int | None
    random_source: str
