"""Diagnostic logger for selector build events.

Uses the standard ``logging`` module with the ``"weighted_selector"`` logger.
No ``print()`` statements. Only builds are logged; selection is the hot
path and never emits records.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weighted_selector.config import SelectorConfig
    from weighted_selector.logging.types import BuildRecord

logger = logging.getLogger("weighted_selector")


class BuildLogger:
    """Per-build diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per build with key metrics.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: SelectorConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[BuildRecord] = []

    def log_build(self, record: BuildRecord) -> None:
        """Log a single build event.

        Args:
            record: Immutable record of the build.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "built %s selector: items=%d strategy=%s threshold=%d "
                "total_weight=%.6g source=%s seed=%s build=%.3fms",
                record.selector_kind,
                record.item_count,
                record.strategy,
                record.threshold,
                record.total_weight,
                record.random_source,
                "unchanged" if record.seed is None else record.seed,
                record.build_ms,
            )
        elif self._log_level == "full":
            logger.info("build_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[BuildRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        build_times = [r.build_ms for r in self._records]
        counts = [r.item_count for r in self._records]
        binary_count = sum(1 for r in self._records if r.strategy == "binary")

        n = len(self._records)
        return {
            "total_builds": n,
            "mean_build_ms": sum(build_times) / n,
            "max_build_ms": max(build_times),
            "mean_item_count": sum(counts) / n,
            "max_item_count": max(counts),
            "binary_count": binary_count,
            "linear_count": n - binary_count,
        }
