"""weighted-selector: fast weighted random selection over large item sets.

Builds a cumulative distribution from item weights and maps uniform draws to
items with linear or binary search, picking the strategy from the item
count. Offers immutable static selectors and a mutable dynamic selector.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-selector")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_selector.config import SelectorConfig, resolve_config, validate_overrides
from weighted_selector.distribution import build_cumulative_distribution, cumulative_distribution
from weighted_selector.exceptions import (
    ConfigValidationError,
    InvalidWeightError,
    SelectorBuildError,
    SelectorNotBuiltError,
    WeightedSelectorError,
)
from weighted_selector.search import SearchStrategy, choose_strategy
from weighted_selector.selection import (
    KEEP_SEED,
    RANDOM_SEED,
    DynamicRandomSelector,
    RandomSelector,
    RandomSelectorBuilder,
    StaticRandomSelector,
    StaticRandomSelectorBinary,
    StaticRandomSelectorLinear,
    build_selector,
)

__all__ = [
    "KEEP_SEED",
    "RANDOM_SEED",
    "ConfigValidationError",
    "DynamicRandomSelector",
    "InvalidWeightError",
    "RandomSelector",
    "RandomSelectorBuilder",
    "SearchStrategy",
    "SelectorBuildError",
    "SelectorConfig",
    "SelectorNotBuiltError",
    "StaticRandomSelector",
    "StaticRandomSelectorBinary",
    "StaticRandomSelectorLinear",
    "WeightedSelectorError",
    "__version__",
    "build_cumulative_distribution",
    "build_selector",
    "choose_strategy",
    "cumulative_distribution",
    "resolve_config",
    "validate_overrides",
]
