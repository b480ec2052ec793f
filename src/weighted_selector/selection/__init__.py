"""Selector subsystem for weighted-selector.

Immutable static selectors with a builder, and a mutable dynamic selector
that is rebuilt after modification.
"""

from weighted_selector.selection.base import KEEP_SEED, RANDOM_SEED, RandomSelector
from weighted_selector.selection.builder import RandomSelectorBuilder, build_selector
from weighted_selector.selection.dynamic import DynamicRandomSelector
from weighted_selector.selection.static import (
    StaticRandomSelector,
    StaticRandomSelectorBinary,
    StaticRandomSelectorLinear,
)

__all__ = [
    "KEEP_SEED",
    "RANDOM_SEED",
    "DynamicRandomSelector",
    "RandomSelector",
    "RandomSelectorBuilder",
    "StaticRandomSelector",
    "StaticRandomSelectorBinary",
    "StaticRandomSelectorLinear",
    "build_selector",
]
