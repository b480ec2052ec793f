"""Random source subsystem for weighted-selector.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from weighted_selector.random_source import RandomSource, RandomSourceRegistry
    from weighted_selector.random_source import SeededRandomSource, SystemRandomSource
"""

from weighted_selector.random_source.base import RandomSource
from weighted_selector.random_source.registry import (
    RandomSourceRegistry,
    register_random_source,
)
from weighted_selector.random_source.seeded import SeededRandomSource
from weighted_selector.random_source.system import SystemRandomSource

__all__ = [
    "RandomSource",
    "RandomSourceRegistry",
    "SeededRandomSource",
    "SystemRandomSource",
    "register_random_source",
]
