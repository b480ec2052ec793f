"""Diagnostic logging subsystem for weighted-selector.

Provides immutable per-build records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from weighted_selector.logging.logger import BuildLogger
from weighted_selector.logging.types import BuildRecord

__all__ = [
    "BuildLogger",
    "BuildRecord",
]
