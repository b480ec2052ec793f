"""Search subsystem for weighted-selector.

Linear and binary lookups over a cumulative distribution array, plus the
policy choosing between them by item count.
"""

from weighted_selector.search.policy import SearchStrategy, choose_strategy
from weighted_selector.search.strategies import (
    select_index_binary,
    select_index_linear,
    select_indices,
)

__all__ = [
    "SearchStrategy",
    "choose_strategy",
    "select_index_binary",
    "select_index_linear",
    "select_indices",
]
