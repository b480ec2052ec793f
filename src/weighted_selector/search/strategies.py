"""Search functions mapping a uniform value onto a cumulative distribution.

Every function returns the first index ``i`` with ``cda[i] >= u``. Values at
or above the final boundary (including the 1.0 a float rounding may leave
just past it, and NaN) are clamped to the last index instead of signalling
out-of-range. The linear and binary variants return identical indices for
every ``(cda, u)`` pair.
"""

from __future__ import annotations

import numpy as np


def select_index_linear(cda: np.ndarray, u: float) -> int:
    """Scan *cda* from the front for the first boundary at or above *u*.

    O(n) worst case, O(1) when the mass sits near the front. Cheaper than
    binary search for short arrays.

    Args:
        cda: Non-decreasing cumulative distribution array.
        u: Uniform value, nominally in [0, 1].

    Returns:
        Index of the selected item.
    """
    for i, bound in enumerate(cda):
        if bound >= u:
            return i
    return len(cda) - 1


def select_index_binary(cda: np.ndarray, u: float) -> int:
    """Lower-bound binary search for *u* in *cda*.

    Args:
        cda: Non-decreasing cumulative distribution array.
        u: Uniform value, nominally in [0, 1].

    Returns:
        Index of the selected item.
    """
    index = int(np.searchsorted(cda, u, side="left"))
    # Clamp draws that land past the final boundary.
    return min(index, len(cda) - 1)


def select_indices(cda: np.ndarray, values: np.ndarray) -> np.ndarray:
    """Vectorized lower-bound search for many uniform values at once.

    Args:
        cda: Non-decreasing cumulative distribution array.
        values: Array of uniform values.

    Returns:
        Integer array of selected indices, same shape as *values*.
    """
    indices = np.searchsorted(cda, values, side="left")
    return np.minimum(indices, len(cda) - 1)
