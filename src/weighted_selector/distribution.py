"""Cumulative distribution construction.

Turns a weight buffer into a cumulative distribution array (CDA) where
``cda[i] = sum(weights[0..i]) / sum(weights)``. Item ``i`` owns the
probability interval ``(cda[i-1], cda[i]]`` with ``cda[-1] = 0``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from weighted_selector.exceptions import InvalidWeightError, SelectorBuildError

if TYPE_CHECKING:
    from collections.abc import Sequence


def check_weight(weight: float) -> None:
    """Scalar form of :func:`check_weights` used on every ``add()``.

    Raises:
        InvalidWeightError: If *weight* is negative, NaN or infinite.
    """
    if not math.isfinite(weight):
        raise InvalidWeightError(f"Weight must be finite, got {weight!r}")
    if weight < 0:
        raise InvalidWeightError(f"Weight must be non-negative, got {weight!r}")


def check_weights(weights: np.ndarray) -> None:
    """Reject weights that cannot take part in a probability distribution.

    Args:
        weights: 1-D float array of raw weights.

    Raises:
        InvalidWeightError: If any weight is negative, NaN or infinite.
    """
    if not np.all(np.isfinite(weights)):
        raise InvalidWeightError("Weights must be finite")
    if np.any(weights < 0):
        raise InvalidWeightError("Weights must be non-negative")


def build_cumulative_distribution(weights: np.ndarray) -> np.ndarray:
    """Replace *weights* in place with its cumulative distribution.

    The running prefix sum is divided by its own final value, so the last
    entry is exactly 1.0 for any buffer with a positive total.

    Args:
        weights: 1-D float64 buffer of non-negative weights (modified in place).

    Returns:
        The same buffer, now holding the normalized cumulative distribution.

    Raises:
        SelectorBuildError: If the buffer is empty, holds a non-finite weight,
            or its weights sum to zero.
    """
    if weights.size == 0:
        raise SelectorBuildError("Cannot build a distribution with no items")

    # Scale by the largest weight first so the running sum of finite
    # weights cannot overflow to inf.
    largest = float(weights.max())
    if not math.isfinite(largest):
        raise SelectorBuildError("Cannot build a distribution from non-finite weights")
    if largest <= 0.0:
        raise SelectorBuildError("Cannot build a distribution whose weights sum to zero")
    weights /= largest

    np.cumsum(weights, out=weights)
    weights /= weights[-1]
    return weights


def cumulative_distribution(weights: Sequence[float] | np.ndarray) -> np.ndarray:
    """Copy *weights* into a new float64 array and build its distribution.

    Args:
        weights: Raw, non-normalized weights.

    Returns:
        A new float64 cumulative distribution array.

    Raises:
        InvalidWeightError: If any weight is negative or non-finite.
        SelectorBuildError: If there are no weights or they sum to zero.
    """
    buffer = np.array(weights, dtype=np.float64)
    if buffer.ndim != 1:
        raise InvalidWeightError(f"Weights must be one-dimensional, got shape {buffer.shape}")
    check_weights(buffer)
    return build_cumulative_distribution(buffer)
