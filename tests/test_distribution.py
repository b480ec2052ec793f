"""Tests for cumulative distribution construction."""

from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from weighted_selector.distribution import (
    build_cumulative_distribution,
    check_weight,
    check_weights,
    cumulative_distribution,
)
from weighted_selector.exceptions import InvalidWeightError, SelectorBuildError

_TOLERANCE = 1e-5


class TestBuildCumulativeDistribution:
    """In-place prefix-sum normalization."""

    def test_known_values(self, small_weights: list[float]) -> None:
        cda = build_cumulative_distribution(np.array(small_weights))
        np.testing.assert_allclose(cda, [0.1, 0.3, 0.6, 1.0])

    def test_modifies_in_place(self) -> None:
        buffer = np.array([1.0, 1.0, 2.0])
        result = build_cumulative_distribution(buffer)
        assert result is buffer
        np.testing.assert_allclose(buffer, [0.25, 0.5, 1.0])

    def test_single_weight(self) -> None:
        cda = build_cumulative_distribution(np.array([3.5]))
        assert cda.tolist() == [1.0]

    def test_last_value_is_exactly_one(self) -> None:
        weights = np.full(1000, 0.1)
        cda = build_cumulative_distribution(weights)
        assert cda[-1] == 1.0

    def test_zero_entries_allowed(self) -> None:
        cda = build_cumulative_distribution(np.array([0.0, 1.0, 0.0, 1.0]))
        np.testing.assert_allclose(cda, [0.0, 0.5, 0.5, 1.0])

    def test_empty_raises(self) -> None:
        with pytest.raises(SelectorBuildError, match="no items"):
            build_cumulative_distribution(np.array([], dtype=np.float64))

    def test_all_zero_raises(self) -> None:
        with pytest.raises(SelectorBuildError, match="sum to zero"):
            build_cumulative_distribution(np.zeros(5))

    def test_sum_beyond_float_range(self) -> None:
        """Finite weights whose total overflows float64 still normalize."""
        cda = build_cumulative_distribution(np.array([1e308, 1e308]))
        assert np.all(np.isfinite(cda))
        np.testing.assert_allclose(cda, [0.5, 1.0])

    def test_many_huge_weights(self) -> None:
        cda = build_cumulative_distribution(np.array([1e308, 5e307, 1e308, 5e307]))
        assert np.all(np.diff(cda) >= 0)
        np.testing.assert_allclose(cda, [1 / 3, 0.5, 5 / 6, 1.0])
        assert cda[-1] == 1.0

    @pytest.mark.parametrize("bad", [math.inf, math.nan])
    def test_non_finite_buffer_raises(self, bad: float) -> None:
        with pytest.raises(SelectorBuildError, match="non-finite"):
            build_cumulative_distribution(np.array([1.0, bad]))


class TestCumulativeDistribution:
    """Copying front end with weight validation."""

    def test_does_not_modify_input(self) -> None:
        weights = [2.0, 2.0]
        cda = cumulative_distribution(weights)
        assert weights == [2.0, 2.0]
        np.testing.assert_allclose(cda, [0.5, 1.0])

    def test_returns_float64(self) -> None:
        cda = cumulative_distribution([1, 2, 3])
        assert cda.dtype == np.float64

    def test_negative_weight_raises(self) -> None:
        with pytest.raises(InvalidWeightError, match="non-negative"):
            cumulative_distribution([1.0, -1.0])

    def test_nan_weight_raises(self) -> None:
        with pytest.raises(InvalidWeightError, match="finite"):
            cumulative_distribution([1.0, math.nan])

    def test_two_dimensional_raises(self) -> None:
        with pytest.raises(InvalidWeightError, match="one-dimensional"):
            cumulative_distribution([[1.0, 2.0], [3.0, 4.0]])

    @given(st.lists(st.floats(min_value=0.0, max_value=1.7e308), min_size=1, max_size=200))
    def test_non_decreasing_and_ends_at_one(self, weights: list[float]) -> None:
        """Any weight set with a positive total yields a valid distribution."""
        if sum(weights) == 0:
            with pytest.raises(SelectorBuildError):
                cumulative_distribution(weights)
            return
        cda = cumulative_distribution(weights)
        assert np.all(np.diff(cda) >= 0)
        assert np.all((cda >= 0.0) & (cda <= 1.0))
        assert abs(cda[-1] - 1.0) < _TOLERANCE


class TestWeightChecks:
    def test_check_weight_accepts_zero(self) -> None:
        check_weight(0.0)

    @pytest.mark.parametrize("weight", [-0.5, math.inf, -math.inf, math.nan])
    def test_check_weight_rejects(self, weight: float) -> None:
        with pytest.raises(InvalidWeightError):
            check_weight(weight)

    def test_invalid_weight_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            check_weights(np.array([-1.0]))
