"""Shared pytest fixtures for weighted-selector tests.

Provides reusable configuration objects and sample weight sets that are
used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from weighted_selector.config import SelectorConfig


@pytest.fixture
def default_config() -> SelectorConfig:
    """Return a SelectorConfig with all default values."""
    return SelectorConfig()


@pytest.fixture
def silent_config() -> SelectorConfig:
    """Return a config with no logging for noise-free tests."""
    return SelectorConfig(log_level="none")


@pytest.fixture
def diagnostic_config() -> SelectorConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SelectorConfig(log_level="full", diagnostic_mode=True)


@pytest.fixture
def small_weights() -> list[float]:
    """Return four weights whose distribution is [0.1, 0.3, 0.6, 1.0]."""
    return [1.0, 2.0, 3.0, 4.0]


@pytest.fixture
def large_weights() -> np.ndarray:
    """Return 5000 random positive weights, well above every threshold.

    Uses a fixed RNG seed for reproducibility.
    """
    rng = np.random.default_rng(seed=12345)
    return rng.uniform(0.01, 10.0, size=5000)
