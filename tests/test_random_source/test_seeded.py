"""Tests for SeededRandomSource and SystemRandomSource."""

from __future__ import annotations

import numpy as np

from weighted_selector.random_source.seeded import SeededRandomSource
from weighted_selector.random_source.system import SystemRandomSource


class TestSeededRandomSource:
    def test_name(self) -> None:
        assert SeededRandomSource(1).name == "seeded"

    def test_seed_recorded(self) -> None:
        assert SeededRandomSource(42).seed == 42
        assert SeededRandomSource().seed is None

    def test_same_seed_same_sequence(self) -> None:
        a = SeededRandomSource(42)
        b = SeededRandomSource(42)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seed_different_sequence(self) -> None:
        a = SeededRandomSource(1)
        b = SeededRandomSource(2)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_values_in_unit_interval(self) -> None:
        values = SeededRandomSource(3).random_array(10_000)
        assert values.dtype == np.float64
        assert np.all((values >= 0.0) & (values < 1.0))

    def test_random_array_reproducible(self) -> None:
        np.testing.assert_array_equal(
            SeededRandomSource(9).random_array(50), SeededRandomSource(9).random_array(50)
        )

    def test_spawn_seed_non_negative_and_reproducible(self) -> None:
        seeds_a = [SeededRandomSource(5).spawn_seed() for _ in range(3)]
        seeds_b = [SeededRandomSource(5).spawn_seed() for _ in range(3)]
        assert seeds_a == seeds_b
        assert all(0 <= s < 2**31 - 1 for s in seeds_a)


class TestSystemRandomSource:
    def test_name(self) -> None:
        assert SystemRandomSource().name == "system"

    def test_values_in_unit_interval(self) -> None:
        source = SystemRandomSource(123)
        for _ in range(1000):
            assert 0.0 <= source.random() < 1.0

    def test_random_array(self) -> None:
        values = SystemRandomSource().random_array(5000)
        assert values.shape == (5000,)
        assert values.dtype == np.float64
        assert np.all((values >= 0.0) & (values < 1.0))
        # 5000 uniform draws have a mean near 0.5 (SE ~ 0.004).
        assert abs(float(values.mean()) - 0.5) < 0.05

    def test_seed_ignored(self) -> None:
        a = SystemRandomSource(1)
        b = SystemRandomSource(1)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_spawn_seed_non_negative(self) -> None:
        assert SystemRandomSource().spawn_seed() >= 0
