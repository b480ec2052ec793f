"""Tests for RandomSourceRegistry and how selectors use it."""

from __future__ import annotations

import pytest

from weighted_selector.config import SelectorConfig
from weighted_selector.random_source import SeededRandomSource, SystemRandomSource
from weighted_selector.random_source.base import RandomSource
from weighted_selector.random_source.registry import RandomSourceRegistry
from weighted_selector.selection.builder import build_selector
from weighted_selector.selection.dynamic import DynamicRandomSelector


class _ConstantSource(RandomSource):
    """Always draws 0.5, so selection lands on the median item."""

    @property
    def name(self) -> str:
        return "constant"

    def random(self) -> float:
        return 0.5


@pytest.fixture()
def constant_source():
    """Register _ConstantSource as 'constant' for the duration of a test."""
    RandomSourceRegistry.register("constant")(_ConstantSource)
    yield _ConstantSource
    RandomSourceRegistry._registry.pop("constant", None)


class TestRandomSourceRegistry:
    def test_builtins_registered(self) -> None:
        assert RandomSourceRegistry.get("seeded") is SeededRandomSource
        assert RandomSourceRegistry.get("system") is SystemRandomSource

    def test_list_available(self) -> None:
        available = RandomSourceRegistry.list_available()
        assert available == sorted(available)
        assert {"seeded", "system"} <= set(available)

    def test_create_passes_seed(self) -> None:
        source = RandomSourceRegistry.create("seeded", 17)
        assert isinstance(source, SeededRandomSource)
        assert source.seed == 17

    def test_create_without_seed(self) -> None:
        source = RandomSourceRegistry.create("system")
        assert isinstance(source, SystemRandomSource)
        assert source.seed is None

    def test_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="no_such_source"):
            RandomSourceRegistry.get("no_such_source")

    def test_unknown_lists_available(self) -> None:
        with pytest.raises(KeyError, match="seeded"):
            RandomSourceRegistry.create("no_such_source")

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            RandomSourceRegistry.register("seeded")(_ConstantSource)
        assert RandomSourceRegistry.get("seeded") is SeededRandomSource


class TestSelectorsUseConfiguredSource:
    def test_static_selector(self, constant_source: type[RandomSource]) -> None:
        config = SelectorConfig(random_source_type="constant", log_level="none")
        selector = build_selector(["a", "b", "c", "d"], [1.0] * 4, seed=3, config=config)
        assert [selector.select_random_item() for _ in range(5)] == ["b"] * 5
        assert selector.select_random_items(3) == ["b", "b", "b"]

    def test_dynamic_selector(self, constant_source: type[RandomSource]) -> None:
        config = SelectorConfig(random_source_type="constant", log_level="none")
        selector = DynamicRandomSelector.from_items(["a", "b", "c", "d"], [1.0] * 4, config=config)
        assert selector.select_random_item() == "b"

    def test_unknown_source_in_config(self) -> None:
        config = SelectorConfig(random_source_type="missing", log_level="none")
        with pytest.raises(KeyError, match="missing"):
            DynamicRandomSelector(config=config)
