"""Registry mapping ``random_source_type`` names to random source classes.

The built-in ``seeded`` and ``system`` sources register themselves at import
time via ``@register_random_source``. Selectors look up the configured name
and construct their own source with :meth:`RandomSourceRegistry.create`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_selector.random_source.base import RandomSource


class RandomSourceRegistry:
    """Name to class map for random sources."""

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Decorator that registers a RandomSource class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            if name in cls._registry:
                raise ValueError(f"Random source '{name}' is already registered")
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the source class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown random source {name!r}. Available: {available}")
        return cls._registry[name]

    @classmethod
    def create(cls, name: str, seed: int | None = None) -> RandomSource:
        """Instantiate the source registered under *name* with *seed*."""
        return cls.get(name)(seed)

    @classmethod
    def list_available(cls) -> list[str]:
        """Return sorted list of registered source names."""
        return sorted(cls._registry)


# Convenience alias used as a decorator in source modules.
register_random_source = RandomSourceRegistry.register
