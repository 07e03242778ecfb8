"""Strategy registry for seeding algorithms."""
from __future__ import annotations

from SeedSelection.seeding.farthest import (
    FarthestPointsInitialization,
    FarthestPointsMultiStart,
)
from SeedSelection.seeding.random_init import RandomlyChosenInitialization
from SeedSelection.seeding.strategy import InitializationStrategy


class StrategyRegistry:
    """Registry mapping strategy names to their implementation classes."""

    def __init__(self) -> None:
        self._strategies: dict[str, type] = {}

    def register(self, strategy_class: type) -> None:
        """Register a strategy class by its name attribute."""
        self._strategies[strategy_class.name] = strategy_class

    def get(self, name: str, **options: object) -> InitializationStrategy:
        """Instantiate and return a strategy by name.

        ``options`` are passed to the strategy constructor.
        """
        if name not in self._strategies:
            available = ", ".join(sorted(self._strategies))
            msg = (
                f"Unknown strategy {name!r}. "
                f"Available: {available}"
            )
            raise KeyError(msg)
        return self._strategies[name](**options)

    def available(self) -> list[str]:
        """Return names of all registered strategies."""
        return sorted(self._strategies)

    def is_available(self, name: str) -> bool:
        """Check if a strategy is registered."""
        return name in self._strategies


def _build_default_registry() -> StrategyRegistry:
    registry = StrategyRegistry()
    registry.register(FarthestPointsInitialization)
    registry.register(FarthestPointsMultiStart)
    registry.register(RandomlyChosenInitialization)
    return registry


default_registry = _build_default_registry()
