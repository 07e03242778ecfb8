"""Seeding bounded context: initial centers for k-means and k-medoids."""

from SeedSelection.seeding.cache import MinDistanceCache
from SeedSelection.seeding.collection import PointCollection, VectorCollection
from SeedSelection.seeding.distance import (
    CountingDistance,
    DistanceOracle,
    MetricDistance,
)
from SeedSelection.seeding.farthest import (
    FarthestPointsInitialization,
    FarthestPointsMultiStart,
    farthest_points,
)
from SeedSelection.seeding.random_init import RandomlyChosenInitialization
from SeedSelection.seeding.random_source import NumpyRandomSource, RandomSource
from SeedSelection.seeding.registry import StrategyRegistry, default_registry
from SeedSelection.seeding.strategy import (
    InitializationStrategy,
    SeedMetrics,
    SeedPoint,
    SeedResult,
)

__all__ = [
    "CountingDistance",
    "DistanceOracle",
    "FarthestPointsInitialization",
    "FarthestPointsMultiStart",
    "InitializationStrategy",
    "MetricDistance",
    "MinDistanceCache",
    "NumpyRandomSource",
    "PointCollection",
    "RandomSource",
    "RandomlyChosenInitialization",
    "SeedMetrics",
    "SeedPoint",
    "SeedResult",
    "StrategyRegistry",
    "VectorCollection",
    "default_registry",
    "farthest_points",
]
