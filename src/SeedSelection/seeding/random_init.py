"""Uniform random seeding baseline."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from SeedSelection.seeding.random_source import NumpyRandomSource
from SeedSelection.seeding.strategy import validate_k
from SeedSelection.shared.config import SeedingConfig
from SeedSelection.shared.errors import EmptyCollectionError

if TYPE_CHECKING:
    from SeedSelection.seeding.collection import PointCollection
    from SeedSelection.seeding.distance import DistanceOracle
    from SeedSelection.shared.types import PointId, Vector


class RandomlyChosenInitialization:
    """k distinct points drawn uniformly at random.

    Ignores the distance oracle. Needs a random source with ``sample``,
    such as NumpyRandomSource.
    """

    name = "random"

    def __init__(
        self,
        random_source: NumpyRandomSource | None = None,
        config: SeedingConfig | None = None,
    ) -> None:
        self._random_source = random_source or NumpyRandomSource()
        self._config = config or SeedingConfig()

    def choose_initial_means(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[Vector]:
        return [
            np.array(collection.get(pid))
            for pid in self.choose_initial_medoids(collection, k, distance)
        ]

    def choose_initial_medoids(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[PointId]:
        validate_k(collection, k)
        if len(collection) == 0:
            raise EmptyCollectionError("Cannot draw points from an empty collection")
        return self._random_source.sample(collection.ids, k)
