"""Farthest-first traversal seeding for k-means and k-medoids."""
from __future__ import annotations

import itertools
import math
import numbers
from typing import TYPE_CHECKING, Callable, TypeVar

import numpy as np

from SeedSelection.seeding.cache import MinDistanceCache
from SeedSelection.seeding.random_source import NumpyRandomSource
from SeedSelection.seeding.strategy import validate_k
from SeedSelection.shared.config import SeedingConfig
from SeedSelection.shared.errors import (
    EmptyCollectionError,
    InvalidArgumentError,
    OracleFailureError,
)

if TYPE_CHECKING:
    from SeedSelection.seeding.collection import PointCollection
    from SeedSelection.seeding.distance import DistanceOracle
    from SeedSelection.seeding.random_source import RandomSource
    from SeedSelection.shared.types import PointId, Vector

T = TypeVar("T")


def checked_distance(distance: DistanceOracle, a: Vector, b: Vector) -> float:
    """Call the oracle, rejecting errors, non-numbers, NaN and negatives."""
    try:
        value = distance(a, b)
    except Exception as exc:
        raise OracleFailureError(f"Distance oracle failed: {exc}") from exc
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise OracleFailureError(
            f"Distance oracle returned a non-numeric value: {value!r}"
        )
    value = float(value)
    if math.isnan(value) or value < 0:
        raise OracleFailureError(
            f"Distance oracle returned an invalid distance: {value!r}"
        )
    return value


def farthest_points(
    collection: PointCollection,
    k: int,
    distance: DistanceOracle,
    random_source: RandomSource,
    *,
    drop_first: bool = True,
    project: Callable[[PointId], T] | None = None,
) -> list[T]:
    """Greedy farthest-first traversal over ``collection``.

    Each new seed is the point whose minimum distance to the seeds chosen
    so far is largest; ties go to the first point in ``collection.ids``.
    The minimum distances are cached and updated with one oracle call per
    remaining point and iteration, for O(k * N) calls in total.

    The first point is drawn from ``random_source``. With ``drop_first``
    it only bootstraps the traversal and is not returned; otherwise it is
    the first seed. Either way exactly k distinct points are selected and
    passed through ``project`` in selection order.
    """
    validate_k(collection, k)
    if project is None:
        project = _identity

    ids = collection.ids
    if len(collection) == 0:
        raise EmptyCollectionError("Cannot draw a point from an empty collection")
    first = random_source.choose(ids)
    if first not in collection:
        raise InvalidArgumentError(
            f"Random source returned {first!r}, which is not in the collection"
        )

    cache = MinDistanceCache(ids)
    seeds = [project(first)]
    if not drop_first:
        cache.exclude(first)
    prev = collection.get(first)

    for i in range(0 if drop_first else 1, k):
        best = None
        maxdist = -math.inf
        for pid in cache.remaining():
            val = min(cache[pid], checked_distance(distance, prev, collection.get(pid)))
            # Distances to a bootstrap point that is dropped below are not kept.
            if i > 0:
                cache[pid] = val
            if val > maxdist:
                maxdist = val
                best = pid
        if i == 0:
            seeds.clear()
        cache.exclude(best)
        seeds.append(project(best))
        prev = collection.get(best)

    return seeds


def _identity(pid: PointId) -> PointId:
    return pid


def _min_pairwise_distance(
    collection: PointCollection,
    ids: list[PointId],
    distance: DistanceOracle,
) -> float:
    return min(
        (
            checked_distance(distance, collection.get(a), collection.get(b))
            for a, b in itertools.combinations(ids, 2)
        ),
        default=math.inf,
    )


class FarthestPointsInitialization:
    """Initial means / medoids by repeatedly choosing the farthest point.

    2-approximation for max-min dispersion (Gonzalez, 1985). Less random
    than other initializations, so restarts are more likely to end in the
    same local optimum.
    """

    name = "farthest"

    def __init__(
        self,
        random_source: RandomSource | None = None,
        config: SeedingConfig | None = None,
    ) -> None:
        self._random_source = random_source or NumpyRandomSource()
        self._config = config or SeedingConfig()

    @property
    def config(self) -> SeedingConfig:
        return self._config

    def choose_initial_means(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[Vector]:
        return farthest_points(
            collection,
            k,
            distance,
            self._random_source,
            drop_first=self._config.drop_first,
            project=lambda pid: np.array(collection.get(pid)),
        )

    def choose_initial_medoids(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[PointId]:
        return farthest_points(
            collection,
            k,
            distance,
            self._random_source,
            drop_first=self._config.drop_first,
        )


class FarthestPointsMultiStart:
    """Farthest-first traversal from several bootstrap draws.

    'Best' = maximizes minimum pairwise distance among the seeds.
    Mitigates bootstrap-point sensitivity. Every run owns its own cache.
    """

    name = "farthest_multi"

    def __init__(
        self,
        random_source: RandomSource | None = None,
        config: SeedingConfig | None = None,
    ) -> None:
        self._random_source = random_source or NumpyRandomSource()
        self._config = config or SeedingConfig()
        if self._config.n_starts < 1:
            raise InvalidArgumentError(
                f"n_starts must be at least 1; got {self._config.n_starts}"
            )

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
        best_selected: list[PointId] | None = None
        best_min_dist = -math.inf
        for _ in range(self._config.n_starts):
            selected = farthest_points(
                collection,
                k,
                distance,
                self._random_source,
                drop_first=self._config.drop_first,
            )
            min_dist = _min_pairwise_distance(collection, selected, distance)
            if min_dist > best_min_dist:
                best_min_dist = min_dist
                best_selected = selected
        return best_selected  # type: ignore[return-value]
