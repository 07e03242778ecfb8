"""Seeding strategy protocol and domain value objects."""
from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from SeedSelection.shared.errors import InvalidArgumentError

if TYPE_CHECKING:
    from SeedSelection.seeding.collection import PointCollection
    from SeedSelection.seeding.distance import DistanceOracle
    from SeedSelection.shared.types import PointId, Vector


@runtime_checkable
class InitializationStrategy(Protocol):
    """Protocol for k-means / k-medoids initialization.

    Implementations return k seeds either as vectors (initial means) or
    as point ids of the collection (initial medoids).
    """

    @property
    def name(self) -> str: ...

    def choose_initial_means(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[Vector]: ...

    def choose_initial_medoids(
        self,
        collection: PointCollection,
        k: int,
        distance: DistanceOracle,
    ) -> list[PointId]: ...


def validate_k(collection: PointCollection, k: int) -> None:
    """Reject k values for which k distinct seeds cannot exist.

    An empty collection is left to the bootstrap draw to report.
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidArgumentError(f"k must be an integer; got {k!r}")
    if k <= 0:
        raise InvalidArgumentError(f"k must be at least 1; got {k}")
    n = len(collection)
    if n and k > n:
        raise InvalidArgumentError(
            f"Cannot choose {k} distinct seeds from {n} points"
        )


@dataclass(frozen=True)
class SeedPoint:
    """One chosen seed. ``id`` is None for seeds returned as vectors."""

    id: PointId | None
    vector: tuple[float, ...]


@dataclass(frozen=True)
class SeedMetrics:
    """Separation statistics of a seed set."""

    min_pairwise_distance: float
    avg_pairwise_distance: float


@dataclass(frozen=True)
class SeedResult:
    """Aggregate root: the output of the seeding pipeline stage."""

    strategy: str
    mode: str
    k: int
    seed: int | None
    keep_first: bool
    metric: str
    total_points: int
    seeds: tuple[SeedPoint, ...]
    metrics: SeedMetrics

    def to_json(self, path: Path) -> None:
        data = {
            "strategy": self.strategy,
            "mode": self.mode,
            "k": self.k,
            "seed": self.seed,
            "keep_first": self.keep_first,
            "metric": self.metric,
            "total_points": self.total_points,
            "seeds": [
                {"id": s.id, "vector": list(s.vector)} for s in self.seeds
            ],
            "metrics": {
                "min_pairwise_distance": self.metrics.min_pairwise_distance,
                "avg_pairwise_distance": self.metrics.avg_pairwise_distance,
            },
        }
        path.write_text(json.dumps(data, indent=2))

    @classmethod
    def from_json(cls, path: Path) -> SeedResult:
        data = json.loads(path.read_text())
        metrics = data.get("metrics", {})
        return cls(
            strategy=data["strategy"],
            mode=data.get("mode", "means"),
            k=data["k"],
            seed=data.get("seed"),
            keep_first=data.get("keep_first", False),
            metric=data.get("metric", "euclidean"),
            total_points=data["total_points"],
            seeds=tuple(
                SeedPoint(id=s.get("id"), vector=tuple(s["vector"]))
                for s in data["seeds"]
            ),
            metrics=SeedMetrics(
                min_pairwise_distance=metrics.get("min_pairwise_distance", 0.0),
                avg_pairwise_distance=metrics.get("avg_pairwise_distance", 0.0),
            ),
        )
