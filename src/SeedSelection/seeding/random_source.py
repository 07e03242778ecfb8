"""Random sources used to draw bootstrap points."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from SeedSelection.shared.errors import EmptyCollectionError, InvalidArgumentError
from SeedSelection.shared.types import PointId


@runtime_checkable
class RandomSource(Protocol):
    """Supplies uniformly distributed picks from a sequence of ids."""

    def choose(self, ids: Sequence[PointId]) -> PointId: ...


class NumpyRandomSource:
    """Uniform picks backed by ``numpy.random.RandomState``.

    Deterministic given seed.
    """

    def __init__(self, seed: int | None = 42) -> None:
        self._seed = seed
        self._rng = np.random.RandomState(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def choose(self, ids: Sequence[PointId]) -> PointId:
        if len(ids) == 0:
            raise EmptyCollectionError("Cannot draw a point from an empty collection")
        return ids[self._rng.randint(len(ids))]

    def sample(self, ids: Sequence[PointId], k: int) -> list[PointId]:
        """Draw k distinct ids without replacement."""
        n = len(ids)
        if n == 0:
            raise EmptyCollectionError("Cannot draw points from an empty collection")
        if k > n:
            raise InvalidArgumentError(
                f"Cannot sample {k} distinct points from {n}"
            )
        return [ids[int(i)] for i in self._rng.choice(n, size=k, replace=False)]
