"""Point collection protocol and a numpy-backed implementation."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from SeedSelection.shared.errors import InvalidArgumentError
from SeedSelection.shared.types import PointId, Vector


@runtime_checkable
class PointCollection(Protocol):
    """Protocol for the finite, immutable set of points being seeded.

    ``ids`` fixes the iteration order used by every scan of a selection
    run; ``get`` resolves an id to its vector.
    """

    @property
    def ids(self) -> Sequence[PointId]: ...

    def __len__(self) -> int: ...

    def __contains__(self, pid: object) -> bool: ...

    def get(self, pid: PointId) -> Vector: ...


class VectorCollection:
    """Rows of an (N, d) matrix, addressed by id.

    Ids default to the row positions ``0..N-1``.
    """

    def __init__(
        self,
        vectors: NDArray,
        ids: Sequence[PointId] | None = None,
    ) -> None:
        vectors = np.asarray(vectors)
        if vectors.ndim != 2:
            raise InvalidArgumentError(
                f"vectors must be a 2-D array; got shape {vectors.shape}"
            )
        if ids is None:
            ids = range(vectors.shape[0])
        ids = tuple(ids)
        if len(ids) != vectors.shape[0]:
            raise InvalidArgumentError(
                f"Got {len(ids)} ids for {vectors.shape[0]} vectors"
            )
        positions = {pid: row for row, pid in enumerate(ids)}
        if len(positions) != len(ids):
            raise InvalidArgumentError("Point ids must be unique")
        self._vectors = vectors
        self._ids = ids
        self._positions = positions

    @property
    def ids(self) -> tuple[PointId, ...]:
        return self._ids

    @property
    def vectors(self) -> NDArray:
        return self._vectors

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, pid: object) -> bool:
        try:
            return pid in self._positions
        except TypeError:
            return False

    def get(self, pid: PointId) -> Vector:
        return self._vectors[self._positions[pid]]

    def position(self, pid: PointId) -> int:
        """Row of ``pid`` in the underlying matrix."""
        return self._positions[pid]
