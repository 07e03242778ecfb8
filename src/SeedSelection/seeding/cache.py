"""Per-point minimum distance to the seeds chosen so far."""
from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from SeedSelection.shared.types import PointId


class MinDistanceCache:
    """Running minimum distance from each point to the selected seeds.

    Values start at +inf. Selected points are marked in a separate
    exclusion mask; their numeric value is never read again.
    """

    def __init__(self, ids: Sequence[PointId]) -> None:
        self._positions = {pid: i for i, pid in enumerate(ids)}
        self._distances = np.full(len(self._positions), np.inf, dtype=np.float64)
        self._excluded = np.zeros(len(self._positions), dtype=bool)

    def __len__(self) -> int:
        return len(self._positions)

    def is_excluded(self, pid: PointId) -> bool:
        return bool(self._excluded[self._positions[pid]])

    def exclude(self, pid: PointId) -> None:
        """Permanently remove ``pid`` from future selection."""
        self._excluded[self._positions[pid]] = True

    def remaining(self) -> Iterator[PointId]:
        """Ids still eligible, in insertion order."""
        for pid, pos in self._positions.items():
            if not self._excluded[pos]:
                yield pid

    def __getitem__(self, pid: PointId) -> float:
        pos = self._positions[pid]
        if self._excluded[pos]:
            raise LookupError(f"Point {pid!r} is already selected")
        return float(self._distances[pos])

    def __setitem__(self, pid: PointId, value: float) -> None:
        pos = self._positions[pid]
        if self._excluded[pos]:
            raise LookupError(f"Point {pid!r} is already selected")
        self._distances[pos] = value
