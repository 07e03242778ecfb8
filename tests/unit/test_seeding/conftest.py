from __future__ import annotations

import numpy as np
import pytest

from SeedSelection.seeding.collection import VectorCollection


class FixedRandomSource:
    """Random source that always draws the same point."""

    def __init__(self, pid) -> None:
        self.pid = pid
        self.calls = 0

    def choose(self, ids):
        self.calls += 1
        return self.pid


def abs_distance(a, b) -> float:
    return float(np.abs(np.asarray(a) - np.asarray(b)).sum())


@pytest.fixture()
def line_points() -> VectorCollection:
    """The 1-D points 0, 1, 2 and 10, with ids 0..3."""
    return VectorCollection(np.array([[0.0], [1.0], [2.0], [10.0]]))


@pytest.fixture()
def random_points() -> VectorCollection:
    rng = np.random.RandomState(0)
    return VectorCollection(rng.randn(50, 4))


@pytest.fixture()
def fixed_source():
    """Factory for a random source pinned to one point id."""
    return FixedRandomSource


@pytest.fixture()
def distance():
    return abs_distance
