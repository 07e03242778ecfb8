"""Fixtures for benchmark tests generating large synthetic datasets."""
from __future__ import annotations

import numpy as np
import pytest

from SeedSelection.seeding.collection import VectorCollection


@pytest.fixture
def make_collection():
    """Factory fixture that generates random point collections."""

    def _make(n: int, dim: int = 16, seed: int = 42) -> VectorCollection:
        rng = np.random.RandomState(seed)
        return VectorCollection(rng.randn(n, dim))

    return _make


@pytest.fixture
def euclidean():
    def _distance(a, b) -> float:
        return float(np.linalg.norm(a - b))

    return _distance
