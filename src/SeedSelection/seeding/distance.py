"""Distance oracles consumed by the seeding strategies."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from SeedSelection.shared.types import Vector


@runtime_checkable
class DistanceOracle(Protocol):
    """Symmetric, non-negative distance between two point vectors."""

    def __call__(self, a: Vector, b: Vector) -> float: ...


class MetricDistance:
    """Pairwise distance for any scikit-learn metric name.

    Evaluated one pair at a time, so strategies see exactly one oracle
    call per distance they need.
    """

    def __init__(self, metric: str = "euclidean") -> None:
        from sklearn.metrics.pairwise import distance_metrics

        functions = {
            name: func
            for name, func in distance_metrics().items()
            if name != "precomputed"
        }
        if metric not in functions:
            available = ", ".join(sorted(functions))
            msg = f"Unknown metric {metric!r}. Available: {available}"
            raise KeyError(msg)
        self._metric = metric
        self._func = functions[metric]

    @property
    def metric(self) -> str:
        return self._metric

    def __call__(self, a: Vector, b: Vector) -> float:
        a = np.asarray(a, dtype=np.float64).reshape(1, -1)
        b = np.asarray(b, dtype=np.float64).reshape(1, -1)
        return float(self._func(a, b)[0, 0])


class CountingDistance:
    """Wraps an oracle and counts how often it is invoked."""

    def __init__(self, oracle: DistanceOracle) -> None:
        self._oracle = oracle
        self.calls = 0

    def __call__(self, a: Vector, b: Vector) -> float:
        self.calls += 1
        return self._oracle(a, b)

    def reset(self) -> None:
        self.calls = 0
