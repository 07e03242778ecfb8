"""Seeding stage orchestrator: load points, choose seeds, and output."""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from SeedSelection.pipeline.artifacts import load_collection
from SeedSelection.seeding.distance import MetricDistance
from SeedSelection.seeding.random_source import NumpyRandomSource
from SeedSelection.seeding.registry import default_registry
from SeedSelection.seeding.strategy import SeedMetrics, SeedPoint, SeedResult
from SeedSelection.shared.config import SeedingConfig
from SeedSelection.shared.errors import SeedingError
from SeedSelection.shared.types import SEED_MODES

logger = logging.getLogger(__name__)


def run_seed(
    input_file: Path,
    k: int,
    strategy: str = "farthest",
    mode: str = "means",
    metric: str = "euclidean",
    seed: int = 42,
    keep_first: bool = False,
    n_starts: int = 5,
    output_file: Path | None = None,
) -> SeedResult:
    """Run the seeding stage.

    Returns SeedResult. Raises SeedingError on failure.
    """
    try:
        if mode not in SEED_MODES:
            raise SeedingError(
                f"Unknown mode {mode!r}. Available: {', '.join(SEED_MODES)}"
            )

        collection = load_collection(input_file)
        logger.info(
            "[SEED-SELECT] stage=seed event=dataset_loaded points=%d dim=%d",
            len(collection),
            collection.vectors.shape[1],
        )

        config = SeedingConfig(keep_first=keep_first, n_starts=n_starts)
        algo = default_registry.get(
            strategy,
            random_source=NumpyRandomSource(seed),
            config=config,
        )
        oracle = MetricDistance(metric)

        if mode == "means":
            seeds = tuple(
                SeedPoint(id=None, vector=_as_tuple(v))
                for v in algo.choose_initial_means(collection, k, oracle)
            )
        else:
            seeds = tuple(
                SeedPoint(id=pid, vector=_as_tuple(collection.get(pid)))
                for pid in algo.choose_initial_medoids(collection, k, oracle)
            )

        metrics = _compute_seed_metrics(
            np.array([s.vector for s in seeds], dtype=np.float64), metric
        )

        result = SeedResult(
            strategy=strategy,
            mode=mode,
            k=k,
            seed=seed,
            keep_first=keep_first,
            metric=metric,
            total_points=len(collection),
            seeds=seeds,
            metrics=metrics,
        )

        if output_file is not None:
            result.to_json(output_file)

        logger.info(
            "[SEED-SELECT] stage=seed event=complete "
            "strategy=%s mode=%s k=%d min_dist=%.4f avg_dist=%.4f",
            strategy,
            mode,
            k,
            metrics.min_pairwise_distance,
            metrics.avg_pairwise_distance,
        )

        return result

    except SeedingError:
        raise
    except Exception as exc:
        logger.warning(
            "[SEED-SELECT] stage=seed event=error error=%s",
            str(exc),
        )
        raise SeedingError(str(exc)) from exc


def _as_tuple(vector) -> tuple[float, ...]:
    return tuple(float(x) for x in np.asarray(vector).ravel())


def _compute_seed_metrics(seed_vectors: np.ndarray, metric: str) -> SeedMetrics:
    """Compute pairwise distance metrics for the chosen seeds."""
    from sklearn.metrics.pairwise import pairwise_distances

    n = seed_vectors.shape[0]
    if n < 2:
        return SeedMetrics(min_pairwise_distance=0.0, avg_pairwise_distance=0.0)

    pairwise = pairwise_distances(seed_vectors, metric=metric)
    mask = np.triu(np.ones_like(pairwise, dtype=bool), k=1)
    upper_dists = pairwise[mask]

    return SeedMetrics(
        min_pairwise_distance=float(np.min(upper_dists)),
        avg_pairwise_distance=float(np.mean(upper_dists)),
    )
