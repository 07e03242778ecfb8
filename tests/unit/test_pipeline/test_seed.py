"""Tests for the seeding pipeline stage."""
from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from SeedSelection.pipeline.seed import run_seed
from SeedSelection.seeding.random_source import NumpyRandomSource
from SeedSelection.seeding.strategy import SeedResult
from SeedSelection.shared.errors import InvalidArgumentError, SeedingError


def _create_dataset(
    path: Path,
    n_points: int = 30,
    dim: int = 4,
    seed: int = 42,
) -> np.ndarray:
    """Write an .npz dataset with string ids and return its vectors."""
    rng = np.random.RandomState(seed)
    vectors = rng.randn(n_points, dim)
    ids = np.array([f"p{i}" for i in range(n_points)])
    np.savez_compressed(path, vectors=vectors, ids=ids)
    return vectors


class TestRunSeed:
    """Tests for run_seed."""

    def test_means_produces_result(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result = run_seed(input_file=path, k=5)

        assert isinstance(result, SeedResult)
        assert len(result.seeds) == 5
        assert result.strategy == "farthest"
        assert result.mode == "means"
        assert result.total_points == 30
        assert all(s.id is None for s in result.seeds)
        assert all(len(s.vector) == 4 for s in result.seeds)

    def test_medoids_are_dataset_members(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        vectors = _create_dataset(path)

        result = run_seed(input_file=path, k=5, mode="medoids")

        ids = [s.id for s in result.seeds]
        assert len(set(ids)) == 5
        for s in result.seeds:
            row = int(s.id[1:])
            np.testing.assert_allclose(s.vector, vectors[row])

    def test_means_and_medoids_pick_same_points(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        means = run_seed(input_file=path, k=6, mode="means", seed=3)
        medoids = run_seed(input_file=path, k=6, mode="medoids", seed=3)

        assert [s.vector for s in means.seeds] == [s.vector for s in medoids.seeds]

    def test_keep_first_starts_with_random_draw(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)
        expected_first = NumpyRandomSource(7).choose([f"p{i}" for i in range(30)])

        result = run_seed(
            input_file=path, k=4, mode="medoids", seed=7, keep_first=True,
        )

        assert result.keep_first is True
        assert result.seeds[0].id == expected_first

    def test_deterministic(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result1 = run_seed(input_file=path, k=5, mode="medoids", seed=42)
        result2 = run_seed(input_file=path, k=5, mode="medoids", seed=42)

        assert [s.id for s in result1.seeds] == [s.id for s in result2.seeds]

    @pytest.mark.parametrize("strategy", ["farthest", "farthest_multi", "random"])
    def test_all_registered_strategies(self, tmp_path: Path, strategy: str) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result = run_seed(input_file=path, k=4, strategy=strategy, n_starts=2)

        assert result.strategy == strategy
        assert len(result.seeds) == 4

    def test_metrics_computed(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result = run_seed(input_file=path, k=5)

        assert result.metrics.min_pairwise_distance > 0
        assert (
            result.metrics.avg_pairwise_distance
            >= result.metrics.min_pairwise_distance
        )

    def test_single_seed_metrics_are_zero(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result = run_seed(input_file=path, k=1)

        assert result.metrics.min_pairwise_distance == 0.0
        assert result.metrics.avg_pairwise_distance == 0.0

    def test_cosine_metric(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        result = run_seed(input_file=path, k=3, metric="cosine")

        assert result.metric == "cosine"
        assert 0 < result.metrics.min_pairwise_distance <= 2.0

    def test_result_json_roundtrip(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)
        output_file = tmp_path / "seeds.json"

        result = run_seed(
            input_file=path, k=5, mode="medoids", output_file=output_file,
        )

        assert output_file.exists()
        assert len(json.loads(output_file.read_text())["seeds"]) == 5
        loaded = SeedResult.from_json(output_file)
        assert loaded == result

    def test_k_larger_than_dataset_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path, n_points=5)

        with pytest.raises(SeedingError, match="distinct") as exc_info:
            run_seed(input_file=path, k=6)
        assert isinstance(exc_info.value.__cause__, InvalidArgumentError)

    def test_missing_dataset_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SeedingError, match="not found"):
            run_seed(input_file=tmp_path / "missing.npz", k=2)

    def test_unknown_strategy_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        with pytest.raises(SeedingError, match="Unknown strategy"):
            run_seed(input_file=path, k=2, strategy="nope")

    def test_unknown_mode_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "points.npz"
        _create_dataset(path)

        with pytest.raises(SeedingError, match="Unknown mode"):
            run_seed(input_file=path, k=2, mode="centroids")


class TestSeedResultJson:
    def test_missing_seed_loads_as_none(self, tmp_path: Path) -> None:
        path = tmp_path / "seeds.json"
        path.write_text(json.dumps({
            "strategy": "farthest",
            "k": 1,
            "total_points": 3,
            "seeds": [{"id": 0, "vector": [1.0, 2.0]}],
        }))

        loaded = SeedResult.from_json(path)

        assert loaded.seed is None
        assert loaded.seeds[0].vector == (1.0, 2.0)
