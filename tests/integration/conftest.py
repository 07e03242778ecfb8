from __future__ import annotations

import numpy as np
import pytest

CORNERS = np.array([[10.0, 10.0], [10.0, -10.0], [-10.0, 10.0], [-10.0, -10.0]])


@pytest.fixture
def blob_dataset(tmp_path):
    """Four tight, well separated blobs of 25 points each, saved as .npz.

    Returns (path, labels) where labels[i] is the blob of point ``b{i}``.
    """
    rng = np.random.RandomState(42)
    points_per_blob = 25
    vectors = np.concatenate(
        [c + 0.5 * rng.randn(points_per_blob, 2) for c in CORNERS]
    )
    labels = np.repeat(np.arange(len(CORNERS)), points_per_blob)
    ids = np.array([f"b{i}" for i in range(len(vectors))])

    path = tmp_path / "blobs.npz"
    np.savez_compressed(path, vectors=vectors, ids=ids)
    return path, labels
