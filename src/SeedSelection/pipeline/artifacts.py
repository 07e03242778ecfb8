"""Loading point collections from dataset files."""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from SeedSelection.seeding.collection import VectorCollection
from SeedSelection.shared.errors import ArtifactError, InvalidArgumentError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".npy", ".npz")


def load_collection(path: Path) -> VectorCollection:
    """Load an (N, d) dataset into a VectorCollection.

    ``.npy`` files hold the matrix and points are identified by row.
    ``.npz`` files hold a ``vectors`` array and, optionally, an ``ids``
    array of the same length whose entries become string point ids.
    """
    if not path.exists():
        raise ArtifactError(f"Dataset not found: {path}")
    if path.suffix not in SUPPORTED_SUFFIXES:
        raise ArtifactError(
            f"Unsupported dataset format {path.suffix!r}; "
            f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )

    ids = None
    if path.suffix == ".npy":
        vectors = np.load(path, allow_pickle=False)
    else:
        with np.load(path, allow_pickle=False) as data:
            if "vectors" not in data.files:
                raise ArtifactError(f"No 'vectors' array in {path}")
            vectors = data["vectors"]
            if "ids" in data.files:
                ids = [str(pid) for pid in data["ids"]]

    try:
        collection = VectorCollection(vectors, ids=ids)
    except InvalidArgumentError as exc:
        raise ArtifactError(f"Invalid dataset {path}: {exc}") from exc

    logger.debug(
        "[SEED-SELECT] stage=load event=dataset_loaded path=%s points=%d",
        path,
        len(collection),
    )
    return collection
