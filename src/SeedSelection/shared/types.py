from __future__ import annotations

from collections.abc import Hashable

import numpy as np
from numpy.typing import NDArray

PointId = Hashable
"""Opaque, hashable handle into a point collection."""

Vector = NDArray[np.floating]

SEED_MODES = ("means", "medoids")
