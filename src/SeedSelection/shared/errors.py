"""Custom exception hierarchy for seed selection."""
from __future__ import annotations


class SeedSelectionError(Exception):
    """Base exception for seed selection."""


class InvalidArgumentError(SeedSelectionError, ValueError):
    """Raised when k or the collection cannot yield k distinct seeds."""


class EmptyCollectionError(SeedSelectionError, ValueError):
    """Raised when a bootstrap point is drawn from an empty collection."""


class OracleFailureError(SeedSelectionError):
    """Raised when the distance oracle fails or returns an unusable value."""


class SeedingError(SeedSelectionError):
    """Raised when the seeding stage encounters an unrecoverable error."""


class ArtifactError(SeedSelectionError):
    """Raised when an input dataset file cannot be loaded."""
