"""High-level operations for kollektor."""

from kollektor.operations.aggregate import aggregate
from kollektor.operations.aggregate import aggregate_sync
from kollektor.operations.paths import normalize_cwd
from kollektor.operations.validate import validate_handlers

__all__ = [
    "aggregate",
    "aggregate_sync",
    "normalize_cwd",
    "validate_handlers",
]
