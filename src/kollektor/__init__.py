"""Collect per-directory records from files matching glob patterns."""

from kollektor.exceptions import ConfigError
from kollektor.exceptions import HandlerError
from kollektor.exceptions import KollektorError
from kollektor.operations import aggregate
from kollektor.operations import aggregate_sync

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "HandlerError",
    "KollektorError",
    "__version__",
    "aggregate",
    "aggregate_sync",
]
