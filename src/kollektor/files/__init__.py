"""Filesystem operations for kollektor."""

from kollektor.files.discover import discover_files
from kollektor.files.discover import matches_any

__all__ = [
    "discover_files",
    "matches_any",
]
