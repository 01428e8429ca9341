"""File discovery operations."""

import fnmatch
import logging
from collections.abc import Collection
from pathlib import Path

logger = logging.getLogger(__name__)


def matches_any(name: str, patterns: Collection[str]) -> bool:
    """Check if a file basename matches at least one glob pattern."""
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


def _raise_walk_error(error: OSError) -> None:
    raise error


def discover_files(root: Path, patterns: Collection[str]) -> list[Path]:
    """Discover files under root whose basename matches any pattern.

    Args:
        root: Absolute path of an existing directory to scan
        patterns: Glob patterns tested against each file's basename

    Returns:
        Sorted list of absolute paths to matching files. Sorted by the path
        string, since that order decides which directory is seen first.

    Raises:
        ValueError: If patterns is empty
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        OSError: If a directory under root cannot be listed
    """
    if not patterns:
        raise ValueError("At least one pattern is required")
    if not root.exists():
        raise FileNotFoundError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")

    files = []
    for dirpath, dirnames, filenames in root.walk(on_error=_raise_walk_error):
        for filename in filenames:
            full_path = dirpath / filename
            # Skip sockets, fifos and broken symlinks
            if not full_path.is_file():
                continue
            if matches_any(filename, patterns):
                files.append(full_path)

    logger.debug("Matched %d files under %s", len(files), root)
    return sorted(files, key=str)
