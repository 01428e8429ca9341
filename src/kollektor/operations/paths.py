"""Path normalization utilities."""

import os
from pathlib import Path


def normalize_cwd(cwd: Path | str | None = None) -> Path:
    """Normalize the scan root to an absolute path.

    Symlinks are not followed, so records and handler paths stay under the
    directory the caller named.

    Args:
        cwd: Directory to scan. If None, uses the current working directory.

    Returns:
        Absolute path to the scan root with ".." segments collapsed
    """
    if cwd is None:
        return Path.cwd()
    return Path(os.path.abspath(cwd))
