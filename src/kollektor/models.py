"""Data models for kollektor."""

import fnmatch
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Accumulated fields for one directory. Always has "dir" (relative to the
# scan root, "." for the root itself) and "dir_path" (absolute Path).
DirectoryRecord = dict[str, Any]

HandlerResult = Mapping[str, Any] | None

Handler = Callable[[Path, DirectoryRecord], HandlerResult | Awaitable[HandlerResult]]


@dataclass(frozen=True)
class HandlerEntry:
    """A glob pattern and the handler that runs for files matching it."""

    pattern: str
    handler: Handler

    def matches(self, name: str) -> bool:
        """Check if a file basename matches this entry's pattern."""
        return fnmatch.fnmatch(name, self.pattern)


def new_record(rel_dir: str, dir_path: Path) -> DirectoryRecord:
    """Create the bare record for a directory seen for the first time."""
    return {"dir": rel_dir, "dir_path": dir_path}
