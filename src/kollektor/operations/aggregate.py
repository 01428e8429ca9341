"""Aggregation of handler results into per-directory records.

Both entry points share one step generator. It yields a ``HandlerCall``
whenever a handler has to run and expects the call's result to be sent
back, so the sync driver can call handlers directly while the async driver
awaits them.
"""

import asyncio
import inspect
import logging
from collections.abc import Generator
from collections.abc import Iterator
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kollektor.exceptions import HandlerError
from kollektor.files import discover_files
from kollektor.models import DirectoryRecord
from kollektor.models import HandlerEntry
from kollektor.models import new_record
from kollektor.operations.paths import normalize_cwd
from kollektor.operations.validate import validate_handlers

logger = logging.getLogger(__name__)


@dataclass
class HandlerCall:
    """A pending handler invocation for one matched file."""

    entry: HandlerEntry
    path: Path
    record: DirectoryRecord

    def invoke(self) -> Any:
        """Run the handler, returning its result or awaitable."""
        logger.debug("Running handler for %r on %s", self.entry.pattern, self.path)
        with handler_errors(self):
            return self.entry.handler(self.path, self.record)


@contextmanager
def handler_errors(call: HandlerCall) -> Iterator[None]:
    """Re-raise anything a handler raises as HandlerError."""
    try:
        yield
    except Exception as e:
        raise HandlerError(call.entry.pattern, call.path, repr(e)) from e


AggregateSteps = Generator[HandlerCall, Any, list[DirectoryRecord]]


def aggregate_steps(
    entries: list[HandlerEntry], paths: list[Path], cwd: Path
) -> AggregateSteps:
    """Walk handlers x paths, yielding each handler call that has to run.

    Handlers form the outer loop, so for one directory all results of an
    earlier pattern are merged before any of a later pattern.

    Args:
        entries: Handler entries in declaration order
        paths: Sorted absolute paths of matched files
        cwd: Absolute scan root the paths live under

    Returns:
        Records in the order their directory was first seen
    """
    records: dict[str, DirectoryRecord] = {}

    for entry in entries:
        for path in paths:
            dir_path = path.parent
            rel_dir = str(dir_path.relative_to(cwd))
            record = records.setdefault(rel_dir, new_record(rel_dir, dir_path))

            if not entry.matches(path.name):
                continue

            call = HandlerCall(entry=entry, path=path, record=record)
            result = yield call

            if result is None:
                continue
            if not isinstance(result, Mapping):
                raise HandlerError(
                    entry.pattern,
                    path,
                    f"returned {type(result).__name__}, expected a mapping or None",
                )
            record.update(result)

    return list(records.values())


def _prepare(
    handlers: Any, cwd: Path | str | None
) -> tuple[list[HandlerEntry], Path, list[str]]:
    """Validate handlers and resolve the scan root, before any filesystem access."""
    entries = validate_handlers(handlers)
    root = normalize_cwd(cwd)
    return entries, root, [entry.pattern for entry in entries]


def aggregate_sync(
    handlers: Mapping[str, Any] | None = None, cwd: Path | str | None = None
) -> list[DirectoryRecord]:
    """Aggregate handler results per directory, with synchronous handlers.

    Args:
        handlers: Mapping of glob pattern to handler, in the order the
            handlers should run
        cwd: Directory to scan. If None, uses the current working directory.

    Returns:
        One record per directory containing at least one matched file

    Raises:
        ConfigError: If handlers is invalid
        HandlerError: If a handler fails, returns a non-mapping, or returns an
            awaitable
        OSError: If the scan root cannot be walked
    """
    entries, root, patterns = _prepare(handlers, cwd)
    paths = discover_files(root, patterns)
    steps = aggregate_steps(entries, paths, root)
    try:
        call = next(steps)
        while True:
            result = call.invoke()
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise HandlerError(
                    call.entry.pattern,
                    call.path,
                    "returned an awaitable; use aggregate() for async handlers",
                )
            call = steps.send(result)
    except StopIteration as stop:
        records = stop.value
    finally:
        steps.close()

    logger.debug("Aggregated %d directory records", len(records))
    return records


async def aggregate(
    handlers: Mapping[str, Any] | None = None, cwd: Path | str | None = None
) -> list[DirectoryRecord]:
    """Aggregate handler results per directory, awaiting async handlers.

    Handlers may be plain functions or coroutine functions; they still run
    one at a time, each awaited before the next starts. The directory walk
    runs in a worker thread.

    Args:
        handlers: Mapping of glob pattern to handler, in the order the
            handlers should run
        cwd: Directory to scan. If None, uses the current working directory.

    Returns:
        One record per directory containing at least one matched file

    Raises:
        ConfigError: If handlers is invalid
        HandlerError: If a handler fails or returns a non-mapping
        OSError: If the scan root cannot be walked
    """
    entries, root, patterns = _prepare(handlers, cwd)
    # The walk blocks, so keep it off the event loop
    paths = await asyncio.to_thread(discover_files, root, patterns)
    steps = aggregate_steps(entries, paths, root)
    try:
        call = next(steps)
        while True:
            result = call.invoke()
            if inspect.isawaitable(result):
                with handler_errors(call):
                    result = await result
            call = steps.send(result)
    except StopIteration as stop:
        records = stop.value
    finally:
        steps.close()

    logger.debug("Aggregated %d directory records", len(records))
    return records
