"""Validation of the handler mapping."""

from collections.abc import Mapping
from typing import Any

from kollektor.exceptions import ConfigError
from kollektor.models import HandlerEntry


def validate_handlers(handlers: Any) -> list[HandlerEntry]:
    """Validate a pattern-to-handler mapping.

    Args:
        handlers: Mapping of glob pattern to handler callable

    Returns:
        HandlerEntry list in the mapping's insertion order

    Raises:
        ConfigError: If handlers is missing, not a mapping or empty, or has a
            pattern that is not a string or a handler that is not callable
    """
    if handlers is None:
        raise ConfigError("Missing handlers option")
    if not isinstance(handlers, Mapping):
        raise ConfigError("handlers option must be an object")
    if not handlers:
        raise ConfigError("handlers option must contain at least one handler")

    entries = []
    for pattern, handler in handlers.items():
        if not isinstance(pattern, str):
            raise ConfigError(f"handler pattern {pattern!r} is not a string")
        if not callable(handler):
            raise ConfigError(f'handler for "{pattern}" is not a function')
        entries.append(HandlerEntry(pattern=pattern, handler=handler))
    return entries
