"""Custom exceptions for kollektor."""

from pathlib import Path


class KollektorError(Exception):
    """Base exception for kollektor."""


class ConfigError(KollektorError, TypeError):
    """Call-time arguments are missing or malformed."""


class HandlerError(KollektorError):
    """A handler raised, failed while awaited, or returned the wrong shape."""

    def __init__(self, pattern: str, path: Path, reason: str):
        self.pattern = pattern
        self.path = path
        super().__init__(f'handler for "{pattern}" failed on {path}: {reason}')
