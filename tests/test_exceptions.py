"""Tests for kollektor exceptions."""

from pathlib import Path

from kollektor.exceptions import ConfigError
from kollektor.exceptions import HandlerError
from kollektor.exceptions import KollektorError


class TestHandlerError:
    """Tests for HandlerError."""

    def test_formats_message_with_pattern_and_path(self):
        """Test that the message names the pattern, the file and the reason."""
        error = HandlerError("*.json", Path("/project/data.json"), "boom")

        assert str(error) == 'handler for "*.json" failed on /project/data.json: boom'
        assert error.pattern == "*.json"
        assert error.path == Path("/project/data.json")

    def test_is_kollektor_error(self):
        """Test that HandlerError shares the package base class."""
        assert isinstance(HandlerError("a", Path("/a"), "b"), KollektorError)


class TestConfigError:
    """Tests for ConfigError."""

    def test_is_kollektor_and_type_error(self):
        """Test that ConfigError is both a KollektorError and a TypeError."""
        error = ConfigError("Missing handlers option")

        assert isinstance(error, KollektorError)
        assert isinstance(error, TypeError)
