"""Tests for handler validation."""

import pytest

from kollektor.exceptions import ConfigError
from kollektor.models import HandlerEntry
from kollektor.operations import validate_handlers


def noop(path, data):
    return None


class TestValidateHandlers:
    """Tests for validate_handlers()."""

    def test_missing_handlers(self):
        """Test that None is reported as missing."""
        with pytest.raises(ConfigError, match="Missing handlers option"):
            validate_handlers(None)

    @pytest.mark.parametrize("handlers", ["here are my handlers", [noop], 42])
    def test_handlers_not_a_mapping(self, handlers):
        """Test that non-mapping values are rejected."""
        with pytest.raises(ConfigError, match="handlers option must be an object"):
            validate_handlers(handlers)

    def test_empty_handlers(self):
        """Test that an empty mapping is rejected."""
        with pytest.raises(
            ConfigError, match="handlers option must contain at least one handler"
        ):
            validate_handlers({})

    def test_non_callable_handler(self):
        """Test that the first non-callable handler is named."""
        with pytest.raises(ConfigError, match='handler for "b" is not a function'):
            validate_handlers({"a": noop, "b": "nope", "c": 1})

    def test_config_error_is_type_error(self):
        """Test that ConfigError can be caught as TypeError."""
        with pytest.raises(TypeError):
            validate_handlers({})

    def test_returns_entries_in_insertion_order(self):
        """Test that entries follow declaration order, not alphabetical order."""
        entries = validate_handlers({"data.json": noop, "config.yml": noop})

        assert entries == [
            HandlerEntry(pattern="data.json", handler=noop),
            HandlerEntry(pattern="config.yml", handler=noop),
        ]

    def test_non_string_pattern(self):
        """Test that a pattern that is not a string is rejected."""
        with pytest.raises(ConfigError, match="handler pattern 1 is not a string"):
            validate_handlers({1: noop})
