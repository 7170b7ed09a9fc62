"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from gridkit.config import (
    GridKitSettings,
    InputConfig,
    LoggingConfig,
    SearchConfig,
    get_default_settings,
)


class TestDefaults:
    """Tests for default settings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, GridKitSettings)
        assert settings.input.bordered is True
        assert settings.search.start_symbol == "S"
        assert settings.search.end_symbol == "E"
        assert settings.search.wall_symbol == "#"
        assert settings.search.climb is False
        assert settings.search.max_climb == 1
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_nested_override(self):
        settings = GridKitSettings(
            input=InputConfig(bordered=False),
            search=SearchConfig(climb=True, max_climb=3),
        )
        assert settings.input.bordered is False
        assert settings.search.max_climb == 3


class TestSearchConfig:
    """Tests for search option validation."""

    @pytest.mark.parametrize("value", [-1, 26])
    def test_max_climb_bounds(self, value):
        with pytest.raises(ValidationError):
            SearchConfig(max_climb=value)

    @pytest.mark.parametrize("field", ["start_symbol", "end_symbol", "wall_symbol"])
    def test_symbols_single_character(self, field):
        with pytest.raises(ValidationError, match="exactly one character"):
            SearchConfig(**{field: "ab"})
        with pytest.raises(ValidationError):
            SearchConfig(**{field: ""})


class TestLoggingConfig:
    """Tests for logging option validation."""

    def test_level_normalized(self):
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValidationError, match="unknown log level"):
            LoggingConfig(log_level="chatty")
