"""Tests for tracker configuration models and error handling."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from eta_tracker.config.exceptions import (
    ConfigError,
    ConfigValidationError,
)
from eta_tracker.config.models import (
    DEFAULT_WINDOW_SIZE,
    MAX_WINDOW_SIZE,
    MIN_WINDOW_SIZE,
    TrackerConfig,
)


class TestTrackerConfig:
    """Test suite for TrackerConfig."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = TrackerConfig()
        assert config.window_size == DEFAULT_WINDOW_SIZE == 10
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self) -> None:
        """Test that log level names are case-insensitive and stripped."""
        config = TrackerConfig(log_level="  info ")
        assert config.log_level == "INFO"

    @pytest.mark.parametrize("window_size", [0, -1, 1001])
    def test_window_size_bounds(self, window_size: int) -> None:
        """Test that out-of-range window sizes are rejected."""
        with pytest.raises(ValidationError):
            _ = TrackerConfig(window_size=window_size)

    def test_invalid_log_level(self) -> None:
        """Test that unknown log level names are rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            _ = TrackerConfig(log_level="chatty")

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            _ = TrackerConfig.model_validate({"window": 5})

    def test_validate_assignment(self) -> None:
        """Test that assignments are validated."""
        config = TrackerConfig()
        with pytest.raises(ValidationError):
            config.window_size = 0


class TestFromMapping:
    """Test suite for TrackerConfig.from_mapping."""

    def test_valid_mapping(self) -> None:
        """Test building a configuration from a plain mapping."""
        config = TrackerConfig.from_mapping({"window_size": 25, "log_level": "error"})
        assert config.window_size == 25
        assert config.log_level == "ERROR"

    def test_invalid_mapping_raises_config_validation_error(self) -> None:
        """Test that validation failures are wrapped with field details."""
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = TrackerConfig.from_mapping({"window_size": 0})

        error = exc_info.value
        assert isinstance(error.pydantic_error, ValidationError)
        assert error.fields == ["window_size"]
        assert isinstance(error.__cause__, ValidationError)


class TestErrorHandling:
    """Test suite for configuration error types."""

    def test_config_error_context(self) -> None:
        """Test ConfigError carries message and context."""
        error = ConfigError("Test error", context={"field": "test"})
        assert str(error) == "Test error"
        assert error.context == {"field": "test"}
        assert ConfigError("No context").context == {}

    def test_validation_error_names_field_and_range(self) -> None:
        """Test that a rejected window size reports the accepted bounds."""
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = TrackerConfig.from_mapping({"window_size": 5000})

        error = exc_info.value
        assert error.fields == ["window_size"]
        assert error.context["window_size_range"] == (MIN_WINDOW_SIZE, MAX_WINDOW_SIZE)
        assert "window_size" in str(error)

    def test_validation_error_collects_every_field(self) -> None:
        """Test that several failing fields are all reported."""
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = TrackerConfig.from_mapping({"window_size": 0, "log_level": "loud"})

        error = exc_info.value
        assert error.fields == ["log_level", "window_size"]
        assert error.context["fields"] == ["log_level", "window_size"]
        assert "log_level_range" not in error.context
        assert "Invalid log level" in error.field_errors["log_level"]

    def test_non_mapping_input(self) -> None:
        """Test that input which is not a mapping raises a plain ConfigError."""
        with pytest.raises(ConfigError, match="must be a mapping") as exc_info:
            _ = TrackerConfig.from_mapping([1, 2])  # pyright: ignore[reportArgumentType]

        assert not isinstance(exc_info.value, ConfigValidationError)
        assert exc_info.value.context == {"input_type": "list"}
        assert isinstance(exc_info.value.__cause__, TypeError)
