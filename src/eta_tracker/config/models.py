"""Configuration models for the progress tracker."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from eta_tracker.config.exceptions import ConfigError, ConfigValidationError
from eta_tracker.utils.logging import LogLevel

# Sample window used by the reference algorithm
DEFAULT_WINDOW_SIZE = 10
MIN_WINDOW_SIZE = 1
MAX_WINDOW_SIZE = 1000


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=False,
    )


class TrackerConfig(BaseConfig):
    """Configuration for a progress tracker."""

    window_size: int = Field(
        default=DEFAULT_WINDOW_SIZE,
        ge=MIN_WINDOW_SIZE,
        le=MAX_WINDOW_SIZE,
        description="Maximum number of samples kept for speed smoothing",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level applied to the eta_tracker logger",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        return LogLevel.parse(v).name

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> TrackerConfig:
        """Build a validated configuration from a plain mapping.

        Args:
            data: Configuration values keyed by field name

        Returns:
            Validated TrackerConfig

        Raises:
            ConfigError: If data cannot be read as a mapping
            ConfigValidationError: If any value fails validation
        """
        try:
            values = dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Tracker configuration must be a mapping, got {type(data).__name__}",
                context={"input_type": type(data).__name__},
            ) from e

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigValidationError(
                e, limits={"window_size": (MIN_WINDOW_SIZE, MAX_WINDOW_SIZE)}
            ) from e
