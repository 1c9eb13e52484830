"""Configuration models and error types."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigValidationError,
)
from .models import (
    DEFAULT_WINDOW_SIZE,
    MAX_WINDOW_SIZE,
    MIN_WINDOW_SIZE,
    BaseConfig,
    TrackerConfig,
)

__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "MAX_WINDOW_SIZE",
    "MIN_WINDOW_SIZE",
    "BaseConfig",
    "ConfigError",
    "ConfigValidationError",
    "TrackerConfig",
]
