"""Log level management for the eta_tracker logger hierarchy."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from eta_tracker.config.models import TrackerConfig

PACKAGE_LOGGER_NAME: Final[str] = "eta_tracker"


class LogLevel(Enum):
    """Standard log levels accepted by the tracker configuration."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: str | int) -> LogLevel:
        """Parse a level name (case-insensitive) or an exact numeric level.

        Raises:
            ValueError: If value names no standard level
        """
        if isinstance(value, int):
            for level in cls:
                if level.value == value:
                    return level
        else:
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise ValueError(f"Invalid log level: {value!r}")

    @classmethod
    def nearest(cls, value: int) -> LogLevel:
        """Map any numeric level, including custom ones, onto a standard level.

        Returns the most severe standard level not above ``value``; values
        below DEBUG map to DEBUG.

        Examples:
            >>> LogLevel.nearest(25)
            <LogLevel.INFO: 20>
            >>> LogLevel.nearest(5)
            <LogLevel.DEBUG: 10>
        """
        result = cls.DEBUG
        for level in cls:
            if level.value <= value:
                result = level
        return result


def get_package_logger() -> logging.Logger:
    """Return the root logger of the eta_tracker hierarchy."""
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def set_log_level(level: LogLevel | str, logger_name: str = PACKAGE_LOGGER_NAME) -> None:
    """Set the level of a logger in the eta_tracker hierarchy.

    Child loggers keep NOTSET so they inherit the new level.

    Args:
        level: Level to apply, as enum or case-insensitive name
        logger_name: Logger to configure (defaults to the package logger)

    Raises:
        ValueError: If level is a string that names no log level
    """
    if isinstance(level, str):
        level = LogLevel.parse(level)
    logging.getLogger(logger_name).setLevel(level.value)


def get_log_level(logger_name: str = PACKAGE_LOGGER_NAME) -> LogLevel:
    """Return the effective level of a logger as a LogLevel.

    Custom numeric levels are reported as the nearest standard level below them.
    """
    return LogLevel.nearest(logging.getLogger(logger_name).getEffectiveLevel())


def configure_logging(config: TrackerConfig) -> None:
    """Apply the log level from a tracker configuration.

    Args:
        config: Validated tracker configuration
    """
    set_log_level(config.log_level)
