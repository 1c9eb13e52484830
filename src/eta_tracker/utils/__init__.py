"""Shared utilities."""

from __future__ import annotations

from .logging import (
    PACKAGE_LOGGER_NAME,
    LogLevel,
    configure_logging,
    get_log_level,
    get_package_logger,
    set_log_level,
)

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "LogLevel",
    "configure_logging",
    "get_log_level",
    "get_package_logger",
    "set_log_level",
]
