"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from eta_tracker.core.tracker import ProgressTracker
from eta_tracker.timers import ManualTimer
from eta_tracker.utils.logging import PACKAGE_LOGGER_NAME


@pytest.fixture
def timer() -> ManualTimer:
    """Provide a manual time source starting at zero."""
    return ManualTimer()


@pytest.fixture
def tracker(timer: ManualTimer) -> ProgressTracker[ManualTimer]:
    """Provide a tracker driven by the ``timer`` fixture."""
    return ProgressTracker(timer)


@pytest.fixture
def restore_package_log_level() -> Generator[logging.Logger, None, None]:
    """Restore the package logger level after a test changes it."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original = logger.level
    try:
        yield logger
    finally:
        logger.setLevel(original)
