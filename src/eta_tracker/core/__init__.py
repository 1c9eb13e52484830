"""Progress tracking core: the tracker and its pure calculation functions."""

from __future__ import annotations

from .calculation import (
    calculate_progress,
    calculate_remaining_time,
    calculate_speed,
    ieee_divide,
)
from .tracker import ProgressTracker

__all__ = [
    "ProgressTracker",
    "calculate_progress",
    "calculate_remaining_time",
    "calculate_speed",
    "ieee_divide",
]
