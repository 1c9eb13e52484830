"""ETA Tracker - smoothed speed and remaining-time estimates for long operations.

This package tracks the progress of a single operation from periodic
progress reports and a caller-supplied time source, and derives a
sliding-window speed estimate and a remaining-time estimate from it.
"""

import logging

from eta_tracker.config import TrackerConfig
from eta_tracker.core import ProgressTracker
from eta_tracker.timers import CallableTimer, ManualTimer
from eta_tracker.types import ProgressSnapshot, Sample, TimeSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CallableTimer",
    "ManualTimer",
    "ProgressSnapshot",
    "ProgressTracker",
    "Sample",
    "TimeSource",
    "TrackerConfig",
]
