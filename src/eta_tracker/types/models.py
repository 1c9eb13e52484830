"""Data models for eta-tracker.

This module defines immutable dataclasses used by the progress tracker
and the pure calculation functions.
"""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Sample:
    """Immutable progress sample.

    Pairs a timestamp read from the time source with the progress
    percentage computed for the same update.
    """

    timestamp: int
    progress: float  # Percentage, not clamped


@dataclass(slots=True, frozen=True)
class ProgressSnapshot:
    """Point-in-time view of a tracker's derived values."""

    progress: float
    speed: float  # Percent per time unit
    remaining_time: int
    sample_count: int
