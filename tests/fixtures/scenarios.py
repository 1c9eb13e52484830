"""Progress report sequences shared by tracker tests."""

from __future__ import annotations

from collections.abc import Sequence

from eta_tracker.core.tracker import ProgressTracker
from eta_tracker.timers import ManualTimer


def run_linear_scenario(timer: ManualTimer, tracker: ProgressTracker[ManualTimer]) -> None:
    """Report 0, 10, ..., 90 out of 100 at t = 0, 10, ..., 90."""
    for step in range(10):
        timer.set_timestamp(step * 10)
        tracker.update(step * 10, 100)


def replay(
    tracker: ProgressTracker[ManualTimer],
    reports: Sequence[tuple[int, int, int]],
) -> None:
    """Feed ``(timestamp, cur_prog, max_prog)`` reports into a tracker."""
    for timestamp, cur_prog, max_prog in reports:
        tracker.time_source.set_timestamp(timestamp)
        tracker.update(cur_prog, max_prog)
