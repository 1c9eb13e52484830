"""Progress tracker producing smoothed speed and remaining-time estimates."""

from __future__ import annotations

import logging
from collections import deque
from typing import Generic, TypeVar

from eta_tracker.config.models import TrackerConfig
from eta_tracker.core.calculation import (
    calculate_progress,
    calculate_remaining_time,
    calculate_speed,
)
from eta_tracker.types.models import ProgressSnapshot, Sample
from eta_tracker.types.protocols import TimeSource
from eta_tracker.utils.logging import configure_logging

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TimeSource)


class ProgressTracker(Generic[T]):
    """Tracks the progress of one operation and estimates its completion.

    The tracker keeps a bounded window of recent samples and averages the
    speed each sample implies relative to the first report. Time is read
    from a caller-supplied time source, and every derived value is
    expressed in that source's unit.

    Call ``update`` periodically from the loop doing the work; read
    ``current_speed`` and ``remaining_time`` whenever an estimate is needed.

    A new sample is only stored when its progress delta (relative to the
    first report) differs from the absolute progress of the last stored
    sample. This compares unlike quantities whenever the first report was
    not at zero progress; the rule is kept as is so estimates stay
    reproducible against existing consumers.

    Example:
        >>> from eta_tracker import ManualTimer
        >>> timer = ManualTimer()
        >>> tracker = ProgressTracker(timer)
        >>> for step in range(10):
        ...     timer.set_timestamp(step * 10)
        ...     tracker.update(step * 10, 100)
        >>> tracker.current_speed()
        1.0
        >>> tracker.remaining_time()
        10
    """

    _time_source: T
    _samples: deque[Sample]
    _first_timestamp: int | None
    _first_progress: float | None
    _current_progress: float
    _current_speed: float

    def __init__(self, time_source: T, config: TrackerConfig | None = None) -> None:
        """Initialize the tracker.

        Args:
            time_source: Provider of timestamps in a caller-chosen unit
            config: Optional tuning; defaults to a 10-sample window

        Raises:
            TypeError: If time_source does not provide ``get_timestamp``
        """
        if not isinstance(time_source, TimeSource):
            raise TypeError(
                f"time_source must provide get_timestamp(), got {type(time_source).__name__}"
            )

        config = config or TrackerConfig()

        self._time_source = time_source
        self._samples = deque(maxlen=config.window_size)
        self._first_timestamp = None
        self._first_progress = None
        self._current_progress = 0.0
        self._current_speed = 0.0

    @classmethod
    def from_config(cls, time_source: T, config: TrackerConfig) -> ProgressTracker[T]:
        """Create a tracker and apply the configured log level.

        Args:
            time_source: Provider of timestamps
            config: Validated tracker configuration

        Returns:
            New ProgressTracker
        """
        configure_logging(config)
        return cls(time_source, config)

    def update(self, cur_prog: int, max_prog: int) -> None:
        """Report the current progress of the operation.

        The operation is considered complete when ``cur_prog`` reaches
        ``max_prog``. Neither value is validated: ``max_prog == 0`` yields
        a non-finite progress which ``remaining_time`` reports as 0.

        Args:
            cur_prog: Current progress value
            max_prog: Progress value meaning 100%
        """
        if self._first_timestamp is None:
            self._first_timestamp = self._time_source.get_timestamp()
            logger.debug(f"First timestamp captured: {self._first_timestamp}")

        self._update_history(cur_prog, max_prog)
        self._current_speed = self.calc_speed()

    def _update_history(self, cur_prog: int, max_prog: int) -> None:
        """Record a sample unless progress has not moved since the last one."""
        progress = calculate_progress(cur_prog, max_prog)
        self._current_progress = progress

        if self._first_progress is None:
            self._first_progress = progress
            logger.debug(f"First progress captured: {progress}%")

        timestamp = self._time_source.get_timestamp()

        last_progress = self._samples[-1].progress if self._samples else 0.0
        if last_progress == progress - self._first_progress:
            logger.debug(f"Skipping duplicate sample at {timestamp} ({progress}%)")
            return

        if len(self._samples) == self._samples.maxlen:
            evicted = self._samples[0]
            logger.debug(f"Evicting oldest sample at {evicted.timestamp}")

        self._samples.append(Sample(timestamp=timestamp, progress=progress))

    def calc_speed(self) -> float:
        """Calculate the speed implied by the current sample window.

        The value reads as ``x`` percent for every unit of time returned
        by the time source.

        Returns:
            Mean speed over the window, or 0.0 before any sample is stored
        """
        if not self._samples:
            return 0.0

        # A stored sample implies both first values were captured
        return calculate_speed(
            self._samples,
            first_timestamp=self._first_timestamp or 0,
            first_progress=self._first_progress or 0.0,
        )

    def current_speed(self) -> float:
        """Return the speed computed by the most recent update."""
        return self._current_speed

    def remaining_time(self) -> int:
        """Return the estimated remaining time in the time source's unit.

        Returns:
            Remaining time, or 0 before the first update and whenever the
            estimate is negative or not finite
        """
        if self._first_timestamp is None or self._first_progress is None:
            return 0

        return calculate_remaining_time(
            current_progress=self._current_progress,
            first_progress=self._first_progress,
            speed=self._current_speed,
        )

    def snapshot(self) -> ProgressSnapshot:
        """Capture the tracker's derived values at this instant."""
        return ProgressSnapshot(
            progress=self._current_progress,
            speed=self._current_speed,
            remaining_time=self.remaining_time(),
            sample_count=len(self._samples),
        )

    @property
    def time_source(self) -> T:
        """The time source passed to the constructor.

        The object itself is returned, so it can be reconfigured in place.
        """
        return self._time_source

    @property
    def current_progress(self) -> float:
        """Progress percentage computed by the most recent update."""
        return self._current_progress

    @property
    def first_timestamp(self) -> int | None:
        return self._first_timestamp

    @property
    def first_progress(self) -> float | None:
        return self._first_progress

    @property
    def is_initialized(self) -> bool:
        """Whether at least one update has been reported."""
        return self._first_timestamp is not None

    @property
    def samples(self) -> tuple[Sample, ...]:
        """Stored samples, oldest first."""
        return tuple(self._samples)

    @property
    def sample_count(self) -> int:
        return len(self._samples)

    @property
    def window_size(self) -> int:
        """Maximum number of samples kept."""
        # maxlen is always set by __init__
        return self._samples.maxlen or 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(progress={self._current_progress}, "
            f"speed={self._current_speed}, samples={len(self._samples)})"
        )
