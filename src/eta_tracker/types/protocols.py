"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts for collaborators supplied by callers, without requiring
inheritance.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeSource(Protocol):
    """Protocol for timestamp providers consumed by the progress tracker.

    Implementations choose their own unit of time (milliseconds, seconds,
    ticks). The unit must stay consistent for the lifetime of a tracker,
    and values are expected to be non-decreasing in practice. The tracker
    performs no unit conversion and does not validate ordering.

    Example of a millisecond time source::

        import time

        class SystemTimer:
            def get_timestamp(self) -> int:
                return time.monotonic_ns() // 1_000_000
    """

    def get_timestamp(self) -> int:
        """Return the current time.

        Returns:
            Current timestamp as a non-negative integer in the
            implementation's chosen unit
        """
        ...
