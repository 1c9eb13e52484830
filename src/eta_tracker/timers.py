"""Time source implementations.

``ManualTimer`` is the deterministic test double: it returns whatever value
was last set. ``CallableTimer`` adapts a plain function to the TimeSource
protocol for callers who already have a clock function.
"""

from __future__ import annotations

from collections.abc import Callable


class ManualTimer:
    """Time source returning a value set by the caller.

    Lets tests and simulations drive time passage explicitly.
    """

    __slots__ = ("_timestamp",)

    def __init__(self, initial: int = 0) -> None:
        """Initialize the timer.

        Args:
            initial: Value returned until the timestamp is changed
        """
        self._timestamp: int = initial

    def get_timestamp(self) -> int:
        """Return the value set by ``set_timestamp`` or ``advance``."""
        return self._timestamp

    def set_timestamp(self, value: int) -> None:
        """Set the value returned by ``get_timestamp``."""
        self._timestamp = value

    def advance(self, delta: int) -> int:
        """Move the timestamp forward.

        Args:
            delta: Amount of time units to add

        Returns:
            The new timestamp
        """
        self._timestamp += delta
        return self._timestamp

    def __repr__(self) -> str:
        return f"ManualTimer(timestamp={self._timestamp})"


class CallableTimer:
    """Time source backed by a zero-argument function."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], int]) -> None:
        if not callable(func):
            raise TypeError(f"func must be callable, got {type(func).__name__}")
        self._func: Callable[[], int] = func

    def get_timestamp(self) -> int:
        return self._func()
