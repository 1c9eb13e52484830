"""Type definitions and protocols for eta-tracker.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
"""

from eta_tracker.types.models import (
    ProgressSnapshot,
    Sample,
)
from eta_tracker.types.protocols import (
    TimeSource,
)

__all__ = [
    # Data models
    "ProgressSnapshot",
    "Sample",
    # Protocols
    "TimeSource",
]
