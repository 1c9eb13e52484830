"""Pure calculation functions for progress tracking and ETA estimation.

This module provides stateless, side-effect-free functions for calculating:
- Progress percentage from a current and a maximum progress counter
- Smoothed speed from a window of progress samples
- Remaining time from the current speed and remaining percentage

Degenerate inputs never raise. Division follows IEEE-754 semantics, so a
zero divisor yields ``inf`` or ``nan`` instead of ``ZeroDivisionError``,
and callers absorb those values through ordinary comparisons.
"""

import math
from collections.abc import Iterable

from eta_tracker.types.models import Sample


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats the way IEEE-754 hardware does.

    Python raises ``ZeroDivisionError`` for ``x / 0.0``; this helper
    returns the IEEE result instead.

    Args:
        numerator: Dividend
        denominator: Divisor, may be zero or signed zero

    Returns:
        ``numerator / denominator``, or ``±inf``/``nan`` for a zero divisor

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(5.0, 0.0)
        inf
        >>> ieee_divide(-5.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def calculate_progress(cur_prog: int, max_prog: int) -> float:
    """Calculate progress percentage from progress counters.

    Args:
        cur_prog: Current progress value in caller-defined units
        max_prog: Value at which the operation is complete

    Returns:
        ``cur_prog * 100 / max_prog``. The result is not clamped, so
        ``cur_prog > max_prog`` gives values above 100.

    Edge cases:
        - ``max_prog == 0`` with ``cur_prog > 0`` returns ``inf``
        - ``max_prog == 0`` with ``cur_prog == 0`` returns ``nan``

    Examples:
        >>> calculate_progress(25, 100)
        25.0
        >>> calculate_progress(150, 100)
        150.0
        >>> calculate_progress(50, 0)
        inf
    """
    return ieee_divide(float(cur_prog) * 100.0, float(max_prog))


def calculate_speed(
    samples: Iterable[Sample],
    *,
    first_timestamp: int,
    first_progress: float,
) -> float:
    """Calculate the smoothed speed over a window of samples.

    Each sample contributes its progress gained since the first report
    divided by the time elapsed since the first report. The result is the
    simple (unweighted) mean of those per-sample speeds.

    Args:
        samples: Window of samples ordered oldest to newest
        first_timestamp: Timestamp captured on the first update
        first_progress: Progress percentage captured on the first update

    Returns:
        Mean speed in percent per time unit, or 0.0 for an empty window

    Edge cases:
        - A sample taken at ``first_timestamp`` divides by 1 instead of 0,
          so it contributes its raw progress delta
        - ``nan``/``inf`` progress values propagate into the result

    Examples:
        >>> window = [Sample(10, 10.0), Sample(20, 20.0)]
        >>> calculate_speed(window, first_timestamp=0, first_progress=0.0)
        1.0
    """
    speed_sum = 0.0
    count = 0

    for sample in samples:
        elapsed = sample.timestamp - first_timestamp
        delta = sample.progress - first_progress
        speed_sum += delta / (elapsed if elapsed != 0 else 1)
        count += 1

    if count == 0:
        return 0.0

    return speed_sum / count


def calculate_remaining_time(
    *,
    current_progress: float,
    first_progress: float,
    speed: float,
) -> int:
    """Estimate the time remaining until the operation completes.

    Args:
        current_progress: Most recent progress percentage
        first_progress: Progress percentage captured on the first update
        speed: Smoothed speed in percent per time unit

    Returns:
        Remaining time truncated toward zero, in the time source's unit.
        Returns 0 whenever the estimate is negative, ``nan`` or ``inf``.

    Examples:
        >>> calculate_remaining_time(current_progress=90.0, first_progress=0.0, speed=1.0)
        10
        >>> calculate_remaining_time(current_progress=50.0, first_progress=0.0, speed=-1.0)
        0
        >>> calculate_remaining_time(current_progress=50.0, first_progress=0.0, speed=0.0)
        0
    """
    remaining_pct = 100.0 - (current_progress - first_progress)
    eta = ieee_divide(remaining_pct, speed)

    # nan fails both comparisons; inf has no integer value
    if 0.0 <= eta < math.inf:
        return int(eta)
    return 0
