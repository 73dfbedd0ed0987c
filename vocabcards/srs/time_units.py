"""
Time unit helpers.

All timestamps are millisecond epoch integers. Intervals are in days.
"""

from __future__ import annotations
import math
import time


MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def minutes_to_ms(minutes: float) -> int:
    """Convert minutes to whole milliseconds."""
    return int(round(minutes * MS_PER_MINUTE))


def days_to_ms(days: float) -> int:
    """Convert (possibly fractional) days to whole milliseconds."""
    return int(round(days * MS_PER_DAY))


def now_ms() -> int:
    """
    Current wall-clock time in ms.

    For callers only; the scheduling engine and due queue always take `now`
    as an argument.
    """
    return int(time.time() * 1000)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _plural(count: int, unit: str) -> str:
    return f"in {count} {unit}{'' if count == 1 else 's'}"


def format_time_until(timestamp: int, now: int) -> str:
    """
    Human-readable time until `timestamp`.

    Examples: 'now', 'in 1 min', 'in 3 hours', 'in 2 days'.
    """
    diff = timestamp - now
    if diff <= 0:
        return "now"

    minutes = _round_half_up(diff / MS_PER_MINUTE)
    if minutes < 60:
        return _plural(minutes, "min")

    hours = _round_half_up(diff / MS_PER_HOUR)
    if hours < 24:
        return _plural(hours, "hour")

    days = _round_half_up(diff / MS_PER_DAY)
    return _plural(days, "day")
