"""Pure time conversion helpers used across the CLI and services."""
from __future__ import annotations

from typing import NamedTuple


class TimeValue(NamedTuple):
    """Signed hours/minutes/seconds triple.

    Fields are not limited to clock ranges: ``TimeValue(2, 91, -60)`` is a
    valid value and totals the same as ``TimeValue(3, 30, 0)``.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0


def total_seconds(time: TimeValue) -> int:
    """Return the number of seconds represented by ``time``."""
    return time.seconds + time.minutes * 60 + time.hours * 3600


def seconds_to_time(total: int) -> TimeValue:
    """Decompose ``total`` seconds into hours, minutes and seconds.

    Uses floor division, so for negative totals the sign goes into
    ``hours`` and minutes/seconds stay in ``[0, 60)``:
    ``seconds_to_time(-1) == TimeValue(-1, 59, 59)``.
    """
    hours = total // 3600
    minutes = (total - hours * 3600) // 60
    seconds = total - hours * 3600 - minutes * 60
    return TimeValue(hours, minutes, seconds)


def format_time(time: TimeValue) -> str:
    """Format ``time`` as ``H:MM:SS``, normalizing out-of-range fields.

    Negative durations keep the sign in front: ``-0:00:01``.
    """
    total = total_seconds(time)
    sign = '-' if total < 0 else ''
    hours, minutes, seconds = seconds_to_time(abs(total))
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
