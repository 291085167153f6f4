"""
Core utilities and domain helpers for the Time Calculator.

This package hosts pure, side‑effect‑free logic kept out of the CLI and
the rendering layer so it can be tested in isolation.
"""

__all__ = [
    "TimeValue",
    "ParseError",
    "total_seconds",
    "seconds_to_time",
    "format_time",
    "clock_to_time",
    "clock_to_seconds",
    "csv_to_time",
    "csv_to_seconds",
    "parse_time",
    "parse_seconds",
    "FORMATS",
]

from .errors import ParseError
from .timeutils import TimeValue, total_seconds, seconds_to_time, format_time
from .parsing import (
    FORMATS,
    clock_to_time,
    clock_to_seconds,
    csv_to_time,
    csv_to_seconds,
    parse_time,
    parse_seconds,
)
