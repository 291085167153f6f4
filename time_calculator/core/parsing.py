"""Pure parsers for delimited clock strings.

Each parser expects exactly three integer tokens (hours, minutes,
seconds) and raises ``ParseError`` otherwise.
"""
from __future__ import annotations

from typing import Dict

from .errors import ParseError
from .timeutils import TimeValue, total_seconds


# Nome formato -> separatore
FORMATS: Dict[str, str] = {
    'clock': ':',
    'csv': ',',
}


def _split_time(text: str, delimiter: str) -> TimeValue:
    parts = text.split(delimiter)
    if len(parts) != 3:
        raise ParseError(text, delimiter, f"expected 3 fields, got {len(parts)}")
    try:
        hours, minutes, seconds = (int(p) for p in parts)
    except ValueError:
        raise ParseError(text, delimiter, "non-integer field") from None
    return TimeValue(hours, minutes, seconds)


def clock_to_time(text: str) -> TimeValue:
    """Parse ``"1:03:45"`` into ``TimeValue(1, 3, 45)``."""
    return _split_time(text, FORMATS['clock'])


def clock_to_seconds(text: str) -> int:
    return total_seconds(clock_to_time(text))


def csv_to_time(text: str) -> TimeValue:
    """Parse ``"1,3,45"`` into ``TimeValue(1, 3, 45)``."""
    return _split_time(text, FORMATS['csv'])


def csv_to_seconds(text: str) -> int:
    return total_seconds(csv_to_time(text))


def parse_time(text: str, fmt: str = 'clock') -> TimeValue:
    """Parse ``text`` using the named format (``'clock'`` or ``'csv'``).

    Raises ``ValueError`` for an unknown format name.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format: {fmt!r} (use one of {', '.join(FORMATS)})")
    return _split_time(text, FORMATS[fmt])


def parse_seconds(text: str, fmt: str = 'clock') -> int:
    return total_seconds(parse_time(text, fmt))
