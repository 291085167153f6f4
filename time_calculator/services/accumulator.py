"""Line accumulation: fold many time expressions into one total.

Each non-blank line is converted through the pure core and summed with
integer addition, so line order does not affect the result.
"""
from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Tuple

from time_calculator.core import ParseError, TimeValue, parse_seconds, seconds_to_time


logger = logging.getLogger(__name__)


class SkippedLine(NamedTuple):
    line_number: int
    text: str
    reason: str


class AccumulationResult(NamedTuple):
    total_seconds: int
    time: TimeValue
    lines: int
    skipped: Tuple[SkippedLine, ...] = ()


def accumulate(lines: Iterable[str], fmt: str = 'clock', skip_invalid: bool = False) -> AccumulationResult:
    """Sum the time expressions in ``lines`` and return the total.

    Blank lines are ignored. A malformed line raises ``ParseError`` unless
    ``skip_invalid`` is set, in which case it is recorded in
    ``AccumulationResult.skipped`` and the fold continues.
    """
    total = 0
    counted = 0
    skipped = []
    for line_number, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue
        try:
            seconds = parse_seconds(line, fmt)
        except ParseError as e:
            if not skip_invalid:
                raise
            logger.warning("Skipping line %d (%r): %s", line_number, line, e.reason)
            skipped.append(SkippedLine(line_number, line, e.reason))
            continue
        logger.debug("Line %d: %r -> %d s", line_number, line, seconds)
        total += seconds
        counted += 1

    logger.info("Accumulated %d line(s) into %d s (%d skipped)", counted, total, len(skipped))
    return AccumulationResult(total, seconds_to_time(total), counted, tuple(skipped))


def accumulate_text(text: str, fmt: str = 'clock', skip_invalid: bool = False) -> AccumulationResult:
    """Like ``accumulate`` over the lines of a newline-separated string."""
    return accumulate(text.splitlines(), fmt=fmt, skip_invalid=skip_invalid)
