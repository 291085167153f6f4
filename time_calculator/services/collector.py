"""Input collection: read time lines from files, stdin or a prompt.

File I/O is isolated here to keep the CLI/test flows clean and mockable.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, List

from .errors import InputReadError


logger = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    """Return the lines of the UTF-8 text file at ``path``.

    ``"-"`` reads from standard input. Raises ``InputReadError`` on failure.
    """
    source = '<stdin>' if path == '-' else path
    logger.info("Reading lines from %s", source)
    try:
        if path == '-':
            lines = sys.stdin.read().splitlines()
        else:
            with open(path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        logger.debug("Read %d line(s) from %s", len(lines), source)
        return lines
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", source, e)
        raise InputReadError(f"{source}: {e}") from e


def prompt_lines(prompt_fn: Callable[[str], str] = input,
                 prompt: str = "Time (empty line to finish): ") -> List[str]:
    """Collect lines interactively until an empty line or EOF.

    ``KeyboardInterrupt`` is left to the caller.
    """
    lines: List[str] = []
    while True:
        try:
            line = prompt_fn(prompt)
        except EOFError:
            break
        if not line.strip():
            break
        lines.append(line)
    return lines
