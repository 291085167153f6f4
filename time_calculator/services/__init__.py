"""Service layer modules (file I/O and line accumulation).

The accumulator folds many lines through the pure core; the collector
isolates reading input so CLI and tests can supply lines directly.
"""

__all__ = [
    "accumulator",
    "collector",
    "errors",
]
