"""Time calculator: pure hours/minutes/seconds conversions with a thin CLI."""

__version__ = "0.1.0"
