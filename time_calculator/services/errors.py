"""Custom exceptions for service layer operations."""


class InputReadError(Exception):
    """Raised when reading time lines from a file or stdin fails."""


class ConfigError(Exception):
    """Raised when loading or parsing the YAML configuration fails."""


class RenderError(Exception):
    """Raised when rendering or saving the result card fails."""
