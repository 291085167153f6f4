"""Exceptions raised by the pure core."""


class ParseError(ValueError):
    """Raised when a delimited time string is not three integer tokens."""

    def __init__(self, text: str, delimiter: str, reason: str = ""):
        message = f"Cannot parse {text!r} as h{delimiter}m{delimiter}s"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text
        self.delimiter = delimiter
        self.reason = reason
