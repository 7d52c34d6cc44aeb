"""
Exceptions raised by termlog.

Both concrete errors also derive from the builtin exception a caller would
naturally catch for the same mistake (AttributeError for a bad style name,
KeyError for a bad logger name), so existing `except` clauses keep working.
"""


class TermlogError(Exception):
    """
    Base exception for termlog errors.

    - message: human-friendly description of the problem
    - name: the offending identifier (style or logger name), when there is one
    """

    def __init__(self, message: str, *, name: str | None = None):
        super().__init__(message)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return self.message


class UnknownStyleError(TermlogError, AttributeError):
    """Raised when a style chain references a color or modifier that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown style {name!r}", name=name)


class UnknownLoggerError(TermlogError, KeyError):
    """Raised when a semantic logger is looked up by a name that is not in the table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown semantic logger {name!r}", name=name)


__all__ = [
    "TermlogError",
    "UnknownStyleError",
    "UnknownLoggerError",
]
