"""Exceptions raised by the event logger."""

from pathlib import Path


class OrmLogError(Exception):
    """Base exception for event logger errors."""


class InvalidLoggerOptionsError(OrmLogError, ValueError):
    """Logger configuration has an unknown shape or category tag."""

    def __init__(self, value: object, detail: str = "") -> None:
        self.value = value
        self.detail = detail
        msg = f"Invalid logger options: {value!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class ParameterSerializationError(OrmLogError):
    """Query parameters could not be encoded as JSON.

    Recovered by the formatter, which falls back to the raw parameter
    representation. Never reaches the caller of a logging operation.
    """


class LogWriteError(OrmLogError):
    """Appending to the log file failed.

    Propagates to the caller of the logging operation. The underlying
    ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        msg = f"Failed to append to log file {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
