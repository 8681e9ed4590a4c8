"""File-backed event logger for database-access events."""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol, Self

from ormlog.enums import EventKind, LogLevel
from ormlog.formatting import (
    FAILED_QUERY_TAG,
    QUERY_ERROR_TAG,
    QUERY_TAG,
    level_tag,
    query_with_parameters,
    render_lines,
    slow_query_tag,
)
from ormlog.options import FileLoggerOptions, LoggerConfiguration, parse_logger_options
from ormlog.paths import resolve_app_root, resolve_log_path
from ormlog.policy import should_record
from ormlog.settings import LoggerSettings, get_settings
from ormlog.sinks import AppendSink, FileAppendSink

logger = logging.getLogger(__name__)


class QueryLogger(Protocol):
    """Logger abstraction consumed by the data-access layer.

    ``query_runner`` is the execution context the event came from. It is
    accepted for interface compatibility and may be ignored.
    """

    def record_query(self, query: str, parameters: Sequence[Any] | None = None, query_runner: Any = None) -> None: ...

    def record_query_error(
        self,
        error: str | BaseException,
        query: str,
        parameters: Sequence[Any] | None = None,
        query_runner: Any = None,
    ) -> None: ...

    def record_slow_query(
        self,
        elapsed_ms: float,
        query: str,
        parameters: Sequence[Any] | None = None,
        query_runner: Any = None,
    ) -> None: ...

    def record_schema_build(self, message: str, query_runner: Any = None) -> None: ...

    def record_migration(self, message: str, query_runner: Any = None) -> None: ...

    def record_level(self, level: LogLevel | str, message: Any, query_runner: Any = None) -> None: ...


class FileLogger:
    """Records events as timestamped lines appended to ``ormlogs.log``.

    Usage::

        event_logger = FileLogger(["query", "error"], FileLoggerOptions(log_path="logs/db.log"))
        event_logger.record_query("SELECT 1", [42, "x"])

    Each logical event is rendered into one block and handed to the sink in
    a single ``append`` call. Slow queries and migrations are always
    recorded; everything else goes through :func:`ormlog.policy.should_record`.

    File-system failures surface as :class:`ormlog.exceptions.LogWriteError`
    and propagate to the caller.
    """

    def __init__(
        self,
        options: object = None,
        file_options: FileLoggerOptions | None = None,
        *,
        sink: AppendSink | None = None,
        root_resolver: Callable[[], Path] = resolve_app_root,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._configuration: LoggerConfiguration = parse_logger_options(options)
        self._file_options = file_options or FileLoggerOptions()
        self._sink: AppendSink = sink or FileAppendSink()
        self._root_resolver = root_resolver
        self._clock = clock or (lambda: datetime.now(UTC))

    @classmethod
    def from_settings(cls, settings: LoggerSettings | None = None, *, sink: AppendSink | None = None) -> Self:
        """Create a FileLogger from environment-backed settings."""
        settings = settings or get_settings()
        root_resolver = resolve_app_root
        if settings.APP_ROOT_PATH:
            root = Path(settings.APP_ROOT_PATH)
            root_resolver = lambda: root  # noqa: E731
        return cls(
            settings.ORM_LOGGING,
            FileLoggerOptions(log_path=settings.ORM_LOG_PATH or None),
            sink=sink,
            root_resolver=root_resolver,
        )

    @property
    def configuration(self) -> LoggerConfiguration:
        return self._configuration

    @property
    def file_options(self) -> FileLoggerOptions:
        return self._file_options

    @property
    def log_path(self) -> Path:
        """Destination for the next write. Resolved fresh on every access."""
        return resolve_log_path(self._root_resolver(), self._file_options.log_path)

    # --- Events ---

    def record_query(self, query: str, parameters: Sequence[Any] | None = None, query_runner: Any = None) -> None:
        """Record an executed query and its parameters."""
        if should_record(EventKind.QUERY, self._configuration):
            self.write(QUERY_TAG + query_with_parameters(query, parameters))

    def record_query_error(
        self,
        error: str | BaseException,
        query: str,
        parameters: Sequence[Any] | None = None,
        query_runner: Any = None,
    ) -> None:
        """Record a failed query as two lines: the query, then the error."""
        if should_record(EventKind.QUERY_ERROR, self._configuration):
            self.write(
                [
                    FAILED_QUERY_TAG + query_with_parameters(query, parameters),
                    QUERY_ERROR_TAG + str(error),
                ]
            )

    def record_slow_query(
        self,
        elapsed_ms: float,
        query: str,
        parameters: Sequence[Any] | None = None,
        query_runner: Any = None,
    ) -> None:
        """Record a query that exceeded the execution time limit."""
        self.write(slow_query_tag(elapsed_ms) + query_with_parameters(query, parameters))

    def record_schema_build(self, message: str, query_runner: Any = None) -> None:
        """Record a schema build step."""
        if should_record(EventKind.SCHEMA_BUILD, self._configuration):
            self.write(message)

    def record_migration(self, message: str, query_runner: Any = None) -> None:
        """Record a migration step."""
        self.write(message)

    def record_level(self, level: LogLevel | str, message: Any, query_runner: Any = None) -> None:
        """Record a leveled message. Unknown levels are ignored."""
        try:
            level = LogLevel(level)
        except ValueError:
            logger.debug("Ignoring message with unknown level %r", level)
            return
        if should_record(EventKind.for_level(level), self._configuration):
            self.write(level_tag(level) + str(message))

    log = record_level

    # --- Output ---

    def write(self, messages: str | Sequence[str]) -> None:
        """Append one logical event (one or more lines) to the log file."""
        if isinstance(messages, str):
            messages = [messages]
        data = render_lines(messages, self._clock())
        self._sink.append(self.log_path, data)
