"""File-backed event logger for database-access events."""

from ormlog.engine_events import attach_engine_logger
from ormlog.enums import CategoryTag, EventKind, LogLevel
from ormlog.exceptions import (
    InvalidLoggerOptionsError,
    LogWriteError,
    OrmLogError,
    ParameterSerializationError,
)
from ormlog.logger import FileLogger, QueryLogger
from ormlog.options import (
    AllEvents,
    Categories,
    Enabled,
    FileLoggerOptions,
    LoggerConfiguration,
    parse_logger_options,
)
from ormlog.policy import should_record
from ormlog.settings import LoggerSettings, get_settings
from ormlog.sinks import AppendSink, FileAppendSink, MemoryAppendSink

__all__ = [
    # Logger
    "FileLogger",
    "QueryLogger",
    "attach_engine_logger",
    # Configuration
    "AllEvents",
    "Categories",
    "Enabled",
    "FileLoggerOptions",
    "LoggerConfiguration",
    "LoggerSettings",
    "get_settings",
    "parse_logger_options",
    "should_record",
    # Enums
    "CategoryTag",
    "EventKind",
    "LogLevel",
    # Sinks
    "AppendSink",
    "FileAppendSink",
    "MemoryAppendSink",
    # Exceptions
    "InvalidLoggerOptionsError",
    "LogWriteError",
    "OrmLogError",
    "ParameterSerializationError",
]
