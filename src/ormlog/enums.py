"""Enums for event categories, log levels, and event kinds."""

import enum


class CategoryTag(enum.StrEnum):
    """Categories that may be enabled in a logger configuration."""

    QUERY = "query"
    ERROR = "error"
    SCHEMA = "schema"
    LOG = "log"
    INFO = "info"
    WARN = "warn"


class LogLevel(enum.StrEnum):
    """Levels accepted by the generic leveled log operation."""

    LOG = "log"
    INFO = "info"
    WARN = "warn"


class EventKind(enum.StrEnum):
    """Kinds of event a logger can be asked to record."""

    QUERY = "query"
    QUERY_ERROR = "query_error"
    SLOW_QUERY = "slow_query"
    SCHEMA_BUILD = "schema_build"
    MIGRATION = "migration"
    LOG = "log"
    INFO = "info"
    WARN = "warn"

    @classmethod
    def for_level(cls, level: LogLevel) -> "EventKind":
        return cls(level.value)
