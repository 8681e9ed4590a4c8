"""Filtering policy: which event kinds are recorded under which configuration."""

from ormlog.enums import CategoryTag, EventKind
from ormlog.options import AllEvents, Categories, Enabled, LoggerConfiguration

# Always recorded, whatever the configuration.
UNCONDITIONAL_KINDS: frozenset[EventKind] = frozenset({EventKind.SLOW_QUERY, EventKind.MIGRATION})

# Enabled by the boolean shortcut ``Enabled(True)``.
BOOLEAN_ENABLED_KINDS: frozenset[EventKind] = frozenset({EventKind.QUERY, EventKind.QUERY_ERROR})

_KIND_TAGS: dict[EventKind, CategoryTag] = {
    EventKind.QUERY: CategoryTag.QUERY,
    EventKind.QUERY_ERROR: CategoryTag.ERROR,
    EventKind.SCHEMA_BUILD: CategoryTag.SCHEMA,
    EventKind.LOG: CategoryTag.LOG,
    EventKind.INFO: CategoryTag.INFO,
    EventKind.WARN: CategoryTag.WARN,
}


def should_record(kind: EventKind, configuration: LoggerConfiguration) -> bool:
    """Return whether an event of ``kind`` is recorded under ``configuration``."""
    if kind in UNCONDITIONAL_KINDS:
        return True
    match configuration:
        case AllEvents():
            return True
        case Enabled(value=value):
            return value and kind in BOOLEAN_ENABLED_KINDS
        case Categories(tags=tags):
            return _KIND_TAGS[kind] in tags
    return False
