"""Logger configuration variants and file logger options."""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel

from ormlog.constants import ALL_EVENTS_OPTION
from ormlog.enums import CategoryTag
from ormlog.exceptions import InvalidLoggerOptionsError

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class AllEvents:
    """Record every category, including schema, migration and leveled messages."""


@dataclass(frozen=True, slots=True)
class Enabled:
    """Boolean shortcut. ``True`` enables queries and query errors only."""

    value: bool


@dataclass(frozen=True, slots=True)
class Categories:
    """Record only the listed categories."""

    tags: frozenset[CategoryTag] = frozenset()

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags


LoggerConfiguration = AllEvents | Enabled | Categories


def _parse_tags(values: Iterable[object], raw: object) -> Categories:
    tags: set[CategoryTag] = set()
    for value in values:
        if isinstance(value, CategoryTag):
            tags.add(value)
            continue
        if not isinstance(value, str):
            raise InvalidLoggerOptionsError(raw, f"category tags must be strings, got {type(value).__name__}")
        try:
            tags.add(CategoryTag(value.strip().lower()))
        except ValueError:
            raise InvalidLoggerOptionsError(raw, f"unknown category {value!r}") from None
    return Categories(frozenset(tags))


def _parse_string(raw: str) -> LoggerConfiguration:
    value = raw.strip().lower()
    if value == ALL_EVENTS_OPTION:
        return AllEvents()
    if value in _TRUE_STRINGS:
        return Enabled(True)
    if value in _FALSE_STRINGS:
        return Enabled(False)
    return _parse_tags((part for part in value.split(",") if part.strip()), raw)


def parse_logger_options(raw: object) -> LoggerConfiguration:
    """Convert a dynamically shaped logger option into a configuration variant.

    Accepted shapes::

        None                      -> Enabled(False)
        True / False              -> Enabled(value)
        "all"                     -> AllEvents()
        ["query", "error"]        -> Categories({QUERY, ERROR})
        "query,warn"              -> Categories({QUERY, WARN})   # env style
        "true" / "false"          -> Enabled(...)                # env style

    Variants are returned unchanged.
    """
    if isinstance(raw, AllEvents | Enabled | Categories):
        return raw
    if raw is None:
        return Enabled(False)
    if isinstance(raw, bool):
        return Enabled(raw)
    if isinstance(raw, str):
        return _parse_string(raw)
    if isinstance(raw, Iterable) and not isinstance(raw, bytes | dict):
        return _parse_tags(raw, raw)
    raise InvalidLoggerOptionsError(raw, f"unsupported type {type(raw).__name__}")


class FileLoggerOptions(BaseModel):
    """Destination options for the file logger.

    ``log_path`` is read on every write, so reassigning it redirects the
    next event without rebuilding the logger.
    """

    log_path: str | None = None
