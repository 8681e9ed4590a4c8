"""Line formatting for the event log file.

Every line is ``[<timestamp>]<tag>: <body>`` where the timestamp is ISO-8601
UTC with millisecond precision. Lines belonging to one event are joined with
CRLF and terminated with CRLF, ready for a single append.
"""

import json
import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import Any

from ormlog.constants import LINE_SEPARATOR, LOG_ENCODING, PARAMETERS_MARKER
from ormlog.enums import LogLevel
from ormlog.exceptions import ParameterSerializationError

logger = logging.getLogger(__name__)

QUERY_TAG = "[QUERY]: "
FAILED_QUERY_TAG = "[FAILED QUERY]: "
QUERY_ERROR_TAG = "[QUERY ERROR]: "


def slow_query_tag(elapsed_ms: float) -> str:
    return f"[SLOW QUERY: {elapsed_ms} ms]: "


def level_tag(level: LogLevel) -> str:
    return f"[{level.value.upper()}]: "


def _json_default(value: Any) -> Any:
    if isinstance(value, date | time):
        return value.isoformat()
    return str(value)


def serialize_params(parameters: Sequence[Any]) -> str:
    """Encode parameters as compact JSON, e.g. ``[42,"x"]``.

    Dates and times are written in ISO-8601, other non-JSON values with
    ``str()``. Non-finite floats are written as ``NaN``/``Infinity``.

    Raises:
        ParameterSerializationError: the structure cannot be encoded, most
            often because it references itself.
    """
    try:
        return json.dumps(list(parameters), separators=(",", ":"), ensure_ascii=False, default=_json_default)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ParameterSerializationError(str(exc)) from exc


def stringify_params(parameters: Sequence[Any]) -> str:
    """Serialize parameters, falling back to their raw ``repr`` on failure."""
    try:
        return serialize_params(parameters)
    except ParameterSerializationError as exc:
        logger.debug("Falling back to raw parameters: %s", exc)
        return repr(parameters)


def query_with_parameters(query: str, parameters: Sequence[Any] | None = None) -> str:
    """Append the parameter list to ``query`` when there is one."""
    if parameters:
        return query + PARAMETERS_MARKER + stringify_params(parameters)
    return query


def format_timestamp(moment: datetime) -> str:
    """Format as ``2024-05-01T12:00:00.123Z``. Naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def render_lines(messages: Sequence[str], moment: datetime) -> bytes:
    """Prefix each message with the timestamp and join into one CRLF-terminated block."""
    stamp = f"[{format_timestamp(moment)}]"
    text = LINE_SEPARATOR.join(stamp + message for message in messages) + LINE_SEPARATOR
    return text.encode(LOG_ENCODING)
