"""Bridge SQLAlchemy engine events to a query logger."""

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Connection, Engine, ExceptionContext
from sqlalchemy.ext.asyncio import AsyncEngine

from ormlog.logger import QueryLogger

logger = logging.getLogger(__name__)

_START_TIMES_KEY = "ormlog_query_start"


def _as_parameter_list(parameters: Any) -> Sequence[Any] | None:
    """Normalise DBAPI parameters (tuple, dict, or executemany list) to a list."""
    if not parameters:
        return None
    if isinstance(parameters, dict):
        return [parameters]
    if isinstance(parameters, tuple):
        return list(parameters)
    if isinstance(parameters, list):
        return [list(item) if isinstance(item, tuple) else item for item in parameters]
    return [parameters]


def attach_engine_logger(
    engine: Engine | AsyncEngine,
    query_logger: QueryLogger,
    *,
    max_query_execution_time: float | None = None,
    timer: Callable[[], float] = time.perf_counter,
) -> Callable[[], None]:
    """Record statements executed on ``engine`` through ``query_logger``.

    Every statement is passed to ``record_query``. Statements taking longer
    than ``max_query_execution_time`` milliseconds are also passed to
    ``record_slow_query`` (``None`` or ``0`` disables the check); failures go
    to ``record_query_error``. The connection is handed over as the query
    runner. Timing starts after the query line is written.

    Returns a callable that removes the listeners again.
    """
    sync_engine = engine.sync_engine if isinstance(engine, AsyncEngine) else engine

    def before_cursor_execute(
        conn: Connection,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        # Elapsed time excludes the query log write.
        query_logger.record_query(statement, _as_parameter_list(parameters), conn)
        conn.info.setdefault(_START_TIMES_KEY, []).append(timer())

    def after_cursor_execute(
        conn: Connection,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        start_times = conn.info.get(_START_TIMES_KEY)
        if not start_times:
            return
        elapsed_ms = round((timer() - start_times.pop()) * 1000)
        if max_query_execution_time and elapsed_ms > max_query_execution_time:
            query_logger.record_slow_query(elapsed_ms, statement, _as_parameter_list(parameters), conn)

    def handle_error(exception_context: ExceptionContext) -> None:
        conn = exception_context.connection
        if conn is not None:
            start_times = conn.info.get(_START_TIMES_KEY)
            if start_times:
                start_times.pop()
        if exception_context.statement is None:
            return
        query_logger.record_query_error(
            exception_context.original_exception,
            exception_context.statement,
            _as_parameter_list(exception_context.parameters),
            conn,
        )

    listeners: list[tuple[str, Callable[..., None]]] = [
        ("before_cursor_execute", before_cursor_execute),
        ("after_cursor_execute", after_cursor_execute),
        ("handle_error", handle_error),
    ]
    for name, fn in listeners:
        event.listen(sync_engine, name, fn)
    logger.debug("Attached query logger to engine %s", sync_engine.url)

    def detach() -> None:
        for name, fn in listeners:
            if event.contains(sync_engine, name, fn):
                event.remove(sync_engine, name, fn)
        logger.debug("Detached query logger from engine %s", sync_engine.url)

    return detach
