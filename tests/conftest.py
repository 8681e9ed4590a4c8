"""Shared test configuration and fixtures for event logger tests."""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

from ormlog.logger import FileLogger
from ormlog.options import FileLoggerOptions
from ormlog.sinks import MemoryAppendSink

FIXED_MOMENT = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=UTC)


@pytest.fixture
def memory_sink() -> MemoryAppendSink:
    return MemoryAppendSink()


@pytest.fixture
def make_logger(tmp_path: Path, memory_sink: MemoryAppendSink) -> Callable[..., FileLogger]:
    """Build a FileLogger rooted at ``tmp_path`` that writes to ``memory_sink``."""

    def _make(options: object = None, file_options: FileLoggerOptions | None = None) -> FileLogger:
        return FileLogger(
            options,
            file_options,
            sink=memory_sink,
            root_resolver=lambda: tmp_path,
            clock=lambda: FIXED_MOMENT,
        )

    return _make
