"""Append-only destinations for rendered log lines."""

import threading
from pathlib import Path
from typing import Protocol

from ormlog.exceptions import LogWriteError


class AppendSink(Protocol):
    """Something that appends bytes to a named resource, creating it if absent."""

    def append(self, path: Path, data: bytes) -> None: ...


class FileAppendSink:
    """Append to a file on disk, opening and closing it on every call.

    The file is created when missing; parent directories are not.
    """

    def append(self, path: Path, data: bytes) -> None:
        try:
            with open(path, "ab") as handle:
                handle.write(data)
        except OSError as exc:
            raise LogWriteError(path, exc.strerror or str(exc)) from exc


class MemoryAppendSink:
    """Keep appended bytes in memory, in call order.

    Thread-safe: ``append()`` records into a list protected by a lock.
    """

    def __init__(self) -> None:
        self._writes: list[tuple[Path, bytes]] = []
        self._lock = threading.Lock()

    def append(self, path: Path, data: bytes) -> None:
        with self._lock:
            self._writes.append((path, data))

    @property
    def writes(self) -> list[tuple[Path, bytes]]:
        with self._lock:
            return self._writes[:]

    def read(self, path: Path) -> bytes:
        """Return everything appended to ``path``."""
        with self._lock:
            return b"".join(data for target, data in self._writes if target == path)

    def clear(self) -> None:
        with self._lock:
            self._writes.clear()
