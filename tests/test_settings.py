"""Tests for LoggerSettings and building a FileLogger from them."""

from pathlib import Path

import pytest

from ormlog.enums import CategoryTag
from ormlog.logger import FileLogger
from ormlog.options import AllEvents, Categories, Enabled
from ormlog.paths import resolve_app_root, resolve_log_path
from ormlog.settings import LoggerSettings
from ormlog.sinks import MemoryAppendSink


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings default to logging disabled and the default file."""
    for name in ("ORM_LOGGING", "ORM_LOG_PATH", "APP_ROOT_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = LoggerSettings()
    assert settings.ORM_LOGGING == "false"
    assert settings.ORM_LOG_PATH == ""
    assert settings.APP_ROOT_PATH == ""


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORM_LOGGING", "query,warn")
    monkeypatch.setenv("ORM_LOG_PATH", "logs/db.log")
    monkeypatch.setenv("APP_ROOT_PATH", "/srv/app")

    settings = LoggerSettings()
    assert settings.ORM_LOGGING == "query,warn"
    assert settings.ORM_LOG_PATH == "logs/db.log"
    assert settings.APP_ROOT_PATH == "/srv/app"


def test_from_settings(tmp_path: Path) -> None:
    sink = MemoryAppendSink()
    settings = LoggerSettings(ORM_LOGGING="query,warn", ORM_LOG_PATH="db.log", APP_ROOT_PATH=str(tmp_path))

    event_logger = FileLogger.from_settings(settings, sink=sink)
    event_logger.record_query("SELECT 1")
    event_logger.record_level("info", "skipped")

    assert event_logger.configuration == Categories(frozenset({CategoryTag.QUERY, CategoryTag.WARN}))
    assert [path for path, _ in sink.writes] == [tmp_path / "db.log"]


@pytest.mark.parametrize(("value", "expected"), [("all", AllEvents()), ("true", Enabled(True)), ("", Enabled(False))])
def test_from_settings_shapes(value: str, expected: object) -> None:
    event_logger = FileLogger.from_settings(LoggerSettings(ORM_LOGGING=value))
    assert event_logger.configuration == expected


def test_from_settings_without_root_uses_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("APP_ROOT_PATH", raising=False)
    monkeypatch.chdir(tmp_path)

    event_logger = FileLogger.from_settings(LoggerSettings(ORM_LOGGING="true"))
    assert event_logger.log_path == tmp_path / "ormlogs.log"


def test_resolve_app_root_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APP_ROOT_PATH", str(tmp_path))
    assert resolve_app_root() == tmp_path


def test_resolve_app_root_defaults_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("APP_ROOT_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_app_root() == Path.cwd()


def test_resolve_log_path() -> None:
    root = Path("/srv/app")
    assert resolve_log_path(root) == root / "ormlogs.log"
    assert resolve_log_path(root, "") == root / "ormlogs.log"
    assert resolve_log_path(root, "logs/./db.log") == root / "logs" / "db.log"
    assert resolve_log_path(root, "/var/log/db.log") == root / "var" / "log" / "db.log"
