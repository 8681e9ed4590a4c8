"""Application root and log file path resolution."""

import os
from pathlib import Path

from ormlog.constants import APP_ROOT_PATH_ENV, DEFAULT_LOG_FILENAME


def resolve_app_root() -> Path:
    """Return ``$APP_ROOT_PATH`` when set, otherwise the current working directory."""
    root = os.environ.get(APP_ROOT_PATH_ENV, "")
    return Path(root) if root else Path.cwd()


def resolve_log_path(root: Path, log_path: str | None = None) -> Path:
    """Join the log path onto ``root``.

    The override always stays under ``root``: a leading separator is dropped,
    so ``/logs/db.log`` resolves to ``<root>/logs/db.log``.
    """
    if not log_path:
        return root / DEFAULT_LOG_FILENAME
    return root / os.path.normpath(log_path).lstrip("/\\")
