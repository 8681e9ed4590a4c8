"""Event logger settings loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings


class LoggerSettings(BaseSettings):
    """File logger configuration."""

    # "all", "true"/"false", or comma-separated categories (query,error,schema,log,info,warn)
    ORM_LOGGING: str = "false"

    # Log file override, relative to the application root unless absolute
    ORM_LOG_PATH: str = ""

    # Application root; empty = current working directory
    APP_ROOT_PATH: str = ""

    model_config = {"env_prefix": ""}


@functools.lru_cache(maxsize=1)
def get_settings() -> LoggerSettings:
    """Return cached logger settings singleton."""
    return LoggerSettings()
