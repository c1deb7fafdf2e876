"""Settings and logging setup for regua."""

import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HANDLER_NAME = "regua"


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"
    format: str = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"


class TopologySettings(BaseSettings):
    """
    Settings applied to newly created projects.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables (REGUA_DEFAULT_PROJECT_NAME, REGUA_LOGGING__LEVEL, ...)
    3. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="REGUA_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    default_project_name: str = Field(
        "New Project",
        min_length=1,
        description="Name given to projects created without one.",
    )
    name_start_index: int = Field(
        1,
        ge=0,
        description="First number tried when generating names like 'Line 1'.",
    )

    logging: LoggingSettings = LoggingSettings()


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> TopologySettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    return TopologySettings(**overrides)


def configure_logging(settings: TopologySettings | None = None) -> logging.Logger:
    """Attach a stream handler to the ``regua`` logger.

    The library itself never calls this; applications embedding regua may.

    Args:
        settings: Settings to apply. Defaults to ``get_settings()``.

    Returns:
        The configured ``regua`` logger.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("regua")
    logger.setLevel(settings.logging.level)

    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.logging.format))

    return logger
