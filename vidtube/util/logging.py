"""Stdlib logging for libraries that do not emit logfire spans.

uvicorn, alembic and the maintenance scripts log through ``logging``;
application code uses logfire directly.
"""

import logging
import sys

from vidtube.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Library loggers that are noisy at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncio")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout at a level derived from the environment."""
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    # Request spans already come from logfire
    if settings.environment == "production":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("vidtube").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name``."""
    return logging.getLogger(name)
