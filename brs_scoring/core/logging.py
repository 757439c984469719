"""
Logging Setup - BRS Scoring Engine
brs_scoring/core/logging.py

Configures structlog once per process. Library modules only call
structlog.get_logger(__name__); entry points call configure_logging().
Rendered events are handed to the standard library logger of the same name,
which writes to stderr.
"""

import logging
import sys
from typing import Optional

import structlog

from brs_scoring.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Wire structlog processors and renderer from LOG_LEVEL / LOG_FORMAT."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
