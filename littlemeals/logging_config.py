"""Logging setup (stdlib logging + structlog)."""

import logging
import sys
from typing import Optional

import structlog

from littlemeals.config import get_log_format, get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure logging for command line use.

    Library code never calls this; it only asks structlog for loggers.

    Args:
        level: Log level name (defaults to LITTLEMEALS_LOG_LEVEL)
        json: Render JSON lines instead of console output
            (defaults to LITTLEMEALS_LOG_FORMAT)
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if json is None:
        json = get_log_format() == "json"

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
