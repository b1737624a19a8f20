"""Logging configuration: JSON lines in production, plain text elsewhere."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from admin_dashboard.config import get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging() -> None:
    """Configure the root logger from settings."""
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if settings.ENVIRONMENT == "production":
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter(
            LOG_FORMAT,
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
        handler.setFormatter(formatter)
        logging.root.handlers = [handler]
        logging.root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
