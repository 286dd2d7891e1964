"""Logging configuration for the API process."""

import json
import logging
import sys
from datetime import datetime, timezone

from seo_metadata.config import Settings


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    One JSON object per line so log shippers can pick out the level
    without parsing free text.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(settings: Settings) -> None:
    """Route root and package loggers to stdout."""
    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )
        )

    level = logging.DEBUG if settings.debug else settings.log_level.upper()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()  # Remove default stderr handlers
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    app_logger = logging.getLogger("seo_metadata")
    app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(level)
    app_logger.propagate = False
