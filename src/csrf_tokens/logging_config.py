"""Logging configuration for the csrf_tokens package."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from csrf_tokens.config import TokenConfig, get_config

PACKAGE_LOGGER = "csrf_tokens"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Token event fields
        if hasattr(record, "event_type"):
            log_data["event_type"] = record.event_type
        if hasattr(record, "token_type"):
            log_data["token_type"] = record.token_type
        if hasattr(record, "reason"):
            log_data["reason"] = record.reason

        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(
    config: Optional[TokenConfig] = None, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the previous handler.

    Args:
        config: Token configuration (defaults to ``get_config()``)
        stream: Output stream (defaults to stderr)

    Returns:
        Configured package logger
    """
    config = config or get_config()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    logger.addHandler(handler)

    return logger
