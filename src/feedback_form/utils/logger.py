"""Structured logging for form interaction events."""

import logging
import json
from logging.handlers import RotatingFileHandler
from pathlib import Path

from feedback_form.config import Settings


class JsonFormatter(logging.Formatter):
    """Custom formatter that outputs logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with timestamp, level, component, event, and optional data
        """
        log_data = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "component": record.name,
            "event": record.getMessage(),
        }

        # Include extra data if provided
        if hasattr(record, 'data'):
            log_data['data'] = record.data

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_form_logger(name: str = "feedback_form.form") -> logging.Logger:
    """
    Set up structured logger for form events.

    Creates the log directory if it doesn't exist and attaches a rotating
    JSON file handler once per logger.

    Args:
        name: Logger name (default: feedback_form.form)

    Returns:
        Configured logger instance
    """
    log_dir = Path(Settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    handler = RotatingFileHandler(
        Settings.get_log_path(),
        maxBytes=Settings.LOG_MAX_BYTES,
        backupCount=Settings.LOG_BACKUP_COUNT,
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    return logger
