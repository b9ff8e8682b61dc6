"""
Structured JSON logging configuration.
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from typing import Any, Optional
from uuid import uuid4

from mutstd.config.settings import Settings, get_settings

# Context variable for catalog load tracking
load_id_ctx: ContextVar[Optional[str]] = ContextVar("load_id", default=None)

# Attributes every LogRecord carries; anything else came in via `extra`.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent schema.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add load ID if available
        load_id = load_id_ctx.get()
        if load_id:
            log_data["load_id"] = load_id

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_"):
                log_data[key] = value

        log_data["file"] = record.pathname
        log_data["line"] = record.lineno
        log_data["function"] = record.funcName

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Use JSON format (True) or plain text (False)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_logs:
        formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure application logging from settings.

    Args:
        settings: Settings instance (defaults to global settings)
    """
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger with given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_load_id(load_id: Optional[str] = None) -> str:
    """
    Set catalog load ID for current context.

    Args:
        load_id: Load ID (generates UUID if None)

    Returns:
        Load ID that was set
    """
    if load_id is None:
        load_id = str(uuid4())
    load_id_ctx.set(load_id)
    return load_id


def log_performance(logger: logging.Logger, operation: str, start_time: float) -> None:
    """
    Log duration of an operation.

    Args:
        logger: Logger instance
        operation: Operation name
        start_time: Start timestamp from time.perf_counter()
    """
    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{operation} completed",
        extra={
            "operation": operation,
            "duration_ms": round(duration_ms, 2),
        },
    )
