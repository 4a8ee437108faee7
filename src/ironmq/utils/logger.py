"""
Module: logger.py
Description: Structured logging for the IronMQ client.

Loggers are structlog wrappers around standard library loggers under the
"ironmq" namespace. Importing the package leaves the global structlog
configuration and the host application's logging setup untouched; output
goes wherever the host routes the "ironmq" logger, and nowhere by default.

Key Components:
- JSON rendering with timestamp and level fields
- Level filtering through the standard library logger
- get_logger() helper function
- configure_logging() opt-in stream output

Dependencies: structlog, logging, datetime
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog

ROOT_LOGGER_NAME = "ironmq"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


_PROCESSORS = [
    # Drop events below the stdlib logger's effective level
    structlog.stdlib.filter_by_level,
    _add_timestamp,
    _add_log_level,
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def configure_logging(level: Optional[str] = None, stream=None) -> logging.Handler:
    """
    Opt in to JSON log lines from the client.

    Args:
        level: Minimum level name (defaults to settings.log_level)
        stream: Output stream (defaults to stdout)

    Returns:
        The handler attached to the "ironmq" logger
    """
    if level is None:
        from ironmq.config.settings import get_settings
        level = get_settings().log_level

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper())
    root.addHandler(handler)
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger bound to a standard library logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance that renders events as JSON

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Retrying request", status_code=503, retry=1)
        {"status_code": 503, "retry": 1, "event": "Retrying request", "timestamp": "...", "level": "WARNING"}
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
