"""
Centralized logging configuration for the Product Catalog Service.

Provides a structured logger with:
- Console (coloured) or JSON output, selected by LOG_FORMAT
- Request IDs attached to every entry
- Free-form metadata dictionaries
- Exception capture on warning/error entries
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from catalog.core.config import config
from catalog.utils.request_id import get_request_id

# Attributes every LogRecord carries; everything else came in through `extra`
_RESERVED_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "exc_info",
    "exc_text", "stack_info", "taskName",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"

        metadata = getattr(record, "metadata", None)
        if metadata:
            line = f"{line} {json.dumps(metadata, default=str)}"

        return line


class StructuredLogger:
    """
    Logger wrapper that emits structured entries with request IDs and metadata.
    """

    def __init__(self, name: str = None):
        self.service_name = config.service_name
        self.environment = config.environment
        self._logger = logging.getLogger(name or config.service_name)
        self._setup_logging()

    def _setup_logging(self):
        """Configure the underlying logger with a single stdout handler"""
        level = getattr(logging, config.log_level.upper(), logging.INFO)

        self._logger.handlers.clear()
        self._logger.setLevel(level)
        self._logger.propagate = False

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        if config.log_format == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(ConsoleFormatter())

        self._logger.addHandler(handler)

    def _log(
        self,
        level: int,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, Exception]] = None,
    ):
        if error is not None:
            metadata = dict(metadata or {})
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        extra = {
            "environment": self.environment,
            "requestId": get_request_id(),
        }
        if metadata:
            extra["metadata"] = metadata

        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, metadata: Optional[Dict[str, Any]] = None):
        """Debug level logging"""
        self._log(logging.DEBUG, message, metadata)

    def info(self, message: str, metadata: Optional[Dict[str, Any]] = None):
        """Info level logging"""
        self._log(logging.INFO, message, metadata)

    def warning(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, Exception]] = None,
    ):
        """Warning level logging"""
        self._log(logging.WARNING, message, metadata, error)

    def error(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, Exception]] = None,
    ):
        """Error level logging"""
        self._log(logging.ERROR, message, metadata, error)

    def critical(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, Exception]] = None,
    ):
        """Critical level logging"""
        self._log(logging.CRITICAL, message, metadata, error)


# Create and export the logger instance
logger = StructuredLogger()
