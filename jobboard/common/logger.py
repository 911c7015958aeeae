"""
Centralized logging configuration for the job board.

Provides request-scoped logging with a request_id prefix for easy debugging.
"""

import logging
import sys
from typing import Optional


class RequestLogger:
    """
    Logger wrapper that tags every message with the request it belongs to.
    """

    def __init__(self, name: str, request_id: Optional[str] = None):
        """
        Initialize request logger.

        Args:
            name: Logger name (usually __name__)
            request_id: Optional request identifier for correlation
        """
        self.logger = logging.getLogger(name)
        self.request_id = request_id

    @property
    def level(self) -> int:
        """Get current logging level."""
        return self.logger.level

    def _format_message(self, message: str) -> str:
        """Add contextual prefix to message."""
        if self.request_id:
            return f"[req:{self.request_id[:8]}] {message}"
        return message

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message."""
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with traceback."""
        self.logger.exception(self._format_message(message), **kwargs)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log format ("simple" or "json")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if format == "json":
        # JSON format for production (parseable by log aggregators)
        formatter = logging.Formatter(
            '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, request_id: Optional[str] = None) -> RequestLogger:
    """
    Get a request logger instance.

    Args:
        name: Logger name (usually __name__)
        request_id: Optional request identifier

    Returns:
        RequestLogger instance
    """
    return RequestLogger(name, request_id)
