"""
Centralized error handling for the job board.

Three kinds of failure reach a caller:
    - field validation errors, reported per field on creation
    - domain-rule errors (salary range, deadline window, description length),
      reported as a single message where the first violation wins
    - store errors, reported as a generic failure with a message
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class FieldError:
    """
    A single failed field rule on a submitted job posting.

    Serialized in the same shape the REST API has always returned
    (type/value/msg/path/location) so existing clients keep working.
    """

    path: str  # e.g., "jobTitle", "minSalary"
    msg: str
    value: Any = None
    location: str = "body"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": "field",
            "value": self.value,
            "msg": self.msg,
            "path": self.path,
            "location": self.location,
        }


class JobBoardError(Exception):
    """Base class for all job board errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FieldValidationError(JobBoardError):
    """One or more fields failed validation. Carries every failure."""

    def __init__(self, errors: List[FieldError]):
        super().__init__(f"{len(errors)} field(s) failed validation")
        self.errors = errors

    def to_dict(self) -> dict:
        return {"errors": [e.to_dict() for e in self.errors]}


class DomainRuleError(JobBoardError):
    """A cross-field business rule was violated."""


class StoreError(JobBoardError):
    """The document store rejected or failed an operation."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


def log_on_exception(
    logger: logging.Logger,
    operation: str,
    level: int = logging.WARNING,
    include_traceback: bool = False,
):
    """
    Context manager for logging exceptions without swallowing them.

    Usage:
        with log_on_exception(logger, "MongoDB insert", level=logging.ERROR, include_traceback=True):
            collection.insert_one(...)

    Args:
        logger: Logger instance to use
        operation: Operation description for the log message
        level: Log level (default: WARNING)
        include_traceback: Whether to include stack trace in log
    """

    class ExceptionLogger:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None:
                logger.log(level, f"[{operation}] Failed: {exc_val}", exc_info=include_traceback)
            # Return False to not suppress the exception
            return False

    return ExceptionLogger()
