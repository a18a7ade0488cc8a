"""
Exceptions for the logging layer.
"""

from typing import Any

from ..exceptions import ClassAttrError


class LoggingError(ClassAttrError):
    """Base exception for logging-related errors."""

    pass


class InvalidLogLevelError(LoggingError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}", level=level)
