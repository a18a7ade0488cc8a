"""
Logging layer built on the standard logging module.

Adds a TRACE level below DEBUG, structured extra fields rendered as
[key:value], and a factory for library and console loggers. Library loggers
carry no handlers of their own and propagate to the "classattr" logger.
"""

import logging

from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LoggingError
from .factory import LoggerFactory, resolve_level
from .formatters import LogFormatter
from .logger import Logger

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]
logging.addLevelName(TRACE, "TRACE")


def get_logger(name: str) -> Logger:
    """Shortcut for LoggerFactory.get()."""
    return LoggerFactory.get(name)


__all__ = [
    "TRACE",
    "InvalidLogLevelError",
    "LogConstants",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "LoggingError",
    "get_logger",
    "resolve_level",
]
