"""
Factory for creating library and console loggers.
"""

import logging
import sys
import threading
from typing import IO, Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError
from .formatters import LogFormatter
from .logger import Logger


def resolve_level(s: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        s: Log level as string name, numeric value, or False to disable logging

    Returns:
        Union[int, bool]: Numeric log level or False to disable logging

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(s, bool):
        return s
    if isinstance(s, int):
        return s
    if s.isnumeric():
        return int(s)
    if s.lower() in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[s.lower()]
    raise InvalidLogLevelError(s)


class LoggerFactory:
    """Factory for creating and caching loggers."""

    _lock = threading.Lock()
    _loggers: dict[str, Logger] = {}

    @staticmethod
    def get(name: str, **extra: Any) -> Logger:
        """
        Get a handler-less library logger.

        The logger is not registered with the logging manager: its parent is
        the standard "classattr" logger, so records propagate to whatever
        handlers the application configured there or on the root logger.

        Args:
            name: Logger name (the "classattr." prefix is added if missing)
            **extra: Pre-populated extra fields (only used on first creation)

        Returns:
            Logger: Cached logger for name
        """
        root = LogConstants.ROOT_NAME
        if name != root and not name.startswith(root + "."):
            name = f"{root}.{name}"
        with LoggerFactory._lock:
            lg = LoggerFactory._loggers.get(name)
            if lg is None:
                lg = Logger(name, extra=extra)
                lg.parent = logging.getLogger(root)
                LoggerFactory._loggers[name] = lg
            return lg

    @staticmethod
    def create(
        name: str, level: str | int | bool = "info", stream: IO[str] | None = None
    ) -> Logger:
        """
        Create a standalone logger writing to a console stream.

        Args:
            name: Logger name
            level: Log level, or False to disable output
            stream: Output stream (stdout by default)

        Returns:
            Logger: Logger with its own handler and propagation disabled

        Example:
            >>> lg = LoggerFactory.create("/app", "debug")
            >>> lg.debug("declared attribute", extra={"attribute": "enabled"})
            [12:34:56,789] [D] declared attribute     [attribute:enabled] [/app]
        """
        resolved = resolve_level(level)
        lg = Logger(name)
        if resolved is False:
            lg.disabled = True
        else:
            lg.setLevel(logging.DEBUG if resolved is True else resolved)
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(LogFormatter())
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root
        return lg

    @staticmethod
    def configure(level: str | int | bool) -> None:
        """Set the level of the library's parent logger."""
        resolved = resolve_level(level)
        root = logging.getLogger(LogConstants.ROOT_NAME)
        if resolved is False:
            root.disabled = True
        else:
            root.disabled = False
            root.setLevel(logging.DEBUG if resolved is True else resolved)
