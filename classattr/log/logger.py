"""
Logger class with a TRACE level and structured extra fields.
"""

import logging
from typing import Any

from .constants import LogConstants

EXTRA_ATTR = "__classattr__extra"


class Logger(logging.Logger):
    """
    Standard logger extended with:
    - trace() at the custom TRACE level
    - pre-populated extra fields merged into every record
    - derived child loggers that inherit those fields
    """

    def __init__(
        self,
        name: str,
        level: int = logging.NOTSET,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(name, level)
        self._extra = dict(extra or {})

    @property
    def extra(self) -> dict[str, Any]:
        """Fields attached to every record from this logger."""
        return dict(self._extra)

    def isEnabledFor(self, level: int) -> bool:
        """Check if enabled without the per-logger cache.

        Library loggers are not registered in the manager's loggerDict, so
        Manager._clear_cache() never reaches them and a cached answer would
        outlive a later level change on an ancestor.
        """
        if self.disabled or self.manager.disable >= level:
            return False
        return level >= self.getEffectiveLevel()

    def makeRecord(
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with pre-populated and per-call extra fields."""
        merged = dict(self._extra)
        if extra:
            merged.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        # Use setattr to avoid clashing with LogRecord attributes
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)

    def derive(self, suffix: str, **extra: Any) -> "Logger":
        """
        Create a child logger propagating to this one.

        Args:
            suffix: Appended to this logger's name with a dot
            **extra: Fields added on top of this logger's own fields

        Returns:
            Logger: Child logger with level NOTSET
        """
        merged = dict(self._extra)
        merged.update(extra)
        child = self.__class__(f"{self.name}.{suffix}", extra=merged)
        child.parent = self
        return child
