"""
Formatter rendering extra fields as [key:value] after the message.
"""

import logging

from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_extra(record: logging.LogRecord) -> str:
    """Format extra fields, sorted by key."""
    extra = getattr(record, EXTRA_ATTR, None)
    if not extra:
        return ""

    parts = []
    for key in sorted(extra):
        value = extra[key]
        if key == "exception" and isinstance(value, Exception):
            parts.append(f"[{key}:{value.__class__.__name__}]")
        else:
            parts.append(f"[{key}:{value}]")
    return " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Plain-text formatter: timestamp, level initial, message, padded extra
    fields, then the logger name.
    """

    def __init__(self, rule_width: int = LogConstants.DEFAULT_RULE_WIDTH) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._rule_width = rule_width

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = _format_extra(record)
        if extra:
            line += " " * max(1, self._rule_width - len(line)) + extra
        return f"{line} [{record.name}]"
