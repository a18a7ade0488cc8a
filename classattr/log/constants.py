"""
Constants for the logging layer.
"""

import logging


class LogConstants:
    """Constants for the logging layer."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Column at which extra fields start
    DEFAULT_RULE_WIDTH: int = 70

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Library loggers live under this name
    ROOT_NAME: str = "classattr"

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": CUSTOM_LEVELS["TRACE"],
        "false": False,  # Special value to disable all logging
    }
