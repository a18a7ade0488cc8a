"""
Utility functions shared by the declaration and resolution modules.
"""

import keyword
from typing import Any

from .exceptions import ValidationError


def check_name(name: Any, **context: Any) -> str:
    """
    Validate an attribute name.

    Args:
        name: Candidate attribute name
        **context: Extra context attached to the error (e.g. node=...)

    Returns:
        str: The validated name

    Raises:
        ValidationError: If name is not a non-keyword Python identifier
    """
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise ValidationError("invalid attribute name", attribute=repr(name), **context)
    return name
