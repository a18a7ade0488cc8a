"""
Unified exception hierarchy for attribute declaration and resolution.

Every error raised by this package derives from ClassAttrError, so callers can
catch all of them with a single except clause. Each error carries the offending
node/instance and attribute name in its context.
"""

from typing import Any


class ClassAttrError(Exception):
    """
    Base exception for all classattr errors.

    Example:
        try:
            accessor.set(True)
        except ClassAttrError as e:
            lg.error("attribute write failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class NotDeclaredError(ClassAttrError, AttributeError):
    """
    Attribute name was never declared on the relevant chain.

    Raised when resolving, setting, or overriding a name that no node on the
    type's resolution chain (and no override layer of the instance) declared.
    Subclasses AttributeError so attribute-style lookups behave as expected.
    """

    def __init__(self, message: str, **context: Any) -> None:
        ClassAttrError.__init__(self, message, **context)


class InvalidPromotionError(ClassAttrError):
    """
    Instance override requested on an instance without an override layer.

    Examples:
        - set_override() on an unpromoted instance
        - reading an instance accessor that was never installed
    """

    pass


class ValidationError(ClassAttrError, ValueError):
    """
    Invalid argument passed to the declaration API.

    Examples:
        - Attribute name is not a valid identifier
        - Parent is not a TypeNode
        - Duplicate type name in a hierarchy
        - Class with multiple bases bound to a registry
    """

    def __init__(self, message: str, **context: Any) -> None:
        ClassAttrError.__init__(self, message, **context)


class ConfigError(ClassAttrError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Unknown parent type or parent cycle
        - Schema validation failed
    """

    pass
