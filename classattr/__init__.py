from importlib.metadata import PackageNotFoundError, version

from .binding import ClassRegistry, class_attribute, default_registry
from .config import HierarchyDocument, LoggingSettings, Settings, TypeSpec
from .config.loader import (
    build_hierarchy,
    load_document,
    load_hierarchy,
    parse_document,
    parse_hierarchy,
)
from .declarator import (
    AttributeState,
    InstanceAccessor,
    TypeAccessor,
    accessor,
    declare,
    declare_many,
    get_default,
    get_value,
    set_default,
    set_override,
    state_of,
)
from .exceptions import (
    ClassAttrError,
    ConfigError,
    InvalidPromotionError,
    NotDeclaredError,
    ValidationError,
)
from .hierarchy import Hierarchy
from .instance import Instance, OverrideLayer
from .lock import NullLock, RWLock
from .node import TypeNode
from .resolver import Resolver, resolve

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("classattr")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Type hierarchy
    "TypeNode",
    "Resolver",
    "resolve",
    "Hierarchy",
    # Instances
    "Instance",
    "OverrideLayer",
    # Declaration
    "declare",
    "declare_many",
    "accessor",
    "TypeAccessor",
    "InstanceAccessor",
    "get_default",
    "set_default",
    "get_value",
    "set_override",
    "state_of",
    "AttributeState",
    # Python classes
    "ClassRegistry",
    "class_attribute",
    "default_registry",
    # Configuration
    "Settings",
    "LoggingSettings",
    "TypeSpec",
    "HierarchyDocument",
    "load_document",
    "parse_document",
    "build_hierarchy",
    "load_hierarchy",
    "parse_hierarchy",
    # Locks
    "RWLock",
    "NullLock",
    # Exceptions
    "ClassAttrError",
    "NotDeclaredError",
    "InvalidPromotionError",
    "ValidationError",
    "ConfigError",
]
