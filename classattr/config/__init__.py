"""
Settings schemas and YAML loading for hierarchies.

The loader lives in classattr.config.loader; it is not imported here because
it depends on classattr.hierarchy, which itself depends on these schemas.
"""

from .constants import DEFAULT_HIERARCHY_NAME, MAX_CONFIG_SIZE_BYTES
from .schemas import HierarchyDocument, LoggingSettings, Settings, TypeSpec

__all__ = [
    "DEFAULT_HIERARCHY_NAME",
    "MAX_CONFIG_SIZE_BYTES",
    "HierarchyDocument",
    "LoggingSettings",
    "Settings",
    "TypeSpec",
]
