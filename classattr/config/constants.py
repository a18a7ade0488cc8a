"""
Configuration-related constants and resource limits.
"""

# Maximum hierarchy document size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

# Name of a hierarchy created without an explicit name
DEFAULT_HIERARCHY_NAME = "default"
