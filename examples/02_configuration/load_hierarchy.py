#!/usr/bin/env python3
"""
Loading a type hierarchy from YAML.

This example demonstrates:
- Building a Hierarchy from widgets.yaml with load_hierarchy()
- Reading effective values per type
- Overriding a value on one instance (auto_promote is enabled in the file)

Usage:
    python load_hierarchy.py [path/to/hierarchy.yaml]
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from classattr import ConfigError, load_hierarchy
from classattr.log import LoggerFactory


def main(path: pathlib.Path) -> int:
    lg = LoggerFactory.create("/example", "info")
    try:
        hierarchy = load_hierarchy(path, lg=lg)
    except ConfigError as e:
        lg.error("cannot load hierarchy", extra={"exception": e, "path": path})
        return 1

    for node in hierarchy:
        lg.info(node.path, extra=hierarchy.effective(node))

    toggle = hierarchy.instance("ToggleButton", label="toggle")
    hierarchy.set_override(toggle, "enabled", True)
    lg.info(
        "override",
        extra={
            "instance": hierarchy.get(toggle, "enabled"),
            "type": hierarchy.get("ToggleButton", "enabled"),
        },
    )
    return 0


if __name__ == "__main__":
    default = pathlib.Path(__file__).with_name("widgets.yaml")
    sys.exit(main(pathlib.Path(sys.argv[1]) if len(sys.argv) > 1 else default))
