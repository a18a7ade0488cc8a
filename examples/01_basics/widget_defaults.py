#!/usr/bin/env python3
"""
Inherited defaults and instance overrides on plain Python classes.

This example demonstrates:
- Declaring an attribute with class_attribute() and a default
- Shadowing the default in one subclass without touching its siblings
- Promoting one object and giving it a private override

Usage:
    python widget_defaults.py
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from classattr import AttributeState, class_attribute, default_registry
from classattr.binding import promote, set_class_default
from classattr.log import LoggerFactory


class Widget:
    enabled = class_attribute(default=True)


class Button(Widget):
    pass


class Label(Widget):
    pass


def main() -> None:
    lg = LoggerFactory.create("/example", "info")

    set_class_default(Button, "enabled", False)
    lg.info("class values", extra={"widget": Widget.enabled, "button": Button.enabled})
    lg.info("sibling unaffected", extra={"label": Label.enabled})

    special, plain = Button(), Button()
    promote(special)
    special.enabled = True
    state, _ = default_registry.state_of(special, "enabled")
    lg.info(
        "instance values",
        extra={
            "special": special.enabled,
            "plain": plain.enabled,
            "state": state.value,
        },
    )
    assert state is AttributeState.INSTANCE_OVERRIDE


if __name__ == "__main__":
    main()
