"""
Hierarchical attributes on ordinary Python classes.

ClassRegistry maps each Python class to a TypeNode along its single base
chain, and class_attribute is a data descriptor backed by that registry:

    class Widget:
        enabled = class_attribute(default=True)

    class Button(Widget):
        pass

    set_class_default(Button, "enabled", False)
    Widget.enabled          # True
    Button.enabled          # False

    b = Button()
    promote(b)
    b.enabled = True        # private to b
    Button().enabled        # False

Assigning to the class itself (Button.enabled = ...) replaces the descriptor;
use set_class_default() to change a class-level value.
"""

import threading
import weakref
from typing import Any, cast

from .config.schemas import Settings
from .declarator import AttributeState
from .exceptions import ValidationError
from .hierarchy import Hierarchy
from .instance import Instance, OverrideLayer
from .log import Logger
from .node import MISSING, TypeNode

class ClassRegistry:
    """
    Binds Python classes to type nodes of a private Hierarchy.

    Args:
        settings: Settings of the underlying hierarchy
        lg: Parent logger of the underlying hierarchy
    """

    def __init__(
        self, settings: Settings | None = None, lg: Logger | None = None
    ) -> None:
        self.hierarchy = Hierarchy("classes", settings, lg)
        self._nodes: dict[type, TypeNode] = {}
        # Keyed by id(); a finalizer drops the entry when the object dies
        self._instances: dict[int, Instance] = {}
        self._lock = threading.RLock()

    def node_for(self, cls: type) -> TypeNode:
        """
        Type node of a class, creating it and its ancestors on first use.

        Raises:
            ValidationError: If cls is not a class or has several bases
        """
        if not isinstance(cls, type):
            raise ValidationError("expected a class", target=repr(cls))
        with self._lock:
            node = self._nodes.get(cls)
            if node is not None:
                return node
            bases = [b for b in cls.__bases__ if b is not object]
            if len(bases) > 1:
                raise ValidationError(
                    "multiple inheritance is not supported",
                    cls=cls.__qualname__,
                    bases=", ".join(b.__qualname__ for b in bases),
                )
            parent = self.node_for(bases[0]) if bases else None
            base_name = name = f"{cls.__module__}.{cls.__qualname__}"
            # Distinct classes may share a qualified name (e.g. built in a loop)
            count = 1
            while name in self.hierarchy:
                count += 1
                name = f"{base_name}#{count}"
            node = self.hierarchy.define(name, parent)
            self._nodes[cls] = node
            return node

    def instance_for(self, obj: Any, create: bool = True) -> Instance | None:
        """
        Instance record of an object, kept by the registry.

        Records are not stored on the object, so copies of an object start
        without one and never share overrides with the original.

        Raises:
            ValidationError: If obj cannot be weakly referenced
        """
        key = id(obj)
        with self._lock:
            instance = self._instances.get(key)
            if instance is not None or not create:
                return instance
            try:
                weakref.finalize(obj, self._instances.pop, key, None)
            except TypeError as e:
                raise ValidationError(
                    "object cannot hold instance attributes",
                    target=type(obj).__qualname__,
                ) from e
            instance = self.hierarchy.instance(
                self.node_for(type(obj)), label=f"{type(obj).__qualname__}@{key:x}"
            )
            self._instances[key] = instance
            return instance

    def declare(self, cls: type, *names: str) -> list[Any]:
        """Declare names on a class."""
        return self.hierarchy.declare(self.node_for(cls), *names)

    def set_class_default(self, cls: type, name: str, value: Any) -> Any:
        """Set a class's own default for name."""
        return self.hierarchy.set_default(self.node_for(cls), name, value)

    def promote(self, obj: Any) -> OverrideLayer:
        """Give an object its own override layer."""
        instance = cast(Instance, self.instance_for(obj))
        return self.hierarchy.promote(instance)

    def is_promoted(self, obj: Any) -> bool:
        """Check whether an object has an override layer."""
        instance = self.instance_for(obj, create=False)
        return instance is not None and instance.promoted

    def set_override(self, obj: Any, name: str, value: Any) -> Any:
        """Set an override private to obj."""
        instance = cast(Instance, self.instance_for(obj))
        return self.hierarchy.set_override(instance, name, value)

    def get(self, target: Any, name: str) -> Any:
        """Read name for a class or an object."""
        if isinstance(target, type):
            return self.hierarchy.get(self.node_for(target), name)
        instance = self.instance_for(target, create=False)
        if instance is None:
            return self.hierarchy.get(self.node_for(type(target)), name)
        return self.hierarchy.get(instance, name)

    def state_of(self, target: Any, name: str) -> tuple[AttributeState, Any]:
        """Report where the value of name comes from for a class or an object."""
        if isinstance(target, type):
            return self.hierarchy.state_of(self.node_for(target), name)
        instance = self.instance_for(target, create=False)
        if instance is None:
            return self.hierarchy.state_of(self.node_for(type(target)), name)
        return self.hierarchy.state_of(instance, name)


default_registry = ClassRegistry()


class class_attribute:
    """
    Data descriptor for an attribute inherited along the class chain.

    Args:
        default: Value set at the owning class (unset when omitted)
        registry: Registry to use (default_registry when omitted)
    """

    def __init__(
        self, default: Any = MISSING, registry: ClassRegistry | None = None
    ) -> None:
        self.default = default
        self.registry = registry or default_registry
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.registry.declare(owner, name)
        if self.default is not MISSING:
            self.registry.set_class_default(owner, name, self.default)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self.registry.get(objtype, self._name)
        return self.registry.get(obj, self._name)

    def __set__(self, obj: Any, value: Any) -> None:
        self.registry.set_override(obj, self._name, value)

    @property
    def _name(self) -> str:
        if self.name is None:
            raise ValidationError("class_attribute used outside a class body")
        return self.name


def set_class_default(cls: type, name: str, value: Any) -> Any:
    """Set a class's own default for name in the default registry."""
    return default_registry.set_class_default(cls, name, value)


def promote(obj: Any) -> OverrideLayer:
    """Give an object its own override layer in the default registry."""
    return default_registry.promote(obj)


def set_override(obj: Any, name: str, value: Any) -> Any:
    """Set an override private to obj in the default registry."""
    return default_registry.set_override(obj, name, value)
