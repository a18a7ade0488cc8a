"""
Named registry of type nodes and factory for their instances.

A Hierarchy owns a set of uniquely named TypeNodes, a Resolver configured
from its Settings, and a logger. It is the front door for applications that
build their type tree at runtime or load it from configuration.

Example:
    >>> h = Hierarchy("widgets")
    >>> h.define("Base")
    TypeNode('Base')
    >>> h.define("Derived", parent="Base")
    TypeNode('Base/Derived')
    >>> h.declare("Base", "enabled")
    [TypeAccessor('Base', 'enabled')]
    >>> h.set_default("Base", "enabled", True)
    True
    >>> h.get("Derived", "enabled")
    True
"""

import threading
from collections.abc import Iterator
from typing import Any

from . import declarator
from .config.schemas import Settings
from .exceptions import ValidationError
from .instance import Instance, OverrideLayer
from .log import Logger, get_logger, resolve_level
from .node import TypeNode
from .resolver import Resolver


class Hierarchy:
    """
    Registry of named type nodes sharing one set of Settings.

    Args:
        name: Hierarchy name, used in log records
        settings: Behavior switches (defaults when omitted)
        lg: Parent logger; a child named after the hierarchy is derived from it
    """

    def __init__(
        self,
        name: str = "default",
        settings: Settings | None = None,
        lg: Logger | None = None,
    ) -> None:
        self.name = name
        self.settings = settings or Settings()
        self._lg = (lg or get_logger("hierarchy")).derive(name, hierarchy=name)
        if self.settings.logging.level is not None:
            level = resolve_level(self.settings.logging.level)
            if level is False:
                self._lg.disabled = True
            else:
                self._lg.setLevel(level)
        self.resolver = Resolver(strict=self.settings.strict, lg=self._lg)
        self._nodes: dict[str, TypeNode] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Hierarchy({self.name!r}, types={len(self)})"

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._nodes

    def __iter__(self) -> Iterator[TypeNode]:
        with self._lock:
            return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    @property
    def lg(self) -> Logger:
        """Logger of this hierarchy."""
        return self._lg

    def define(self, name: str, parent: "str | TypeNode | None" = None) -> TypeNode:
        """
        Create a type node.

        Args:
            name: Unique type name within this hierarchy
            parent: Parent type (name or node of this hierarchy), None for a root

        Returns:
            TypeNode: The new node

        Raises:
            ValidationError: If name is taken or parent is unknown
        """
        parent_node = self.node(parent) if parent is not None else None
        with self._lock:
            if name in self._nodes:
                raise ValidationError(
                    "type already defined", hierarchy=self.name, type=name
                )
            node = TypeNode(name, parent_node, thread_safe=self.settings.thread_safe)
            self._nodes[name] = node
        self._lg.debug(
            "defined type",
            extra={"type": name, "parent": parent_node.name if parent_node else None},
        )
        return node

    def node(self, ref: "str | TypeNode") -> TypeNode:
        """
        Look up a type node of this hierarchy.

        Raises:
            ValidationError: If ref names no type here, or is a foreign node
        """
        key = ref.name if isinstance(ref, TypeNode) else ref
        with self._lock:
            node = self._nodes.get(key)  # type: ignore[arg-type]
        if node is None or (isinstance(ref, TypeNode) and node is not ref):
            raise ValidationError("unknown type", hierarchy=self.name, type=key)
        return node

    def roots(self) -> list[TypeNode]:
        """Nodes without a parent, in definition order."""
        return [n for n in self if n.parent is None]

    def instance(
        self, type_ref: "str | TypeNode", label: str | None = None
    ) -> Instance:
        """Create an instance of a type, carrying this hierarchy's settings."""
        return Instance(
            self.node(type_ref),
            label=label,
            auto_promote=self.settings.auto_promote,
            thread_safe=self.settings.thread_safe,
        )

    def promote(self, instance: Instance) -> OverrideLayer:
        """Give instance its override layer."""
        layer = instance.promote()
        self._lg.debug("promoted instance", extra={"instance": instance.label})
        return layer

    def declare(
        self, target: "str | TypeNode | Instance", *names: str
    ) -> list[declarator.TypeAccessor | declarator.InstanceAccessor]:
        """Declare names on a type (by name or node) or a promoted instance."""
        resolved = target if isinstance(target, Instance) else self.node(target)
        return declarator.declare_many(
            resolved, *names, resolver=self.resolver, lg=self._lg
        )

    def accessor(
        self, type_ref: "str | TypeNode", name: str
    ) -> declarator.TypeAccessor:
        """Accessor for name as seen from a type."""
        return declarator.accessor(self.node(type_ref), name, self.resolver)

    def set_default(self, type_ref: "str | TypeNode", name: str, value: Any) -> Any:
        """Set a type's own default for name."""
        return declarator.set_default(self.node(type_ref), name, value, self._lg)

    def set_override(self, instance: Instance, name: str, value: Any) -> Any:
        """Set an instance override for name."""
        return declarator.set_override(instance, name, value, self._lg)

    def get(self, target: "str | TypeNode | Instance", name: str) -> Any:
        """Read name for a type or an instance."""
        if isinstance(target, Instance):
            return declarator.get_value(target, name, self.resolver)
        return declarator.get_default(self.node(target), name, self.resolver)

    def state_of(
        self, target: "str | TypeNode | Instance", name: str
    ) -> tuple[declarator.AttributeState, TypeNode | Instance | None]:
        """Report where the value of name comes from."""
        resolved = target if isinstance(target, Instance) else self.node(target)
        return declarator.state_of(resolved, name, self.resolver)

    def effective(self, type_ref: "str | TypeNode") -> dict[str, Any]:
        """Every name declared on a type's chain with its resolved value."""
        return self.resolver.effective(self.node(type_ref))

    def describe(self) -> dict[str, dict[str, Any]]:
        """
        Snapshot of the whole hierarchy, keyed by node path.

        Returns:
            dict: path -> {"parent", "declared", "defaults", "effective"}
        """
        return {
            node.path: {
                "parent": node.parent.name if node.parent else None,
                "declared": sorted(node.declared_names()),
                "defaults": node.own_defaults(),
                "effective": self.resolver.effective(node),
            }
            for node in self
        }
