"""
Attribute declaration and the accessors it installs.

declare(node, name) installs a getter/setter pair for name on a TypeNode.
Declaring through a promoted instance's OverrideLayer installs an
instance-level accessor on the owning Instance instead: its getter returns
the instance override when present and falls back to type-level resolution.

Example:
    >>> base = TypeNode("Base")
    >>> derived = TypeNode("Derived", parent=base)
    >>> enabled = declare(base, "enabled")
    >>> enabled.get() is None
    True
    >>> enabled.set(True)
    True
    >>> get_default(derived, "enabled")
    True
"""

from enum import Enum
from typing import Any

from .exceptions import InvalidPromotionError, NotDeclaredError, ValidationError
from .instance import Instance, OverrideLayer
from .log import Logger, get_logger
from .node import MISSING, TypeNode
from .resolver import Resolver, default_resolver
from .utils import check_name

_lg = get_logger("declare")


class AttributeState(Enum):
    """Where the value of an attribute currently comes from."""

    UNSET = "unset"
    TYPE_DEFAULT = "type_default"
    INSTANCE_OVERRIDE = "instance_override"


class TypeAccessor:
    """Getter/setter pair for one attribute on one TypeNode."""

    def __init__(
        self,
        node: TypeNode,
        name: str,
        resolver: Resolver | None = None,
        lg: Logger | None = None,
    ) -> None:
        self.node = node
        self.name = name
        self._resolver = resolver or default_resolver
        self._lg = lg or _lg

    def __repr__(self) -> str:
        return f"TypeAccessor({self.node.path!r}, {self.name!r})"

    def get(self) -> Any:
        """Resolve the attribute for this node."""
        return self._resolver.resolve(self.node, self.name, strict=False)

    def set(self, value: Any) -> Any:
        """Set this node's own default and return the value."""
        self.node.store(self.name, value)
        self._lg.debug(
            "set default",
            extra={"node": self.node.path, "attribute": self.name, "value": value},
        )
        return value


class InstanceAccessor:
    """Instance-level getter/setter for one attribute of a promoted instance."""

    def __init__(
        self,
        instance: Instance,
        name: str,
        resolver: Resolver | None = None,
        lg: Logger | None = None,
    ) -> None:
        self.instance = instance
        self.name = name
        self._resolver = resolver or default_resolver
        self._lg = lg or _lg

    def __repr__(self) -> str:
        return f"InstanceAccessor({self.instance.label!r}, {self.name!r})"

    def get(self) -> Any:
        """Return the override if present, else the type-level resolution."""
        return get_value(self.instance, self.name, self._resolver)

    def set(self, value: Any) -> Any:
        """Write the instance override and return the value."""
        return set_override(self.instance, self.name, value, self._lg)


def _layer_of(instance: Instance, name: str) -> OverrideLayer:
    if instance.layer is None:
        raise InvalidPromotionError(
            "instance is not promoted", instance=instance.label, attribute=name
        )
    return instance.layer


def declare(
    target: TypeNode | OverrideLayer | Instance,
    name: str,
    resolver: Resolver | None = None,
    lg: Logger | None = None,
) -> TypeAccessor | InstanceAccessor:
    """
    Declare an attribute and install its accessor.

    Idempotent: re-declaring returns the accessor installed the first time
    and leaves stored values untouched.

    Args:
        target: TypeNode, OverrideLayer, or a promoted Instance (its layer)
        name: Attribute name
        resolver: Resolver used by the accessor's getter
        lg: Logger for declaration and write events

    Returns:
        TypeAccessor for a TypeNode, InstanceAccessor for a layer/instance

    Raises:
        ValidationError: If name is invalid or target has the wrong type
        InvalidPromotionError: If target is an Instance that was never promoted
    """
    lg = lg or _lg
    if isinstance(target, Instance):
        check_name(name, instance=target.label)
        target = _layer_of(target, name)

    if isinstance(target, TypeNode):
        check_name(name, node=target.path)
        target.declare_name(name)
        lg.debug("declared attribute", extra={"node": target.path, "attribute": name})
        return target.install_accessor(name, TypeAccessor(target, name, resolver, lg))

    if isinstance(target, OverrideLayer):
        instance = target.owner
        check_name(name, instance=instance.label)
        target.declare_name(name)
        lg.debug(
            "declared instance attribute",
            extra={"instance": instance.label, "attribute": name},
        )
        return instance.install_accessor(
            name, InstanceAccessor(instance, name, resolver, lg)
        )

    raise ValidationError(
        "declare target must be a TypeNode, OverrideLayer or Instance",
        target=repr(target),
        attribute=name,
    )


def declare_many(
    target: TypeNode | OverrideLayer | Instance,
    *names: str,
    resolver: Resolver | None = None,
    lg: Logger | None = None,
) -> list[TypeAccessor | InstanceAccessor]:
    """Declare several attributes at once; accessors are returned in order."""
    return [declare(target, name, resolver, lg) for name in names]


def accessor(
    node: TypeNode, name: str, resolver: Resolver | None = None
) -> TypeAccessor:
    """
    Get the accessor for name as seen from node.

    Names declared on an ancestor are accessible from every descendant, the
    way a class-level accessor is inherited. The returned accessor writes to
    node itself, not to the declaring ancestor.

    Raises:
        NotDeclaredError: If no node on the chain declared name
    """
    own = node.accessor(name)
    if own is not None:
        return own
    if not node.declares(name):
        raise NotDeclaredError("attribute not declared", node=node.path, attribute=name)
    return TypeAccessor(node, name, resolver)


def get_default(node: TypeNode, name: str, resolver: Resolver | None = None) -> Any:
    """
    Resolve name for node.

    Raises:
        NotDeclaredError: If the resolver is strict and name was never declared
    """
    return (resolver or default_resolver).resolve(node, name)


def set_default(
    node: TypeNode, name: str, value: Any, lg: Logger | None = None
) -> Any:
    """
    Set node's own default for name and return the value.

    The value shadows ancestors for node and its descendants only.

    Raises:
        NotDeclaredError: If no node on the chain declared name
    """
    if not node.declares(name):
        raise NotDeclaredError("attribute not declared", node=node.path, attribute=name)
    node.store(name, value)
    (lg or _lg).debug(
        "set default", extra={"node": node.path, "attribute": name, "value": value}
    )
    return value


def set_override(
    instance: Instance, name: str, value: Any, lg: Logger | None = None
) -> Any:
    """
    Write a private override for a single instance and return the value.

    An unpromoted instance is promoted on the fly only when its auto_promote
    flag is set and its type chain declares name.

    Raises:
        InvalidPromotionError: If the instance has no override layer
        NotDeclaredError: If neither the layer nor the type chain declared name
    """
    lg = lg or _lg
    layer = instance.layer
    if layer is None:
        if not (instance.auto_promote and instance.type.declares(name)):
            raise InvalidPromotionError(
                "instance is not promoted", instance=instance.label, attribute=name
            )
        layer = instance.promote()
        lg.debug("promoted instance", extra={"instance": instance.label})
    elif not (layer.declares(name) or instance.type.declares(name)):
        raise NotDeclaredError(
            "attribute not declared", instance=instance.label, attribute=name
        )
    layer.store(name, value)
    lg.debug(
        "set override",
        extra={"instance": instance.label, "attribute": name, "value": value},
    )
    return value


def get_value(
    instance: Instance, name: str, resolver: Resolver | None = None
) -> Any:
    """
    Read name for an instance: its override if present, else its type's value.

    Raises:
        NotDeclaredError: If the resolver is strict and neither the layer nor
            the type chain declared name
    """
    resolver = resolver or default_resolver
    layer = instance.layer
    if layer is not None:
        value = layer.lookup(name)
        if value is not MISSING:
            return value
        if layer.declares(name):
            return resolver.resolve(instance.type, name, strict=False)
    return resolver.resolve(instance.type, name)


def state_of(
    target: TypeNode | Instance, name: str, resolver: Resolver | None = None
) -> tuple[AttributeState, TypeNode | Instance | None]:
    """
    Report where the value of name comes from.

    Returns:
        (state, holder): holder is the Instance for INSTANCE_OVERRIDE, the
        authoritative TypeNode for TYPE_DEFAULT, None for UNSET
    """
    resolver = resolver or default_resolver
    if isinstance(target, Instance):
        if target.layer is not None and target.layer.has_override(name):
            return AttributeState.INSTANCE_OVERRIDE, target
        target = target.type
    origin = resolver.origin(target, name)
    if origin is None:
        return AttributeState.UNSET, None
    return AttributeState.TYPE_DEFAULT, origin
