"""
Instances and their optional override layer.

An Instance belongs to exactly one TypeNode for its lifetime. Once promoted it
owns an OverrideLayer: a sparse, private map of attribute overrides that
shadows type-level resolution for that instance alone. Overrides never touch
the type's defaults or any other instance.
"""

import threading
from typing import Any

from .exceptions import ValidationError
from .lock import make_lock
from .node import MISSING, TypeNode


class OverrideLayer:
    """
    Private override slot of a promoted instance.

    Holds the names declared through the layer and the override values set
    on it. Values are created or overwritten, never removed.
    """

    def __init__(self, owner: "Instance", thread_safe: bool = True) -> None:
        self._owner = owner
        self._declared: set[str] = set()
        self._overrides: dict[str, Any] = {}
        self._lock = make_lock(thread_safe)

    def __repr__(self) -> str:
        return f"OverrideLayer({self._owner!r})"

    @property
    def owner(self) -> "Instance":
        """Instance this layer belongs to."""
        return self._owner

    def declare_name(self, name: str) -> None:
        """Record that name was declared through this layer."""
        with self._lock.write():
            self._declared.add(name)

    def declares(self, name: str) -> bool:
        """Check whether name was declared through this layer."""
        with self._lock.read():
            return name in self._declared

    def store(self, name: str, value: Any) -> None:
        """Create or overwrite the override for name."""
        with self._lock.write():
            self._overrides[name] = value

    def lookup(self, name: str) -> Any:
        """Override for name, or MISSING if none was set."""
        with self._lock.read():
            return self._overrides.get(name, MISSING)

    def has_override(self, name: str) -> bool:
        """Check whether an override was set for name."""
        with self._lock.read():
            return name in self._overrides

    def overrides(self) -> dict[str, Any]:
        """Snapshot of all overrides."""
        with self._lock.read():
            return dict(self._overrides)


class Instance:
    """
    One promotable object of a given type.

    Args:
        type_node: Type of the instance, fixed for its lifetime
        label: Display name used in logs and errors
        auto_promote: Let set_override() promote this instance on first use
            when its type chain declares the attribute
        thread_safe: Guard the override layer with a reader/writer lock

    Example:
        >>> d = Instance(derived, label="d")
        >>> d.promoted
        False
        >>> layer = d.promote()
        >>> d.layer is layer
        True
    """

    def __init__(
        self,
        type_node: TypeNode,
        label: str | None = None,
        auto_promote: bool = False,
        thread_safe: bool = True,
    ) -> None:
        if not isinstance(type_node, TypeNode):
            raise ValidationError(
                "instance type must be a TypeNode", type=repr(type_node)
            )
        self._type = type_node
        self.label = label or f"{type_node.name}@{id(self):x}"
        self.auto_promote = auto_promote
        self._thread_safe = thread_safe
        self._layer: OverrideLayer | None = None
        self._accessors: dict[str, Any] = {}
        self._promote_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Instance({self.label!r}, type={self._type.path!r})"

    @property
    def type(self) -> TypeNode:
        """Type node of this instance."""
        return self._type

    @property
    def layer(self) -> OverrideLayer | None:
        """Override layer, None until promoted."""
        return self._layer

    @property
    def promoted(self) -> bool:
        """Check whether this instance has an override layer."""
        return self._layer is not None

    def promote(self) -> OverrideLayer:
        """
        Give this instance its own override layer.

        Idempotent: promoting twice returns the same layer.

        Returns:
            OverrideLayer: The instance's layer
        """
        with self._promote_lock:
            if self._layer is None:
                self._layer = OverrideLayer(self, self._thread_safe)
            return self._layer

    def install_accessor(self, name: str, accessor: Any) -> Any:
        """Install the instance-level accessor for name, replacing an existing one."""
        with self._promote_lock:
            self._accessors[name] = accessor
        return accessor

    def accessor(self, name: str) -> Any | None:
        """Instance-level accessor for name, if one was installed."""
        with self._promote_lock:
            return self._accessors.get(name)
