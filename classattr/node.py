"""
Type nodes: the per-type store of declared attribute names and defaults.

A TypeNode is one type in a strict single-parent tree. It records which
attribute names were declared at this node and the sparse map of defaults
explicitly set here; absence from the map means "inherit from the parent".
Entries are created or overwritten, never removed.
"""

from collections.abc import Iterator
from typing import Any

from .exceptions import ValidationError
from .lock import make_lock

# Returned by lookup() when a node has no own entry for a name
MISSING: Any = object()


class TypeNode:
    """
    One type in a single-inheritance hierarchy.

    The parent is fixed at construction, so the parent relation is a tree by
    construction: a node can only point at a node that already exists.

    Example:
        >>> base = TypeNode("Base")
        >>> derived = TypeNode("Derived", parent=base)
        >>> [n.name for n in derived.lineage()]
        ['Derived', 'Base']
    """

    def __init__(
        self, name: str, parent: "TypeNode | None" = None, thread_safe: bool = True
    ) -> None:
        """
        Initialize the node and attach it to its parent.

        Args:
            name: Display name of the type
            parent: Parent node, or None for a root
            thread_safe: Guard the store with a reader/writer lock

        Raises:
            ValidationError: If parent is not a TypeNode
        """
        if parent is not None and not isinstance(parent, TypeNode):
            raise ValidationError(
                "parent must be a TypeNode", node=name, parent=repr(parent)
            )
        self.name = name
        self._parent = parent
        self._children: list[TypeNode] = []
        self._declared: set[str] = set()
        self._defaults: dict[str, Any] = {}
        self._accessors: dict[str, Any] = {}
        self._lock = make_lock(thread_safe)
        if parent is not None:
            with parent._lock.write():
                parent._children.append(self)

    def __repr__(self) -> str:
        return f"TypeNode({self.path!r})"

    @property
    def parent(self) -> "TypeNode | None":
        """Parent node, None for the root."""
        return self._parent

    @property
    def children(self) -> tuple["TypeNode", ...]:
        """Direct descendants, in creation order."""
        with self._lock.read():
            return tuple(self._children)

    @property
    def path(self) -> str:
        """Slash-separated names from the root down to this node."""
        return "/".join(reversed([n.name for n in self.lineage()]))

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for a root)."""
        return sum(1 for _ in self.lineage()) - 1

    def lineage(self) -> Iterator["TypeNode"]:
        """Yield this node, then each ancestor up to the root."""
        node: TypeNode | None = self
        while node is not None:
            yield node
            node = node._parent

    def descendants(self) -> Iterator["TypeNode"]:
        """Yield every node below this one, depth first."""
        for child in self.children:
            yield child
            yield from child.descendants()

    def is_descendant_of(self, other: "TypeNode") -> bool:
        """Check whether other is a strict ancestor of this node."""
        return any(n is other for n in self.lineage() if n is not self)

    # Store operations

    def declare_name(self, name: str) -> None:
        """Record that name was declared at this node."""
        with self._lock.write():
            self._declared.add(name)

    def store(self, name: str, value: Any) -> None:
        """Create or overwrite this node's own default for name."""
        with self._lock.write():
            self._defaults[name] = value

    def lookup(self, name: str) -> tuple[Any, bool]:
        """
        Read this node's own entry for name under a shared lock.

        Returns:
            (value, declared): value is MISSING when the node has no own
            default; declared tells whether name was declared here.
        """
        with self._lock.read():
            return self._defaults.get(name, MISSING), name in self._declared

    def declares(self, name: str) -> bool:
        """Check whether name was declared here or on any ancestor."""
        return any(n.declares_here(name) for n in self.lineage())

    def declares_here(self, name: str) -> bool:
        """Check whether name was declared at this exact node."""
        with self._lock.read():
            return name in self._declared

    def has_own_default(self, name: str) -> bool:
        """Check whether this node holds its own value for name."""
        with self._lock.read():
            return name in self._defaults

    def own_defaults(self) -> dict[str, Any]:
        """Snapshot of the defaults set at this exact node."""
        with self._lock.read():
            return dict(self._defaults)

    def declared_names(self) -> frozenset[str]:
        """Names declared at this exact node."""
        with self._lock.read():
            return frozenset(self._declared)

    def install_accessor(self, name: str, accessor: Any) -> Any:
        """Install the accessor for name, replacing an existing one."""
        with self._lock.write():
            self._accessors[name] = accessor
        return accessor

    def accessor(self, name: str) -> Any | None:
        """Accessor installed for name at this exact node, if any."""
        with self._lock.read():
            return self._accessors.get(name)
