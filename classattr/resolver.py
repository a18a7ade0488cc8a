"""
Resolution of attribute values along a type's root-ward chain.

Lookups are live: nothing is cached, so a write to an ancestor is visible to
every descendant that has not set its own value, including descendants
created after the write. Each node is read under its own shared lock, held
only for that node's lookup.
"""

from typing import Any

from .exceptions import NotDeclaredError
from .log import TRACE, Logger, get_logger
from .node import MISSING, TypeNode


class Resolver:
    """
    Walks from a node toward the root and returns the nearest declared value.

    Args:
        strict: Raise NotDeclaredError for names no node on the chain declared.
            When False such names resolve to the null baseline (None).
        lg: Logger for resolution traces (library logger by default)

    Example:
        >>> resolver = Resolver()
        >>> resolver.resolve(derived, "enabled")
        True
        >>> resolver.origin(derived, "enabled").name
        'Base'
    """

    def __init__(self, strict: bool = True, lg: Logger | None = None) -> None:
        self.strict = strict
        self._lg = lg or get_logger("resolver")

    def _walk(self, node: TypeNode, name: str) -> tuple[Any, TypeNode | None, bool]:
        """Return (value, origin, declared) for name starting at node."""
        declared = False
        for current in node.lineage():
            value, here = current.lookup(name)
            if value is not MISSING:
                return value, current, True
            declared = declared or here
        return None, None, declared

    def resolve(self, node: TypeNode, name: str, strict: bool | None = None) -> Any:
        """
        Resolve name for node.

        Args:
            node: Type node to start from
            name: Attribute name
            strict: Override the resolver's strict setting for this call

        Returns:
            The nearest value on the chain, or None if no node holds one

        Raises:
            NotDeclaredError: If strict and no node on the chain declared name
        """
        value, origin, declared = self._walk(node, name)
        if not declared and (self.strict if strict is None else strict):
            raise NotDeclaredError(
                "attribute not declared", node=node.path, attribute=name
            )
        if self._lg.isEnabledFor(TRACE):
            self._lg.trace(
                "resolved attribute",
                extra={
                    "node": node.path,
                    "attribute": name,
                    "origin": origin.path if origin else None,
                },
            )
        return value

    def origin(self, node: TypeNode, name: str) -> TypeNode | None:
        """Return the node holding the authoritative value, or None if unset."""
        return self._walk(node, name)[1]

    def declared_names(self, node: TypeNode) -> set[str]:
        """All names declared on node or any of its ancestors."""
        names: set[str] = set()
        for current in node.lineage():
            names.update(current.declared_names())
        return names

    def effective(self, node: TypeNode) -> dict[str, Any]:
        """
        Resolve every name declared on the chain.

        Returns:
            dict: Attribute name to resolved value, sorted by name
        """
        return {
            name: self._walk(node, name)[0]
            for name in sorted(self.declared_names(node))
        }


default_resolver = Resolver()


def resolve(node: TypeNode, name: str, strict: bool = True) -> Any:
    """Resolve name for node with the module's default resolver."""
    return default_resolver.resolve(node, name, strict=strict)
