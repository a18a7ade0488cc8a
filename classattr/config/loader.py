"""
Loading hierarchies from YAML documents.

A document lists types with their parent, the names they declare and the
defaults they set. Types may appear in any order; parents are created before
their children. Setting a default at a type also declares it there.

Example document:
    name: widgets
    settings:
      strict: true
      auto_promote: false
    types:
      Base:
        declare: [enabled]
        defaults: {retries: 3}
      Derived:
        parent: Base
        defaults: {enabled: false}
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pydantic
import yaml  # type: ignore[import-untyped]

from ..exceptions import ConfigError
from ..hierarchy import Hierarchy
from ..log import Logger
from .constants import MAX_CONFIG_SIZE_BYTES
from .schemas import HierarchyDocument


def _check_file_size(path: Path) -> None:
    """Reject documents above the size ceiling."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "hierarchy file too large",
            path=str(path),
            size=file_size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


def _parse_yaml(text: str, origin: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError("invalid YAML", source=origin, error=str(e)) from e


def load_document(source: str | Path | Mapping[str, Any]) -> HierarchyDocument:
    """
    Load and validate a hierarchy document.

    Args:
        source: Path to a YAML file, or an already parsed mapping

    Returns:
        HierarchyDocument: Validated document

    Raises:
        ConfigError: If the file is missing, too large, not valid YAML, or
            fails schema validation
    """
    if isinstance(source, Mapping):
        data: Any = dict(source)
        origin = "<mapping>"
    else:
        path = Path(source)
        origin = str(path)
        if not path.is_file():
            raise ConfigError("hierarchy file not found", path=origin)
        _check_file_size(path)
        data = _parse_yaml(path.read_text(encoding="utf-8"), origin)
    return _validate(data, origin)


def parse_document(text: str) -> HierarchyDocument:
    """Parse and validate a hierarchy document given as YAML text."""
    if len(text.encode("utf-8")) > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError("hierarchy document too large", limit=MAX_CONFIG_SIZE_BYTES)
    return _validate(_parse_yaml(text, "<text>"), "<text>")


def _validate(data: Any, origin: str) -> HierarchyDocument:
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError("hierarchy document must be a mapping", source=origin)
    try:
        return HierarchyDocument.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigError(
            "invalid hierarchy document",
            source=origin,
            errors=e.error_count(),
            detail=e.errors()[0]["msg"],
        ) from e


def _creation_order(document: HierarchyDocument) -> list[str]:
    """Order type names parents first; raise ConfigError on a parent cycle."""
    order: list[str] = []
    state: dict[str, str] = {}

    def visit(name: str, trail: list[str]) -> None:
        if state.get(name) == "done":
            return
        if state.get(name) == "visiting":
            cycle = " -> ".join(trail[trail.index(name) :] + [name])
            raise ConfigError("parent cycle", cycle=cycle)
        state[name] = "visiting"
        parent = document.types[name].parent
        if parent is not None:
            visit(parent, trail + [name])
        state[name] = "done"
        order.append(name)

    for name in document.types:
        visit(name, [])
    return order


def build_hierarchy(document: HierarchyDocument, lg: Logger | None = None) -> Hierarchy:
    """
    Create a Hierarchy from a validated document.

    Raises:
        ConfigError: If the parent relation contains a cycle
    """
    hierarchy = Hierarchy(document.name, document.settings, lg)
    for name in _creation_order(document):
        spec = document.types[name]
        node = hierarchy.define(name, parent=spec.parent)
        hierarchy.declare(node, *spec.declare, *spec.defaults)
        for attr, value in spec.defaults.items():
            hierarchy.set_default(node, attr, value)
    hierarchy.lg.info(
        "loaded hierarchy",
        extra={"types": len(hierarchy), "strict": document.settings.strict},
    )
    return hierarchy


def load_hierarchy(
    source: str | Path | Mapping[str, Any], lg: Logger | None = None
) -> Hierarchy:
    """Load a hierarchy from a YAML file path or a parsed mapping."""
    return build_hierarchy(load_document(source), lg)


def parse_hierarchy(text: str, lg: Logger | None = None) -> Hierarchy:
    """Load a hierarchy from YAML text."""
    return build_hierarchy(parse_document(text), lg)
