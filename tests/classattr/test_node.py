"""Tests for TypeNode."""

import pytest

from classattr.exceptions import ValidationError
from classattr.lock import NullLock, RWLock
from classattr.node import MISSING, TypeNode


@pytest.fixture
def tree():
    base = TypeNode("Base")
    derived = TypeNode("Derived", parent=base)
    leaf = TypeNode("Leaf", parent=derived)
    sibling = TypeNode("Sibling", parent=base)
    return base, derived, leaf, sibling


@pytest.mark.unit
class TestTypeNodeStructure:
    """Test parent links and traversal."""

    def test_root_has_no_parent(self, tree):
        base, *_ = tree
        assert base.parent is None
        assert base.depth == 0

    def test_parent_and_children(self, tree):
        base, derived, leaf, sibling = tree
        assert derived.parent is base
        assert base.children == (derived, sibling)
        assert derived.children == (leaf,)

    def test_lineage_walks_to_root(self, tree):
        base, derived, leaf, _ = tree
        assert list(leaf.lineage()) == [leaf, derived, base]

    def test_path_and_depth(self, tree):
        _, _, leaf, sibling = tree
        assert leaf.path == "Base/Derived/Leaf"
        assert leaf.depth == 2
        assert sibling.path == "Base/Sibling"

    def test_descendants_depth_first(self, tree):
        base, derived, leaf, sibling = tree
        assert list(base.descendants()) == [derived, leaf, sibling]

    def test_is_descendant_of(self, tree):
        base, derived, leaf, sibling = tree
        assert leaf.is_descendant_of(base)
        assert not base.is_descendant_of(leaf)
        assert not leaf.is_descendant_of(leaf)
        assert not leaf.is_descendant_of(sibling)

    def test_repr(self, tree):
        _, derived, _, _ = tree
        assert repr(derived) == "TypeNode('Base/Derived')"

    def test_parent_must_be_node(self):
        with pytest.raises(ValidationError, match="parent must be a TypeNode"):
            TypeNode("Bad", parent="Base")  # type: ignore[arg-type]

    def test_lock_selection(self):
        assert isinstance(TypeNode("A")._lock, RWLock)
        assert isinstance(TypeNode("B", thread_safe=False)._lock, NullLock)


@pytest.mark.unit
class TestTypeNodeStore:
    """Test declared names and sparse defaults."""

    def test_lookup_missing(self):
        node = TypeNode("Base")
        assert node.lookup("enabled") == (MISSING, False)

    def test_declare_then_lookup(self):
        node = TypeNode("Base")
        node.declare_name("enabled")
        assert node.lookup("enabled") == (MISSING, True)
        assert node.declares_here("enabled")

    def test_store_creates_and_overwrites(self):
        node = TypeNode("Base")
        node.store("enabled", True)
        node.store("enabled", False)
        assert node.lookup("enabled")[0] is False
        assert node.own_defaults() == {"enabled": False}

    def test_none_is_a_value(self):
        """Test an explicit None is stored, distinct from absence."""
        node = TypeNode("Base")
        node.store("enabled", None)
        assert node.has_own_default("enabled")
        assert node.lookup("enabled")[0] is None

    def test_declares_checks_ancestors(self, tree):
        base, derived, leaf, sibling = tree
        derived.declare_name("color")
        assert leaf.declares("color")
        assert derived.declares("color")
        assert not base.declares("color")
        assert not sibling.declares("color")
        assert not leaf.declares_here("color")

    def test_own_defaults_is_a_copy(self):
        node = TypeNode("Base")
        node.store("a", 1)
        snapshot = node.own_defaults()
        snapshot["a"] = 2
        assert node.lookup("a")[0] == 1

    def test_declared_names(self):
        node = TypeNode("Base")
        node.declare_name("a")
        node.declare_name("b")
        node.declare_name("a")
        assert node.declared_names() == frozenset({"a", "b"})

    def test_install_accessor_replaces(self):
        node = TypeNode("Base")
        first, second = object(), object()
        assert node.install_accessor("a", first) is first
        assert node.install_accessor("a", second) is second
        assert node.accessor("a") is second
        assert node.accessor("b") is None
