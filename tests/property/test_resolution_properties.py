"""Property-based tests for hierarchical resolution."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from classattr import (
    Hierarchy,
    Settings,
    get_value,
    set_override,
)

NAME = "attr"


@st.composite
def trees(draw, max_size: int = 12):
    """Random single-parent trees: parents[i] is the index of node i's parent."""
    size = draw(st.integers(min_value=1, max_value=max_size))
    parents: list[int | None] = [None]
    for i in range(1, size):
        parents.append(draw(st.one_of(st.none(), st.integers(0, i - 1))))
    return parents


def _build(parents: list[int | None]) -> Hierarchy:
    h = Hierarchy("prop", Settings(thread_safe=False))
    for i, parent in enumerate(parents):
        h.define(f"T{i}", parent=None if parent is None else f"T{parent}")
    for root in h.roots():
        h.declare(root, NAME)
    return h


def _expected(parents, writes, index):
    """Nearest write walking root-ward from index, None if none."""
    current: int | None = index
    while current is not None:
        if current in writes:
            return writes[current]
        current = parents[current]
    return None


@pytest.mark.property
@pytest.mark.unit
class TestResolutionProperties:
    """Resolution matches a reference walk over random trees and writes."""

    @given(
        parents=trees(),
        writes=st.lists(
            st.tuples(st.integers(0, 11), st.integers(-5, 5)), max_size=20
        ),
    )
    @settings(max_examples=100)
    def test_nearest_write_wins(self, parents, writes):
        h = _build(parents)
        applied: dict[int, int] = {}
        for index, value in writes:
            if index < len(parents):
                h.set_default(f"T{index}", NAME, value)
                applied[index] = value
        for i in range(len(parents)):
            assert h.get(f"T{i}", NAME) == _expected(parents, applied, i)

    @given(parents=trees(), value=st.integers())
    @settings(max_examples=50)
    def test_unset_node_matches_parent(self, parents, value):
        h = _build(parents)
        h.set_default("T0", NAME, value)
        for i, parent in enumerate(parents):
            node = h.node(f"T{i}")
            if not node.has_own_default(NAME) and parent is not None:
                assert h.get(node, NAME) == h.get(f"T{parent}", NAME)

    @given(parents=trees(), value=st.integers())
    @settings(max_examples=50)
    def test_root_write_propagates_to_late_descendants(self, parents, value):
        h = _build(parents)
        h.set_default("T0", NAME, value)
        late = h.define("Late", parent=f"T{len(parents) - 1}")
        expected = _expected(parents, {0: value}, len(parents) - 1)
        assert h.get(late, NAME) == expected

    @given(
        parents=trees(),
        target=st.integers(0, 11),
        value=st.integers(),
    )
    @settings(max_examples=50)
    def test_shadowing_is_local_to_subtree(self, parents, target, value):
        target = target % len(parents)
        h = _build(parents)
        h.set_default("T0", NAME, "root")
        before = {node.name: h.get(node, NAME) for node in h}
        h.set_default(f"T{target}", NAME, value)
        shadowed = h.node(f"T{target}")
        for node in h:
            if node is shadowed or node.is_descendant_of(shadowed):
                assert h.get(node, NAME) == value
            else:
                assert h.get(node, NAME) == before[node.name]

    @given(
        parents=trees(),
        type_values=st.lists(st.integers(), min_size=1, max_size=5),
        override=st.integers(),
    )
    @settings(max_examples=50)
    def test_instance_override_isolated(self, parents, type_values, override):
        h = _build(parents)
        leaf = f"T{len(parents) - 1}"
        i, j = h.instance(leaf), h.instance(leaf)
        h.promote(i)
        set_override(i, NAME, override)
        for type_value in type_values:
            h.set_default(leaf, NAME, type_value)
            assert get_value(i, NAME) == override
            assert get_value(j, NAME) == type_value

    @given(parents=trees(), value=st.one_of(st.none(), st.integers(), st.text()))
    @settings(max_examples=50)
    def test_redeclare_keeps_value(self, parents, value):
        h = _build(parents)
        h.set_default("T0", NAME, value)
        before = {node.name: h.get(node, NAME) for node in h}
        for root in h.roots():
            h.declare(root, NAME)
        assert {node.name: h.get(node, NAME) for node in h} == before
