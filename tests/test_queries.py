"""
Tests for Structural Queries.

These tests verify that:
1. Containment finds atoms and sub-graphs at any depth
2. Paths follow the combined child/atom indexing
3. Sole elements of an enclosure are never reported
"""

import pytest

from aegraph.notation import parse
from aegraph.paths import element_at
from aegraph.queries import contains, find_paths


# Canonical order: ([[a, d], c], [[a]], [a, b], a)
SAMPLE = "(a, [a, b], [[a]], [c, [a, d]])"


@pytest.fixture
def graph():
    return parse(SAMPLE)


# =============================================================================
# CONTAINMENT TESTS
# =============================================================================

class TestContains:
    """Test containment of atoms and sub-graphs."""

    def test_contains_atom_at_any_depth(self, graph):
        assert contains(graph, "a")
        assert contains(graph, "d")
        assert not contains(graph, "z")

    def test_contains_subgraph(self, graph):
        assert contains(graph, parse("[a]"))
        assert contains(graph, parse("[d, a]"))
        assert not contains(graph, parse("[q]"))

    def test_subgraph_order_is_irrelevant(self, graph):
        assert contains(graph, parse("[b, a]"))

    def test_node_does_not_contain_itself(self):
        cut = parse("[a]")

        assert not contains(cut, parse("[a]"))

    def test_sheet_never_matches_a_cut(self, graph):
        assert not contains(graph, parse("(a)"))

    def test_rejects_other_targets(self, graph):
        with pytest.raises(TypeError):
            contains(graph, 42)


# =============================================================================
# PATH ENUMERATION TESTS
# =============================================================================

class TestFindAtomPaths:
    """Test path enumeration for atoms."""

    def test_all_occurrences(self, graph):
        assert find_paths(graph, "a") == {(3,), (0, 0, 0), (2, 0)}

    def test_paths_address_the_atom(self, graph):
        for path in find_paths(graph, "a"):
            assert element_at(graph, path) == "a"

    def test_sole_atom_is_skipped(self):
        assert find_paths(parse("(a)"), "a") == set()
        assert find_paths(parse("([a])"), "a") == set()

    def test_missing_atom(self, graph):
        assert find_paths(graph, "z") == set()

    def test_atom_index_is_offset_by_children(self):
        graph = parse("(x, y, [p], [q])")

        assert find_paths(graph, "y") == {(3,)}


class TestFindGraphPaths:
    """Test path enumeration for sub-graphs."""

    def test_match_at_top_level(self):
        assert find_paths(parse("([a], b)"), parse("[a]")) == {(0,)}

    def test_match_nested(self):
        assert find_paths(parse("([[a], b])"), parse("[a]")) == {(0, 0)}

    def test_sole_cut_is_skipped(self):
        assert find_paths(parse("([a])"), parse("[a]")) == set()

    def test_sole_cut_inside_cut_is_skipped(self, graph):
        # [a] only occurs as the sole content of [[a]]
        assert find_paths(graph, parse("[a]")) == set()

    def test_nested_compound_match(self, graph):
        assert find_paths(graph, parse("[a, d]")) == {(0, 0)}

    def test_paths_address_the_subgraph(self):
        graph = parse("([x], [[x], y], [z, [[x], w]])")
        target = parse("[x]")

        paths = find_paths(graph, target)

        assert paths
        for path in paths:
            assert element_at(graph, path) == target
