"""
Tests for the Deiteration Engine.

These tests verify that:
1. Copies of top-level cuts inside sibling cuts are found
2. Copies of top-level atoms inside cuts are found
3. Every found site can be applied and removes a duplicate
4. Paths that are not deiteration sites are rejected
"""

import pytest

from aegraph.graph import Graph, InvalidPathError
from aegraph.notation import parse
from aegraph.paths import element_at
from aegraph.rules.deiteration import apply_deiteration, find_deiteration_sites


# Canonical order: ([[a, b], c], [a, b], a)
SAMPLE = "(a, [a, b], [[a, b], c])"


@pytest.fixture
def graph():
    return parse(SAMPLE)


# =============================================================================
# SITE DISCOVERY TESTS
# =============================================================================

class TestFindDeiterationSites:
    """Test deiteration site discovery."""

    def test_sample_sites(self, graph):
        assert find_deiteration_sites(graph) == {
            (0, 0),      # [a, b] copied inside [[a, b], c]
            (0, 0, 0),   # atom a inside [[a, b], c]
            (1, 0),      # atom a inside [a, b]
        }

    def test_sites_are_duplicates(self, graph):
        top_level = set(graph.atoms) | set(graph.children)

        for site in find_deiteration_sites(graph):
            assert element_at(graph, site) in top_level

    def test_no_duplicates(self):
        assert find_deiteration_sites(parse("(a, [b])")) == set()

    def test_empty_sheet(self):
        assert find_deiteration_sites(parse("()")) == set()

    def test_sole_atom_of_cut_not_offered(self):
        assert find_deiteration_sites(parse("(a, [a])")) == set()

    def test_deep_copy_of_atom(self):
        graph = parse("(p, [q, [p, r]])")

        assert find_deiteration_sites(graph) == {(0, 0, 0)}

    def test_identical_sibling_cuts(self):
        graph = parse("([x, [y]], [z, [x, [y]]])")

        # Canonical order: ([[[y], x], z], [[y], x])
        assert find_deiteration_sites(graph) == {(0, 0)}


# =============================================================================
# APPLICATION TESTS
# =============================================================================

class TestApplyDeiteration:
    """Test deiteration."""

    def test_remove_copied_cut(self, graph):
        assert apply_deiteration(graph, (0, 0)) == parse("(a, [a, b], [c])")

    def test_remove_copied_atom(self, graph):
        assert apply_deiteration(graph, (1, 0)) == parse("(a, [b], [[a, b], c])")

    def test_remove_deep_copied_atom(self, graph):
        assert apply_deiteration(graph, (0, 0, 0)) == parse("(a, [a, b], [[b], c])")

    def test_every_found_site_applies(self, graph):
        for site in find_deiteration_sites(graph):
            result = apply_deiteration(graph, site)
            assert isinstance(result, Graph)
            assert result != graph

    def test_input_is_untouched(self, graph):
        apply_deiteration(graph, (0, 0))

        assert graph == parse(SAMPLE)

    @pytest.mark.parametrize("path", [
        (2,),     # the original atom itself
        (1,),     # the original cut itself
        (0, 1),   # atom c has no top-level original
        (),
        (7,),
        (0, 0, 9),
    ])
    def test_invalid_paths(self, graph, path):
        with pytest.raises(InvalidPathError):
            apply_deiteration(graph, path)
