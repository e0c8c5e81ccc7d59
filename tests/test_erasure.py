"""
Tests for the Erasure Engine.

These tests verify that:
1. Only elements in positive (evenly enclosed) contexts are offered
2. The sole element of a nested cut is never offered
3. Erasure removes exactly one element and nothing else
4. Paths that are not erasure sites are rejected
"""

import pytest

from aegraph.graph import InvalidPathError
from aegraph.notation import parse, serialize
from aegraph.paths import enclosure_at
from aegraph.rules.erasure import apply_erasure, find_erasure_sites, is_positive


# Canonical order: ([[c, d], b], [e], a)
SAMPLE = "(a, [b, [c, d]], [e])"


@pytest.fixture
def graph():
    return parse(SAMPLE)


# =============================================================================
# POLICY TESTS
# =============================================================================

class TestDepthParity:
    """The sheet is depth 0; every cut adds one level."""

    def test_even_depths_are_positive(self):
        assert is_positive(0)
        assert is_positive(2)

    def test_odd_depths_are_negative(self):
        assert not is_positive(1)
        assert not is_positive(3)


# =============================================================================
# SITE DISCOVERY TESTS
# =============================================================================

class TestFindErasureSites:
    """Test erasure site discovery."""

    def test_sample_sites(self, graph):
        assert find_erasure_sites(graph) == {
            (0,), (1,), (2,),   # everything on the sheet
            (0, 0, 0), (0, 0, 1),   # c and d, two cuts deep
        }

    def test_nothing_offered_in_negative_context(self, graph):
        sites = find_erasure_sites(graph)

        assert not any(len(site) == 2 for site in sites)

    def test_sole_element_of_cut_not_offered(self):
        assert find_erasure_sites(parse("([[x]])")) == {(0,)}

    def test_sole_element_of_sheet_is_offered(self):
        assert find_erasure_sites(parse("(a)")) == {(0,)}

    def test_empty_sheet(self):
        assert find_erasure_sites(parse("()")) == set()

    def test_level_shifts_parity(self):
        cut = parse("[a, [b, c]]")

        # Searched as a cut directly on the sheet: only b and c are positive
        assert find_erasure_sites(cut, level=1) == {(0, 0), (0, 1)}
        # Searched as a positive context: a and the nested cut are offered
        assert find_erasure_sites(cut, level=0) == {(0,), (1,)}


# =============================================================================
# APPLICATION TESTS
# =============================================================================

class TestApplyErasure:
    """Test erasure."""

    def test_erase_atom_on_sheet(self, graph):
        assert apply_erasure(graph, (2,)) == parse("([b, [c, d]], [e])")

    def test_erase_cut_on_sheet(self, graph):
        assert apply_erasure(graph, (1,)) == parse("(a, [b, [c, d]])")

    def test_erase_deep_atom(self, graph):
        assert apply_erasure(graph, (0, 0, 1)) == parse("(a, [b, [c]], [e])")

    def test_erase_last_element_of_sheet(self):
        assert apply_erasure(parse("(a)"), (0,)) == parse("()")

    def test_removes_exactly_one_element(self, graph):
        for site in find_erasure_sites(graph):
            if len(site) != 1:
                continue
            result = apply_erasure(graph, site)
            assert result.size == graph.size - 1

    def test_other_parts_unchanged(self, graph):
        result = apply_erasure(graph, (0, 0, 0))

        assert enclosure_at(result, (1,)) == parse("[e]")
        assert result.atoms == ("a",)
        assert enclosure_at(result, (0,)) == parse("[b, [d]]")

    def test_input_is_untouched(self, graph):
        apply_erasure(graph, (2,))

        assert serialize(graph) == "([[c, d], b], [e], a)"

    def test_negative_context_rejected(self, graph):
        with pytest.raises(InvalidPathError, match="negative context"):
            apply_erasure(graph, (0, 1))

    def test_sole_element_rejected(self):
        with pytest.raises(InvalidPathError, match="sole content"):
            apply_erasure(parse("([[x]])"), (0, 0, 0))

    @pytest.mark.parametrize("path", [(), (9,), (2, 0), (0, 5, 0)])
    def test_invalid_paths(self, graph, path):
        with pytest.raises(InvalidPathError):
            apply_erasure(graph, path)
