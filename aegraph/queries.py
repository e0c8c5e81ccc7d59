"""
Structural Queries over Existential Graphs.

Two query families, each accepting either an atom symbol or a sub-graph:
    contains    — does the target occur anywhere below this enclosure?
    find_paths  — every path (combined indexing) to an occurrence

An element that is the sole content of its enclosure is never reported
by find_paths: it has no occurrence path distinct from the enclosure.
"""

from __future__ import annotations

from typing import Union

from .graph import Graph, Path


Target = Union[str, Graph]


# =============================================================================
# CONTAINMENT
# =============================================================================

def contains_atom(graph: Graph, atom: str) -> bool:
    """True if `atom` appears in this enclosure or any nested cut."""
    if atom in graph.atoms:
        return True
    return any(contains_atom(child, atom) for child in graph.children)


def contains_graph(graph: Graph, sub: Graph) -> bool:
    """True if some cut nested below this enclosure equals `sub`."""
    for child in graph.children:
        if child == sub or contains_graph(child, sub):
            return True
    return False


def contains(graph: Graph, target: Target) -> bool:
    """Containment test for an atom symbol or a sub-graph."""
    if isinstance(target, Graph):
        return contains_graph(graph, target)
    if isinstance(target, str):
        return contains_atom(graph, target)
    raise TypeError(f"target must be str or Graph, got {type(target).__name__}")


# =============================================================================
# PATH ENUMERATION
# =============================================================================

def find_atom_paths(graph: Graph, atom: str) -> set[Path]:
    """Every path to an occurrence of `atom` at or below this enclosure."""
    paths: set[Path] = set()

    if graph.size > 1:
        for k, symbol in enumerate(graph.atoms):
            if symbol == atom:
                paths.add((graph.num_children + k,))

    for i, child in enumerate(graph.children):
        if contains_atom(child, atom):
            paths.update((i,) + sub_path for sub_path in find_atom_paths(child, atom))

    return paths


def find_graph_paths(graph: Graph, sub: Graph) -> set[Path]:
    """
    Every path to a nested cut equal to `sub`.

    A matching cut that is the sole element of its enclosure is searched
    inside instead of being reported.
    """
    paths: set[Path] = set()

    for i, child in enumerate(graph.children):
        if child == sub and graph.size > 1:
            paths.add((i,))
        else:
            paths.update((i,) + sub_path for sub_path in find_graph_paths(child, sub))

    return paths


def find_paths(graph: Graph, target: Target) -> set[Path]:
    """Path enumeration for an atom symbol or a sub-graph."""
    if isinstance(target, Graph):
        return find_graph_paths(graph, target)
    if isinstance(target, str):
        return find_atom_paths(graph, target)
    raise TypeError(f"target must be str or Graph, got {type(target).__name__}")
