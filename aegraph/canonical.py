"""
Canonical form for Existential Graphs.

Sibling order carries no meaning in an Existential Graph, so every graph
has one canonical arrangement:
    - atoms sorted lexicographically
    - children canonicalized first, then sorted by their serialization

Structural equality is decided by comparing canonical serializations.
"""

from __future__ import annotations

from .graph import Graph
from .notation import serialize


def canonicalize(graph: Graph) -> Graph:
    """Return the canonical arrangement of a graph (the input is untouched)."""
    children = [canonicalize(child) for child in graph.children]
    children.sort(key=serialize)

    return Graph(
        is_root=graph.is_root,
        atoms=tuple(sorted(graph.atoms)),
        children=tuple(children),
    )


def canonical_key(graph: Graph) -> str:
    """Serialized canonical form, usable as a sort or hash key."""
    return serialize(canonicalize(graph))


def is_canonical(graph: Graph) -> bool:
    """Check whether a graph is already stored in canonical order."""
    return serialize(graph) == canonical_key(graph)
