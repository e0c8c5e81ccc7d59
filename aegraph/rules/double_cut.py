"""
Double-Cut Engine.

A double cut is a cut whose entire content is exactly one cut:

    [[X]]  ==  X

Removing (or inserting) a double cut never changes the meaning of a
graph, so it is legal at any depth.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..canonical import canonicalize
from ..graph import Graph, InvalidPathError, Path
from ..paths import rebuild, split_path


logger = logging.getLogger("aegraph.rules")


def is_double_cut(node: Graph) -> bool:
    """Check the double-cut shape: no atoms and exactly one nested cut."""
    return not node.is_root and node.num_atoms == 0 and node.num_children == 1


# =============================================================================
# SITE DISCOVERY
# =============================================================================

def find_double_cuts(graph: Graph) -> set[Path]:
    """
    Every path to the outer cut of a double cut, at any depth.
    """
    sites: set[Path] = set()

    for i, child in enumerate(graph.children):
        if is_double_cut(child):
            sites.add((i,))
        sites.update((i,) + sub_path for sub_path in find_double_cuts(child))

    return sites


# =============================================================================
# APPLICATION
# =============================================================================

def apply_double_cut(graph: Graph, path: Path) -> Graph:
    """
    Collapse the double cut whose outer cut is addressed by `path`.

    The inner cut's atoms and children are spliced into the enclosure
    that held the outer cut. The result is canonical.

    Raises:
        InvalidPathError: If `path` does not address a double cut
    """
    path = tuple(path)
    parent, step = split_path(graph, path)
    if not step.is_child:
        raise InvalidPathError(path, "addresses an atom, not a cut")

    outer = parent.children[step.index]
    if not is_double_cut(outer):
        raise InvalidPathError(path, "addressed cut is not a double cut")
    inner = outer.children[0]

    def collapse(node: Graph) -> Graph:
        children = (
            node.children[:step.index]
            + inner.children
            + node.children[step.index + 1:]
        )
        return replace(node, atoms=node.atoms + inner.atoms, children=children)

    result = canonicalize(rebuild(graph, path[:-1], collapse))
    logger.debug("removed double cut at %s", path)
    return result


def insert_double_cut(graph: Graph, path: Path = ()) -> Graph:
    """
    Wrap the element addressed by `path` in two new cuts.

    The empty path wraps the whole content of the graph. The result is
    canonical.

    Raises:
        InvalidPathError: If `path` does not address an element
    """
    path = tuple(path)

    if not path:
        wrapped = Graph.cut(children=(Graph.cut(atoms=graph.atoms, children=graph.children),))
        return canonicalize(replace(graph, atoms=(), children=(wrapped,)))

    _, step = split_path(graph, path)

    def wrap(node: Graph) -> Graph:
        if step.is_child:
            target = node.children[step.index]
            wrapped = Graph.cut(children=(Graph.cut(children=(target,)),))
            children = (
                node.children[:step.index]
                + (wrapped,)
                + node.children[step.index + 1:]
            )
            return replace(node, children=children)

        atom = node.atoms[step.index]
        wrapped = Graph.cut(children=(Graph.cut(atoms=(atom,)),))
        atoms = node.atoms[:step.index] + node.atoms[step.index + 1:]
        return replace(node, atoms=atoms, children=node.children + (wrapped,))

    result = canonicalize(rebuild(graph, path[:-1], wrap))
    logger.debug("inserted double cut at %s", path)
    return result
