"""
Erasure Engine.

Any element in a positive context may be erased. A context is positive
when it is enclosed by an even number of cuts: the sheet of assertion is
depth 0 (positive), a cut on the sheet is depth 1 (negative), and so on.

The sole element of a nested cut is not offered for erasure.
"""

from __future__ import annotations

import logging

from ..canonical import canonicalize
from ..graph import Graph, InvalidPathError, Path
from ..paths import depth_of, remove_element, split_path


logger = logging.getLogger("aegraph.rules")


# Depth parity of the contexts in which erasure is permitted
POSITIVE_PARITY = 0


def is_positive(level: int) -> bool:
    """Check whether an enclosure at this depth is a positive context."""
    return level % 2 == POSITIVE_PARITY


# =============================================================================
# SITE DISCOVERY
# =============================================================================

def find_erasure_sites(graph: Graph, level: int = 0) -> set[Path]:
    """
    Every path to an element that may be erased.

    Args:
        graph: Enclosure to search
        level: Nesting depth of `graph` (0 for the sheet of assertion)
    """
    sites: set[Path] = set()

    offered = is_positive(level) and (graph.is_root or graph.size != 1)

    for i in range(graph.size):
        if offered:
            sites.add((i,))
        if i < graph.num_children:
            nested = find_erasure_sites(graph.children[i], level + 1)
            sites.update((i,) + sub_path for sub_path in nested)

    return sites


# =============================================================================
# APPLICATION
# =============================================================================

def apply_erasure(graph: Graph, path: Path) -> Graph:
    """
    Erase the atom or cut addressed by `path`. The result is canonical.

    Raises:
        InvalidPathError: If `path` does not address an element, or the
            element is not an erasure site
    """
    path = tuple(path)
    parent, _ = split_path(graph, path)

    if not is_positive(depth_of(path)):
        raise InvalidPathError(path, "element is in a negative context")
    if path not in find_erasure_sites(graph):
        raise InvalidPathError(path, "element is the sole content of its cut")

    result = canonicalize(remove_element(graph, path))
    logger.debug("erased element at %s (enclosure size %d)", path, parent.size)
    return result
