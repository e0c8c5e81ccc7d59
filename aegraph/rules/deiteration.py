"""
Deiteration Engine.

A copy of a sub-graph (or atom) found inside a sibling cut of the
enclosure where the original sits is redundant and may be removed.

Sites are searched from the top-level enclosure only:
    - every top-level cut i, looked for inside every other top-level cut j
    - every top-level atom, looked for inside every top-level cut j
"""

from __future__ import annotations

import logging

from ..canonical import canonicalize
from ..graph import Graph, InvalidPathError, Path
from ..paths import remove_element, split_path
from ..queries import find_paths


logger = logging.getLogger("aegraph.rules")


# =============================================================================
# SITE DISCOVERY
# =============================================================================

def find_deiteration_sites(graph: Graph) -> set[Path]:
    """Every path to a removable duplicate of top-level content."""
    sites: set[Path] = set()

    for i, original in enumerate(graph.children):
        for j, sibling in enumerate(graph.children):
            if i == j:
                continue
            sites.update((j,) + sub_path for sub_path in find_paths(sibling, original))

    for atom in graph.atoms:
        for j, sibling in enumerate(graph.children):
            sites.update((j,) + sub_path for sub_path in find_paths(sibling, atom))

    return sites


# =============================================================================
# APPLICATION
# =============================================================================

def apply_deiteration(graph: Graph, path: Path) -> Graph:
    """
    Remove the duplicate addressed by `path`. The result is canonical.

    Raises:
        InvalidPathError: If `path` is not a deiteration site of `graph`
    """
    path = tuple(path)
    split_path(graph, path)

    if path not in find_deiteration_sites(graph):
        raise InvalidPathError(path, "element does not duplicate top-level content")

    result = canonicalize(remove_element(graph, path))
    logger.debug("deiterated element at %s", path)
    return result
