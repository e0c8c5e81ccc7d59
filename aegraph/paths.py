"""
Path resolution and path-addressed rebuilding.

A path is a tuple of combined indices. Every step except the last must
select a nested cut; the last step may select a cut or an atom.

Rule applications never mutate a graph. They rebuild the tree along a
path: every ancestor of the target is copied with one child replaced,
everything off the path is shared unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Union

from .graph import Graph, InvalidPathError, Path, Selector


# =============================================================================
# RESOLUTION
# =============================================================================

def resolve_step(node: Graph, index: int, path: Path) -> Selector:
    """
    Resolve one combined index against an enclosure.

    Raises:
        InvalidPathError: If the index is out of range
    """
    try:
        return node.selector(index)
    except (IndexError, TypeError) as e:
        raise InvalidPathError(path, str(e)) from e


def enclosure_at(graph: Graph, path: Path) -> Graph:
    """
    Walk a path made only of cut selections and return the enclosure
    it reaches. The empty path reaches the graph itself.

    Raises:
        InvalidPathError: If a step is out of range or selects an atom
    """
    path = tuple(path)
    node = graph
    for index in path:
        step = resolve_step(node, index, path)
        if not step.is_child:
            raise InvalidPathError(path, f"step {index} selects an atom, not a cut")
        node = node.children[step.index]
    return node


def split_path(graph: Graph, path: Path) -> tuple[Graph, Selector]:
    """
    Resolve a non-empty path into (containing enclosure, final selector).

    Raises:
        InvalidPathError: If the path is empty or does not address an element
    """
    path = tuple(path)
    if not path:
        raise InvalidPathError(path, "the root path does not address an element")

    parent = enclosure_at(graph, path[:-1])
    return parent, resolve_step(parent, path[-1], path)


def element_at(graph: Graph, path: Path) -> Union[Graph, str]:
    """Return the cut or the atom symbol addressed by a non-empty path."""
    parent, step = split_path(graph, path)
    if step.is_child:
        return parent.children[step.index]
    return parent.atoms[step.index]


def depth_of(path: Path) -> int:
    """Nesting depth of the enclosure that contains the addressed element."""
    return len(path) - 1


# =============================================================================
# REBUILDING
# =============================================================================

def rebuild(graph: Graph, path: Path, transform: Callable[[Graph], Graph]) -> Graph:
    """
    Replace the enclosure reached by `path` with `transform(enclosure)`,
    copying every ancestor along the way.

    Raises:
        InvalidPathError: If the path does not reach an enclosure
    """
    path = tuple(path)
    enclosure_at(graph, path)
    return _rebuild(graph, path, transform)


def _rebuild(node: Graph, path: Path, transform: Callable[[Graph], Graph]) -> Graph:
    if not path:
        return transform(node)

    index = path[0]
    children = list(node.children)
    children[index] = _rebuild(children[index], path[1:], transform)
    return replace(node, children=tuple(children))


def without_element(node: Graph, step: Selector) -> Graph:
    """Copy of an enclosure with one element removed."""
    if step.is_child:
        children = node.children[:step.index] + node.children[step.index + 1:]
        return replace(node, children=children)

    atoms = node.atoms[:step.index] + node.atoms[step.index + 1:]
    return replace(node, atoms=atoms)


def remove_element(graph: Graph, path: Path) -> Graph:
    """
    Remove the atom or cut addressed by a non-empty path.

    Raises:
        InvalidPathError: If the path does not address an element
    """
    path = tuple(path)
    _, step = split_path(graph, path)
    return rebuild(graph, path[:-1], lambda parent: without_element(parent, step))
