"""
Core Domain Objects for the aegraph reasoning engine.

An Existential Graph is a tree of enclosures. The outermost enclosure is
the sheet of assertion; every nested enclosure is a cut (negation).

Domain Objects:
    Graph     — One enclosure: its atoms and its directly nested cuts
    Selector  — One resolved path step (a cut or an atom at some level)
    Path      — A tuple of combined indices addressing an element

Addressing convention at every level:
    0 .. num_children-1                       select nested cuts
    num_children .. num_children+num_atoms-1  select atoms
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


Path = tuple[int, ...]


# =============================================================================
# ERRORS
# =============================================================================

class AEGraphError(Exception):
    """Base class for every error raised by aegraph."""
    pass


class MalformedInputError(AEGraphError):
    """Raised when notation text is not a well-framed, balanced graph."""

    def __init__(self, reason: str, text: Optional[str] = None):
        self.reason = reason
        self.text = text
        if text is not None:
            super().__init__(f"{reason}: {text!r}")
        else:
            super().__init__(reason)


class InvalidPathError(AEGraphError):
    """
    Raised when a path does not address an element of a graph, or
    addresses one that does not satisfy the requested rule.
    """

    def __init__(self, path: Path, reason: str):
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"invalid path {format_path(self.path)}: {reason}")


class UnknownRuleError(AEGraphError, ValueError):
    """Raised when a rule name is not registered."""
    pass


# =============================================================================
# PATH STEPS
# =============================================================================

class SelectorKind(Enum):
    """What a single path step selects."""
    CHILD = "child"
    ATOM = "atom"


@dataclass(frozen=True)
class Selector:
    """
    A path step resolved against a concrete enclosure.

    `index` is relative to the selected sequence: a CHILD selector
    indexes `children`, an ATOM selector indexes `atoms`.
    """
    kind: SelectorKind
    index: int

    @property
    def is_child(self) -> bool:
        return self.kind == SelectorKind.CHILD

    @property
    def is_atom(self) -> bool:
        return self.kind == SelectorKind.ATOM


def format_path(path: Path) -> str:
    """Render a path as comma separated indices (the root path is '<root>')."""
    if not path:
        return "<root>"
    return ",".join(str(step) for step in path)


def parse_path(text: str) -> Path:
    """
    Parse the comma separated form produced by format_path.

    An empty string (or '<root>') is the root path.

    Raises:
        ValueError: If a step is not a non-negative integer
    """
    text = text.strip()
    if not text or text == "<root>":
        return ()

    steps = []
    for part in text.split(","):
        step = int(part.strip())
        if step < 0:
            raise ValueError(f"path steps must be non-negative, got {step}")
        steps.append(step)
    return tuple(steps)


# =============================================================================
# GRAPH
# =============================================================================

@dataclass(frozen=True, eq=False)
class Graph:
    """
    One enclosure of an Existential Graph.

    A Graph exclusively owns its atoms and children. It is immutable:
    every rule application builds a new tree.

    Equality, ordering and hashing use the canonical serialization, so
    two graphs differing only in sibling order compare equal.
    """
    is_root: bool = True
    atoms: tuple[str, ...] = field(default_factory=tuple)
    children: tuple[Graph, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Normalize sequences to tuples and enforce the root invariant."""
        object.__setattr__(self, "atoms", tuple(self.atoms))
        object.__setattr__(self, "children", tuple(self.children))

        for child in self.children:
            if not isinstance(child, Graph):
                raise TypeError(f"children must be Graph, got {type(child)}")
            if child.is_root:
                raise ValueError("the sheet of assertion cannot be nested")

    @classmethod
    def sheet(cls, atoms=(), children=()) -> Graph:
        """Create a sheet of assertion."""
        return cls(is_root=True, atoms=tuple(atoms), children=tuple(children))

    @classmethod
    def cut(cls, atoms=(), children=()) -> Graph:
        """Create a cut."""
        return cls(is_root=False, atoms=tuple(atoms), children=tuple(children))

    # -------------------------------------------------------------------------
    # Size
    # -------------------------------------------------------------------------

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def num_children(self) -> int:
        return len(self.children)

    @property
    def size(self) -> int:
        """Number of elements directly inside this enclosure."""
        return self.num_atoms + self.num_children

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def selector(self, index: int) -> Selector:
        """
        Resolve a combined index into a tagged Selector.

        Raises:
            IndexError: If the index is outside 0 .. size-1
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be int, got {type(index)}")
        if index < 0 or index >= self.size:
            raise IndexError(f"index {index} out of range for size {self.size}")
        if index < self.num_children:
            return Selector(SelectorKind.CHILD, index)
        return Selector(SelectorKind.ATOM, index - self.num_children)

    def __getitem__(self, index: int) -> Graph:
        """
        Element at a combined index.

        A cut is returned as-is; an atom is returned as a sheet holding
        only that atom.
        """
        step = self.selector(index)
        if step.is_child:
            return self.children[step.index]
        return Graph.sheet(atoms=(self.atoms[step.index],))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.canonical_key() == other.canonical_key()

    def __lt__(self, other: Graph) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.canonical_key() < other.canonical_key()

    def __hash__(self) -> int:
        return hash(self.canonical_key())

    def canonical_key(self) -> str:
        """Serialization of this graph's canonical form."""
        from .canonical import canonical_key
        return canonical_key(self)

    def __str__(self) -> str:
        from .notation import serialize
        return serialize(self)

    def __repr__(self) -> str:
        return f"Graph({str(self)!r})"
