# aegraph — Existential Graphs reasoning engine

"""
Peirce's Existential Graphs (alpha part) as immutable trees.

    parse / serialize        — bracket notation codec
    canonicalize             — order-insensitive canonical form
    contains / find_paths    — structural queries
    aegraph.rules            — double cut, erasure, deiteration
"""

from .canonical import canonicalize, is_canonical
from .graph import (
    AEGraphError,
    Graph,
    InvalidPathError,
    MalformedInputError,
    Path,
    Selector,
    SelectorKind,
    UnknownRuleError,
    format_path,
    parse_path,
)
from .notation import parse, serialize
from .queries import contains, find_paths

__version__ = "0.1.0"

__all__ = [
    "AEGraphError",
    "Graph",
    "InvalidPathError",
    "MalformedInputError",
    "Path",
    "Selector",
    "SelectorKind",
    "UnknownRuleError",
    "canonicalize",
    "contains",
    "find_paths",
    "format_path",
    "is_canonical",
    "parse",
    "parse_path",
    "serialize",
]
