"""
Notation Codec for the aegraph reasoning engine.

Grammar:
    graph      := root-graph
    root-graph := "(" content ")"
    cut        := "[" content "]"
    content    := "" | element ("," element)*
    element    := atom-symbol | cut

Whitespace around any token is insignificant. A comma separates elements
only at the current bracket depth; commas inside a deeper, still-open
bracket belong to that nested element.

The parser trusts well-formed input beyond framing and bracket balance.
Parsed graphs are always returned in canonical form.
"""

from __future__ import annotations

import logging

from .graph import Graph, MalformedInputError


logger = logging.getLogger("aegraph.notation")


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

SHEET_DELIMITERS = ("(", ")")
CUT_DELIMITERS = ("[", "]")
ELEMENT_SEPARATOR = ","

# Separator emitted between elements when serializing
OUTPUT_SEPARATOR = ELEMENT_SEPARATOR + " "


# =============================================================================
# SPLITTING
# =============================================================================

def split_level(text: str, delimiter: str = ELEMENT_SEPARATOR) -> list[str]:
    """
    Split enclosure content into its top-level elements.

    Empty content yields an empty list. Empty elements (as in "a,,b")
    are kept so the caller can reject them.
    """
    if not text.strip():
        return []

    elements = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char == CUT_DELIMITERS[0]:
            depth += 1
        elif char == CUT_DELIMITERS[1]:
            depth -= 1
        elif char == delimiter and depth == 0:
            elements.append(text[start:i].strip())
            start = i + 1

    elements.append(text[start:].strip())
    return elements


# =============================================================================
# VALIDATION
# =============================================================================

def validate_framing(text: str) -> bool:
    """
    Check the outer delimiter pair and the bracket balance of a graph.

    Returns:
        True for a sheet of assertion, False for a cut

    Raises:
        MalformedInputError: If framing or balance is wrong
    """
    if len(text) < 2:
        raise MalformedInputError("graph must be wrapped in () or []", text)

    pair = (text[0], text[-1])
    if pair not in (SHEET_DELIMITERS, CUT_DELIMITERS):
        raise MalformedInputError(
            "graph must start and end with a matching () or [] pair", text
        )

    inner = text[1:-1]
    if SHEET_DELIMITERS[0] in inner or SHEET_DELIMITERS[1] in inner:
        raise MalformedInputError(
            "the sheet of assertion may only wrap the whole graph", text
        )

    depth = 0
    for char in inner:
        if char == CUT_DELIMITERS[0]:
            depth += 1
        elif char == CUT_DELIMITERS[1]:
            depth -= 1
            if depth < 0:
                raise MalformedInputError("unbalanced ']'", text)
    if depth != 0:
        raise MalformedInputError("unbalanced '['", text)

    return pair == SHEET_DELIMITERS


# =============================================================================
# PARSING
# =============================================================================

def _parse_node(text: str) -> Graph:
    """Build the (not yet canonical) tree for validated notation."""
    is_root = validate_framing(text)

    atoms: list[str] = []
    children: list[Graph] = []
    for element in split_level(text[1:-1]):
        if not element:
            raise MalformedInputError("empty element", text)
        if element.startswith(CUT_DELIMITERS[0]):
            children.append(_parse_node(element))
        else:
            atoms.append(element)

    return Graph(is_root=is_root, atoms=tuple(atoms), children=tuple(children))


def parse(text: str) -> Graph:
    """
    Parse bracket notation into a canonical Graph.

    Raises:
        MalformedInputError: If the text is not framed by a matching
            delimiter pair or its brackets are unbalanced
    """
    from .canonical import canonicalize

    if not isinstance(text, str):
        raise MalformedInputError(f"notation must be str, got {type(text).__name__}")

    graph = canonicalize(_parse_node(text.strip()))
    logger.debug("parsed %d atoms, %d cuts at top level", graph.num_atoms, graph.num_children)
    return graph


# =============================================================================
# SERIALIZATION
# =============================================================================

def serialize(graph: Graph) -> str:
    """
    Serialize a graph to bracket notation.

    Children come first, then atoms, in stored order. No sorting happens
    here; canonicalize first when a canonical string is needed.
    """
    left, right = SHEET_DELIMITERS if graph.is_root else CUT_DELIMITERS

    elements = [serialize(child) for child in graph.children]
    elements.extend(graph.atoms)

    return left + OUTPUT_SEPARATOR.join(elements) + right
