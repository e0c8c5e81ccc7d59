# Rules package for the aegraph reasoning engine
"""
Structural inference rules.

Each rule is exposed as a pair of operations:
    find_sites(graph) -> set of paths where the rule may be applied
    apply(graph, path) -> new graph with the rule applied at that path
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..graph import Graph, Path, UnknownRuleError
from .deiteration import apply_deiteration, find_deiteration_sites
from .double_cut import apply_double_cut, find_double_cuts, insert_double_cut
from .erasure import apply_erasure, find_erasure_sites


@dataclass(frozen=True)
class Rule:
    """A named rule with its site finder and its application."""
    name: str
    find_sites: Callable[[Graph], set[Path]]
    apply: Callable[[Graph, Path], Graph]
    description: str = ""


RULES = {
    rule.name: rule
    for rule in (
        Rule(
            "double-cut",
            find_double_cuts,
            apply_double_cut,
            "remove two immediately nested cuts",
        ),
        Rule(
            "erasure",
            find_erasure_sites,
            apply_erasure,
            "erase an element from a positive context",
        ),
        Rule(
            "deiteration",
            find_deiteration_sites,
            apply_deiteration,
            "remove a copy of top-level content from a sibling cut",
        ),
    )
}


def get_rule(name: str) -> Rule:
    """
    Look up a rule by name.

    Raises:
        UnknownRuleError: If no rule has that name
    """
    try:
        return RULES[name]
    except KeyError:
        raise UnknownRuleError(
            f"unknown rule {name!r}, expected one of: {', '.join(sorted(RULES))}"
        ) from None


__all__ = [
    "RULES",
    "Rule",
    "get_rule",
    "apply_deiteration",
    "apply_double_cut",
    "apply_erasure",
    "find_deiteration_sites",
    "find_double_cuts",
    "find_erasure_sites",
    "insert_double_cut",
]
