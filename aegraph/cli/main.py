"""
aegraph CLI — Read-Only Interface for Existential Graph rewriting.

Commands:
    aegraph show [FILE]               — Print the canonical notation
    aegraph sites RULE [FILE]         — List every site where RULE applies
    aegraph apply RULE PATH [FILE]    — Apply RULE at PATH, print the result

FILE defaults to '-' (standard input). PATH is comma separated indices,
as printed by 'aegraph sites'.

The CLI never chains rule applications; choosing which site to rewrite
is left to the caller.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..graph import AEGraphError, Graph, format_path, parse_path
from ..notation import parse, serialize
from ..rules import RULES, get_rule


logger = logging.getLogger("aegraph.cli")


# =============================================================================
# INPUT / OUTPUT
# =============================================================================

def read_graph(source: str) -> Graph:
    """
    Read and parse notation from a file path, or stdin for '-'.

    Raises:
        MalformedInputError: If the notation is malformed
        OSError: If the file cannot be read
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        with open(source, "r", encoding="utf-8") as fh:
            text = fh.read()

    logger.debug("read %d characters from %s", len(text), source)
    return parse(text)


def format_sites(sites: set) -> list[str]:
    """Format sites one per line, in sorted order."""
    return [format_path(site) for site in sorted(sites)]


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_show(args: argparse.Namespace) -> int:
    """Print the canonical notation of a graph."""
    graph = read_graph(args.file)
    print(serialize(graph))
    return 0


def cmd_sites(args: argparse.Namespace) -> int:
    """List every site where a rule applies."""
    rule = get_rule(args.rule)
    graph = read_graph(args.file)

    sites = rule.find_sites(graph)
    for line in format_sites(sites):
        print(line)

    print(f"Total: {len(sites)} {rule.name} sites")
    return 0


def cmd_apply(args: argparse.Namespace) -> int:
    """Apply a rule at a site and print the resulting graph."""
    rule = get_rule(args.rule)

    try:
        path = parse_path(args.path)
    except ValueError as e:
        print(f"ERROR: Invalid path {args.path!r}")
        print(f"Reason: {e}")
        return 1

    graph = read_graph(args.file)
    print(serialize(rule.apply(graph, path)))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="aegraph",
        description="aegraph — Existential Graphs rewriting",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the canonical notation of a graph",
    )
    show_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Notation file ('-' for stdin)",
    )
    show_parser.set_defaults(func=cmd_show)

    # Sites command
    sites_parser = subparsers.add_parser(
        "sites",
        help="List every site where a rule applies",
    )
    sites_parser.add_argument(
        "rule",
        choices=sorted(RULES),
        help="Rule to search for",
    )
    sites_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Notation file ('-' for stdin)",
    )
    sites_parser.set_defaults(func=cmd_sites)

    # Apply command
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply a rule at a site",
    )
    apply_parser.add_argument(
        "rule",
        choices=sorted(RULES),
        help="Rule to apply",
    )
    apply_parser.add_argument(
        "path",
        help="Site path, comma separated (e.g. 0,1,2)",
    )
    apply_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Notation file ('-' for stdin)",
    )
    apply_parser.set_defaults(func=cmd_apply)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (AEGraphError, OSError) as e:
        print(f"ERROR: {type(e).__name__}")
        print(f"Reason: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
