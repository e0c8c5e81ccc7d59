# CLI package for the aegraph reasoning engine
"""
Read-only CLI interface for rewriting Existential Graphs.

Commands:
    aegraph show   — Print the canonical notation
    aegraph sites  — List rule application sites
    aegraph apply  — Apply a rule at a site
"""
