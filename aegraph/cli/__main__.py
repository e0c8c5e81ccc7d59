"""
aegraph CLI entry point.

Usage:
    python -m aegraph.cli show graph.txt
    python -m aegraph.cli sites erasure graph.txt
    python -m aegraph.cli apply double-cut 2 graph.txt
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
