"""
Entry point for running treewalk as CLI.

Usage:
    python -m treewalk --demo
    python -m treewalk --graph tree.json --mode dfs
    python -m treewalk --help
"""

from .cli import main

if __name__ == "__main__":
    main()
