#!/usr/bin/env python3
"""
Dump the suffix automaton table for a list of suffixes.

Reads a newline-delimited suffix file (plain or .gz) and prints the
TRANSITIONS/FINALS tables as Python source, one state per line with the
suffix noted next to every accepting state.

Usage:
    python scripts/generate_stage_table.py suffixes.txt
    python scripts/generate_stage_table.py suffixes.txt.gz > table.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.porter2.tablegen import read_suffixes, render_table


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage:")
        print("  python scripts/generate_stage_table.py <suffix-file>")
        print("\nExamples:")
        print("  python scripts/generate_stage_table.py step2.txt")
        print("  python scripts/generate_stage_table.py step2.txt.gz > step2_table.py")
        sys.exit(1)

    try:
        suffixes = read_suffixes(sys.argv[1])
        print(render_table(suffixes), end="")
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
