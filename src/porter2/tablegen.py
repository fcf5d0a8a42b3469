"""
Suffix table generator.

Turns a list of suffixes into the transition table walked by the suffix
automaton. Every suffix is inserted back to front into a tree whose root is
state 0; the tree is then flattened into plain data:

    transitions[state] = {char: next_state}
    finals = {state: suffix}

States are numbered in the order they are created, so the same suffix list
always yields the same table.

Example (suffixes "'", "'s", "'s'"):
    transitions = ({"'": 1, "s": 2}, {"s": 4}, {"'": 3}, {}, {"'": 5}, {})
    finals = {1: "'", 3: "'s", 5: "'s'"}

The stage tables are compiled from their rule lists at import time. The
render_table() dump is for inspecting a suffix list offline
(see scripts/generate_stage_table.py).
"""

import gzip
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)


def compile_suffixes(suffixes: Iterable[str]) -> Tuple[List[Dict[str, int]], Dict[int, str]]:
    """
    Build the transition table for a list of suffixes.

    Args:
        suffixes: Suffix strings (blank entries and duplicates are ignored)

    Returns:
        (transitions, finals) where transitions is indexed by state and
        finals maps each accepting state to its suffix

    Raises:
        ValueError: If no suffix is given
    """
    transitions: List[Dict[str, int]] = [{}]
    finals: Dict[int, str] = {}

    for suffix in suffixes:
        suffix = suffix.strip()
        if not suffix:
            continue

        state = 0
        for char in reversed(suffix):
            next_state = transitions[state].get(char)
            if next_state is None:
                next_state = len(transitions)
                transitions.append({})
                transitions[state][char] = next_state
            state = next_state

        finals[state] = suffix

    if not finals:
        raise ValueError("Suffix list is empty")

    logger.debug(f"Compiled {len(finals)} suffixes into {len(transitions)} states")

    return transitions, finals


def read_suffixes(path: Union[str, Path]) -> List[str]:
    """
    Read a newline-delimited suffix file (plain or .gz).

    Returns:
        Non-blank suffixes in file order
    """
    path = Path(path)

    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as f:
            lines = f.read().splitlines()
    else:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()

    return [line.strip() for line in lines if line.strip()]


def render_table(suffixes: Iterable[str]) -> str:
    """
    Render the table for a suffix list as Python source.

    The output defines TRANSITIONS and FINALS and can be pasted into a module
    or diffed against a previous rendering.
    """
    transitions, finals = compile_suffixes(suffixes)

    lines = ["TRANSITIONS = ("]
    for state, edges in enumerate(transitions):
        body = ", ".join(f"{char!r}: {target}" for char, target in edges.items())
        comment = f"  # {state}"
        if state in finals:
            comment += f" {finals[state]} - final"
        lines.append(f"    {{{body}}},{comment}")
    lines.append(")")
    lines.append("")
    lines.append("FINALS = {")
    for state in sorted(finals):
        lines.append(f"    {state}: {finals[state]!r},")
    lines.append("}")

    return "\n".join(lines) + "\n"
