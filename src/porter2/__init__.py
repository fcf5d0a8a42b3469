"""
Porter2 (Snowball English) stemmer built on table-driven suffix automata.

Instead of comparing a word against a list of suffix strings, every step
walks the word backwards through a small transition table compiled from
its suffix list, keeping the longest suffix that reaches an accepting state.

Components:
- stemmer: stem() pipeline
- stages: prelude, steps 0-5, postlude and their rule tables
- automaton: generic longest-suffix-match engine
- tablegen: suffix list → transition table compiler
- regions: R1/R2 locator
- irregulars: whole-word exception tables
- classifiers: vowel / short syllable / short word predicates

Reference: https://snowballstem.org/algorithms/english/stemmer.html
"""

from .errors import InvalidInputError
from .regions import Regions, mark_regions
from .stemmer import regions_of, stem

__all__ = [
    "stem",
    "regions_of",
    "mark_regions",
    "Regions",
    "InvalidInputError",
]
