"""
Table-driven suffix automaton.

One generic engine performs the longest-suffix-match-and-rewrite used by
steps 0, 1a, 1b, 2, 3 and 4. Each step only supplies data: a list of
SuffixRule entries and the region its suffixes must lie in.

Matching walks the word from its last character backwards through the
transition table. Every accepting state reached replaces the previous best
match, so the longest suffix always wins ("caresses" matches "sses", not
"s"). A missing transition ends the walk early.

Rewrite kinds:
- delete:      truncate the matched suffix
- replace:     truncate, then append a fixed string ("ational" → "ate")
- conditional: rewrite only if a predicate on the word holds
- keep:        matched suffix is left in place ("ss", "us")

No match and a match outside the region are both plain no-ops.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .regions import Regions
from .tablegen import compile_suffixes

# condition(word, stem_end, regions) -> bool, stem_end = len(word) - len(suffix)
Condition = Callable[[List[str], int, Regions], bool]

# then(word, regions) -> None, runs after the rewrite and may edit the tail
Repair = Callable[[List[str], Regions], None]


@dataclass(frozen=True)
class SuffixRule:
    """Action for one suffix of a stage"""
    suffix: str
    replacement: Optional[str] = ""    # None keeps the suffix in place
    condition: Optional[Condition] = None
    otherwise: Optional[str] = None    # replacement when condition fails (None: no-op)
    region: Optional[str] = None       # extra region gate on top of the stage's
    then: Optional[Repair] = None

    @property
    def kind(self) -> str:
        if self.replacement is None:
            return "keep"
        if self.condition is not None:
            return "conditional"
        if self.replacement:
            return "replace"
        return "delete"


@dataclass(frozen=True)
class Match:
    """Longest suffix found by a backward walk"""
    length: int
    state: int
    rule: SuffixRule


class SuffixAutomaton:
    """
    Immutable transition/action table for one set of suffix rules.

    Safe to share between threads: tables are built once and never mutated.
    """

    def __init__(self, rules: Sequence[SuffixRule]):
        suffixes = [rule.suffix for rule in rules]
        if len(set(suffixes)) != len(suffixes):
            raise ValueError(f"Duplicate suffix rules: {suffixes}")

        transitions, finals = compile_suffixes(suffixes)
        by_suffix = {rule.suffix: rule for rule in rules}

        self.transitions: Tuple[Mapping[str, int], ...] = tuple(
            MappingProxyType(edges) for edges in transitions
        )
        self.actions: Mapping[int, SuffixRule] = MappingProxyType({
            state: by_suffix[suffix] for state, suffix in finals.items()
        })

    def __len__(self) -> int:
        return len(self.transitions)

    def longest_match(self, word: Sequence[str]) -> Optional[Match]:
        """Walk the word backwards and return the longest matching suffix."""
        state = 0
        best = None

        for depth in range(1, len(word) + 1):
            state = self.transitions[state].get(word[-depth])
            if state is None:
                break

            rule = self.actions.get(state)
            if rule is not None:
                best = Match(length=depth, state=state, rule=rule)

        return best


@dataclass(frozen=True)
class Stage:
    """A suffix stage: automaton plus the region its suffixes must lie in"""
    name: str
    automaton: SuffixAutomaton
    region: Optional[str] = None

    @classmethod
    def from_rules(cls, name: str, rules: Sequence[SuffixRule], region: Optional[str] = None) -> "Stage":
        return cls(name=name, automaton=SuffixAutomaton(rules), region=region)

    def apply(self, word: List[str], regions: Regions) -> bool:
        """
        Rewrite the longest matching suffix of `word` in place.

        Returns:
            True if the word was changed
        """
        match = self.automaton.longest_match(word)
        if match is None:
            return False

        length = len(word)
        if not regions.contains(self.region, length, match.length):
            return False

        rule = match.rule
        if rule.region is not None and not regions.contains(rule.region, length, match.length):
            return False

        if rule.replacement is None:
            return False

        replacement = rule.replacement
        stem_end = length - match.length
        if rule.condition is not None and not rule.condition(word, stem_end, regions):
            if rule.otherwise is None:
                return False
            replacement = rule.otherwise

        del word[stem_end:]
        word.extend(replacement)

        if rule.then is not None:
            rule.then(word, regions)

        return True
