"""
R1/R2 region locator.

R1 is the region after the first non-vowel following a vowel, or the null
region at the end of the word if there is no such non-vowel.

R2 is the region after the first non-vowel following a vowel in R1, or the
null region at the end of the word if there is no such non-vowel.

If the word begins with gener, commun or arsen, R1 is the remainder of the
word after that prefix.

Reference: https://snowballstem.org/texts/r1r2.html

Examples:
- "beautiful" → R1=5 ("iful"), R2=7 ("ul")
- "beau" → R1=4, R2=4 (both null)
- "animadversion" → R1=2, R2=4
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .classifiers import is_vowel

# Prefixes whose end fixes R1 regardless of the vowel scan
R1_PREFIXES = ("gener", "commun", "arsen")


@dataclass(frozen=True)
class Regions:
    """R1/R2 start offsets into the normalized word"""
    r1: int
    r2: int

    def start(self, name: Optional[str]) -> int:
        """Offset of the named region ("r1" or "r2"), 0 for no region."""
        if name is None:
            return 0
        if name == "r1":
            return self.r1
        if name == "r2":
            return self.r2
        raise ValueError(f"Unknown region: {name!r}")

    def contains(self, name: Optional[str], word_length: int, suffix_length: int) -> bool:
        """
        Check if a suffix lies entirely inside the named region.

        Stages only ever shorten or rewrite the end of the word, so the
        offsets computed up front stay valid for the shrinking word.
        """
        return word_length - self.start(name) >= suffix_length


def region_after(chars: Sequence[str], start: int = 0) -> int:
    """
    Find the offset just past the first non-vowel that follows a vowel.

    Scanning begins at `start`. Returns len(chars) if there is no such
    non-vowel.
    """
    for i in range(start, len(chars) - 1):
        if is_vowel(chars[i]) and not is_vowel(chars[i + 1]):
            return i + 2
    return len(chars)


def mark_regions(chars: Sequence[str]) -> Regions:
    """
    Compute R1 and R2 for a normalized word.

    Pure function: the word is never modified.

    Args:
        chars: Normalized word (lowercase, consonant y marked as Y)

    Returns:
        Regions with 0 <= r1 <= r2 <= len(chars)
    """
    word = "".join(chars)

    r1 = None
    for prefix in R1_PREFIXES:
        if word.startswith(prefix):
            r1 = len(prefix)
            break

    if r1 is None:
        r1 = region_after(chars)

    return Regions(r1=r1, r2=region_after(chars, r1))
