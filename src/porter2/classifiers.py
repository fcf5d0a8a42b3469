"""
Character and word classifiers shared by the stemming stages.

Vowels are a, e, i, o, u and y. The marker Y (a y that behaves like a
consonant) is deliberately not a vowel.

Short syllable:
    (a) a vowel followed by a non-vowel other than w, x or Y and preceded
        by a non-vowel, or
    (b) a vowel at the beginning of the word followed by a non-vowel.

Short word:
    R1 is null and the word ends in a short syllable.
    ("bed", "shed", "shred" are short; "bead", "embed", "beds" are not.)
"""

from typing import Sequence

VOWELS = frozenset("aeiouy")

# Marker for a y that acts as a consonant (initial y, or y after a vowel)
CONSONANT_Y = "Y"

# Last letter of a short syllable may not be one of these
NON_SHORT_ENDINGS = frozenset("wxY")


def is_vowel(char: str) -> bool:
    return char in VOWELS


def has_vowel(chars: Sequence[str]) -> bool:
    """Check if any character in the sequence is a vowel."""
    return any(c in VOWELS for c in chars)


def is_short_syllable(chars: Sequence[str]) -> bool:
    """
    Check if the word ends in a short syllable.

    Only the last three characters are inspected, except for two-letter
    words where the syllable must start the word.
    """
    length = len(chars)

    if length < 2:
        return False

    if length == 2:
        return is_vowel(chars[0]) and not is_vowel(chars[1])

    last, middle, first = chars[-1], chars[-2], chars[-3]
    return (
        not is_vowel(first)
        and is_vowel(middle)
        and not is_vowel(last)
        and last not in NON_SHORT_ENDINGS
    )


def is_short_word(chars: Sequence[str], r1: int) -> bool:
    """
    Check if the word is short.

    Args:
        chars: Word characters (possibly already shortened by a stage)
        r1: R1 offset computed for the word before any stage ran
    """
    if r1 < len(chars):
        return False

    return is_short_syllable(chars)
