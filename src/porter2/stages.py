"""
Porter2 stages: prelude, steps 0-5 and postlude.

Steps 0, 1a, 1b, 2, 3 and 4 are rule tables run by the suffix automaton.
Steps 1c and 5 only look at the last one or two letters and are plain
functions.

Algorithm: https://snowballstem.org/algorithms/english/stemmer.html

Every step edits the word list in place and only ever touches its end, so
the R1/R2 offsets computed once after the prelude stay valid throughout.
"""

from typing import List

from .automaton import Stage, SuffixRule
from .classifiers import CONSONANT_Y, has_vowel, is_short_syllable, is_short_word, is_vowel
from .regions import Regions

# Doubled letters that lose one copy after step 1b ("hopp" → "hop")
DOUBLE_CONSONANTS = frozenset("bdfgmnprt")

# Letters that may precede a removable "li" in step 2
LI_ENDINGS = frozenset("cdeghkmnrt")

# Endings that get an "e" back after step 1b ("luxuriat" → "luxuriate")
E_RESTORING_ENDINGS = ("at", "bl", "iz")


def prelude(word: List[str]) -> List[str]:
    """
    Drop a leading apostrophe, then mark consonant y's as Y.

    A y is a consonant at the start of the word and right after a vowel.
    """
    if word and word[0] == "'":
        del word[0]

    if word and word[0] == "y":
        word[0] = CONSONANT_Y

    for i in range(1, len(word)):
        if word[i] == "y" and is_vowel(word[i - 1]):
            word[i] = CONSONANT_Y

    return word


def postlude(word: List[str]) -> List[str]:
    """Turn any remaining Y markers back into y."""
    for i, char in enumerate(word):
        if char == CONSONANT_Y:
            word[i] = "y"
    return word


# Rule predicates: (word, stem_end, regions) -> bool

def _vowel_before_previous_letter(word: List[str], stem_end: int, regions: Regions) -> bool:
    # "gaps" → "gap", but "gas" keeps its s
    return has_vowel(word[:max(stem_end - 1, 0)])


def _more_than_one_letter_before(word: List[str], stem_end: int, regions: Regions) -> bool:
    return stem_end > 1


def _vowel_before(word: List[str], stem_end: int, regions: Regions) -> bool:
    return has_vowel(word[:stem_end])


def _preceded_by_l(word: List[str], stem_end: int, regions: Regions) -> bool:
    return stem_end > 0 and word[stem_end - 1] == "l"


def _preceded_by_li_ending(word: List[str], stem_end: int, regions: Regions) -> bool:
    return stem_end > 0 and word[stem_end - 1] in LI_ENDINGS


def _preceded_by_s_or_t(word: List[str], stem_end: int, regions: Regions) -> bool:
    return stem_end > 0 and word[stem_end - 1] in ("s", "t")


def _repair_step1b(word: List[str], regions: Regions) -> None:
    """
    Fix up the word after step 1b removed ed/edly/ing/ingly.

    - ends in at, bl or iz: add e ("conflat" → "conflate")
    - ends in a double from DOUBLE_CONSONANTS: drop one ("hopp" → "hop")
    - short word: add e ("hop" → "hope")
    """
    tail = "".join(word[-2:])

    if tail in E_RESTORING_ENDINGS:
        word.append("e")
    elif len(tail) == 2 and tail[0] == tail[1] and tail[1] in DOUBLE_CONSONANTS:
        del word[-1]
    elif is_short_word(word, regions.r1):
        word.append("e")


STEP_0 = Stage.from_rules("step0", [
    SuffixRule("'"),
    SuffixRule("'s"),
    SuffixRule("'s'"),
])

STEP_1A = Stage.from_rules("step1a", [
    SuffixRule("sses", "ss"),
    SuffixRule("ied", "i", condition=_more_than_one_letter_before, otherwise="ie"),
    SuffixRule("ies", "i", condition=_more_than_one_letter_before, otherwise="ie"),
    SuffixRule("s", condition=_vowel_before_previous_letter),
    SuffixRule("us", None),
    SuffixRule("ss", None),
])

STEP_1B = Stage.from_rules("step1b", [
    SuffixRule("eedly", "ee", region="r1"),
    SuffixRule("eed", "ee", region="r1"),
    SuffixRule("ingly", condition=_vowel_before, then=_repair_step1b),
    SuffixRule("edly", condition=_vowel_before, then=_repair_step1b),
    SuffixRule("ing", condition=_vowel_before, then=_repair_step1b),
    SuffixRule("ed", condition=_vowel_before, then=_repair_step1b),
])

STEP_2 = Stage.from_rules("step2", [
    SuffixRule("tional", "tion"),
    SuffixRule("enci", "ence"),
    SuffixRule("anci", "ance"),
    SuffixRule("abli", "able"),
    SuffixRule("entli", "ent"),
    SuffixRule("izer", "ize"),
    SuffixRule("ization", "ize"),
    SuffixRule("ational", "ate"),
    SuffixRule("ation", "ate"),
    SuffixRule("ator", "ate"),
    SuffixRule("alism", "al"),
    SuffixRule("aliti", "al"),
    SuffixRule("alli", "al"),
    SuffixRule("fulness", "ful"),
    SuffixRule("ousli", "ous"),
    SuffixRule("ousness", "ous"),
    SuffixRule("iveness", "ive"),
    SuffixRule("iviti", "ive"),
    SuffixRule("biliti", "ble"),
    SuffixRule("bli", "ble"),
    SuffixRule("ogi", "og", condition=_preceded_by_l),
    SuffixRule("fulli", "ful"),
    SuffixRule("lessli", "less"),
    SuffixRule("li", condition=_preceded_by_li_ending),
], region="r1")

STEP_3 = Stage.from_rules("step3", [
    SuffixRule("tional", "tion"),
    SuffixRule("ational", "ate"),
    SuffixRule("alize", "al"),
    SuffixRule("icate", "ic"),
    SuffixRule("iciti", "ic"),
    SuffixRule("ical", "ic"),
    SuffixRule("ful"),
    SuffixRule("ness"),
    SuffixRule("ative", region="r2"),
], region="r1")

STEP_4 = Stage.from_rules("step4", [
    SuffixRule("al"),
    SuffixRule("ance"),
    SuffixRule("ence"),
    SuffixRule("er"),
    SuffixRule("ic"),
    SuffixRule("able"),
    SuffixRule("ible"),
    SuffixRule("ant"),
    SuffixRule("ement"),
    SuffixRule("ment"),
    SuffixRule("ent"),
    SuffixRule("ism"),
    SuffixRule("ate"),
    SuffixRule("iti"),
    SuffixRule("ous"),
    SuffixRule("ive"),
    SuffixRule("ize"),
    SuffixRule("ion", condition=_preceded_by_s_or_t),
], region="r2")


def step0(word: List[str], regions: Regions) -> List[str]:
    """Remove ', 's or 's' (longest first)."""
    STEP_0.apply(word, regions)
    return word


def step1a(word: List[str], regions: Regions) -> List[str]:
    """Plural and third-person endings: sses, ied, ies, s (us and ss stay)."""
    STEP_1A.apply(word, regions)
    return word


def step1b(word: List[str], regions: Regions) -> List[str]:
    """Past tense and gerund endings: eed(ly), ed(ly), ing(ly)."""
    STEP_1B.apply(word, regions)
    return word


def step1c(word: List[str], regions: Regions) -> List[str]:
    """
    Replace a final y or Y by i if preceded by a non-vowel which is not the
    first letter of the word (cry → cri, by → by, say → say).
    """
    if len(word) > 2 and word[-1] in ("y", CONSONANT_Y) and not is_vowel(word[-2]):
        word[-1] = "i"
    return word


def step2(word: List[str], regions: Regions) -> List[str]:
    STEP_2.apply(word, regions)
    return word


def step3(word: List[str], regions: Regions) -> List[str]:
    STEP_3.apply(word, regions)
    return word


def step4(word: List[str], regions: Regions) -> List[str]:
    STEP_4.apply(word, regions)
    return word


def step5(word: List[str], regions: Regions) -> List[str]:
    """
    Final e and l:
    - e: delete if in R2, or in R1 and not preceded by a short syllable
    - l: delete if in R2 and preceded by l
    """
    if not word:
        return word

    length = len(word)
    last = word[-1]

    if last == "e":
        if regions.contains("r2", length, 1):
            del word[-1]
        elif regions.contains("r1", length, 1) and not is_short_syllable(word[:-1]):
            del word[-1]

    elif last == "l":
        if length > 1 and regions.contains("r2", length, 1) and word[-2] == "l":
            del word[-1]

    return word


SUFFIX_STAGES = {
    "step0": STEP_0,
    "step1a": STEP_1A,
    "step1b": STEP_1B,
    "step2": STEP_2,
    "step3": STEP_3,
    "step4": STEP_4,
}
