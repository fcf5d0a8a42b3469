"""
Whole-word exception tables.

Some irregular words would be mis-stemmed by the regular suffix rules.

Table 1 is consulted before any stage runs and maps a word straight to its
stem ("skies" → "sky", "news" → "news").

Table 2 is consulted after step 1a: the listed words are returned as they
are, so step 1b never trims their "-ing"/"-eed" ending.
"""

from typing import Optional, Sequence

PRE_STAGE_EXCEPTIONS = {
    "skis": "ski",
    "skies": "sky",
    "dying": "die",
    "lying": "lie",
    "tying": "tie",
    "idly": "idl",
    "gently": "gentl",
    "ugly": "ugli",
    "early": "earli",
    "only": "onli",
    "singly": "singl",
    "sky": "sky",
    "news": "news",
    "howe": "howe",
    "atlas": "atlas",
    "cosmos": "cosmos",
    "bias": "bias",
    "andes": "andes",
}

POST_STEP1A_INVARIANTS = frozenset([
    "inning", "outing", "canning", "herring",
    "earring", "proceed", "exceed", "succeed",
])

# Cheap admission filters applied before the dictionary/set lookups
PRE_STAGE_MAX_LENGTH = 6
PRE_STAGE_ENDINGS = frozenset("sgye")
POST_STEP1A_LENGTHS = frozenset([6, 7])
POST_STEP1A_ENDINGS = frozenset("gd")


def pre_stage_exception(chars: Sequence[str]) -> Optional[str]:
    """
    Look up the word in exception table 1.

    Returns:
        The literal stem for an exceptional word, None otherwise
    """
    if not chars or len(chars) > PRE_STAGE_MAX_LENGTH:
        return None

    if chars[-1] not in PRE_STAGE_ENDINGS:
        return None

    return PRE_STAGE_EXCEPTIONS.get("".join(chars))


def is_post_step1a_invariant(chars: Sequence[str]) -> bool:
    """Check if the word (after step 1a) must be left alone from here on."""
    if len(chars) not in POST_STEP1A_LENGTHS:
        return False

    if chars[-1] not in POST_STEP1A_ENDINGS:
        return False

    return "".join(chars) in POST_STEP1A_INVARIANTS
