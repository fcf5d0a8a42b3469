"""
Porter2 (Snowball English) stemmer.

Pipeline:
1. Words of two letters or less are returned as they are
2. Normalize: lowercase, drop leading apostrophe, mark consonant y as Y
3. Exception table 1 (may return early: "skies" → "sky")
4. Compute R1/R2
5. Steps 0 and 1a
6. Exception table 2 (may return early: "succeed")
7. Steps 1b, 1c, 2, 3, 4, 5
8. Postlude: Y back to y

Examples:
- "generalization" → "general"
- "national" → "nation"
- "knightly" → "knight"
- "hopping" → "hop"
"""

import logging
from typing import List

from .errors import InvalidInputError
from .irregulars import is_post_step1a_invariant, pre_stage_exception
from .regions import Regions, mark_regions
from .stages import (
    postlude,
    prelude,
    step0,
    step1a,
    step1b,
    step1c,
    step2,
    step3,
    step4,
    step5,
)

logger = logging.getLogger(__name__)

# Steps run after exception table 2, in order
MAIN_STEPS = (step1b, step1c, step2, step3, step4, step5)


def normalize(word: str) -> List[str]:
    """Lowercase the word and apply the prelude (apostrophe, Y marking)."""
    return prelude(list(word.lower()))


def stem(word: str) -> str:
    """
    Stem a single word using the Porter2 algorithm.

    Args:
        word: Word to stem (any case)

    Returns:
        Stemmed word, lowercase

    Raises:
        InvalidInputError: If word is empty or not a string

    Examples:
        >>> stem("caresses")
        'caress'
        >>> stem("generalization")
        'general'
        >>> stem("sky")
        'sky'
    """
    if not isinstance(word, str):
        raise InvalidInputError(f"Word must be a string, got {type(word).__name__}")
    if not word:
        raise InvalidInputError("Word must not be empty")

    if len(word) <= 2:
        return word

    chars = normalize(word)

    exception = pre_stage_exception(chars)
    if exception is not None:
        logger.debug(f"Exception table 1 hit: {word!r} → {exception!r}")
        return exception

    regions = mark_regions(chars)

    step0(chars, regions)
    step1a(chars, regions)

    if is_post_step1a_invariant(chars):
        logger.debug(f"Exception table 2 hit: {word!r}")
        return "".join(postlude(chars))

    for step in MAIN_STEPS:
        step(chars, regions)

    return "".join(postlude(chars))


def regions_of(word: str) -> Regions:
    """R1/R2 of the normalized word (for inspection and tests)."""
    if not isinstance(word, str):
        raise InvalidInputError(f"Word must be a string, got {type(word).__name__}")
    if not word:
        raise InvalidInputError("Word must not be empty")
    return mark_regions(normalize(word))
