"""
Unit tests for the whole-word exception tables.
"""

import pytest
from src.porter2 import stem
from src.porter2.irregulars import (
    POST_STEP1A_INVARIANTS,
    PRE_STAGE_EXCEPTIONS,
    is_post_step1a_invariant,
    pre_stage_exception,
)


class TestPreStageExceptions:
    """Exception table 1: literal stems looked up before any step"""

    @pytest.mark.parametrize("word,expected", sorted(PRE_STAGE_EXCEPTIONS.items()))
    def test_lookup(self, word, expected):
        assert pre_stage_exception(list(word)) == expected

    @pytest.mark.parametrize("word,expected", sorted(PRE_STAGE_EXCEPTIONS.items()))
    def test_stem_returns_literal(self, word, expected):
        assert stem(word) == expected

    def test_examples(self):
        assert stem("skis") == "ski"
        assert stem("sky") == "sky"
        assert stem("news") == "news"
        assert stem("skies") == "sky"
        assert stem("dying") == "die"

    def test_case_insensitive(self):
        assert stem("Skies") == "sky"
        assert stem("NEWS") == "news"

    def test_misses(self):
        assert pre_stage_exception(list("skiing")) is None
        # Too long for the table
        assert pre_stage_exception(list("cosmoses")) is None
        # Ending not in the admission filter
        assert pre_stage_exception(list("atlan")) is None
        assert pre_stage_exception([]) is None

    def test_entries_pass_admission_filter(self):
        """Every entry is reachable through the length/ending filter"""
        for word in PRE_STAGE_EXCEPTIONS:
            assert len(word) <= 6
            assert word[-1] in "sgye"


class TestPostStep1aInvariants:
    """Exception table 2: words left alone after step 1a"""

    @pytest.mark.parametrize("word", sorted(POST_STEP1A_INVARIANTS))
    def test_membership(self, word):
        assert is_post_step1a_invariant(list(word))

    @pytest.mark.parametrize("word", sorted(POST_STEP1A_INVARIANTS))
    def test_stem_keeps_word(self, word):
        assert stem(word) == word

    def test_plural_reaches_guard_after_step1a(self):
        """Step 1a strips the plural s, then the guard applies"""
        assert stem("innings") == "inning"
        assert stem("herrings") == "herring"
        assert stem("outings") == "outing"

    def test_misses(self):
        assert not is_post_step1a_invariant(list("winning"))
        assert not is_post_step1a_invariant(list("proceeds"))
        assert not is_post_step1a_invariant(list("inn"))

    def test_without_guard_step1b_would_trim(self):
        """Similar words not in the table go through step 1b"""
        assert stem("spinning") == "spin"
        assert stem("agreed") == "agre"
