"""
Unit tests for the full Porter2 stem() pipeline.
"""

import concurrent.futures

import pytest
from src.porter2 import InvalidInputError, stem


class TestStem:
    """End-to-end stemming"""

    def test_golden_corpus(self, golden_pairs):
        """Published sample vocabulary with expected stems"""
        failures = [(word, expected, stem(word)) for word, expected in golden_pairs if stem(word) != expected]
        assert failures == []

    @pytest.mark.parametrize("word,expected", [
        ("generalization", "general"),
        ("national", "nation"),
        ("knightly", "knight"),
        ("caresses", "caress"),
        ("hopping", "hop"),
        ("falling", "fall"),
        ("sized", "size"),
        ("running", "run"),
        ("happiness", "happi"),
        ("communication", "communic"),
        ("architectures", "architectur"),
        ("strategies", "strategi"),
        ("searching", "search"),
        ("deployment", "deploy"),
        ("kubernetes", "kubernet"),
    ])
    def test_cross_stage(self, word, expected):
        assert stem(word) == expected

    def test_longest_match_caresses(self):
        """sses → ss, not the shorter s rule"""
        assert stem("caresses") == "caress"

    def test_uppercase_input(self):
        assert stem("Generalization") == "general"
        assert stem("HOPPING") == "hop"

    def test_possessive(self):
        assert stem("knight's") == "knight"
        assert stem("knights'") == "knight"

    def test_leading_apostrophe(self):
        assert stem("'tis") == "tis"

    def test_y_marker_never_leaks(self):
        for word in ["saying", "youth", "yelling", "boyish", "enjoyed", "obeying", "yay"]:
            assert "Y" not in stem(word)

    def test_y_handling(self):
        assert stem("enjoyed") == "enjoy"
        assert stem("youth") == "youth"
        assert stem("cry") == "cri"
        assert stem("say") == "say"

    def test_region_gated_no_op(self):
        """"ement" is found in "cement" but lies outside R2"""
        assert stem("cement") == "cement"

    def test_e_restoration_grows_word(self):
        """ed removal followed by e restoration"""
        assert stem("hoped") == "hope"
        assert stem("luxuriated") == "luxuri"

    def test_non_ascii_passes_through(self):
        """Other characters are treated as non-vowels"""
        assert stem("naïve") == "naïv"
        assert stem("café") == "café"


class TestShortWords:
    """Words of two letters or less are returned unchanged"""

    @pytest.mark.parametrize("word", ["a", "I", "by", "is", "'s", "Go", "ys", "ab"])
    def test_unchanged(self, word):
        assert stem(word) == word


class TestFixedPoints:
    """Already stemmed words stem to themselves"""

    @pytest.mark.parametrize("word", [
        "consign", "consist", "knight", "general", "nation", "hop", "fall",
        "size", "caress", "knack", "knob", "run", "search", "deploy",
        "conspir", "constabl", "relat", "condit",
    ])
    def test_fixed_point(self, word):
        assert stem(word) == word

    def test_not_idempotent_in_general(self):
        """Stemming a stem can strip further"""
        assert stem("agreed") == "agre"
        assert stem("agre") == "agr"


class TestErrors:
    """Invalid input fails fast"""

    def test_empty_string(self):
        with pytest.raises(InvalidInputError):
            stem("")

    def test_non_string(self):
        with pytest.raises(InvalidInputError):
            stem(None)
        with pytest.raises(InvalidInputError):
            stem(b"bytes")

    def test_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            stem("")
        assert "empty" in str(exc_info.value).lower()


class TestConcurrency:
    """Stem tables are shared read-only between threads"""

    def test_threads_agree_with_sequential(self, golden_pairs):
        words = [word for word, _ in golden_pairs] * 20
        expected = [stem(word) for word in words]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(stem, words))

        assert results == expected
