"""
Tests for the text matching primitives.
"""

import pytest

from essay_grader.utils.text import allowed_mistakes, fuzzy_contains, is_isolated_match


class TestIsIsolatedMatch:
    """Test cases for is_isolated_match."""

    @pytest.mark.parametrize("haystack", [
        "dog",
        "i have a dog.",
        "dog, cat and bird",
        "my (dog) sleeps",
        "doghouse and dog",
    ])
    def test_isolated(self, haystack):
        assert is_isolated_match("dog", haystack)

    @pytest.mark.parametrize("haystack", [
        "doghouse",
        "hotdog",
        "dogs are great",
        "dog2",
        "no match here",
    ])
    def test_not_isolated(self, haystack):
        assert not is_isolated_match("dog", haystack)

    def test_phrases(self):
        assert is_isolated_match("new york", "i live in new york city")
        assert not is_isolated_match("new york", "brand new yorkshire terrier")

    def test_empty_strings(self):
        assert not is_isolated_match("", "anything")
        assert not is_isolated_match("dog", "")


class TestFuzzyContains:
    """Test cases for fuzzy_contains."""

    def test_allowed_mistakes_scale_with_length(self):
        assert allowed_mistakes(3) == 0
        assert allowed_mistakes(4) == 1
        assert allowed_mistakes(9) == 1
        assert allowed_mistakes(10) == 2

    def test_exact_containment(self):
        assert fuzzy_contains("elephant", "i saw an elephant today")

    def test_single_typo_in_long_word(self):
        assert fuzzy_contains("elephant", "i saw an elephent")

    def test_short_words_must_be_exact(self):
        assert not fuzzy_contains("dog", "i have a dig")

    def test_too_many_mistakes(self):
        assert not fuzzy_contains("elephant", "i saw an elefant")

    def test_explicit_threshold(self):
        assert fuzzy_contains("elephant", "i saw an elefant", threshold=75)

    def test_short_haystack_does_not_contain_long_needle(self):
        assert not fuzzy_contains("elephant", "ele")

    def test_empty_strings(self):
        assert not fuzzy_contains("", "text")
        assert not fuzzy_contains("text", "")

    def test_fuzzy_match_stays_on_word_boundaries(self):
        assert not fuzzy_contains("dog", "i have a doghouse.")
        assert not fuzzy_contains("elephant", "the elephanthouse was empty")

    def test_merged_phrase_counts_as_one_mistake(self):
        assert fuzzy_contains("ice cream", "we ate icecream at the beach")

    def test_essay_length_haystack(self):
        essay = (
            "Plants take up water through their roots and move it up the stem "
            "to every leaf. Most of that water is never used for growth, it "
            "leaves the plant again as vapour through small pores that open "
            "during the day. Scientists call this movement of water through "
            "a plant transpiration, and it depends on the evaporaton of water "
            "from the leaves."
        )
        assert len(essay) > 250
        assert fuzzy_contains("evaporation", essay)
        assert not fuzzy_contains("condensation", essay)
