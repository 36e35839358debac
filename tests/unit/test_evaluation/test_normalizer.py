"""
Tests for input normalization.
"""

import pytest

from essay_grader.evaluation.normalizer import normalize_input


class TestNormalizeInput:
    """Test cases for normalize_input."""

    @pytest.mark.parametrize("raw,expected", [
        ("a\r\nb", "a b"),
        ("a\rb", "a b"),
        ("a\nb", "a b"),
        ("a  b", "a b"),
        ("a\n\nb", "a b"),
        ("a\tb", "a\tb"),
    ])
    def test_line_breaks_and_pairs(self, raw, expected):
        assert normalize_input(raw) == expected

    def test_long_runs_keep_residual_whitespace(self):
        """Whitespace pairs are collapsed in one pass only."""
        assert normalize_input("a   b") == "a  b"
        assert normalize_input("a    b") == "a  b"
        assert normalize_input("a \n b") == "a  b"

    def test_no_trimming(self):
        assert normalize_input(" dog ") == " dog "

    def test_empty_input(self):
        assert normalize_input("") == ""
        assert normalize_input(None) == ""
