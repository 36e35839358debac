"""
Input Normalization

Maps raw learner input to the string keywords are matched against.
"""

import re

LINE_BREAK_PATTERN = re.compile(r'(\r\n|\r|\n)')
DOUBLE_WHITESPACE_PATTERN = re.compile(r'\s\s')


def normalize_input(raw: str) -> str:
    """
    Normalize learner input for keyword matching.

    Line breaks become single spaces, then each non-overlapping pair of
    whitespace characters is replaced by one space in a single pass. Runs
    of three or more whitespace characters keep residual whitespace, and
    nothing is trimmed; stored answers were graded with exactly this rule.

    Args:
        raw: Text as typed by the learner

    Returns:
        Normalized text
    """
    if not raw:
        return ""

    text = LINE_BREAK_PATTERN.sub(' ', raw)
    return DOUBLE_WHITESPACE_PATTERN.sub(' ', text)
