"""
Text Utilities

String primitives used by keyword matching: isolated substring search
and approximate (fuzzy) containment.
"""

import re
from typing import Optional

from fuzzywuzzy import fuzz

# Runs of letters and digits, the same characters is_isolated_match treats as word parts
WORD_PATTERN = re.compile(r'[^\W_]+')


def is_isolated_match(needle: str, haystack: str) -> bool:
    """
    Check whether needle occurs in haystack as a stand-alone word or phrase.

    An occurrence is isolated when the characters directly before and after
    it are either the string boundary or not alphanumeric. Every occurrence
    is tried, so "doghouse and dog" still isolates "dog".

    Args:
        needle: Text to look for
        haystack: Text to search in

    Returns:
        True if at least one isolated occurrence exists
    """
    if not needle or not haystack:
        return False

    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        before_ok = start == 0 or not haystack[start - 1].isalnum()
        after_ok = end == len(haystack) or not haystack[end].isalnum()
        if before_ok and after_ok:
            return True
        start = haystack.find(needle, start + 1)

    return False


def allowed_mistakes(length: int) -> int:
    """Number of typos tolerated for a word of the given length."""
    if length > 9:
        return 2
    if length > 3:
        return 1
    return 0


def fuzzy_contains(needle: str, haystack: str, threshold: Optional[float] = None) -> bool:
    """
    Check whether needle is approximately contained in haystack.

    The haystack is cut into windows of whole words, as many words as the
    needle has (one fewer or one more to allow for a split or merged word),
    and each window is compared to the needle with fuzz.ratio. Windows
    always start and end on word boundaries, so a keyword is never scored
    against a fragment of a longer word, and the score does not depend
    on how long the haystack is.

    Args:
        needle: Text to look for
        haystack: Text to search in
        threshold: Minimum similarity (0-100). Defaults to a tolerance
            derived from the needle length, see allowed_mistakes().

    Returns:
        True if the best matching window is similar enough
    """
    if not needle or not haystack:
        return False

    if threshold is None:
        length = len(needle)
        threshold = 100.0 * (length - allowed_mistakes(length)) / length

    return best_window_score(needle, haystack) >= threshold


def best_window_score(needle: str, haystack: str) -> int:
    """Highest fuzz.ratio between needle and any word-aligned window of haystack."""
    words = [(m.start(), m.end()) for m in WORD_PATTERN.finditer(haystack)]
    needle_words = max(len(WORD_PATTERN.findall(needle)), 1)

    best = 0
    for size in range(max(needle_words - 1, 1), needle_words + 2):
        for first in range(len(words) - size + 1):
            window = haystack[words[first][0]:words[first + size - 1][1]]
            best = max(best, fuzz.ratio(needle, window))
            if best == 100:
                return best
    return best
