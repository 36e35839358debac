"""
Keyword Matching

Evaluates keyword groups against normalized learner input. Alternatives
are tried in configured order and the first success decides the group,
trying an isolated exact match before an optional fuzzy match.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import Alternative, BehaviourConfig, KeywordGroup, OverrideMode
from ..utils.logging import get_logger
from ..utils.text import fuzzy_contains, is_isolated_match

logger = get_logger(__name__)


class MatchType(str, Enum):
    """How a keyword group was matched."""
    EXACT = "exact"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class GroupMatch:
    """Outcome of matching one keyword group."""
    found: bool
    points_earned: float
    message: Optional[str]
    match_type: MatchType = MatchType.NONE
    alternative: Optional[str] = None


class KeywordMatcher:
    """Matches keyword groups using isolated exact and fuzzy matching."""

    def __init__(self, fuzzy_threshold: Optional[float] = None):
        """
        Initialize the keyword matcher.

        Args:
            fuzzy_threshold: Minimum fuzzy similarity (0-100), None for the
                word-length based tolerance
        """
        self.fuzzy_threshold = fuzzy_threshold

    def match_group(self, group: KeywordGroup, normalized_input: str,
                    normalized_input_lower: str,
                    behaviour: BehaviourConfig) -> GroupMatch:
        """
        Match a single keyword group.

        Args:
            group: Keyword group to evaluate
            normalized_input: Normalized learner input
            normalized_input_lower: Lower-cased normalized input
            behaviour: Behaviour settings with override modes

        Returns:
            GroupMatch with points and the found/missed message
        """
        for alternative in group.alternatives:
            match_type = self._match_alternative(
                alternative, normalized_input, normalized_input_lower, behaviour
            )
            if match_type is not MatchType.NONE:
                logger.debug(f"Matched alternative '{alternative.text}' ({match_type.value})")
                return GroupMatch(
                    found=True,
                    points_earned=group.points,
                    message=group.feedback_found,
                    match_type=match_type,
                    alternative=alternative.text,
                )

        return GroupMatch(found=False, points_earned=0, message=group.feedback_missed)

    def _match_alternative(self, alternative: Alternative, normalized_input: str,
                           normalized_input_lower: str,
                           behaviour: BehaviourConfig) -> MatchType:
        needle = alternative.text
        haystack = normalized_input

        case_sensitive = (alternative.case_sensitive and
                          behaviour.override_case_sensitive != OverrideMode.OFF)
        if not case_sensitive:
            needle = needle.lower()
            haystack = normalized_input_lower

        if is_isolated_match(needle, haystack):
            return MatchType.EXACT

        forgive_mistakes = (alternative.forgive_mistakes or
                            behaviour.override_forgive_mistakes == OverrideMode.ON)
        if forgive_mistakes and fuzzy_contains(needle, haystack, self.fuzzy_threshold):
            return MatchType.FUZZY

        return MatchType.NONE
