"""
Essay Scoring

Runs the keyword matcher over every group in configured order and
aggregates points and feedback messages into an evaluation result.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .matcher import GroupMatch, KeywordMatcher
from .models import BehaviourConfig, KeywordGroup
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FeedbackMessage:
    """Feedback text of one keyword group."""
    message: str
    found: bool


@dataclass(frozen=True)
class EvaluationResult:
    """Raw score and messages of one evaluation, in group order."""
    raw_score: float
    messages: Tuple[FeedbackMessage, ...]
    group_matches: Tuple[GroupMatch, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'raw_score': self.raw_score,
            'messages': [{'message': m.message, 'found': m.found} for m in self.messages],
        }


class EssayGrader:
    """Aggregates keyword group matches into a score."""

    def __init__(self, matcher: Optional[KeywordMatcher] = None):
        self.matcher = matcher or KeywordMatcher()

    def aggregate(self, groups: Sequence[KeywordGroup], normalized_input: str,
                  behaviour: BehaviourConfig) -> EvaluationResult:
        """
        Score normalized input against all keyword groups.

        Each group adds its points at most once; its found or missed
        message is recorded only if configured.

        Args:
            groups: Keyword groups in configured order
            normalized_input: Normalized learner input
            behaviour: Behaviour settings

        Returns:
            EvaluationResult with the summed raw score
        """
        normalized_input_lower = normalized_input.lower()
        score = 0
        messages = []
        matches = []

        for group in groups:
            match = self.matcher.match_group(
                group, normalized_input, normalized_input_lower, behaviour
            )
            matches.append(match)
            score += match.points_earned
            if match.message:
                messages.append(FeedbackMessage(message=match.message, found=match.found))

        found_count = sum(1 for m in matches if m.found)
        logger.debug(f"Matched {found_count}/{len(matches)} keyword groups, raw score {score}")

        return EvaluationResult(
            raw_score=score,
            messages=tuple(messages),
            group_matches=tuple(matches),
        )
