"""
Essay Grading Engine

Explicitly constructed grading engine wiring normalization, keyword
matching, score aggregation and feedback composition for one content.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .feedback import ComposedFeedback, FeedbackComposer
from .grader import EssayGrader, EvaluationResult, FeedbackMessage
from .matcher import GroupMatch, KeywordMatcher
from .models import EssayContent, load_content
from .normalizer import normalize_input
from ..utils.logging import PerformanceTimer, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GradingOutcome:
    """Everything one evaluation produces."""
    raw_score: float
    display_score: float
    max_score: float
    passing_score: float
    messages: Tuple[FeedbackMessage, ...]
    passed: bool
    mastered: bool
    feedback_text: str
    normalized_input: str
    group_matches: Tuple[GroupMatch, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the outcome."""
        return {
            'raw_score': self.raw_score,
            'display_score': self.display_score,
            'max_score': self.max_score,
            'passing_score': self.passing_score,
            'messages': [{'message': m.message, 'found': m.found} for m in self.messages],
            'passed': self.passed,
            'mastered': self.mastered,
            'feedback_text': self.feedback_text,
            'normalized_input': self.normalized_input,
            'matches': [
                {
                    'found': m.found,
                    'points': m.points_earned,
                    'match_type': m.match_type.value,
                    'alternative': m.alternative,
                }
                for m in self.group_matches
            ],
        }


class EssayEngine:
    """Grades free-text answers against one essay content."""

    def __init__(self, content: EssayContent,
                 fuzzy_threshold: Optional[float] = None,
                 line_break: str = "\n"):
        """
        Initialize the engine.

        Args:
            content: Parsed essay content
            fuzzy_threshold: Minimum fuzzy similarity (0-100), None for the
                word-length based tolerance
            line_break: Separator between group messages and overall feedback
        """
        self.content = content
        self.grader = EssayGrader(KeywordMatcher(fuzzy_threshold=fuzzy_threshold))
        self.composer = FeedbackComposer(line_break=line_break)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **kwargs) -> "EssayEngine":
        return cls(EssayContent.from_dict(data), **kwargs)

    @classmethod
    def from_file(cls, content_path: Union[str, Path], **kwargs) -> "EssayEngine":
        return cls(load_content(content_path), **kwargs)

    @property
    def behaviour(self):
        return self.content.behaviour

    def compute_feedback(self, raw_text: str) -> EvaluationResult:
        """Normalize the input and aggregate keyword group matches."""
        return self.grader.aggregate(
            self.content.keyword_groups,
            normalize_input(raw_text),
            self.content.behaviour
        )

    def evaluate(self, raw_text: str) -> GradingOutcome:
        """
        Grade a learner's answer.

        Args:
            raw_text: Answer as typed by the learner

        Returns:
            GradingOutcome with scores, status and feedback
        """
        with PerformanceTimer("essay evaluation", logger):
            normalized = normalize_input(raw_text)
            result = self.grader.aggregate(
                self.content.keyword_groups, normalized, self.content.behaviour
            )
            composed: ComposedFeedback = self.composer.compose(
                result, self.content.behaviour, self.content.overall_feedback
            )

        behaviour = self.content.behaviour
        logger.info(
            f"Evaluated answer: raw={result.raw_score} shown={composed.display_score}/"
            f"{behaviour.score_mastering} passed={composed.passed} mastered={composed.mastered}"
        )

        return GradingOutcome(
            raw_score=result.raw_score,
            display_score=composed.display_score,
            max_score=behaviour.score_mastering,
            passing_score=behaviour.score_passing,
            messages=result.messages,
            passed=composed.passed,
            mastered=composed.mastered,
            feedback_text=composed.feedback_text,
            normalized_input=normalized,
            group_matches=result.group_matches,
        )
