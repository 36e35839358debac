"""
Feedback Composition

Turns an evaluation result into the score shown to the learner, the
pass/mastery status and the final feedback text.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from .grader import EvaluationResult
from .models import BehaviourConfig, FeedbackRange


@dataclass(frozen=True)
class ComposedFeedback:
    """Displayed score, status flags and feedback text."""
    display_score: float
    feedback_text: str
    passed: bool
    mastered: bool


def determine_overall_feedback(ranges: Sequence[FeedbackRange], ratio: float) -> str:
    """
    Select the overall feedback template for a score ratio.

    The ratio is turned into a whole percentage (rounded down) and the
    first range containing it with non-blank text wins.
    """
    percentage = math.floor(ratio * 100)
    for feedback_range in ranges:
        has_feedback = bool(feedback_range.feedback and feedback_range.feedback.strip())
        if feedback_range.start <= percentage <= feedback_range.end and has_feedback:
            return feedback_range.feedback
    return ''


def format_score(value: float) -> str:
    """Render a score without a trailing '.0' for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FeedbackComposer:
    """Composes learner-facing feedback from an evaluation result."""

    def __init__(self, line_break: str = "\n"):
        self.line_break = line_break

    def compose(self, result: EvaluationResult, behaviour: BehaviourConfig,
                overall_feedback: Sequence[FeedbackRange]) -> ComposedFeedback:
        """
        Compose the feedback for one evaluation.

        The displayed score is capped at the mastering score while the
        passing check uses the uncapped raw score.

        Args:
            result: Aggregated evaluation result
            behaviour: Behaviour with derived thresholds
            overall_feedback: Score ranges with feedback templates

        Returns:
            ComposedFeedback
        """
        score_mastering = behaviour.score_mastering
        display_score = min(result.raw_score, score_mastering)

        passed = result.raw_score >= behaviour.score_passing
        mastered = display_score >= score_mastering

        body = ' '.join(m.message.strip() for m in result.messages)
        if body:
            body += self.line_break

        ratio = display_score / score_mastering if score_mastering else 1
        template = determine_overall_feedback(overall_feedback, ratio)
        text_score = (template
                      .replace('@score', format_score(display_score))
                      .replace('@total', format_score(score_mastering)))

        return ComposedFeedback(
            display_score=display_score,
            feedback_text=body + text_score,
            passed=passed,
            mastered=mastered,
        )
