"""
Evaluation Module

Keyword based essay grading: content model, matching, scoring, feedback
composition and the check / retry session.
"""

from .models import EssayContent, KeywordGroup, Alternative, BehaviourConfig, load_content
from .matcher import KeywordMatcher, MatchType
from .grader import EssayGrader, EvaluationResult
from .feedback import FeedbackComposer
from .engine import EssayEngine, GradingOutcome
from .session import EssaySession, SessionStatus, TextInputProvider
from .question import EssayQuestion

__all__ = [
    "EssayContent",
    "KeywordGroup",
    "Alternative",
    "BehaviourConfig",
    "load_content",
    "KeywordMatcher",
    "MatchType",
    "EssayGrader",
    "EvaluationResult",
    "FeedbackComposer",
    "EssayEngine",
    "GradingOutcome",
    "EssaySession",
    "SessionStatus",
    "TextInputProvider",
    "EssayQuestion",
]
