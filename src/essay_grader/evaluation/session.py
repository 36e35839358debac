"""
Grading Session

Tracks one learner's attempts at an essay: the answer snapshot that is
persisted for resuming, and the check / retry state machine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .engine import EssayEngine, GradingOutcome
from ..core.exceptions import StateError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    """Session states."""
    AWAITING_INPUT = "awaiting_input"
    EVALUATED = "evaluated"          # terminal when retry is disabled
    RETRY_OFFERED = "retry_offered"
    MASTERED = "mastered"            # terminal


@dataclass
class SessionState:
    """Data that outlives a single evaluation."""
    last_text: str = ""


class InputProvider(ABC):
    """Source of the learner's current answer text."""

    @abstractmethod
    def get_input(self) -> str:
        """Return the current raw answer text."""


class TextInputProvider(InputProvider):
    """In-memory answer field that can be locked while graded."""

    def __init__(self, text: str = ""):
        self.text = text
        self.editable = True

    def get_input(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        if not self.editable:
            raise StateError("Answer cannot be edited after it was checked")
        self.text = text


class EssaySession:
    """Check / retry state machine around an EssayEngine."""

    def __init__(self, engine: EssayEngine, input_provider: InputProvider,
                 previous_state: Optional[Dict[str, Any]] = None):
        """
        Initialize the session.

        Args:
            engine: Grading engine for the content
            input_provider: Source of the learner's answer
            previous_state: Snapshot from get_current_state() to resume from
        """
        self.engine = engine
        self.input_provider = input_provider
        self.status = SessionStatus.AWAITING_INPUT
        self.last_outcome: Optional[GradingOutcome] = None

        previous_text = ''
        if previous_state:
            previous_text = previous_state.get('text') or ''
        self.state = SessionState(last_text=previous_text)

    @property
    def accepts_input(self) -> bool:
        return self.status == SessionStatus.AWAITING_INPUT

    @property
    def can_evaluate(self) -> bool:
        return self.status in (SessionStatus.AWAITING_INPUT, SessionStatus.RETRY_OFFERED)

    @property
    def is_finished(self) -> bool:
        return self.status in (SessionStatus.EVALUATED, SessionStatus.MASTERED)

    def evaluate(self) -> GradingOutcome:
        """
        Grade the current input and advance the state machine.

        Raises:
            StateError: If the session is in a terminal state
        """
        if not self.can_evaluate:
            raise StateError(f"Cannot evaluate in state '{self.status.value}'")

        text = self.input_provider.get_input()
        outcome = self.engine.evaluate(text)

        self.state = SessionState(last_text=text)
        self.last_outcome = outcome

        if outcome.mastered:
            self.status = SessionStatus.MASTERED
        elif self.engine.behaviour.enable_retry:
            self.status = SessionStatus.RETRY_OFFERED
        else:
            self.status = SessionStatus.EVALUATED

        if isinstance(self.input_provider, TextInputProvider):
            self.input_provider.editable = False

        logger.debug(f"Session moved to {self.status.value}")
        return outcome

    def retry(self) -> None:
        """
        Return to accepting input after a retry was offered.

        Raises:
            StateError: If no retry is offered
        """
        if self.status != SessionStatus.RETRY_OFFERED:
            raise StateError(f"Retry is not offered in state '{self.status.value}'")

        self.status = SessionStatus.AWAITING_INPUT
        if isinstance(self.input_provider, TextInputProvider):
            self.input_provider.editable = True

    def get_current_state(self) -> Dict[str, str]:
        """Snapshot to persist for resuming the session."""
        return {'text': self.state.last_text}
