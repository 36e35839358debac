"""
Essay Question Adapter

Connects an EssaySession to a host question UI: button visibility,
the feedback bar and analytics events. The grading engine is used only
through its GradingOutcome.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .engine import EssayEngine, GradingOutcome
from .events import EssayEvent, EssayEventBuilder, Verb
from .session import EssaySession, InputProvider, SessionStatus
from ..utils.logging import get_session_logger

CHECK_ANSWER = 'check-answer'
TRY_AGAIN = 'try-again'

EventListener = Callable[[EssayEvent], None]


@dataclass(frozen=True)
class DisplayedFeedback:
    """What the feedback bar shows."""
    text: str
    score: float
    max_score: float


class EssayQuestion:
    """Host-facing essay question."""

    def __init__(self, engine: EssayEngine, content_id: str,
                 input_provider: InputProvider,
                 previous_state: Optional[Dict[str, Any]] = None,
                 event_listener: Optional[EventListener] = None,
                 state_id: Optional[str] = None):
        self.engine = engine
        self.content_id = content_id
        self.session = EssaySession(engine, input_provider, previous_state)
        self.event_listener = event_listener
        self.events = EssayEventBuilder(content_id, engine.content.task_description)
        self.buttons: Dict[str, bool] = {CHECK_ANSWER: True, TRY_AGAIN: False}
        self.feedback: Optional[DisplayedFeedback] = None
        self.emitted: List[EssayEvent] = []
        self.logger = get_session_logger(content_id, state_id=state_id)

    def register(self) -> None:
        """Announce that the learner has seen the task."""
        self._trigger(self.events.build(Verb.EXPERIENCED))

    def check_answer(self) -> GradingOutcome:
        """Grade the answer, show feedback and emit result events."""
        outcome = self.session.evaluate()

        self.feedback = DisplayedFeedback(
            text=outcome.feedback_text,
            score=outcome.display_score,
            max_score=outcome.max_score,
        )
        self.buttons[CHECK_ANSWER] = False

        self._trigger(self.events.build(Verb.COMPLETED))
        self._trigger(self.events.build_scored(
            score=outcome.display_score,
            max_score=outcome.max_score,
            success=outcome.passed,
            response=outcome.normalized_input,
        ))
        self._trigger(self.events.build(Verb.PASSED if outcome.passed else Verb.FAILED))

        if self.session.status == SessionStatus.MASTERED:
            self._trigger(self.events.build(Verb.MASTERED))
            self.buttons[TRY_AGAIN] = False
        elif self.session.status == SessionStatus.RETRY_OFFERED:
            self.buttons[TRY_AGAIN] = True

        self.logger.info(f"Answer checked: {outcome.display_score}/{outcome.max_score}, "
                         f"session {self.session.status.value}")
        return outcome

    def try_again(self) -> None:
        """Reopen the answer for editing."""
        self.session.retry()
        self.feedback = None
        self.buttons[TRY_AGAIN] = False
        self.buttons[CHECK_ANSWER] = True

    def is_button_visible(self, button_id: str) -> bool:
        return self.buttons.get(button_id, False)

    def get_current_state(self) -> Dict[str, str]:
        return self.session.get_current_state()

    def _trigger(self, event: EssayEvent) -> None:
        self.emitted.append(event)
        self.logger.debug(f"Event {event.verb.value}")
        if self.event_listener is not None:
            self.event_listener(event)
