"""
Tests for the grading session state machine.
"""

import pytest

from essay_grader.core.exceptions import StateError
from essay_grader.evaluation.engine import EssayEngine
from essay_grader.evaluation.session import (
    EssaySession, InputProvider, SessionStatus, TextInputProvider
)


@pytest.fixture
def no_retry_engine(pets_content):
    pets_content['behaviour']['enableRetry'] = False
    return EssayEngine.from_dict(pets_content)


class TestTextInputProvider:
    """Test cases for TextInputProvider."""

    def test_get_and_set(self):
        provider = TextInputProvider("draft")
        assert provider.get_input() == "draft"
        provider.set_text("final")
        assert provider.get_input() == "final"

    def test_locked_provider_rejects_edits(self):
        provider = TextInputProvider()
        provider.editable = False
        with pytest.raises(StateError):
            provider.set_text("late change")


class TestEssaySession:
    """Test cases for EssaySession."""

    def test_initial_state(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider())
        assert session.status == SessionStatus.AWAITING_INPUT
        assert session.accepts_input
        assert session.get_current_state() == {'text': ''}

    def test_seeded_from_previous_state(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider("old"), {'text': 'old'})
        assert session.get_current_state() == {'text': 'old'}

    def test_previous_state_without_text(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider(), {})
        assert session.get_current_state() == {'text': ''}

    def test_mastered_is_terminal(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider("dog and cat"))
        outcome = session.evaluate()
        assert outcome.mastered
        assert session.status == SessionStatus.MASTERED
        assert session.is_finished
        with pytest.raises(StateError):
            session.evaluate()
        with pytest.raises(StateError):
            session.retry()

    def test_retry_offered(self, pets_engine):
        provider = TextInputProvider("a dog")
        session = EssaySession(pets_engine, provider)
        session.evaluate()
        assert session.status == SessionStatus.RETRY_OFFERED
        assert not session.accepts_input
        assert not provider.editable

        session.retry()
        assert session.status == SessionStatus.AWAITING_INPUT
        provider.set_text("a dog and a cat")
        assert session.evaluate().mastered
        assert session.status == SessionStatus.MASTERED

    def test_evaluate_directly_from_retry_offered(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider("a dog"))
        session.evaluate()
        assert session.can_evaluate
        session.evaluate()
        assert session.status == SessionStatus.RETRY_OFFERED

    def test_retry_disabled(self, no_retry_engine):
        session = EssaySession(no_retry_engine, TextInputProvider("a dog"))
        session.evaluate()
        assert session.status == SessionStatus.EVALUATED
        assert session.is_finished
        with pytest.raises(StateError, match="Retry is not offered"):
            session.retry()
        with pytest.raises(StateError, match="Cannot evaluate"):
            session.evaluate()

    def test_mastered_ignores_retry_setting(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider("dog cat"))
        session.evaluate()
        assert session.status == SessionStatus.MASTERED

    def test_snapshot_replaced_on_evaluation(self, pets_engine):
        provider = TextInputProvider("first")
        session = EssaySession(pets_engine, provider, {'text': 'seed'})
        session.evaluate()
        assert session.get_current_state() == {'text': 'first'}
        assert session.last_outcome.raw_score == 0

    def test_retry_before_evaluation_rejected(self, pets_engine):
        session = EssaySession(pets_engine, TextInputProvider())
        with pytest.raises(StateError):
            session.retry()

    def test_custom_input_provider(self, pets_engine):
        class FixedInput(InputProvider):
            def get_input(self):
                return "the cat"

        session = EssaySession(pets_engine, FixedInput())
        outcome = session.evaluate()
        assert outcome.raw_score == 5
        assert session.get_current_state() == {'text': 'the cat'}
