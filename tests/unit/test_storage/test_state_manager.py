"""
Tests for answer snapshot storage.
"""

import pytest

from essay_grader.core.exceptions import StateError
from essay_grader.storage.state_manager import StateManager


class TestStateManager:
    """Test cases for StateManager."""

    @pytest.fixture
    def manager(self, temp_dir):
        return StateManager(temp_dir / "state")

    def test_creates_state_dir(self, temp_dir):
        StateManager(temp_dir / "nested" / "state")
        assert (temp_dir / "nested" / "state").is_dir()

    def test_save_and_load(self, manager):
        path = manager.save_state("alice", {'text': 'My dog.'})
        assert path.exists()
        assert manager.load_state("alice") == {'text': 'My dog.'}

    def test_save_overwrites(self, manager):
        manager.save_state("alice", {'text': 'first'})
        manager.save_state("alice", {'text': 'second'})
        assert manager.load_state("alice") == {'text': 'second'}

    def test_load_missing(self, manager):
        assert manager.load_state("nobody") is None

    def test_load_corrupted(self, manager):
        (manager.state_dir / "broken.json").write_text("{not json", encoding='utf-8')
        with pytest.raises(StateError, match="State load failed"):
            manager.load_state("broken")

    def test_delete(self, manager):
        manager.save_state("alice", {'text': 'x'})
        assert manager.delete_state("alice") is True
        assert manager.delete_state("alice") is False
        assert manager.load_state("alice") is None

    def test_list_states(self, manager):
        manager.save_state("bob", {'text': ''})
        manager.save_state("alice", {'text': ''})
        assert manager.list_states() == ["alice", "bob"]

    @pytest.mark.parametrize("state_id", ["", "../escape", "a/b", "with space"])
    def test_invalid_state_id(self, manager, state_id):
        with pytest.raises(StateError, match="Invalid state id"):
            manager.save_state(state_id, {'text': ''})
