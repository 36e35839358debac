"""
State Manager

Persists the learner's answer snapshot ({"text": ...}) per state id so an
essay can be resumed later.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from ..core.exceptions import StateError
from ..utils.logging import get_logger

logger = get_logger(__name__)

STATE_ID_PATTERN = re.compile(r'^[A-Za-z0-9_.-]+$')


class StateManager:
    """Stores answer snapshots as JSON files."""

    def __init__(self, state_dir: Optional[Path] = None):
        self.state_dir = Path(state_dir or "state")
        self.state_dir.mkdir(parents=True, exist_ok=True)

    def save_state(self, state_id: str, state: Dict[str, str]) -> Path:
        """
        Save an answer snapshot.

        Args:
            state_id: Identifier of the snapshot
            state: Snapshot from EssaySession.get_current_state()

        Returns:
            Path of the written file
        """
        state_file = self._state_file(state_id)
        data = {
            'state_id': state_id,
            'saved_at': datetime.now().isoformat(),
            'text': state.get('text', ''),
        }

        try:
            with open(state_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save state {state_id}: {e}")
            raise StateError(f"State save failed: {e}", state_id=state_id)

        logger.info(f"Saved state: {state_id}")
        return state_file

    def load_state(self, state_id: str) -> Optional[Dict[str, str]]:
        """
        Load an answer snapshot.

        Returns:
            {"text": ...} or None if nothing was saved under this id
        """
        state_file = self._state_file(state_id)
        if not state_file.exists():
            return None

        try:
            with open(state_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load state {state_id}: {e}")
            raise StateError(f"State load failed: {e}", state_id=state_id)

        return {'text': str(data.get('text') or '')}

    def delete_state(self, state_id: str) -> bool:
        """Delete a snapshot, returning whether one existed."""
        state_file = self._state_file(state_id)
        if not state_file.exists():
            return False

        try:
            state_file.unlink()
        except OSError as e:
            raise StateError(f"State delete failed: {e}", state_id=state_id)

        logger.info(f"Deleted state: {state_id}")
        return True

    def list_states(self) -> List[str]:
        """Ids of all saved snapshots."""
        return sorted(p.stem for p in self.state_dir.glob("*.json"))

    def _state_file(self, state_id: str) -> Path:
        if not state_id or not STATE_ID_PATTERN.match(state_id):
            raise StateError(f"Invalid state id: {state_id!r}", state_id=state_id)
        return self.state_dir / f"{state_id}.json"
