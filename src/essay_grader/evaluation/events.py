"""
Learning Analytics Events

Typed builder for the xAPI-style statements an essay emits: experienced,
completed, scored, passed/failed and mastered.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

ESSAY_ACTIVITY_TYPE = "http://id.tincanapi.com/activitytype/essay"
ESSAY_INTERACTION_TYPE = "long-fill-in"
VERB_BASE_URI = "http://adlnet.gov/expapi/verbs/"


class Verb(str, Enum):
    """Statement verbs used by the essay."""
    EXPERIENCED = "experienced"
    COMPLETED = "completed"
    SCORED = "scored"
    PASSED = "passed"
    FAILED = "failed"
    MASTERED = "mastered"

    @property
    def uri(self) -> str:
        return VERB_BASE_URI + self.value


@dataclass(frozen=True)
class ActivityDefinition:
    """Definition of the essay activity."""
    description: str
    name: str = "Essay"
    activity_type: str = ESSAY_ACTIVITY_TYPE
    interaction_type: str = ESSAY_INTERACTION_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': {'en-US': self.name},
            'description': {'en-US': self.description},
            'type': self.activity_type,
            'interactionType': self.interaction_type,
        }


@dataclass(frozen=True)
class ScoredResult:
    """Result block of a scored statement."""
    raw: float
    max: float
    success: bool
    response: str
    completion: bool = True
    min: float = 0

    @property
    def scaled(self) -> float:
        if not self.max:
            return 1.0
        return round(self.raw / self.max, 4)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': {
                'min': self.min,
                'max': self.max,
                'raw': self.raw,
                'scaled': self.scaled,
            },
            'completion': self.completion,
            'success': self.success,
            'response': self.response,
        }


@dataclass(frozen=True)
class EssayEvent:
    """One analytics statement."""
    verb: Verb
    object_id: str
    definition: ActivityDefinition
    result: Optional[ScoredResult] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_statement(self) -> Dict[str, Any]:
        """Statement mapping in xAPI shape."""
        statement = {
            'verb': {
                'id': self.verb.uri,
                'display': {'en-US': self.verb.value},
            },
            'object': {
                'id': self.object_id,
                'objectType': 'Activity',
                'definition': self.definition.to_dict(),
            },
            'timestamp': self.timestamp.isoformat(),
        }
        if self.result is not None:
            statement['result'] = self.result.to_dict()
        return statement


class EssayEventBuilder:
    """Creates events for one essay content."""

    def __init__(self, content_id: str, task_description: str = ""):
        self.content_id = content_id
        self.definition = ActivityDefinition(description=task_description)

    def build(self, verb: Verb) -> EssayEvent:
        return EssayEvent(verb=verb, object_id=self.content_id, definition=self.definition)

    def build_scored(self, score: float, max_score: float, success: bool,
                     response: str) -> EssayEvent:
        """Create the scored event carrying the result block."""
        result = ScoredResult(raw=score, max=max_score, success=success, response=response)
        return EssayEvent(
            verb=Verb.SCORED,
            object_id=self.content_id,
            definition=self.definition,
            result=result,
        )
