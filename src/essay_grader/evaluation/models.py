"""
Essay Content Model

Typed, immutable representation of the grading content: keyword groups,
their alternatives, behaviour thresholds and overall feedback ranges.
Parsing never fails on missing or malformed fields; absent values fall
back to their defaults.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..core.exceptions import ContentError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class OverrideMode(str, Enum):
    """Content-wide override for a per-alternative matching option."""
    ON = "on"
    OFF = "off"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: Any) -> "OverrideMode":
        """Map a raw config value to a mode, unknown values count as default."""
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True)
class Alternative:
    """One accepted phrasing inside a keyword group."""
    text: str
    case_sensitive: bool = False
    forgive_mistakes: bool = False


@dataclass(frozen=True)
class KeywordGroup:
    """A scored unit of expected content, matched by any one alternative."""
    alternatives: Tuple[Alternative, ...] = ()
    points: float = 0
    feedback_found: Optional[str] = None
    feedback_missed: Optional[str] = None


@dataclass(frozen=True)
class BehaviourConfig:
    """
    Grading behaviour with thresholds already derived from the content.

    score_mastering is capped at the total of all group points and
    score_passing at score_mastering.
    """
    score_mastering: float = math.inf
    score_passing: float = 0
    override_case_sensitive: OverrideMode = OverrideMode.DEFAULT
    override_forgive_mistakes: OverrideMode = OverrideMode.DEFAULT
    enable_retry: bool = True


@dataclass(frozen=True)
class FeedbackRange:
    """Overall feedback shown for a score percentage in [start, end]."""
    start: int
    end: int
    feedback: str


@dataclass(frozen=True)
class EssayContent:
    """Complete grading content for one essay task."""
    keyword_groups: Tuple[KeywordGroup, ...] = ()
    behaviour: BehaviourConfig = field(default_factory=BehaviourConfig)
    overall_feedback: Tuple[FeedbackRange, ...] = ()
    task_description: str = ""
    check_answer_label: str = "Check"
    try_again_label: str = "Retry"

    @property
    def max_points(self) -> float:
        """Sum of the points of all keyword groups."""
        return sum(group.points for group in self.keyword_groups)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EssayContent":
        """
        Build content from the H5P-style parameter mapping.

        Args:
            data: Mapping with keywordGroups, behaviour, overallFeedback

        Returns:
            EssayContent with derived behaviour thresholds
        """
        data = data if isinstance(data, dict) else {}

        raw_groups = data.get('keywordGroups') or []
        if not isinstance(raw_groups, list):
            logger.warning("keywordGroups is not a list, ignoring it")
            raw_groups = []
        groups = tuple(_parse_group(raw) for raw in raw_groups)

        behaviour = _parse_behaviour(
            data.get('behaviour'),
            sum(group.points for group in groups)
        )

        task_description = data.get('taskDescription')
        if task_description is None:
            input_field = _mapping(data.get('inputField'))
            task_description = _mapping(input_field.get('params')).get('taskDescription', '')

        return cls(
            keyword_groups=groups,
            behaviour=behaviour,
            overall_feedback=_parse_feedback_ranges(data.get('overallFeedback')),
            task_description=str(task_description or ''),
            check_answer_label=str(data.get('checkAnswer') or 'Check'),
            try_again_label=str(data.get('tryAgain') or 'Retry'),
        )


def load_content(content_path: Union[str, Path]) -> EssayContent:
    """
    Load essay content from a YAML or JSON file.

    Raises:
        ContentError: If the file is missing, unparsable or not a mapping
    """
    return EssayContent.from_dict(read_content_file(content_path))


def read_content_file(content_path: Union[str, Path]) -> Dict[str, Any]:
    """Read the raw content mapping from a YAML or JSON file."""
    path = Path(content_path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            # JSON documents are valid YAML
            data = yaml.safe_load(f)
    except OSError as e:
        raise ContentError(f"Cannot read content file: {e}", content_path=str(path))
    except yaml.YAMLError as e:
        raise ContentError(f"Content file is not valid YAML/JSON: {e}", content_path=str(path))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentError("Content file must contain a mapping", content_path=str(path))

    logger.debug(f"Loaded content file {path}")
    return data


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _number(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def _text(value: Any) -> Optional[str]:
    if value is None or value == '':
        return None
    return str(value)


def _parse_alternative(raw: Any) -> Alternative:
    raw = _mapping(raw)
    options = _mapping(raw.get('options'))
    return Alternative(
        text=str(raw.get('alternative') or ''),
        case_sensitive=bool(options.get('caseSensitive', False)),
        forgive_mistakes=bool(options.get('forgiveMistakes', False)),
    )


def _parse_group(raw: Any) -> KeywordGroup:
    raw = _mapping(raw)
    options = _mapping(raw.get('options'))

    alternatives = raw.get('alternatives') or []
    if not isinstance(alternatives, list):
        alternatives = []

    points = _number(options.get('points'), 0)
    if points < 0:
        logger.warning(f"Negative points ({points}) in keyword group clamped to 0")
        points = 0

    return KeywordGroup(
        alternatives=tuple(_parse_alternative(alt) for alt in alternatives),
        points=points,
        feedback_found=_text(options.get('feedbackFound')),
        feedback_missed=_text(options.get('feedbackMissed')),
    )


def _parse_behaviour(raw: Any, max_points: float) -> BehaviourConfig:
    raw = _mapping(raw)

    # Mastering score doubles as the maximum shown to the learner
    score_mastering = min(max_points, _number(raw.get('scoreMastering'), math.inf))
    score_passing = min(score_mastering, _number(raw.get('scorePassing'), 0))

    return BehaviourConfig(
        score_mastering=score_mastering,
        score_passing=score_passing,
        override_case_sensitive=OverrideMode.parse(raw.get('overrideCaseSensitive', 'default')),
        override_forgive_mistakes=OverrideMode.parse(raw.get('overrideForgiveMistakes', 'default')),
        enable_retry=bool(raw.get('enableRetry', True)),
    )


def _parse_feedback_ranges(raw: Any) -> Tuple[FeedbackRange, ...]:
    if not isinstance(raw, list):
        return ()

    ranges: List[FeedbackRange] = []
    for entry in raw:
        entry = _mapping(entry)
        ranges.append(FeedbackRange(
            start=int(_number(entry.get('from'), 0)),
            end=int(_number(entry.get('to'), 100)),
            feedback=str(entry.get('feedback') or ''),
        ))
    return tuple(ranges)
