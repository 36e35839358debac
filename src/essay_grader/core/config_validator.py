"""
Content Validator

Checks essay content for questionable settings. Grading itself falls back
to defaults for anything malformed; this validator reports what those
defaults are hiding so authors can fix their content.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..evaluation.models import EssayContent, OverrideMode, read_content_file


class ContentValidator:
    """Content validator producing human-readable issues."""

    def __init__(self):
        self.override_fields = ['overrideCaseSensitive', 'overrideForgiveMistakes']
        self.score_fields = ['scoreMastering', 'scorePassing']
        self.valid_overrides = {mode.value for mode in OverrideMode}

    def validate_content(self, content_data: Dict[str, Any]) -> List[str]:
        """
        Validate raw content data.

        Args:
            content_data: Content mapping as read from file

        Returns:
            List of issues, empty if the content looks fine
        """
        issues = []
        issues.extend(self._validate_keyword_groups(content_data.get('keywordGroups')))
        issues.extend(self._validate_behaviour(content_data.get('behaviour')))
        issues.extend(self._validate_overall_feedback(content_data.get('overallFeedback')))
        return issues

    def validate_and_load(self, content_path: Union[str, Path]) -> Tuple[EssayContent, List[str]]:
        """
        Load content from file and validate it.

        Raises:
            ContentError: If the file cannot be read
        """
        data = read_content_file(content_path)
        return EssayContent.from_dict(data), self.validate_content(data)

    def _validate_keyword_groups(self, groups: Any) -> List[str]:
        if groups is None:
            return ["No keywordGroups defined, every answer scores 0"]
        if not isinstance(groups, list):
            return ["keywordGroups must be a list"]

        issues = []
        for index, group in enumerate(groups, start=1):
            prefix = f"keywordGroups[{index}]"
            if not isinstance(group, dict):
                issues.append(f"{prefix}: must be a mapping")
                continue

            alternatives = group.get('alternatives')
            if not isinstance(alternatives, list) or not alternatives:
                issues.append(f"{prefix}: has no alternatives")
            else:
                for alt_index, alternative in enumerate(alternatives, start=1):
                    text = alternative.get('alternative') if isinstance(alternative, dict) else None
                    if not isinstance(text, str) or not text.strip():
                        issues.append(f"{prefix}.alternatives[{alt_index}]: empty alternative text")

            options = group.get('options')
            points = options.get('points') if isinstance(options, dict) else None
            if points is None:
                issues.append(f"{prefix}: no points set, counts as 0")
            elif isinstance(points, bool) or not isinstance(points, (int, float)):
                issues.append(f"{prefix}: points must be a number, got {points!r}")
            elif points < 0:
                issues.append(f"{prefix}: negative points {points} are treated as 0")

        return issues

    def _validate_behaviour(self, behaviour: Any) -> List[str]:
        if behaviour is None:
            return []
        if not isinstance(behaviour, dict):
            return ["behaviour must be a mapping"]

        issues = []
        for field_name in self.override_fields:
            value = behaviour.get(field_name)
            if value is not None and str(value).lower() not in self.valid_overrides:
                issues.append(f"behaviour.{field_name}: unknown value {value!r}, using 'default'")

        for field_name in self.score_fields:
            value = behaviour.get(field_name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
                issues.append(f"behaviour.{field_name}: must be a number, got {value!r}")

        mastering = behaviour.get('scoreMastering')
        passing = behaviour.get('scorePassing')
        if (isinstance(mastering, (int, float)) and isinstance(passing, (int, float))
                and passing > mastering):
            issues.append(f"behaviour.scorePassing ({passing}) exceeds scoreMastering ({mastering})")

        return issues

    def _validate_overall_feedback(self, ranges: Any) -> List[str]:
        if ranges is None:
            return []
        if not isinstance(ranges, list):
            return ["overallFeedback must be a list of ranges"]

        issues = []
        for index, entry in enumerate(ranges, start=1):
            if not isinstance(entry, dict):
                issues.append(f"overallFeedback[{index}]: must be a mapping")
                continue
            start, end = entry.get('from'), entry.get('to')
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (start, end)):
                issues.append(f"overallFeedback[{index}]: from/to must be whole percentages")
            elif not 0 <= start <= end <= 100:
                issues.append(f"overallFeedback[{index}]: range {start}-{end} is not within 0-100")
        return issues
