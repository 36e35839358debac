"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the essay
grader test suite.
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

# Add src to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from essay_grader.core.config import set_config
from essay_grader.evaluation.engine import EssayEngine


def build_group(*alternatives, points=1, found=None, missed=None,
               case_sensitive=False, forgive_mistakes=False) -> Dict[str, Any]:
    """Build a keyword group in content-file shape."""
    options = {'points': points}
    if found is not None:
        options['feedbackFound'] = found
    if missed is not None:
        options['feedbackMissed'] = missed
    return {
        'alternatives': [
            {
                'alternative': text,
                'options': {
                    'caseSensitive': case_sensitive,
                    'forgiveMistakes': forgive_mistakes,
                },
            }
            for text in alternatives
        ],
        'options': options,
    }


def build_content(groups, **behaviour) -> Dict[str, Any]:
    """Build content data with the given groups and behaviour settings."""
    return {
        'keywordGroups': groups,
        'behaviour': behaviour,
        'overallFeedback': [{'from': 0, 'to': 100, 'feedback': '@score/@total'}],
    }


@pytest.fixture
def make_group():
    """Factory for keyword groups in content-file shape."""
    return build_group


@pytest.fixture
def make_content():
    """Factory for content data."""
    return build_content


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def pets_content() -> Dict[str, Any]:
    """Content with a dog group worth 5 and a cat group worth 5."""
    return {
        'taskDescription': 'Write about pets.',
        'keywordGroups': [
            build_group('dog', 'puppy', points=5, found='Found dog', missed='No dog'),
            build_group('cat', points=5, missed='No cat'),
        ],
        'behaviour': {
            'scoreMastering': 10,
            'scorePassing': 5,
            'enableRetry': True,
        },
        'overallFeedback': [
            {'from': 0, 'to': 99, 'feedback': 'You got @score of @total.'},
            {'from': 100, 'to': 100, 'feedback': 'Perfect: @score of @total!'},
        ],
    }


@pytest.fixture
def pets_engine(pets_content) -> EssayEngine:
    return EssayEngine.from_dict(pets_content)


@pytest.fixture
def content_file(temp_dir, pets_content) -> Path:
    """Pets content written to a YAML file."""
    path = temp_dir / "pets.yaml"
    path.write_text(yaml.safe_dump(pets_content), encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep the cached application configuration from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external dependencies"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests driving the command-line interface"
    )
