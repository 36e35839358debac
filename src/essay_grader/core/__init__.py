"""
Core Module

Configuration management and custom exceptions shared across the
application.
"""

from .config import get_config, AppConfig
from .exceptions import (
    EssayGraderException,
    ConfigurationError,
    ContentError,
    StateError,
    ValidationError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "EssayGraderException",
    "ConfigurationError",
    "ContentError",
    "StateError",
    "ValidationError",
]
