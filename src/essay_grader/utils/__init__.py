"""
Utils Module

Logging configuration and text matching primitives.
"""

from .logging import setup_logging, get_logger, get_session_logger, PerformanceTimer
from .text import is_isolated_match, fuzzy_contains

__all__ = [
    "setup_logging",
    "get_logger",
    "get_session_logger",
    "PerformanceTimer",
    "is_isolated_match",
    "fuzzy_contains",
]
