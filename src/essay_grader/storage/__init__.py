"""
Storage Module

Persistence of answer snapshots for resuming essays.
"""

from .state_manager import StateManager

__all__ = ["StateManager"]
