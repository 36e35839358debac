"""
Commands Package

Click commands of the essay-grader CLI.
"""

from .grade import grade
from .attempt import attempt

__all__ = ['grade', 'attempt']
