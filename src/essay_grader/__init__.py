"""
essay-grader

Keyword based grading of free-text answers with scores and feedback.
"""

__version__ = "1.0.0"
