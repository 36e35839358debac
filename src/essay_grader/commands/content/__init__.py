"""
Content Commands

Commands for working with essay content files.
"""

from .validate import validate

__all__ = ['validate']
