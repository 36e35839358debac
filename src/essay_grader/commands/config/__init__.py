"""
Config Commands Package

Configuration management commands.
"""

from .settings import show, export

__all__ = ['show', 'export']
