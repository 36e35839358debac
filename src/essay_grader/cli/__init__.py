"""
CLI Module

Rich output formatting for the command-line interface.
"""

from .formatting import format_outcome_table, format_summary_panel, format_issues_table, print_json

__all__ = [
    "format_outcome_table",
    "format_summary_panel",
    "format_issues_table",
    "print_json",
]
