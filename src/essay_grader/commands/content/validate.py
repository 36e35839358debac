"""
Content Validation Command

Reports questionable settings in an essay content file.
"""

import sys

import click
from rich.console import Console

from ...cli.formatting import format_issues_table
from ...core.config_validator import ContentValidator
from ...evaluation.feedback import format_score
from ...utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('content', type=click.Path(exists=True, dir_okay=False))
@click.option('--strict', is_flag=True, help='Exit with an error if any issue is found')
def validate(content, strict):
    """Validate an essay content file.

    \b
    EXAMPLES:

    essay-grader content validate examples/pets.yaml
    essay-grader content validate examples/pets.yaml --strict
    """
    essay, issues = ContentValidator().validate_and_load(content)

    behaviour = essay.behaviour
    console.print(
        f"[blue]{len(essay.keyword_groups)} keyword groups, "
        f"{format_score(essay.max_points)} points total; mastering at "
        f"{format_score(behaviour.score_mastering)}, passing at "
        f"{format_score(behaviour.score_passing)}[/blue]"
    )

    if not issues:
        console.print("[green]✓ Content is valid[/green]")
        return

    console.print(format_issues_table(issues))
    logger.info(f"Content {content} has {len(issues)} issues")
    if strict:
        sys.exit(1)
