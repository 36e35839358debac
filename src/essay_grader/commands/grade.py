"""
Grade Command

Grades a single answer against an essay content file.
"""

from pathlib import Path

import click
from rich.console import Console

from ..cli.formatting import format_outcome_table, format_summary_panel, print_json
from ..evaluation.engine import EssayEngine
from ..storage.state_manager import StateManager
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('content', type=click.Path(exists=True, dir_okay=False))
@click.option('--text', '-t', help='Answer text')
@click.option('--file', '-f', 'answer_file', type=click.Path(exists=True, dir_okay=False),
              help='Read the answer from a file')
@click.option('--state-id', '-s', help='Save the answer snapshot under this id')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
def grade(ctx, content, text, answer_file, state_id, output_format):
    """Grade an answer against an essay content file.

    \b
    EXAMPLES:

    essay-grader grade examples/pets.yaml --text "I have a dog."
    essay-grader grade examples/pets.yaml --file answer.txt --format json
    """
    if (text is None) == (answer_file is None):
        raise click.UsageError("Provide exactly one of --text or --file")

    if answer_file is not None:
        text = Path(answer_file).read_text(encoding='utf-8')

    config = ctx.obj['config']
    engine = EssayEngine.from_file(
        content,
        fuzzy_threshold=config.matching.fuzzy_threshold,
        line_break=config.feedback.line_break,
    )
    outcome = engine.evaluate(text)

    if state_id:
        StateManager(Path(config.storage.state_dir)).save_state(state_id, {'text': text})

    if output_format == 'json':
        print_json(outcome.to_dict())
        return

    console.print(format_outcome_table(outcome))
    console.print(format_summary_panel(outcome))
