"""
Attempt Command

Interactive check / try-again loop for one essay content.
"""

from pathlib import Path

import click
from rich.console import Console

from ..cli.formatting import format_summary_panel
from ..evaluation.engine import EssayEngine
from ..evaluation.question import EssayQuestion, TRY_AGAIN
from ..evaluation.session import TextInputProvider
from ..storage.state_manager import StateManager
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.argument('content', type=click.Path(exists=True, dir_okay=False))
@click.option('--state-id', '-s', help='Resume from and save to this snapshot id')
@click.pass_context
def attempt(ctx, content, state_id):
    """Answer an essay interactively, retrying while allowed.

    \b
    EXAMPLES:

    essay-grader attempt examples/pets.yaml
    essay-grader attempt examples/pets.yaml --state-id alice
    """
    config = ctx.obj['config']
    engine = EssayEngine.from_file(
        content,
        fuzzy_threshold=config.matching.fuzzy_threshold,
        line_break=config.feedback.line_break,
    )

    states = StateManager(Path(config.storage.state_dir)) if state_id else None
    previous_state = states.load_state(state_id) if states else None

    provider = TextInputProvider((previous_state or {}).get('text', ''))
    question = EssayQuestion(
        engine,
        content_id=Path(content).stem,
        input_provider=provider,
        previous_state=previous_state,
        event_listener=lambda event: logger.debug(f"Statement: {event.to_statement()}"),
        state_id=state_id,
    )
    question.register()

    if engine.content.task_description:
        console.print(f"[bold]{engine.content.task_description}[/bold]")

    while True:
        answer = click.prompt("Your answer", default=provider.get_input() or None,
                              show_default=False)
        provider.set_text(answer)
        outcome = question.check_answer()
        console.print(format_summary_panel(outcome))

        if states:
            states.save_state(state_id, question.get_current_state())

        if not question.is_button_visible(TRY_AGAIN):
            break
        if not click.confirm(engine.content.try_again_label, default=True):
            break
        question.try_again()
