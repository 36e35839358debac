"""
CLI Entry Point

Command-line interface for the essay grader using Click with rich
output formatting.
"""

import sys
from pathlib import Path

import click
from rich.console import Console

from .core.config import get_config, reload_config
from .core.exceptions import EssayGraderException
from .utils.logging import setup_logging, get_logger
from .commands import grade, attempt
from .commands.content import validate as content_validate
from .commands.config import show as config_show, export as config_export

console = Console()
logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """essay-grader - Keyword based grading of free-text answers"""
    ctx.ensure_object(dict)

    if config:
        app_config = reload_config(Path(config))
    else:
        app_config = get_config()

    if debug:
        app_config.debug = debug

    if verbose or debug:
        app_config.logging.level = 'DEBUG'
    setup_logging(app_config)

    ctx.obj['config'] = app_config


# ===== CONTENT COMMANDS =====

@cli.group()
def content():
    """Essay content commands."""
    pass


content.add_command(content_validate)


# ===== CONFIG COMMANDS =====

@cli.group()
def config():
    """Configuration management commands."""
    pass


config.add_command(config_show)
config.add_command(config_export)


# ===== TOP-LEVEL COMMANDS =====

cli.add_command(grade)
cli.add_command(attempt)


def main():
    """Main entry point with error handling."""
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except EssayGraderException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
