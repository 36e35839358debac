"""
Configuration Settings Commands

Show and export the active application configuration.
"""

import json
from dataclasses import asdict
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.table import Table

from ...utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']),
              default='table', help='Output format')
@click.pass_context
def show(ctx, output_format):
    """Show current configuration.

    \b
    EXAMPLES:

    essay-grader config show
    essay-grader config show --format json
    """
    config_dict = _config_to_dict(ctx.obj['config'])

    if output_format == 'json':
        console.print_json(json.dumps(config_dict))
    elif output_format == 'yaml':
        console.print(yaml.dump(config_dict, default_flow_style=False, indent=2))
    else:
        table = Table(title="Configuration")
        table.add_column("Section", style="cyan")
        table.add_column("Setting", style="magenta")
        table.add_column("Value", style="green")

        for key, value in config_dict.items():
            if isinstance(value, dict):
                for nested_key, nested_value in value.items():
                    table.add_row(key, nested_key, repr(nested_value))
            else:
                table.add_row("app", key, repr(value))

        console.print(table)


@click.command()
@click.option('--format', 'output_format', type=click.Choice(['json', 'yaml']), default='yaml',
              help='Export format')
@click.option('--output', '-o', type=click.Path(dir_okay=False), required=True,
              help='Output file path')
@click.pass_context
def export(ctx, output_format, output):
    """Export current configuration to a file.

    \b
    EXAMPLES:

    essay-grader config export --output my_config.yaml
    essay-grader config export --format json --output config.json
    """
    config_dict = _config_to_dict(ctx.obj['config'])
    output_path = Path(output)

    with open(output_path, 'w', encoding='utf-8') as f:
        if output_format == 'json':
            json.dump(config_dict, f, indent=2)
        else:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    console.print(f"[green]✓ Configuration exported to {output_path}[/green]")
    logger.info(f"Configuration exported to {output_path}")


def _config_to_dict(config):
    """Convert configuration object to dictionary."""
    return asdict(config)
