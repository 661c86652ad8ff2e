"""
Main CLI entry point for cluedo-board.
"""

import logging
import click
from typing import Optional

from .config import get_config, set_config, format_corner_pairs, BoardConfig
from .commands import render, rooms
from .. import __version__


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='cluedo-board', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--layout', '-l',
              help='Default layout file for all commands')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version=__version__, prog_name='cluedo-board')
@click.pass_context
def cli(ctx, config: Optional[str], layout: Optional[str],
        verbose: bool, quiet: bool, no_color: bool):
    """
    Cluedo board inspection CLI

    Loads 25x25 board layouts and shows how tiles and tokens are laid out.

    Examples:
        cluedo-board render --players 6
        cluedo-board rooms --layout my_board.txt
        cluedo-board config
    """
    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    if config:
        config_obj = BoardConfig(config_file=config)
    else:
        config_obj = get_config()

    setup_logging(verbose or config_obj.get('verbose', False),
                  quiet or config_obj.get('quiet', False))

    # Override config with command line options
    if layout:
        config_obj.set('layout_path', layout)
    if verbose:
        config_obj.set('verbose', True)
    if quiet:
        config_obj.set('quiet', True)
    if no_color:
        config_obj.set('color_output', False)

    set_config(config_obj)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config_obj


# Register commands
cli.add_command(render.render)
cli.add_command(rooms.rooms)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        if key == 'corner_pairs':
            value = format_corner_pairs(value)
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file:
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == '__main__':
    cli()
