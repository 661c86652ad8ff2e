"""
Render command for printing a board layout.
"""

import logging
import click
from typing import Optional

from ..utils import format_board, handle_error, load_board, make_players, quiet_echo
from ..config import get_config
from ...game.errors import BoardError

logger = logging.getLogger(__name__)


@click.command()
@click.option('--layout', '-l', type=click.Path(dir_okay=False),
              help='Layout file (default: configured or standard board)')
@click.option('--players', '-p', type=int, default=0,
              help='Number of suspects to put on their start squares (default: 0)')
@click.option('--border', '-b', is_flag=True,
              help='Show row and column indices')
@click.pass_context
def render(ctx, layout: Optional[str], players: int, border: bool):
    """
    Print the board, one character per tile.

    \b
    Examples:
        cluedo-board render
        cluedo-board render --players 6 --border
        cluedo-board render --layout my_board.txt
    """
    config = get_config()
    tokens = make_players(players)

    try:
        board = load_board(layout, tokens)
    except BoardError as e:
        handle_error(e, config.get('verbose', False))
        return

    logger.debug(f"Rendering board with {len(tokens)} tokens")
    click.echo(format_board(board, border=border, use_color=config.get('color_output', True)))

    placed = [t for t in tokens if t.is_placed]
    if tokens:
        quiet_echo(f"\n{len(placed)}/{len(tokens)} tokens on start squares")
        for token in placed:
            quiet_echo(f"  {token.symbol}: {token.name} at {token.position}")
