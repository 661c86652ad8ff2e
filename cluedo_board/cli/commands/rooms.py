"""
Rooms command for listing the rooms of a layout.
"""

import click
from typing import Optional

from ..utils import format_table, handle_error, load_board
from ..config import get_config
from ...game.constants import Room
from ...game.errors import BoardError


@click.command()
@click.option('--layout', '-l', type=click.Path(dir_okay=False),
              help='Layout file (default: configured or standard board)')
@click.pass_context
def rooms(ctx, layout: Optional[str]):
    """
    List each room with its symbol, size and stairs destination.
    """
    config = get_config()
    try:
        board = load_board(layout, [])
    except BoardError as e:
        handle_error(e, config.get('verbose', False))
        return

    table_data = []
    for room in Room:
        opposite = board.topology.opposite(room)
        table_data.append({
            'Room': str(room),
            'Symbol': board.room_symbol(room),
            'Tiles': len(board.room_tiles(room)),
            'Stairs to': str(opposite) if opposite else '-',
        })

    click.echo(format_table(table_data, ['Room', 'Symbol', 'Tiles', 'Stairs to']))
