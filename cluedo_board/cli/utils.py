"""
Utility functions for the cluedo-board CLI.

Board loading, table and board formatting, and error display helpers.
"""

from typing import List, Dict, Any, Optional
import click

from .config import get_config
from ..game.board import Board
from ..game.constants import Character, GRID_SIZE
from ..game.errors import BoardLoadFailure, UnrecognizedSymbol
from ..game.tokens import CharacterToken


def make_players(count: int) -> List[CharacterToken]:
    """Create character tokens for the first ``count`` suspects, uids 0..count-1."""
    characters = list(Character)
    if not 0 <= count <= len(characters):
        raise click.BadParameter(f"players must be between 0 and {len(characters)}")
    return [
        CharacterToken(str(character).title(), character, True, uid)
        for uid, character in enumerate(characters[:count])
    ]


def load_board(layout: Optional[str], players: List[CharacterToken]) -> Board:
    """Build a board from the CLI arguments and active configuration."""
    config = get_config()
    layout = layout or config.get('layout_path')
    try:
        topology = config.topology()
    except ValueError as e:
        raise click.ClickException(f"Invalid corner_pairs configuration: {e}")
    return Board(len(players), players, layout, topology)


def format_board(board: Board, border: bool = False, use_color: bool = True) -> str:
    """Format the board dump, optionally with row/column indices."""
    lines = []
    if border:
        lines.append("   " + "".join(str(col % 10) for col in range(GRID_SIZE)))

    for row_idx, row in enumerate(board.grid):
        row_str = ""
        for tile in row:
            symbol = tile.symbol
            if use_color and tile.is_occupied:
                symbol = click.style(symbol, fg='green', bold=True)
            row_str += symbol
        if border:
            row_str = f"{row_idx:2d} " + row_str
        lines.append(row_str)

    return "\n".join(lines)


def format_table(data: List[Dict[str, Any]], headers: List[str]) -> str:
    """Format data as a table."""
    if not data:
        return "No data to display."

    col_widths = {}
    for header in headers:
        col_widths[header] = len(header)
        for row in data:
            if header in row:
                col_widths[header] = max(col_widths[header], len(str(row[header])))

    lines = []
    lines.append(" | ".join(h.ljust(col_widths[h]) for h in headers))
    lines.append("-+-".join("-" * col_widths[h] for h in headers))
    for row in data:
        lines.append(" | ".join(str(row.get(h, "N/A")).ljust(col_widths[h]) for h in headers))

    return "\n".join(lines)


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Display a board error with a hint, then abort the command."""
    suggestions = []
    if isinstance(error, UnrecognizedSymbol):
        suggestions.append("• Layouts may only use x, space, n/e/s/w, 0-9 and the room letters")
    elif isinstance(error, BoardLoadFailure):
        suggestions.append("• Check the layout path is correct and readable")
        suggestions.append(f"• Layouts must be exactly {GRID_SIZE} lines of {GRID_SIZE} characters")

    message = f"{error}"
    if suggestions:
        message += "\n\nSuggestions:\n" + "\n".join(f"  {s}" for s in suggestions)
    if not verbose:
        message += "\n\nUse --verbose for detailed error information"
    raise click.ClickException(message)


def verbose_echo(message: str, **kwargs):
    """Echo message only in verbose mode."""
    config = get_config()
    if config.get('verbose', False):
        click.echo(message, **kwargs)


def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)
