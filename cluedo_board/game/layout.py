"""Reading board layouts and building the tile grid from them.

A layout is GRID_SIZE lines of GRID_SIZE characters each:

    x        wall
    (space)  hallway
    n e s w  doorway, entered from the hallway by walking in that direction
    K B C N I L O H S  room tiles (see ROOM_SYMBOLS)
    0-9      hallway start square of the character token with that uid
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union, IO
import logging

from .constants import GRID_SIZE, HALLWAY_SYMBOL, Position, RoomTopology, STANDARD_TOPOLOGY
from .errors import BoardLoadFailure
from .tiles import Tile, make_tile
from .tokens import CharacterToken

# Setup logger
logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_PATH = Path(__file__).resolve().parent.parent / 'data' / 'board.txt'

LayoutSource = Union[str, Path, IO[str], None]

START_SYMBOLS = '0123456789'


def load_layout(source: LayoutSource = None) -> List[str]:
    """Read a layout into a list of lines.

    Args:
        source: Path to a layout file, an open text stream, or None for the
            standard board shipped with the package.

    Returns:
        The layout lines without line terminators.

    Raises:
        BoardLoadFailure: If the source cannot be read.
    """
    if source is None:
        source = DEFAULT_LAYOUT_PATH

    try:
        if hasattr(source, 'read'):
            text = source.read()
        else:
            with open(source, 'r', encoding='utf-8') as f:
                text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BoardLoadFailure(f"Error processing board file {source}: {e}") from e

    if not isinstance(text, str):
        raise BoardLoadFailure(f"Layout source {source!r} did not produce text")

    lines = text.splitlines()
    logger.debug(f"Read {len(lines)} layout lines from {source}")
    return lines


def _check_shape(lines: Sequence[str]) -> List[str]:
    rows = list(lines)
    # Blank lines at the end of a file are not rows
    while rows and rows[-1] == '':
        rows.pop()

    if len(rows) != GRID_SIZE:
        raise BoardLoadFailure(f"Layout has {len(rows)} rows, expected {GRID_SIZE}")
    for row, line in enumerate(rows):
        if len(line) != GRID_SIZE:
            raise BoardLoadFailure(
                f"Layout row {row} has {len(line)} columns, expected {GRID_SIZE}"
            )
    return rows


def build_grid(lines: Sequence[str], players: Sequence[CharacterToken],
               topology: RoomTopology = STANDARD_TOPOLOGY) -> List[List[Tile]]:
    """Build the full tile grid and put each player on its start square.

    Nothing is placed unless the whole layout parses, so a failed build
    leaves every token untouched.

    Raises:
        BoardLoadFailure: If the layout is not exactly GRID_SIZE x GRID_SIZE or
            two start squares claim the same token.
        UnrecognizedSymbol: If a character is not part of the tile alphabet.
    """
    rows = _check_shape(lines)

    grid: List[List[Tile]] = []
    starts: Dict[int, List[Tuple[int, int]]] = {}

    for row, line in enumerate(rows):
        tiles = []
        for col, char in enumerate(line):
            position = Position(row, col, char)
            if char in START_SYMBOLS:
                starts.setdefault(int(char), []).append((row, col))
                tiles.append(make_tile(HALLWAY_SYMBOL, position, topology))
            else:
                tiles.append(make_tile(char, position, topology))
        grid.append(tiles)

    placements = []
    for uid, coords in sorted(starts.items()):
        player = _find_player(players, uid)
        if player is None:
            logger.debug(f"No active token with uid {uid}; start squares {coords} left empty")
            continue
        if len(coords) > 1:
            raise BoardLoadFailure(f"Start square {uid} appears more than once: {coords}")
        placements.append((player, coords[0]))

    # Tokens outlive boards; one without a start square here is off this grid
    placed = {id(player) for player, _ in placements}
    for player in players:
        if id(player) not in placed and player.is_placed:
            logger.debug(f"{player} has no start square; clearing stale position {player.position}")
            player.clear_position()

    for player, (row, col) in placements:
        player.set_position(row, col)
        grid[row][col].occupant = player
        logger.debug(f"Placed {player} on start square ({row},{col})")

    return grid


def _find_player(players: Sequence[CharacterToken], uid: int) -> Optional[CharacterToken]:
    for player in players:
        if player.uid == uid:
            return player
    return None
