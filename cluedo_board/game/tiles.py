"""Tile variants and the layout symbol classifier."""

from typing import Optional
from dataclasses import dataclass, field
import logging

from .constants import (
    Direction,
    Position,
    Room,
    RoomTopology,
    TileKind,
    HALLWAY_SYMBOL,
    WALL_SYMBOL,
    STANDARD_TOPOLOGY,
)
from .errors import UnrecognizedSymbol
from .tokens import GameToken

# Setup logger
logger = logging.getLogger(__name__)


@dataclass
class Tile:
    """One cell of the board.

    ``kind`` tags the variant; ``facing`` is only set on doorways and the
    ``room``/``corner``/``opposite`` fields only on room tiles.
    """
    kind: TileKind
    position: Position
    base_symbol: str
    facing: Optional[Direction] = None
    room: Optional[Room] = None
    corner: bool = False
    opposite: Optional[Room] = None
    occupant: Optional[GameToken] = field(default=None, repr=False)

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col

    @property
    def symbol(self) -> str:
        """Symbol to draw: the occupant's if there is one."""
        if self.occupant is not None:
            return self.occupant.symbol
        return self.base_symbol

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    def is_wall(self) -> bool:
        return self.kind is TileKind.WALL

    def is_hallway(self) -> bool:
        return self.kind is TileKind.HALLWAY

    def is_doorway(self) -> bool:
        return self.kind is TileKind.DOORWAY

    def is_room(self) -> bool:
        return self.kind is TileKind.ROOM

    def is_corner_room(self) -> bool:
        return self.kind is TileKind.ROOM and self.corner


def make_tile(symbol: str, position: Position,
              topology: RoomTopology = STANDARD_TOPOLOGY) -> Tile:
    """Return a new tile for a layout character.

    Start-square digits are not handled here; the grid builder turns them
    into plain hallway tiles before calling this.
    """
    if symbol == WALL_SYMBOL:
        return Tile(TileKind.WALL, position, WALL_SYMBOL)
    if symbol == HALLWAY_SYMBOL:
        return Tile(TileKind.HALLWAY, position, HALLWAY_SYMBOL)

    facing = Direction.from_symbol(symbol)
    if facing is not None:
        return Tile(TileKind.DOORWAY, position, symbol, facing=facing)

    room = topology.room_for_symbol(symbol)
    if room is not None:
        return Tile(
            TileKind.ROOM,
            position,
            symbol,
            room=room,
            corner=topology.is_corner(room),
            opposite=topology.opposite(room),
        )

    logger.debug(f"Unknown layout character {symbol!r} at {position}")
    raise UnrecognizedSymbol(symbol, position.row, position.col)
