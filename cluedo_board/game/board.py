"""Core board logic for Cluedo."""

from typing import Iterator, List, Optional, Sequence
import numpy as np
import logging

from .constants import (
    Direction,
    Room,
    RoomTopology,
    TileKind,
    GRID_SIZE,
    STANDARD_TOPOLOGY,
    get_next_coordinate,
    is_valid_coordinate,
)
from .errors import IllegalStairsUse
from .layout import LayoutSource, build_grid, load_layout
from .tiles import Tile
from .tokens import CharacterToken, GameToken

# Setup logger
logger = logging.getLogger(__name__)


class Board:
    """Holds the tile grid and the logic for moving tokens around it.

    The grid is the source of truth for occupancy and each token for its own
    coordinate; every method that moves a token updates both.
    """

    def __init__(self, num_players: int, players: Sequence[CharacterToken],
                 layout: LayoutSource = None, topology: RoomTopology = STANDARD_TOPOLOGY):
        """
        Create the board by reading a layout.

        Args:
            num_players: Number of people playing.
            players: Character tokens in play; start squares are matched on uid.
            layout: Layout file path or text stream. None loads the standard board.
            topology: Room symbols and stairs pairing.

        Raises:
            BoardLoadFailure: If the layout is missing, unreadable or malformed.
            UnrecognizedSymbol: If the layout contains an unknown character.
        """
        self._build(num_players, players, load_layout(layout), topology)

    @classmethod
    def from_text(cls, text: str, players: Sequence[CharacterToken],
                  num_players: Optional[int] = None,
                  topology: RoomTopology = STANDARD_TOPOLOGY) -> 'Board':
        """Create a board from layout text instead of a file."""
        board = cls.__new__(cls)
        if num_players is None:
            num_players = len(players)
        board._build(num_players, players, text.splitlines(), topology)
        return board

    def _build(self, num_players: int, players: Sequence[CharacterToken],
               lines: Sequence[str], topology: RoomTopology):
        self.num_players = num_players
        # Shared with the caller, not copied
        self.players: Sequence[CharacterToken] = players
        self.topology = topology
        self.grid: List[List[Tile]] = build_grid(lines, self.players, topology)
        logger.info(f"Board built for {num_players} players "
                    f"({sum(p.is_placed for p in self.players)} tokens on start squares)")

    # ------------------------------------------------------------------
    # Tile lookup
    # ------------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> Optional[Tile]:
        """Get the tile at a coordinate, or None off the board."""
        if not is_valid_coordinate(row, col):
            return None
        return self.grid[row][col]

    def tile_of(self, token: Optional[GameToken]) -> Optional[Tile]:
        """Get the tile a token is standing on."""
        if token is None or token.position is None:
            return None
        return self.get_tile(*token.position)

    def tiles(self) -> Iterator[Tile]:
        """Iterate over every tile in row-major order."""
        for row in self.grid:
            yield from row

    def room_tiles(self, room: Room) -> List[Tile]:
        return [tile for tile in self.tiles() if tile.kind is TileKind.ROOM and tile.room == room]

    def room_symbol(self, room: Room) -> str:
        """Returns the symbol associated with a given room."""
        return self.topology.symbol_for_room(room)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_room(self, token: Optional[GameToken]) -> bool:
        """Returns True if a given token is in any room."""
        tile = self.tile_of(token)
        return tile is not None and tile.is_room()

    def in_corner_room(self, token: Optional[GameToken]) -> bool:
        """Returns True if a given token is in a corner room."""
        tile = self.tile_of(token)
        return tile is not None and tile.is_corner_room()

    def in_doorway(self, token: Optional[GameToken]) -> bool:
        """Returns True if a given token is in any doorway."""
        tile = self.tile_of(token)
        return tile is not None and tile.is_doorway()

    def room_of(self, token: Optional[GameToken]) -> Optional[Room]:
        tile = self.tile_of(token)
        if tile is None or not tile.is_room():
            return None
        return tile.room

    # ------------------------------------------------------------------
    # Step movement
    # ------------------------------------------------------------------

    def can_move(self, token: Optional[GameToken], direction: Direction) -> bool:
        """Check whether a token may take one step in a direction."""
        current = self.tile_of(token)
        if current is None:
            return False

        # Already on the edge in this direction
        target_coord = get_next_coordinate(current.row, current.col, direction)
        if target_coord is None:
            return False

        target = self.grid[target_coord[0]][target_coord[1]]
        if target.is_occupied:
            logger.debug(f"{token} blocked at {target.position}: occupied by {target.occupant}")
            return False

        if current.kind in (TileKind.DOORWAY, TileKind.ROOM):
            # Inside a room any room or doorway tile is reachable
            return target.kind in (TileKind.ROOM, TileKind.DOORWAY)

        if target.kind is TileKind.WALL or target.kind is TileKind.ROOM:
            return False
        if target.kind is TileKind.DOORWAY and target.facing is not direction:
            logger.debug(f"Doorway at {target.position} faces {target.facing.name}, "
                         f"not {direction.name}")
            return False
        return True

    def move(self, token: Optional[GameToken], direction: Direction):
        """Move a token one step. Legality is not re-checked; call can_move first."""
        if token is None or token.position is None:
            return
        target = get_next_coordinate(token.row, token.col, direction)
        if target is None:
            return
        self.move_to(token, *target)

    def try_move(self, token: Optional[GameToken], direction: Direction) -> bool:
        """Check and move in one call. Returns True if the token moved."""
        if not self.can_move(token, direction):
            return False
        self.move(token, direction)
        return True

    def move_to(self, token: Optional[GameToken], row: int, col: int):
        """Set a token's position within the token and the board."""
        if token is None or not is_valid_coordinate(row, col):
            return
        # Lift the token from its original tile
        if token.position is not None:
            old = self.grid[token.row][token.col]
            if old.occupant is token:
                old.occupant = None
        token.set_position(row, col)
        self.grid[row][col].occupant = token
        logger.debug(f"{token} now at ({row},{col})")

    def can_move_north(self, token: Optional[GameToken]) -> bool:
        return self.can_move(token, Direction.NORTH)

    def can_move_east(self, token: Optional[GameToken]) -> bool:
        return self.can_move(token, Direction.EAST)

    def can_move_south(self, token: Optional[GameToken]) -> bool:
        return self.can_move(token, Direction.SOUTH)

    def can_move_west(self, token: Optional[GameToken]) -> bool:
        return self.can_move(token, Direction.WEST)

    def move_north(self, token: Optional[GameToken]):
        self.move(token, Direction.NORTH)

    def move_east(self, token: Optional[GameToken]):
        self.move(token, Direction.EAST)

    def move_south(self, token: Optional[GameToken]):
        self.move(token, Direction.SOUTH)

    def move_west(self, token: Optional[GameToken]):
        self.move(token, Direction.WEST)

    # ------------------------------------------------------------------
    # Rooms and stairs
    # ------------------------------------------------------------------

    def move_into_room(self, token: GameToken, room: Room) -> bool:
        """Place a token on the first free tile of a room, scanning row by row.

        Returns:
            True if the token was placed, False if the room had no free tile.
        """
        if token is None or room is None:
            raise ValueError("Null parameters: move_into_room()")

        for tile in self.tiles():
            if tile.kind is TileKind.ROOM and tile.room == room and tile.occupant is None:
                self.move_to(token, tile.row, tile.col)
                return True

        logger.debug(f"No free tile in {room} for {token}")
        return False

    def use_stairs(self, token: Optional[GameToken]) -> bool:
        """Move a token from a corner room to the diagonally opposite one.

        Raises:
            IllegalStairsUse: If the token is not standing in a corner room.
        """
        if token is None:
            return False
        tile = self.tile_of(token)
        if tile is None or not tile.is_corner_room():
            raise IllegalStairsUse(f"No stairs in this area: {tile.position if tile else 'off board'}")

        logger.debug(f"{token} takes the stairs from {tile.room} to {tile.opposite}")
        return self.move_into_room(token, tile.opposite)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_symbol_array(self) -> np.ndarray:
        """Convert the current board symbols to a (GRID_SIZE, GRID_SIZE) array."""
        state = np.full((GRID_SIZE, GRID_SIZE), ' ', dtype='<U1')
        for tile in self.tiles():
            state[tile.row, tile.col] = tile.symbol
        return state

    def occupancy_mask(self) -> np.ndarray:
        """Boolean array, True where a tile holds a token."""
        mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
        for tile in self.tiles():
            if tile.is_occupied:
                mask[tile.row, tile.col] = True
        return mask

    def dump(self) -> str:
        """Return the state of the board, one line per row."""
        return "\n".join("".join(tile.symbol for tile in row) for row in self.grid)

    def __str__(self) -> str:
        return self.dump()
