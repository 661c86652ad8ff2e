"""Constants for Cluedo board logic."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple
from dataclasses import dataclass, field
import logging

# Setup logger
logger = logging.getLogger(__name__)

# The board is always a fixed square grid
GRID_SIZE = 25

WALL_SYMBOL = 'x'
HALLWAY_SYMBOL = ' '


class Direction(Enum):
    NORTH = 'n'
    EAST = 'e'
    SOUTH = 's'
    WEST = 'w'

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DIRECTION_DELTAS[self]

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITE_DIRECTIONS[self]

    @staticmethod
    def from_symbol(symbol: str) -> Optional['Direction']:
        """Doorway symbol -> facing, or None for anything else."""
        for direction in Direction:
            if direction.value == symbol:
                return direction
        return None


_DIRECTION_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

_OPPOSITE_DIRECTIONS = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


class TileKind(Enum):
    WALL = "wall"
    HALLWAY = "hallway"
    DOORWAY = "doorway"
    ROOM = "room"


class _Card(Enum):
    """Shared behaviour of the three card enums."""

    def __str__(self) -> str:
        return self.name.replace('_', ' ')

    @classmethod
    def from_name(cls, name: str):
        """Look up a card by display or enum name, ignoring case."""
        if name is None:
            return None
        wanted = name.strip().replace('_', ' ').upper()
        for card in cls:
            if str(card) == wanted:
                return card
        return None


class Character(_Card):
    MISS_SCARLETT = 1
    COLONEL_MUSTARD = 2
    MRS_WHITE = 3
    THE_REVEREND_GREEN = 4
    MRS_PEACOCK = 5
    PROFESSOR_PLUM = 6


class Weapon(_Card):
    CANDLESTICK = 1
    DAGGER = 2
    LEAD_PIPE = 3
    REVOLVER = 4
    ROPE = 5
    SPANNER = 6


class Room(_Card):
    KITCHEN = 1
    BALL_ROOM = 2
    CONSERVATORY = 3
    BILLIARD_ROOM = 4
    LIBRARY = 5
    STUDY = 6
    HALL = 7
    LOUNGE = 8
    DINING_ROOM = 9


ROOM_SYMBOLS: Dict[Room, str] = {
    Room.KITCHEN: 'K',
    Room.BALL_ROOM: 'B',
    Room.CONSERVATORY: 'C',
    Room.DINING_ROOM: 'N',
    Room.BILLIARD_ROOM: 'I',
    Room.LIBRARY: 'L',
    Room.LOUNGE: 'O',
    Room.HALL: 'H',
    Room.STUDY: 'S',
}

WEAPON_SYMBOLS: Dict[Weapon, str] = {
    Weapon.CANDLESTICK: '+',
    Weapon.DAGGER: '-',
    Weapon.LEAD_PIPE: '/',
    Weapon.REVOLVER: '*',
    Weapon.ROPE: '=',
    Weapon.SPANNER: '?',
}

# Secret staircases between diagonally opposite corners
STANDARD_CORNER_PAIRS: Tuple[Tuple[Room, Room], ...] = (
    (Room.KITCHEN, Room.STUDY),
    (Room.CONSERVATORY, Room.LOUNGE),
)


def _symmetric(pairs: Iterable[Tuple[Room, Room]]) -> Dict[Room, Room]:
    mapping: Dict[Room, Room] = {}
    for first, second in pairs:
        if first == second:
            raise ValueError(f"Room {first} cannot be paired with itself")
        for source, target in ((first, second), (second, first)):
            if mapping.get(source, target) != target:
                raise ValueError(f"Room {source} is paired with both {mapping[source]} and {target}")
            mapping[source] = target
    return mapping


@dataclass(frozen=True)
class RoomTopology:
    """Room symbol table plus the stairs pairing between corner rooms.

    Both tables are stored as read-only views over private copies.
    """
    symbols: Mapping[Room, str] = field(default_factory=lambda: dict(ROOM_SYMBOLS))
    corners: Mapping[Room, Room] = field(default_factory=lambda: _symmetric(STANDARD_CORNER_PAIRS))

    def __post_init__(self):
        object.__setattr__(self, 'symbols', MappingProxyType(dict(self.symbols)))
        object.__setattr__(self, 'corners', MappingProxyType(dict(self.corners)))

    def __hash__(self) -> int:
        return hash((frozenset(self.symbols.items()), frozenset(self.corners.items())))

    @classmethod
    def with_corner_pairs(cls, pairs: Iterable[Tuple[Room, Room]],
                          symbols: Optional[Mapping[Room, str]] = None) -> 'RoomTopology':
        """Create a topology whose stairs connect each pair both ways."""
        return cls(symbols=dict(symbols or ROOM_SYMBOLS), corners=_symmetric(pairs))

    def room_for_symbol(self, symbol: str) -> Optional[Room]:
        for room, room_symbol in self.symbols.items():
            if room_symbol == symbol:
                return room
        return None

    def symbol_for_room(self, room: Room) -> str:
        return self.symbols.get(room, ' ')

    def is_corner(self, room: Room) -> bool:
        return room in self.corners

    def opposite(self, room: Room) -> Optional[Room]:
        return self.corners.get(room)


STANDARD_TOPOLOGY = RoomTopology()


@dataclass(frozen=True)
class Position:
    """A grid coordinate annotated with the layout symbol it was read from."""
    row: int
    col: int
    symbol: str = HALLWAY_SYMBOL

    def __str__(self) -> str:
        return f"({self.row},{self.col})"

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


def is_valid_coordinate(row: int, col: int) -> bool:
    """Check if a (row, col) pair lies on the board."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def get_next_coordinate(row: int, col: int, direction: Direction) -> Optional[Tuple[int, int]]:
    """Get the neighbouring coordinate in a given direction, or None off the board."""
    d_row, d_col = direction.delta
    new_row, new_col = row + d_row, col + d_col
    if not is_valid_coordinate(new_row, new_col):
        logger.debug(f"({new_row},{new_col}) is off the board")
        return None
    return (new_row, new_col)
