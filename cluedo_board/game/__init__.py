"""Game logic package for the Cluedo board."""

from .constants import (
    GRID_SIZE,
    Direction,
    TileKind,
    Character,
    Weapon,
    Room,
    Position,
    RoomTopology,
    STANDARD_TOPOLOGY,
)
from .errors import BoardError, BoardLoadFailure, UnrecognizedSymbol, IllegalStairsUse
from .tokens import GameToken, CharacterToken, WeaponToken
from .tiles import Tile, make_tile
from .layout import load_layout, build_grid, DEFAULT_LAYOUT_PATH
from .board import Board

__all__ = [
    'GRID_SIZE',
    'Direction',
    'TileKind',
    'Character',
    'Weapon',
    'Room',
    'Position',
    'RoomTopology',
    'STANDARD_TOPOLOGY',
    'BoardError',
    'BoardLoadFailure',
    'UnrecognizedSymbol',
    'IllegalStairsUse',
    'GameToken',
    'CharacterToken',
    'WeaponToken',
    'Tile',
    'make_tile',
    'load_layout',
    'build_grid',
    'DEFAULT_LAYOUT_PATH',
    'Board',
]
