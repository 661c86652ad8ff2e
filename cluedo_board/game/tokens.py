"""Movable pieces: character tokens and weapon tokens."""

from typing import List, Optional, Tuple, Union

from .constants import Character, Weapon, Room, WEAPON_SYMBOLS, is_valid_coordinate

Card = Union[Character, Weapon, Room]


class GameToken:
    """A piece that can rest on a board tile."""

    def __init__(self, name: str):
        self.name = name
        # (row, col) while on the board, None before placement
        self.position: Optional[Tuple[int, int]] = None

    @property
    def symbol(self) -> str:
        raise NotImplementedError

    @property
    def row(self) -> Optional[int]:
        return self.position[0] if self.position is not None else None

    @property
    def col(self) -> Optional[int]:
        return self.position[1] if self.position is not None else None

    @property
    def is_placed(self) -> bool:
        return self.position is not None

    def set_position(self, row: int, col: int):
        if not is_valid_coordinate(row, col):
            raise ValueError(f"Coordinate ({row},{col}) out of bounds")
        self.position = (row, col)

    def clear_position(self):
        self.position = None

    def __str__(self) -> str:
        return self.name


class CharacterToken(GameToken):
    """A suspect on the board; also holds the hand of the player controlling it."""

    def __init__(self, name: str, character: Character, is_player: bool, uid: int):
        super().__init__(name)
        self.character = character
        self.is_player = is_player
        self.uid = uid
        self.hand: List[Card] = []
        self.has_suggested = False
        self.steps_remaining = 0

    def add_card(self, card: Card):
        self.hand.append(card)

    @property
    def symbol(self) -> str:
        # Only single digit uids can be drawn in one cell
        return str(self.uid)[-1]

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, CharacterToken):
            return False
        return self.character == other.character and self.name == other.name

    def __hash__(self):
        return hash((self.character, self.name))

    def __repr__(self) -> str:
        return f"CharacterToken(name='{self.name}', character={self.character.name}, uid={self.uid})"


class WeaponToken(GameToken):
    """A weapon piece; only ever moved by placing it into a room."""

    def __init__(self, weapon: Weapon):
        super().__init__(str(weapon))
        self.weapon = weapon

    @property
    def symbol(self) -> str:
        return WEAPON_SYMBOLS[self.weapon]

    def __repr__(self) -> str:
        return f"WeaponToken({self.weapon.name})"
