"""Test tile classification, tokens and room topology."""

import unittest

from cluedo_board.game.constants import (
    Character, Direction, Position, Room, RoomTopology, TileKind, Weapon,
    STANDARD_TOPOLOGY, get_next_coordinate, is_valid_coordinate,
)
from cluedo_board.game.errors import BoardLoadFailure, UnrecognizedSymbol
from cluedo_board.game.tiles import make_tile
from cluedo_board.game.tokens import CharacterToken, WeaponToken


class TestMakeTile(unittest.TestCase):

    def test_wall_and_hallway(self):
        self.assertEqual(make_tile('x', Position(0, 0, 'x')).kind, TileKind.WALL)
        hallway = make_tile(' ', Position(0, 1))
        self.assertEqual(hallway.kind, TileKind.HALLWAY)
        self.assertEqual(hallway.symbol, ' ')

    def test_doorways_record_facing(self):
        for symbol, direction in [('n', Direction.NORTH), ('e', Direction.EAST),
                                  ('s', Direction.SOUTH), ('w', Direction.WEST)]:
            tile = make_tile(symbol, Position(3, 4, symbol))
            self.assertTrue(tile.is_doorway())
            self.assertIs(tile.facing, direction)
            self.assertIsNone(tile.room)

    def test_every_room_symbol(self):
        expected = {
            'K': Room.KITCHEN, 'B': Room.BALL_ROOM, 'C': Room.CONSERVATORY,
            'N': Room.DINING_ROOM, 'I': Room.BILLIARD_ROOM, 'L': Room.LIBRARY,
            'O': Room.LOUNGE, 'H': Room.HALL, 'S': Room.STUDY,
        }
        for symbol, room in expected.items():
            tile = make_tile(symbol, Position(1, 1, symbol))
            self.assertTrue(tile.is_room())
            self.assertEqual(tile.room, room)

    def test_corner_rooms_know_their_opposite(self):
        kitchen = make_tile('K', Position(1, 1, 'K'))
        self.assertTrue(kitchen.is_corner_room())
        self.assertEqual(kitchen.opposite, Room.STUDY)

        lounge = make_tile('O', Position(1, 1, 'O'))
        self.assertEqual(lounge.opposite, Room.CONSERVATORY)

        hall = make_tile('H', Position(1, 1, 'H'))
        self.assertFalse(hall.is_corner_room())
        self.assertIsNone(hall.opposite)

    def test_unknown_symbol(self):
        with self.assertRaises(UnrecognizedSymbol) as ctx:
            make_tile('?', Position(7, 9, '?'))
        self.assertEqual(ctx.exception.symbol, '?')
        self.assertEqual((ctx.exception.row, ctx.exception.col), (7, 9))
        # Lowercase room letters are not rooms
        with self.assertRaises(BoardLoadFailure):
            make_tile('k', Position(0, 0, 'k'))

    def test_symbol_shows_occupant(self):
        tile = make_tile('B', Position(2, 2, 'B'))
        tile.occupant = WeaponToken(Weapon.ROPE)
        self.assertEqual(tile.symbol, '=')
        tile.occupant = None
        self.assertEqual(tile.symbol, 'B')


class TestRoomTopology(unittest.TestCase):

    def test_standard_pairs_are_symmetric(self):
        self.assertEqual(STANDARD_TOPOLOGY.opposite(Room.KITCHEN), Room.STUDY)
        self.assertEqual(STANDARD_TOPOLOGY.opposite(Room.STUDY), Room.KITCHEN)
        self.assertEqual(STANDARD_TOPOLOGY.opposite(Room.CONSERVATORY), Room.LOUNGE)
        self.assertEqual(STANDARD_TOPOLOGY.opposite(Room.LOUNGE), Room.CONSERVATORY)
        self.assertEqual(sum(STANDARD_TOPOLOGY.is_corner(r) for r in Room), 4)

    def test_custom_pairs(self):
        topology = RoomTopology.with_corner_pairs([(Room.BALL_ROOM, Room.BILLIARD_ROOM)])
        self.assertEqual(topology.opposite(Room.BILLIARD_ROOM), Room.BALL_ROOM)
        self.assertFalse(topology.is_corner(Room.KITCHEN))
        self.assertEqual(topology.symbol_for_room(Room.HALL), 'H')

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            STANDARD_TOPOLOGY.corners[Room.HALL] = Room.LIBRARY
        with self.assertRaises(TypeError):
            STANDARD_TOPOLOGY.symbols[Room.HALL] = 'Q'
        self.assertFalse(STANDARD_TOPOLOGY.is_corner(Room.HALL))

    def test_caller_tables_are_copied(self):
        symbols = dict(STANDARD_TOPOLOGY.symbols)
        topology = RoomTopology(symbols=symbols)
        symbols[Room.HALL] = 'Q'
        self.assertEqual(topology.symbol_for_room(Room.HALL), 'H')

    def test_hashable_and_comparable(self):
        self.assertEqual(RoomTopology(), STANDARD_TOPOLOGY)
        self.assertEqual(hash(RoomTopology()), hash(STANDARD_TOPOLOGY))
        custom = RoomTopology.with_corner_pairs([(Room.BALL_ROOM, Room.BILLIARD_ROOM)])
        self.assertNotEqual(custom, STANDARD_TOPOLOGY)
        self.assertEqual(len({STANDARD_TOPOLOGY, RoomTopology(), custom}), 2)

    def test_conflicting_pairs_rejected(self):
        with self.assertRaises(ValueError):
            RoomTopology.with_corner_pairs([(Room.KITCHEN, Room.STUDY), (Room.KITCHEN, Room.HALL)])
        with self.assertRaises(ValueError):
            RoomTopology.with_corner_pairs([(Room.HALL, Room.HALL)])


class TestCardsAndTokens(unittest.TestCase):

    def test_card_names(self):
        self.assertEqual(str(Character.MISS_SCARLETT), "MISS SCARLETT")
        self.assertEqual(str(Weapon.LEAD_PIPE), "LEAD PIPE")
        self.assertEqual(Room.from_name("ball room"), Room.BALL_ROOM)
        self.assertEqual(Room.from_name("DINING_ROOM"), Room.DINING_ROOM)
        self.assertIsNone(Room.from_name("cellar"))
        self.assertEqual(len(Character), 6)
        self.assertEqual(len(Weapon), 6)
        self.assertEqual(len(Room), 9)

    def test_character_token(self):
        token = CharacterToken("test1", Character.COLONEL_MUSTARD, True, 3)
        self.assertEqual(token.symbol, '3')
        self.assertFalse(token.is_placed)
        self.assertEqual(token.hand, [])
        token.add_card(Room.HALL)
        self.assertEqual(token.hand, [Room.HALL])

    def test_character_equality(self):
        token = CharacterToken("test1", Character.COLONEL_MUSTARD, True, 0)
        same = CharacterToken("test1", Character.COLONEL_MUSTARD, False, 4)
        other = CharacterToken("test2", Character.MISS_SCARLETT, True, 0)
        self.assertEqual(token, same)
        self.assertNotEqual(token, other)

    def test_weapon_symbols(self):
        symbols = {WeaponToken(w).symbol for w in Weapon}
        self.assertEqual(symbols, {'+', '-', '/', '*', '=', '?'})

    def test_position_bounds(self):
        token = WeaponToken(Weapon.DAGGER)
        with self.assertRaises(ValueError):
            token.set_position(25, 0)
        self.assertIsNone(token.position)
        token.set_position(24, 24)
        self.assertEqual((token.row, token.col), (24, 24))


class TestCoordinates(unittest.TestCase):

    def test_valid_coordinates(self):
        self.assertTrue(is_valid_coordinate(0, 0))
        self.assertTrue(is_valid_coordinate(24, 24))
        self.assertFalse(is_valid_coordinate(-1, 0))
        self.assertFalse(is_valid_coordinate(0, 25))

    def test_next_coordinate(self):
        self.assertEqual(get_next_coordinate(5, 5, Direction.NORTH), (4, 5))
        self.assertEqual(get_next_coordinate(5, 5, Direction.EAST), (5, 6))
        self.assertIsNone(get_next_coordinate(24, 5, Direction.SOUTH))
        self.assertIsNone(get_next_coordinate(5, 0, Direction.WEST))
        self.assertIs(Direction.NORTH.opposite, Direction.SOUTH)


if __name__ == '__main__':
    unittest.main()
