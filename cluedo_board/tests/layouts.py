"""In-memory layouts for board tests."""

from typing import Dict, Tuple

from cluedo_board.game.constants import GRID_SIZE, HALLWAY_SYMBOL


def make_layout(cells: Dict[Tuple[int, int], str] = None, fill: str = HALLWAY_SYMBOL) -> str:
    """Build a full-size layout of ``fill`` with individual cells overridden."""
    grid = [[fill] * GRID_SIZE for _ in range(GRID_SIZE)]
    for (row, col), symbol in (cells or {}).items():
        grid[row][col] = symbol
    return "\n".join("".join(row) for row in grid)


def assert_occupancy_consistent(test_case, board, tokens):
    """Every occupant points back at its tile and every placed token is an occupant."""
    occupied = 0
    for tile in board.tiles():
        if tile.occupant is not None:
            occupied += 1
            test_case.assertEqual(tile.occupant.position, (tile.row, tile.col))
    placed = [t for t in tokens if t.is_placed]
    for token in placed:
        test_case.assertIs(board.get_tile(*token.position).occupant, token)
    test_case.assertEqual(occupied, len(placed))
