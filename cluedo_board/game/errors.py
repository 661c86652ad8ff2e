"""Exceptions raised by the board engine."""

from typing import Optional


class BoardError(Exception):
    """Base exception for board operations."""
    pass


class BoardLoadFailure(BoardError):
    """Raised when a layout cannot be read or does not describe a full grid."""
    pass


class UnrecognizedSymbol(BoardLoadFailure):
    """Raised when a layout contains a character outside the tile alphabet."""

    def __init__(self, symbol: str, row: Optional[int] = None, col: Optional[int] = None):
        self.symbol = symbol
        self.row = row
        self.col = col
        where = f" at ({row},{col})" if row is not None and col is not None else ""
        super().__init__(f"Tile character not recognised: {symbol!r}{where}")


class IllegalStairsUse(BoardError):
    """Raised when stairs are used from anywhere but a corner room."""
    pass
