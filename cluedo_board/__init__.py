"""Board and tile movement engine for the Cluedo deduction game."""

__version__ = "0.1.0"
