"""
Command modules for the cluedo-board CLI.
"""

from . import render
from . import rooms

__all__ = ['render', 'rooms']
