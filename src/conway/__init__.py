"""Conway's Game of Life with a Tkinter display."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.game import GameOfLife, advance
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "advance", "Pattern", "PatternLibrary"]
