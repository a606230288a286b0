"""Core cellular automata logic."""

from .grid import Grid
from .game import GameOfLife, advance, advance_cellwise, next_cell_state
from .patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "advance", "advance_cellwise", "next_cell_state", "Pattern", "PatternLibrary"]
