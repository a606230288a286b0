"""Frontend interfaces for the Game of Life."""

from .tkinter_gui import LifeWindow

__all__ = ["LifeWindow"]
