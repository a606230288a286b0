"""Tkinter window for Conway's Game of Life."""

import logging
import tkinter as tk
from typing import Dict, Optional, Tuple

from ..config import LifeConfig
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


class LifeWindow:
    """Draws the grid on a Tk canvas and advances it at a fixed cadence.

    The canvas holds one rectangle per cell. The frame loop runs every
    ``frame_interval_ms`` but only steps the game once every
    ``generation_interval_ms``, so the picture stays the same between
    generations.
    """

    def __init__(self, master: tk.Tk, config: Optional[LifeConfig] = None, grid: Optional[Grid] = None) -> None:
        """Initialize the window.

        Args:
            master: Root Tkinter window
            config: Display and pacing settings (defaults to LifeConfig())
            grid: Starting generation (random when omitted)

        Raises:
            ValueError: If the config is invalid or the grid size doesn't match it
        """
        self.config = config or LifeConfig()
        self.config.validate()

        if grid is None:
            grid = Grid.random(
                self.config.width,
                self.config.height,
                probability=self.config.initial_population,
                wrap_edges=self.config.wrap_edges,
            )
        elif grid.shape != (self.config.width, self.config.height):
            raise ValueError(
                f"Grid size {grid.shape} doesn't match configured size {(self.config.width, self.config.height)}"
            )

        self.master = master
        self.master.title(self.config.title)
        self.master.configure(bg=self.config.background_color)
        self.master.protocol("WM_DELETE_WINDOW", self.close)

        self.game = GameOfLife(grid)

        # Canvas item id of each cell's rectangle
        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self._after_id: Optional[str] = None

        self.setup_ui()
        self.draw_all_cells()
        self.last_update = self._now_ms()
        self.update_loop()

    def setup_ui(self) -> None:
        """Create the canvas."""
        self.canvas = tk.Canvas(
            self.master,
            width=self.config.canvas_width,
            height=self.config.canvas_height,
            bg=self.config.background_color,
            highlightthickness=0,
        )
        self.canvas.pack()

    def _now_ms(self) -> int:
        return int(self.master.tk.call("clock", "milliseconds"))

    def cell_color(self, x: int, y: int) -> str:
        """Fill colour for the cell at (x, y) in the current generation."""
        return self.config.alive_color if self.game.grid.get_cell(x, y) else self.config.dead_color

    def draw_all_cells(self) -> None:
        """Recreate every cell rectangle from the current generation."""
        self.canvas.delete("all")
        self.cell_objects.clear()

        size = self.config.cell_size
        margin = self.config.margin
        for x in range(self.config.width):
            for y in range(self.config.height):
                x1 = margin + x * size
                y1 = margin + y * size
                self.cell_objects[(x, y)] = self.canvas.create_rectangle(
                    x1, y1, x1 + size, y1 + size, fill=self.cell_color(x, y), outline=""
                )

    def draw_cell(self, x: int, y: int) -> None:
        """Recolour a single cell."""
        self.canvas.itemconfig(self.cell_objects[(x, y)], fill=self.cell_color(x, y))

    def draw_changed_cells(self, previous: Grid) -> int:
        """Recolour the cells that differ from ``previous``; return how many did."""
        count = 0
        for x, y in self.game.grid.changed_cells(previous):
            self.draw_cell(x, y)
            count += 1
        return count

    def tick(self, now_ms: int) -> bool:
        """Advance one generation if the interval has elapsed.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            True if a generation was computed
        """
        if now_ms - self.last_update < self.config.generation_interval_ms:
            return False

        previous = self.game.step()
        changed = self.draw_changed_cells(previous)
        self.last_update = now_ms
        logger.debug("Drew generation %d (%d cells changed)", self.game.generation, changed)
        return True

    def update_loop(self) -> None:
        """Frame loop: maybe step, then schedule the next frame."""
        self.tick(self._now_ms())
        self._after_id = self.master.after(self.config.frame_interval_ms, self.update_loop)

    def close(self) -> None:
        """Stop the frame loop and destroy the window."""
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None
        logger.info("Window closed after %d generations", self.game.generation)
        self.master.destroy()


def main() -> int:
    """Main entry point: open the window and run until it is closed.

    Returns:
        Exit code (0 for success, 1 if no window could be opened)
    """
    setup_logging()
    config = LifeConfig()

    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.error("Could not open a window: %s", e)
        return 1

    root.resizable(False, False)
    app = LifeWindow(root, config)
    logger.info(
        "Running %dx%d grid, population %d, one generation every %d ms",
        config.width,
        config.height,
        app.game.population,
        config.generation_interval_ms,
    )

    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
