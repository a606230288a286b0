"""Conway's Game of Life rules and simulation state."""

import logging
from typing import Iterable, Optional, Tuple

from .grid import Grid

logger = logging.getLogger(__name__)


def next_cell_state(grid: Grid, x: int, y: int) -> bool:
    """Apply the Life rule to a single cell of ``grid``.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Only ``grid`` is read, so the result does not depend on which other cells
    of the next generation have already been computed.
    """
    neighbors = grid.get_neighbors(x, y)
    if grid.get_cell(x, y):
        return neighbors in (2, 3)
    return neighbors == 3


def advance(grid: Grid) -> Grid:
    """Compute the next generation of ``grid``.

    The input grid is left untouched; the next generation is written into a
    fresh grid of the same size and topology.

    Args:
        grid: Current generation

    Returns:
        New Grid holding the next generation
    """
    neighbor_counts = grid.count_all_neighbors()
    cells = grid.cells

    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    result = Grid(grid.width, grid.height, wrap_edges=grid.wrap_edges)
    result.cells[survive_mask | birth_mask] = 1
    return result


def advance_cellwise(grid: Grid, order: Optional[Iterable[Tuple[int, int]]] = None) -> Grid:
    """Compute the next generation one cell at a time.

    Slow reference version of :func:`advance`. Cells are visited in ``order``
    (every cell, row by row, when omitted); each one reads the current
    generation and writes a separate output grid.

    Args:
        grid: Current generation
        order: Optional (x, y) visiting order

    Returns:
        New Grid holding the next generation
    """
    if order is None:
        order = ((x, y) for y in range(grid.height) for x in range(grid.width))

    result = Grid(grid.width, grid.height, wrap_edges=grid.wrap_edges)
    for x, y in order:
        result.set_cell(x, y, next_cell_state(grid, x, y))
    return result


class GameOfLife:
    """Owns the current generation and advances it one step at a time."""

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a starting grid.

        Args:
            grid: Generation zero
        """
        self._grid = grid
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Number of steps taken since the last reset."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The previous generation, for callers that diff the two
        """
        previous = self._grid
        self._grid = advance(previous)
        self._generation += 1
        logger.debug("Generation %d: population %d", self._generation, self._grid.population)
        return previous

    def run(self, generations: int) -> Grid:
        """Advance ``generations`` steps and return the resulting grid."""
        for _ in range(generations):
            self.step()
        return self._grid

    def reset(self, grid: Optional[Grid] = None) -> None:
        """Restart the generation count, optionally from a new grid.

        Raises:
            ValueError: If the new grid's size differs from the current one
        """
        if grid is not None:
            if grid.shape != self._grid.shape:
                raise ValueError(f"Grid dimensions don't match: {grid.shape} vs {self._grid.shape}")
            self._grid = grid
        self._generation = 0
