"""Grid data structure for Conway's Game of Life."""

from typing import Iterable, Iterator, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


class Grid:
    """A fixed-size 2D grid of cells.

    Cells are stored in a numpy array indexed ``cells[x, y]`` where x is the
    column and y the row. Dimensions and edge behaviour are fixed at
    construction. By default the grid is bounded: cells beyond the edges are
    dead and never counted as neighbours. With ``wrap_edges=True`` the grid
    is toroidal instead.
    """

    def __init__(self, width: int, height: int, wrap_edges: bool = False) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows
            wrap_edges: Whether edges wrap around (toroidal topology)

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._wrap_edges = wrap_edges
        self._cells = np.zeros((width, height), dtype=np.int8)

        # Single-threaded torch keeps the Tk loop responsive
        torch.set_num_threads(1)

        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def seed(
        cls,
        width: int,
        height: int,
        living_cells: Iterable[Tuple[int, int]],
        wrap_edges: bool = False,
    ) -> "Grid":
        """Create a grid with the given cells alive.

        Args:
            width: Number of columns
            height: Number of rows
            living_cells: (x, y) coordinates of the cells to bring to life
            wrap_edges: Whether edges wrap around

        Returns:
            New Grid instance
        """
        grid = cls(width, height, wrap_edges=wrap_edges)
        for x, y in living_cells:
            grid.set_cell(x, y, True)
        return grid

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        probability: float = 0.5,
        seed: Optional[int] = None,
        wrap_edges: bool = False,
    ) -> "Grid":
        """Create a randomly populated grid.

        Args:
            width: Number of columns
            height: Number of rows
            probability: Chance each cell starts alive (0.0 to 1.0)
            seed: Optional seed for reproducible grids
            wrap_edges: Whether edges wrap around

        Returns:
            New Grid instance
        """
        grid = cls(width, height, wrap_edges=wrap_edges)
        grid.randomize(probability, rng=np.random.default_rng(seed))
        return grid

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def wrap_edges(self) -> bool:
        """Whether the grid is toroidal."""
        return self._wrap_edges

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    def _resolve(self, x: int, y: int) -> Tuple[int, int]:
        if self._wrap_edges:
            return x % self._width, y % self._height
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return x, y

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds and wrap_edges is False
        """
        x, y = self._resolve(x, y)
        return bool(self._cells[x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds and wrap_edges is False
        """
        x, y = self._resolve(x, y)
        self._cells[x, y] = 1 if alive else 0

    def toggle_cell(self, x: int, y: int) -> bool:
        """Toggle the state of a cell and return its new state."""
        new_state = not self.get_cell(x, y)
        self.set_cell(x, y, new_state)
        return new_state

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Optional numpy random generator

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0 and 1, got {probability}")

        rng = rng if rng is not None else np.random.default_rng()
        mask = rng.random((self._width, self._height)) < probability
        self._cells[:] = mask.astype(np.int8)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells and topology."""
        other = Grid(self._width, self._height, wrap_edges=self._wrap_edges)
        other._cells[:] = self._cells
        return other

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of all living cells, ordered by x then y."""
        xs, ys = np.nonzero(self._cells)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy

                if self._wrap_edges:
                    count += int(self._cells[nx % self._width, ny % self._height])
                elif 0 <= nx < self._width and 0 <= ny < self._height:
                    count += int(self._cells[nx, ny])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a torch convolution.

        Returns:
            (width, height) array with the neighbor count of each cell
        """
        # torch expects (height, width), so transpose in and out
        source = torch.from_numpy((self._cells.T > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)

        if self._wrap_edges:
            padded = F.pad(source, (1, 1, 1, 1), mode="circular")
            neighbors = F.conv2d(padded, self._torch_kernel)
        else:
            # Zero padding: off-grid cells are dead
            neighbors = F.conv2d(source, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def changed_cells(self, other: "Grid") -> Iterator[Tuple[int, int]]:
        """Yield coordinates of cells whose state differs from another grid.

        Raises:
            ValueError: If grids have different dimensions
        """
        if other.shape != self.shape:
            raise ValueError(f"Grid dimensions don't match: {other.shape} vs {self.shape}")

        xs, ys = np.nonzero(self._cells != other._cells)
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        xs, ys = np.nonzero(self._cells)
        if len(xs) == 0:
            return None

        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return (
            self.shape == other.shape
            and self.wrap_edges == other.wrap_edges
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid({self._width}, {self._height}, wrap_edges={self._wrap_edges}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self._height):
            result.append("".join("*" if self._cells[x, y] else "." for x in range(self._width)))
        return "\n".join(result)
