"""Well-known Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """A named set of living cells, in (x, y) coordinates."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        self.name = name
        self.cells = list(cells)
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear ``grid`` and draw this pattern on it.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Raises:
            IndexError: If a cell lands outside a bounded grid
        """
        grid.clear()
        for x, y in self.cells:
            grid.set_cell(x + offset_x, y + offset_y, True)

    def to_grid(self, width: int, height: int, offset_x: int = 0, offset_y: int = 0, wrap_edges: bool = False) -> Grid:
        """Create a new grid containing only this pattern."""
        grid = Grid(width, height, wrap_edges=wrap_edges)
        self.apply_to_grid(grid, offset_x, offset_y)
        return grid

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def translated(self, dx: int, dy: int) -> "Pattern":
        """Return a copy of this pattern shifted by (dx, dy)."""
        return Pattern(self.name, [(x + dx, y + dy) for x, y in self.cells], self.description)

    def normalize(self) -> "Pattern":
        """Return a copy with coordinates starting at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return self.translated(-min_x, -min_y)


class PatternLibrary:
    """Built-in patterns, looked up by name."""

    _CATEGORIES: Dict[str, List[str]] = {
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life"))
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator"))

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4, moves +1,+1")
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add or replace a pattern."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category.

        Patterns added at runtime are listed under "Custom".
        """
        categories = {cat: list(names) for cat, names in self._CATEGORIES.items()}

        builtin = {name for names in self._CATEGORIES.values() for name in names}
        custom = [name for name in self._patterns if name not in builtin]
        if custom:
            categories["Custom"] = custom

        return categories
