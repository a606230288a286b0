"""Tests for the Life rule and the GameOfLife class."""

import random

import pytest
from conway.core.grid import Grid
from conway.core.game import GameOfLife, advance, advance_cellwise, next_cell_state
from conway.core.patterns import PatternLibrary


@pytest.fixture
def library():
    return PatternLibrary()


class TestAdvance:
    """Test cases for the advance function."""

    def test_dead_grid_stays_dead(self):
        """Test that an empty grid never comes to life."""
        grid = Grid(12, 9)
        for _ in range(10):
            grid = advance(grid)
            assert grid.population == 0

    def test_block_is_fixed_point(self, library):
        """Test that a block is unchanged by advance."""
        block = library.get_pattern("Block").to_grid(10, 10, 4, 4)
        assert advance(block) == block

    def test_block_in_corner_is_fixed_point(self, library):
        """Test that a block touching a bounded corner is still stable."""
        block = library.get_pattern("Block").to_grid(6, 6)
        assert advance(block) == block

    def test_isolated_cell_dies(self):
        """Test that a lone cell dies of underpopulation."""
        grid = Grid.seed(10, 10, [(5, 5)])
        assert advance(grid).population == 0

    def test_glider_translates_diagonally(self, library):
        """Test that a glider moves one cell diagonally every four generations."""
        glider = library.get_pattern("Glider")
        grid = glider.to_grid(20, 20, 5, 5)

        for _ in range(4):
            grid = advance(grid)

        assert grid == glider.translated(1, 1).to_grid(20, 20, 5, 5)

    def test_glider_travels_many_periods(self, library):
        """Test that a glider keeps its shape over several periods."""
        glider = library.get_pattern("Glider")
        grid = glider.to_grid(30, 30, 2, 2)

        for _ in range(4 * 10):
            grid = advance(grid)

        assert grid == glider.translated(10, 10).to_grid(30, 30, 2, 2)

    def test_blinker_on_three_by_three(self):
        """Test a vertical blinker flipping on a minimal bounded grid."""
        start = Grid.seed(3, 3, [(1, 0), (1, 1), (1, 2)])
        end = Grid.seed(3, 3, [(0, 1), (1, 1), (2, 1)])

        assert advance(start) == end
        assert advance(end) == start

    def test_input_is_not_mutated(self, library):
        """Test that advance writes a new grid."""
        grid = library.get_pattern("R-pentomino").to_grid(10, 10, 4, 4)
        snapshot = grid.copy()

        result = advance(grid)

        assert grid == snapshot
        assert result is not grid
        assert result.cells is not grid.cells

    def test_result_keeps_topology(self):
        """Test that the next generation has the same size and edges."""
        grid = Grid(7, 4, wrap_edges=True)
        result = advance(grid)

        assert result.shape == (7, 4)
        assert result.wrap_edges is True

    def test_bounded_edges_stop_a_glider(self, library):
        """Test that a glider hitting a bounded corner doesn't reappear elsewhere."""
        grid = library.get_pattern("Glider").to_grid(6, 6, 2, 2)

        for _ in range(40):
            grid = advance(grid)

        # The glider turns into a block in the bottom-right corner
        assert grid == Grid.seed(6, 6, [(4, 4), (4, 5), (5, 4), (5, 5)])

    def test_wrapping_edges_keep_a_glider(self, library):
        """Test that a glider survives crossing a toroidal edge."""
        glider = library.get_pattern("Glider")
        grid = glider.to_grid(8, 8, 0, 0, wrap_edges=True)

        for _ in range(4 * 8):
            grid = advance(grid)

        assert grid == glider.to_grid(8, 8, 0, 0, wrap_edges=True)


class TestCellwise:
    """Test cases for the per-cell reference implementation."""

    def test_next_cell_state_rules(self):
        """Test survival, birth and death for single cells."""
        # Vertical blinker
        grid = Grid.seed(5, 5, [(2, 1), (2, 2), (2, 3)])

        assert next_cell_state(grid, 2, 2) is True  # 2 neighbors, survives
        assert next_cell_state(grid, 2, 1) is False  # 1 neighbor, dies
        assert next_cell_state(grid, 1, 2) is True  # 3 neighbors, born
        assert next_cell_state(grid, 0, 0) is False  # stays dead

    def test_overpopulation(self):
        """Test that a cell with more than three neighbors dies."""
        grid = Grid.seed(5, 5, [(x, y) for x in range(1, 4) for y in range(1, 4)])
        assert next_cell_state(grid, 2, 2) is False

    def test_matches_advance(self):
        """Test that both implementations agree on random grids."""
        for seed in range(5):
            grid = Grid.random(12, 8, probability=0.35, seed=seed)
            assert advance_cellwise(grid) == advance(grid)

    def test_iteration_order_does_not_matter(self):
        """Test that shuffling the visiting order gives the same result."""
        grid = Grid.random(10, 10, probability=0.4, seed=7)
        expected = advance(grid)

        rng = random.Random(11)
        cells = [(x, y) for x in range(10) for y in range(10)]
        for _ in range(5):
            rng.shuffle(cells)
            assert advance_cellwise(grid, cells) == expected

    def test_reverse_order_on_wrapping_grid(self):
        """Test order independence on a toroidal grid."""
        grid = Grid.random(6, 6, probability=0.5, seed=2, wrap_edges=True)
        cells = [(x, y) for y in range(6) for x in range(6)]

        assert advance_cellwise(grid, reversed(cells)) == advance(grid)


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0

    def test_step_replaces_grid(self):
        """Test that step swaps in the next generation."""
        grid = Grid.seed(5, 5, [(2, 1), (2, 2), (2, 3)])
        game = GameOfLife(grid)

        previous = game.step()

        assert previous is grid
        assert game.grid is not grid
        assert game.grid == Grid.seed(5, 5, [(1, 2), (2, 2), (3, 2)])
        assert game.generation == 1

    def test_generation_counter(self):
        """Test that each step increments the generation."""
        game = GameOfLife(Grid(5, 5))
        for expected in range(1, 6):
            game.step()
            assert game.generation == expected

    def test_run(self, library):
        """Test running several generations at once."""
        game = GameOfLife(library.get_pattern("Blinker").to_grid(5, 5, 1, 1))
        start = game.grid

        assert game.run(2) == start
        assert game.generation == 2

    def test_extinction(self):
        """Test pattern that goes extinct."""
        game = GameOfLife(Grid.seed(10, 10, [(5, 5), (5, 6)]))
        game.step()
        assert game.population == 0

    def test_reset(self):
        """Test restarting the generation count."""
        game = GameOfLife(Grid.seed(5, 5, [(2, 2)]))
        game.run(3)

        game.reset()
        assert game.generation == 0

        fresh = Grid.seed(5, 5, [(0, 0)])
        game.reset(fresh)
        assert game.grid is fresh

        with pytest.raises(ValueError):
            game.reset(Grid(6, 6))
