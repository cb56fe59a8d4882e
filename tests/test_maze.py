"""Tests for MazeGrid lookups and construction."""
import pytest

from tick_chase import REFERENCE_LAYOUT, CellKind, MazeGrid

ROOM = [
    "11111",
    "12031",
    "10401",
    "11111",
]


class TestConstruction:
    """Loading and validating layouts."""

    def test_from_rows_dimensions(self):
        """Dimensions follow the row strings."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.cols == 5
        assert maze.rows == 4
        assert maze.pixel_width == 100
        assert maze.pixel_height == 80

    def test_blank_lines_are_skipped(self):
        """Empty lines around a layout are ignored."""
        maze = MazeGrid.from_rows(["", "111", "101", "111", ""])
        assert maze.rows == 3

    def test_ragged_rows_rejected(self):
        """Rows of different lengths raise ValueError naming the row."""
        with pytest.raises(ValueError, match="row 1"):
            MazeGrid.from_rows(["111", "10", "111"])

    def test_unknown_code_rejected(self):
        """Codes outside 0-4 raise ValueError."""
        with pytest.raises(ValueError, match="unknown cell code"):
            MazeGrid.from_rows(["111", "171", "111"])

    def test_non_digit_rejected(self):
        """Non-digit characters raise ValueError."""
        with pytest.raises(ValueError):
            MazeGrid.from_rows(["111", "1x1", "111"])

    def test_empty_rejected(self):
        """A maze needs at least one cell."""
        with pytest.raises(ValueError):
            MazeGrid([])

    def test_bad_cell_size_rejected(self):
        """cell_size must be positive."""
        with pytest.raises(ValueError):
            MazeGrid([[0]], cell_size=0)

    def test_reference_layout(self):
        """The reference maze is 28x31 with 240 standard and 4 bonus cells."""
        maze = REFERENCE_LAYOUT.build_maze(20)
        assert (maze.cols, maze.rows) == (28, 31)
        assert len(maze.cells_of(CellKind.STANDARD)) == 240
        assert len(maze.cells_of(CellKind.BONUS)) == 4
        assert len(maze.cells_of(CellKind.HOME)) == 2
        assert maze.cell_kind(*REFERENCE_LAYOUT.agent_spawn) is CellKind.OPEN


class TestLookups:
    """Cell and pixel lookups."""

    def test_cell_kinds(self):
        """Each code maps to its CellKind."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.cell_kind(0, 0) is CellKind.WALL
        assert maze.cell_kind(1, 1) is CellKind.STANDARD
        assert maze.cell_kind(2, 1) is CellKind.OPEN
        assert maze.cell_kind(3, 1) is CellKind.BONUS
        assert maze.cell_kind(2, 2) is CellKind.HOME

    @pytest.mark.parametrize("col,row", [(-1, 1), (5, 1), (1, -1), (1, 4), (-50, 99)])
    def test_out_of_bounds_is_wall(self, col, row):
        """Coordinates outside the grid read as WALL without raising."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.cell_kind(col, row) is CellKind.WALL
        assert maze.is_wall(col, row)

    def test_home_cell_is_not_wall(self):
        """Home-area cells are traversable."""
        maze = MazeGrid.from_rows(ROOM)
        assert not maze.is_wall(2, 2)

    def test_to_continuous_is_cell_centre(self):
        """to_continuous returns the centre pixel."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.to_continuous(0, 0) == (10.0, 10.0)
        assert maze.to_continuous(3, 2) == (70.0, 50.0)

    def test_to_corner_is_top_left(self):
        """to_corner returns the top-left pixel."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.to_corner(0, 0) == (0, 0)
        assert maze.to_corner(3, 2) == (60, 40)

    def test_to_cell_floors(self):
        """to_cell floors, including negative positions."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.to_cell((39.9, 20.0)) == (1, 1)
        assert maze.to_cell((40.0, 19.9)) == (2, 0)
        assert maze.to_cell((-0.5, 5.0)) == (-1, 0)

    def test_center_of(self):
        """center_of snaps a position to its cell centre."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.center_of((47.0, 33.0)) == (50.0, 30.0)

    def test_open_cells_with_margin(self):
        """open_cells skips walls and the border band."""
        maze = MazeGrid.from_rows([
            "111111",
            "100001",
            "100101",
            "100001",
            "111111",
        ])
        inner = maze.open_cells(2)
        assert inner == ((2, 2),)
        assert (3, 2) not in maze.open_cells(1)
        assert len(maze.open_cells(1)) == 11

    def test_open_cells_cached(self):
        """Repeated calls with one margin share a result."""
        maze = MazeGrid.from_rows(ROOM)
        assert maze.open_cells(1) is maze.open_cells(1)
