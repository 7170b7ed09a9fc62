"""Unit tests for the Grid container.

Tests cover:
- Construction and shape validation
- Strict and tolerant cell access
- Neighbour queries and their bounds handling
- Row, column and edge queries on non-square grids
"""

import pytest

from gridkit.domain import Cell, Grid
from gridkit.exceptions import GridShapeError, OutOfBoundsError


@pytest.fixture
def wide_grid() -> Grid[str]:
    """A 4 wide, 2 high grid."""
    return Grid.from_strings(["abcd", "efgh"])


class TestConstruction:
    """Tests for building grids."""

    def test_dimensions(self, wide_grid):
        assert wide_grid.dimensions() == (4, 2)
        assert wide_grid.width == 4
        assert wide_grid.height == 2

    def test_no_rows(self):
        with pytest.raises(GridShapeError, match="no rows"):
            Grid([])

    def test_empty_rows(self):
        with pytest.raises(GridShapeError, match="empty"):
            Grid([[], []])

    def test_jagged_rows(self):
        with pytest.raises(GridShapeError, match="row 1"):
            Grid([[1, 2, 3], [4, 5]])

    def test_rows_are_copied(self):
        """Changing the source rows does not change the grid."""
        rows = [[1, 2], [3, 4]]
        grid = Grid(rows)
        rows[0][0] = 99
        assert grid.get_cell(0, 0).value == 1

    def test_generic_values(self):
        grid = Grid([[1, 2], [3, 4]])
        assert grid.get_cell(1, 1) == Cell(4, 1, 1)


class TestCellAccess:
    """Tests for reading and writing cells."""

    def test_get_cell_uses_x_as_column(self, wide_grid):
        cell = wide_grid.get_cell(3, 1)
        assert cell == Cell("h", 3, 1)

    @pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 2), (0, -1)])
    def test_get_cell_out_of_bounds(self, wide_grid, x, y):
        with pytest.raises(OutOfBoundsError) as exc_info:
            wide_grid.get_cell(x, y)
        assert exc_info.value.width == 4
        assert exc_info.value.height == 2

    def test_get_cell_or_none(self, wide_grid):
        assert wide_grid.get_cell_or_none(0, 1) == Cell("e", 0, 1)
        assert wide_grid.get_cell_or_none(4, 1) is None
        assert wide_grid.get_cell_or_none(-1, -1) is None

    def test_set_cell(self, wide_grid):
        wide_grid.set_cell(2, 0, "Z")
        assert wide_grid.get_cell(2, 0).value == "Z"
        assert str(wide_grid) == "abZd\nefgh"

    def test_set_cell_out_of_bounds(self, wide_grid):
        with pytest.raises(OutOfBoundsError):
            wide_grid.set_cell(0, 2, "Z")

    def test_cells_are_snapshots(self, wide_grid):
        """A cell read before a write keeps the old value."""
        before = wide_grid.get_cell(0, 0)
        wide_grid.set_cell(0, 0, "Q")
        assert before.value == "a"


class TestEnumeration:
    """Tests for whole-grid queries."""

    def test_all_cells_row_major(self, wide_grid):
        positions = [cell.position for cell in wide_grid.all_cells()]
        assert positions == [
            (0, 0), (1, 0), (2, 0), (3, 0),
            (0, 1), (1, 1), (2, 1), (3, 1),
        ]

    def test_all_cells_re_enumerable(self, wide_grid):
        assert wide_grid.all_cells() == wide_grid.all_cells()
        assert list(wide_grid) == wide_grid.all_cells()

    def test_filter_cells_preserves_order(self, wide_grid):
        vowels = wide_grid.filter_cells(lambda cell: cell.value in "aeiou")
        assert vowels == [Cell("a", 0, 0), Cell("e", 0, 1)]

    def test_locate(self, wide_grid):
        assert wide_grid.locate("g") == Cell("g", 2, 1)
        assert wide_grid.locate("z") is None

    def test_locate_first_match(self):
        grid = Grid.from_strings(["..S", "S.."])
        assert grid.locate("S").position == (2, 0)

    def test_to_lists(self, wide_grid):
        values = wide_grid.to_lists()
        assert values == [list("abcd"), list("efgh")]
        values[0][0] = "!"
        assert wide_grid.get_cell(0, 0).value == "a"


class TestNeighbours:
    """Tests for adjacent and surrounding queries."""

    def test_adjacent_interior_order(self):
        grid = Grid.from_strings(["...", "...", "..."])
        positions = [cell.position for cell in grid.adjacent(1, 1)]
        assert positions == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_adjacent_corner(self):
        grid = Grid.from_strings(["...", "...", "..."])
        positions = [cell.position for cell in grid.adjacent(0, 0)]
        assert positions == [(0, 1), (1, 0)]

    def test_adjacent_deterministic(self, wide_grid):
        assert wide_grid.adjacent(2, 1) == wide_grid.adjacent(2, 1)

    def test_adjacent_non_square(self, wide_grid):
        positions = sorted(cell.position for cell in wide_grid.adjacent(3, 0))
        assert positions == [(2, 0), (3, 1)]

    def test_surrounding_interior(self):
        grid = Grid.from_strings(["...", "...", "..."])
        positions = {cell.position for cell in grid.surrounding(1, 1)}
        assert len(positions) == 8
        assert (1, 1) not in positions

    def test_surrounding_corner(self, wide_grid):
        positions = sorted(cell.position for cell in wide_grid.surrounding(0, 0))
        assert positions == [(0, 1), (1, 0), (1, 1)]

    def test_single_cell_has_no_neighbours(self):
        grid = Grid([["x"]])
        assert grid.adjacent(0, 0) == []
        assert grid.surrounding(0, 0) == []


class TestRowsColumnsEdges:
    """Tests for row, column and edge queries."""

    def test_row(self, wide_grid):
        assert [cell.value for cell in wide_grid.row(1)] == list("efgh")

    def test_column(self, wide_grid):
        assert [cell.value for cell in wide_grid.column(3)] == ["d", "h"]

    def test_row_out_of_range(self, wide_grid):
        assert wide_grid.row(2) == []
        assert wide_grid.row(-1) == []

    def test_column_out_of_range(self, wide_grid):
        assert wide_grid.column(4) == []

    def test_is_on_edge_non_square(self):
        grid = Grid.from_strings(["....", "....", "...."])
        tall = Grid.from_strings(["...", "...", "...", "...", "..."])
        assert grid.is_on_edge(3, 1)
        assert not grid.is_on_edge(1, 1)
        assert tall.is_on_edge(1, 4)
        assert tall.is_on_edge(2, 2)
        assert not tall.is_on_edge(1, 3)

    def test_is_on_edge_wide(self, wide_grid):
        assert all(wide_grid.is_on_edge(cell.x, cell.y) for cell in wide_grid)


class TestRendering:
    """Tests for the text form of a grid."""

    def test_str(self):
        assert str(Grid([[1, 2], [3, 4]])) == "12\n34"

    def test_repr(self, wide_grid):
        assert repr(wide_grid) == "Grid(width=4, height=2)"
