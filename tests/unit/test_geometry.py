"""Unit tests for cell geometry helpers."""

from gridkit.core.geometry import (
    interior_points,
    is_neighbor_of,
    manhattan_distance,
    shoelace_area,
)
from gridkit.domain import Cell


def corners(*positions: tuple[int, int]) -> list[Cell[str]]:
    return [Cell("#", x, y) for x, y in positions]


class TestAdjacency:
    """Tests for neighbour and distance helpers."""

    def test_manhattan_distance(self):
        assert manhattan_distance(Cell(".", 0, 0), Cell(".", 3, 4)) == 7
        assert manhattan_distance(Cell(".", 5, 1), Cell(".", 2, 1)) == 3

    def test_orthogonal_neighbours(self):
        center = Cell(".", 2, 2)
        assert is_neighbor_of(Cell(".", 2, 1), center)
        assert is_neighbor_of(Cell(".", 3, 2), center)

    def test_diagonal_is_not_neighbour(self):
        assert not is_neighbor_of(Cell(".", 3, 3), Cell(".", 2, 2))

    def test_cell_is_not_its_own_neighbour(self):
        cell = Cell(".", 1, 1)
        assert not is_neighbor_of(cell, cell)


class TestShoelace:
    """Tests for polygon area of a cell loop."""

    def test_square(self):
        assert shoelace_area(corners((0, 0), (2, 0), (2, 2), (0, 2))) == 4.0

    def test_orientation_does_not_matter(self):
        clockwise = corners((0, 0), (0, 3), (4, 3), (4, 0))
        counter_clockwise = list(reversed(clockwise))
        assert shoelace_area(clockwise) == shoelace_area(counter_clockwise) == 12.0

    def test_l_shape(self):
        shape = corners((0, 0), (3, 0), (3, 1), (1, 1), (1, 3), (0, 3))
        assert shoelace_area(shape) == 5.0

    def test_degenerate(self):
        assert shoelace_area([]) == 0.0
        assert shoelace_area(corners((0, 0), (5, 5))) == 0.0


class TestPick:
    """Tests for interior lattice point counting."""

    def test_square_interior(self):
        # 2x2 square: 8 boundary points, 1 interior point
        assert interior_points(4.0, 8) == 1.0

    def test_large_square(self):
        # 4x4 square: 16 boundary points, 9 interior points
        assert interior_points(16.0, 16) == 9.0

    def test_never_negative(self):
        assert interior_points(0.0, 10) == 0.0
