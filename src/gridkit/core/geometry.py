"""Cell-level geometric helpers.

This module provides small pure functions for:
- 4-neighbour testing between cells
- Manhattan distance
- Polygon area of a cell loop (shoelace formula)
- Interior lattice point count (Pick's theorem)
"""

from collections.abc import Sequence
from typing import Any

from gridkit.domain import Cell


def manhattan_distance(first: Cell[Any], second: Cell[Any]) -> int:
    """Return |dx| + |dy| between two cells."""
    return abs(first.x - second.x) + abs(first.y - second.y)


def is_neighbor_of(candidate: Cell[Any], current: Cell[Any]) -> bool:
    """Check whether two cells are orthogonally adjacent.

    Suitable as the adjacency predicate of shortest_path for plain grids.
    """
    return manhattan_distance(candidate, current) == 1


def shoelace_area(cells: Sequence[Cell[Any]]) -> float:
    """Calculate the area of the polygon whose vertices are ``cells``.

    The cells are taken as the polygon corners in order; the loop is closed
    implicitly from the last cell back to the first.

    Args:
        cells: Polygon vertices in traversal order

    Returns:
        Absolute polygon area. Returns 0.0 for fewer than 3 vertices.

    Examples:
        >>> square = [Cell(".", 0, 0), Cell(".", 2, 0), Cell(".", 2, 2), Cell(".", 0, 2)]
        >>> shoelace_area(square)
        4.0
    """
    n = len(cells)
    if n < 3:
        return 0.0

    area = 0
    for i in range(n):
        j = (i + 1) % n
        area += cells[i].x * cells[j].y
        area -= cells[j].x * cells[i].y

    return abs(area) / 2.0


def interior_points(area: float, boundary_points: float) -> float:
    """Count lattice points strictly inside a lattice polygon.

    Uses Pick's theorem ``A = I + B/2 - 1`` solved for ``I``.

    Args:
        area: Area of the polygon
        boundary_points: Number of lattice points on its boundary

    Returns:
        Number of interior lattice points, never negative
    """
    inside = area - (boundary_points / 2) + 1
    return inside if inside >= 0 else 0.0
