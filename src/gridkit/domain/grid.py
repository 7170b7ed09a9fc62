"""Rectangular 2-D grid container.

The grid owns a fixed topology (width and height never change) with mutable
cell values. All neighbour queries are bounded, so callers never have to
special-case the edges themselves.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from gridkit.domain.cell import Cell
from gridkit.exceptions import GridShapeError, OutOfBoundsError

T = TypeVar("T")

# (dx, dy) offsets; order is left, up, down, right for the 4-neighbourhood
ADJACENT_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
SURROUNDING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Grid(Generic[T]):
    """A rectangular grid of values addressed by (x, y).

    ``x`` indexes columns and ``y`` indexes rows. Width is the row length,
    height the number of rows.

    Example:
        grid = Grid.from_strings(["AAB", "ACC"])
        grid.get_cell(2, 0).value  # "B"
    """

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        """Initialize the grid from its rows.

        Args:
            rows: Row-major values; every row must have the same length

        Raises:
            GridShapeError: If there are no rows, the rows are empty, or the
                rows have different lengths
        """
        self._rows: list[list[T]] = [list(row) for row in rows]
        if not self._rows:
            raise GridShapeError("grid has no rows")

        self._width = len(self._rows[0])
        if self._width == 0:
            raise GridShapeError("grid rows are empty")

        for y, row in enumerate(self._rows):
            if len(row) != self._width:
                raise GridShapeError(
                    f"row {y} has length {len(row)}, expected {self._width}"
                )

        self._height = len(self._rows)

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Grid[str]":
        """Build a grid of single-character cells from text lines."""
        return cls([list(line) for line in lines])  # type: ignore[return-value]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def dimensions(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, x: int, y: int) -> Cell[T]:
        """Return the cell at (x, y).

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return Cell(value=self._rows[y][x], x=x, y=y)

    def get_cell_or_none(self, x: int, y: int) -> Cell[T] | None:
        """Return the cell at (x, y), or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return Cell(value=self._rows[y][x], x=x, y=y)

    def set_cell(self, x: int, y: int, value: T) -> None:
        """Replace the value at (x, y).

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        self._rows[y][x] = value

    def all_cells(self) -> list[Cell[T]]:
        """Return every cell in row-major order."""
        return [
            Cell(value=value, x=x, y=y)
            for y, row in enumerate(self._rows)
            for x, value in enumerate(row)
        ]

    def filter_cells(self, predicate: Callable[[Cell[T]], bool]) -> list[Cell[T]]:
        """Return the cells matching ``predicate``, in row-major order."""
        return [cell for cell in self.all_cells() if predicate(cell)]

    def adjacent(self, x: int, y: int) -> list[Cell[T]]:
        """Return the up to 4 orthogonal neighbours of (x, y)."""
        return self._neighbours(ADJACENT_OFFSETS, x, y)

    def surrounding(self, x: int, y: int) -> list[Cell[T]]:
        """Return the up to 8 orthogonal and diagonal neighbours of (x, y)."""
        return self._neighbours(SURROUNDING_OFFSETS, x, y)

    def is_on_edge(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies in the outermost ring of the grid."""
        return x == 0 or y == 0 or x == self._width - 1 or y == self._height - 1

    def row(self, n: int) -> list[Cell[T]]:
        """Return the cells with ``y == n`` sorted by x (empty if out of range)."""
        if not 0 <= n < self._height:
            return []
        return [Cell(value=value, x=x, y=n) for x, value in enumerate(self._rows[n])]

    def column(self, n: int) -> list[Cell[T]]:
        """Return the cells with ``x == n`` sorted by y (empty if out of range)."""
        if not 0 <= n < self._width:
            return []
        return [Cell(value=row[n], x=n, y=y) for y, row in enumerate(self._rows)]

    def locate(self, value: T) -> Cell[T] | None:
        """Return the first cell holding ``value`` in row-major order."""
        for y, row in enumerate(self._rows):
            for x, candidate in enumerate(row):
                if candidate == value:
                    return Cell(value=candidate, x=x, y=y)
        return None

    def to_lists(self) -> list[list[T]]:
        """Return a copy of the grid values as nested lists."""
        return [list(row) for row in self._rows]

    def _neighbours(
        self, offsets: tuple[tuple[int, int], ...], x: int, y: int
    ) -> list[Cell[T]]:
        return [
            Cell(value=self._rows[y + dy][x + dx], x=x + dx, y=y + dy)
            for dx, dy in offsets
            if self.in_bounds(x + dx, y + dy)
        ]

    def __iter__(self) -> Iterator[Cell[T]]:
        return iter(self.all_cells())

    def __str__(self) -> str:
        return "\n".join("".join(str(value) for value in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
