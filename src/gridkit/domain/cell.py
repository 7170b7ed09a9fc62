"""Cell-level value types shared by the grid and the algorithms.

This module defines:
- Cell: A grid value together with its coordinates
- Node: Alias of Cell used as the vertex type of graph search
- Border: Enum for the four faces of a cell
- Bordered: A labeled payload with the set of its boundary faces
- AreaData: Per-region measurements produced by region analysis
"""

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_CELL_ID_PATTERN = re.compile(r"x(\d+)-y(\d+)")


@dataclass(frozen=True, slots=True)
class Cell(Generic[T]):
    """A grid value at integer coordinates.

    Cells are transient views created on every query; they do not alias the
    grid storage. Two cells are equal when coordinates and value are equal.

    Attributes:
        value: Payload stored in the grid at this position
        x: Column index (zero-based)
        y: Row index (zero-based)
    """

    value: T
    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        """Return the (x, y) coordinates of this cell."""
        return (self.x, self.y)


Node = Cell


class Border(Enum):
    """Face of a cell that can sit on a region boundary."""

    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class Bordered(Generic[T]):
    """A labeled cell payload with its boundary faces.

    Attributes:
        id: Region label of the cell
        borders: Faces of the cell that lie on a region boundary. Empty
            until produced by region analysis.
    """

    id: T
    borders: frozenset[Border] = field(default_factory=frozenset)

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True, slots=True)
class AreaData(Generic[T]):
    """Measurements of one connected region.

    Attributes:
        id: Label shared by every cell of the region
        area: Number of cells
        perimeter: Number of unit boundary edges
        sides: Number of straight boundary segments
    """

    id: T
    area: int
    perimeter: int
    sides: int

    @property
    def price(self) -> int:
        """Area multiplied by perimeter."""
        return self.area * self.perimeter

    @property
    def bulk_price(self) -> int:
        """Area multiplied by side count."""
        return self.area * self.sides

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with id, area, perimeter and sides fields
        """
        return {
            "id": self.id,
            "area": self.area,
            "perimeter": self.perimeter,
            "sides": self.sides,
        }


def cell_to_id(cell: Cell[Any]) -> str:
    """Build a textual identifier such as ``x3-y7`` for a cell."""
    return f"x{cell.x}-y{cell.y}"


def parse_cell_id(text: str) -> tuple[int, int] | None:
    """Extract the coordinates from a cell identifier.

    Args:
        text: String containing an identifier produced by cell_to_id

    Returns:
        Tuple of (x, y), or None if no identifier is found
    """
    match = _CELL_ID_PATTERN.search(text)
    if match is None:
        return None
    return (int(match.group(1)), int(match.group(2)))
