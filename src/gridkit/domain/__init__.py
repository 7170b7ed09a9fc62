"""Domain models for gridkit.

This module contains the value types the algorithms operate on. Cell-level
types are frozen dataclasses created fresh on every query; the grid is the
only mutable container.

Key classes:
- Cell: A grid value at (x, y); Node is an alias used by graph search
- Border: Face of a cell (top, bottom, left, right)
- Bordered: A labeled payload with its boundary faces
- AreaData: Area, perimeter and side count of one region
- Grid: Rectangular container with bounded neighbour queries
"""

from gridkit.domain.cell import (
    AreaData,
    Border,
    Bordered,
    Cell,
    Node,
    cell_to_id,
    parse_cell_id,
)
from gridkit.domain.grid import Grid

__all__: list[str] = [
    # Enums
    "Border",
    # Core types
    "Cell",
    "Node",
    "Bordered",
    "AreaData",
    "Grid",
    # Helpers
    "cell_to_id",
    "parse_cell_id",
]
