"""Region segmentation and measurement for labeled grids.

This module groups same-labeled, 4-connected cells into regions and computes
for each region:
- Area: number of cells
- Perimeter: number of unit edges facing outside the region
- Sides: number of maximal straight boundary segments

Side counting works per face direction. Every cell records which of its four
faces border the outside of the region; top and bottom faces are then grouped
by row and left and right faces by column. Within a group the sorted
coordinates split into contiguous runs, and every run is one side. Concave
regions and regions with holes need no special handling since each face
direction is analyzed independently.

Boundary faces are kept in a side table built for each call, never on the
grid itself, so repeated analyses of one grid are independent.
"""

from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from gridkit.domain import AreaData, Border, Bordered, Cell, Grid

Position = tuple[int, int]
Region = list[Cell[Any]]
LabelKey = Callable[[Any], Hashable]

# (border, dx, dy) for each face of a cell
_FACES: tuple[tuple[Border, int, int], ...] = (
    (Border.TOP, 0, -1),
    (Border.BOTTOM, 0, 1),
    (Border.LEFT, -1, 0),
    (Border.RIGHT, 1, 0),
)


def default_label(value: Any) -> Hashable:
    """Return the region label of a cell value.

    ``Bordered`` payloads are labeled by their ``id``; any other value is its
    own label.
    """
    if isinstance(value, Bordered):
        return value.id
    return value


def canonical_order(cell: Cell[Any]) -> tuple[int, int]:
    """Sort key placing cells column by column, then row by row."""
    return (cell.x, cell.y)


def count_runs(coordinates: Iterable[int]) -> int:
    """Count maximal runs of consecutive integers.

    Duplicates are ignored. ``[0, 1, 2, 5, 6, 9]`` has three runs.
    """
    ordered = sorted(set(coordinates))
    if not ordered:
        return 0
    gaps = sum(1 for a, b in zip(ordered, ordered[1:]) if b - a > 1)
    return gaps + 1


class RegionSegmenter:
    """Partitions a labeled grid into regions and measures them.

    The segmenter holds no per-grid state and can be reused across grids.

    Example:
        segmenter = RegionSegmenter()
        for record in segmenter.analyze(Grid.from_strings(["AAB", "ABB"])):
            print(record.id, record.area, record.perimeter, record.sides)
    """

    def __init__(self, key: LabelKey | None = None) -> None:
        """Initialize the segmenter.

        Args:
            key: Maps a cell value to its region label. Defaults to
                default_label.
        """
        self._key: LabelKey = key if key is not None else default_label

    def label(self, cell: Cell[Any]) -> Hashable:
        """Return the region label of ``cell``."""
        return self._key(cell.value)

    def find_regions(self, grid: Grid[Any]) -> dict[Hashable, list[Region]]:
        """Find all maximal 4-connected same-label regions.

        Start cells are taken in row-major order. Each region is flood filled
        depth first with an explicit stack, then sorted into canonical order.

        Args:
            grid: The grid to segment

        Returns:
            Mapping from label to the regions bearing it. A label owns several
            regions when its cells are disconnected.
        """
        visited: set[Position] = set()
        regions: dict[Hashable, list[Region]] = {}

        for start in grid.all_cells():
            if start.position in visited:
                continue

            label = self.label(start)
            region: Region = []
            stack = [start]
            visited.add(start.position)

            while stack:
                cell = stack.pop()
                region.append(cell)
                for neighbor in grid.adjacent(cell.x, cell.y):
                    if neighbor.position not in visited and self.label(neighbor) == label:
                        visited.add(neighbor.position)
                        stack.append(neighbor)

            region.sort(key=canonical_order)
            regions.setdefault(label, []).append(region)

        return regions

    def perimeter(self, grid: Grid[Any], region: Region) -> int:
        """Count the unit edges of ``region`` that face outside it.

        Each cell contributes 4 edges minus one per orthogonal neighbour that
        belongs to the region.
        """
        members = {cell.position for cell in region}
        total = 0
        for cell in region:
            shared = sum(
                1 for neighbor in grid.adjacent(cell.x, cell.y)
                if neighbor.position in members
            )
            total += 4 - shared
        return total

    def boundary_faces(
        self, grid: Grid[Any], region: Region
    ) -> dict[Position, frozenset[Border]]:
        """Determine which faces of each region cell lie on the boundary.

        A face is a boundary face when the cell across it is outside the grid
        or not a member of the region.

        Args:
            grid: Grid the region was taken from
            region: Cells of one region

        Returns:
            Side table mapping each cell position to its boundary faces
        """
        members = {cell.position for cell in region}
        faces: dict[Position, frozenset[Border]] = {}
        for cell in region:
            faces[cell.position] = frozenset(
                border
                for border, dx, dy in _FACES
                if not grid.in_bounds(cell.x + dx, cell.y + dy)
                or (cell.x + dx, cell.y + dy) not in members
            )
        return faces

    def bordered(self, grid: Grid[Any], region: Region) -> list[Cell[Bordered[Any]]]:
        """Return fresh bordered views of the region cells.

        The grid is left untouched; borders carried by the input payloads are
        ignored.
        """
        faces = self.boundary_faces(grid, region)
        return [
            Cell(
                value=Bordered(id=self.label(cell), borders=faces[cell.position]),
                x=cell.x,
                y=cell.y,
            )
            for cell in region
        ]

    def sides(self, grid: Grid[Any], region: Region) -> int:
        """Count the straight boundary segments of ``region``.

        Args:
            grid: Grid the region was taken from
            region: Cells of one region

        Returns:
            Total number of sides over all four face directions
        """
        faces = self.boundary_faces(grid, region)

        # border -> row or column index -> coordinates along that line
        lines: dict[Border, dict[int, list[int]]] = {
            border: defaultdict(list) for border in Border
        }
        for (x, y), borders in faces.items():
            for border in borders:
                if border in (Border.TOP, Border.BOTTOM):
                    lines[border][y].append(x)
                else:
                    lines[border][x].append(y)

        return sum(
            count_runs(coordinates)
            for by_line in lines.values()
            for coordinates in by_line.values()
        )

    def measure(self, grid: Grid[Any], region: Region) -> AreaData[Any]:
        """Compute area, perimeter and side count of one region."""
        return AreaData(
            id=self.label(region[0]),
            area=len(region),
            perimeter=self.perimeter(grid, region),
            sides=self.sides(grid, region),
        )

    def analyze(self, grid: Grid[Any]) -> list[AreaData[Any]]:
        """Segment the grid and measure every region.

        Args:
            grid: The grid to analyze

        Returns:
            One AreaData per region, including separate entries for
            disconnected regions of the same label
        """
        return [
            self.measure(grid, region)
            for regions in self.find_regions(grid).values()
            for region in regions
        ]


def find_regions(grid: Grid[Any]) -> dict[Hashable, list[Region]]:
    """Find all regions of ``grid`` using the default labeling."""
    return RegionSegmenter().find_regions(grid)


def calculate_perimeter(grid: Grid[Any], region: Region) -> int:
    """Count the boundary unit edges of ``region``."""
    return RegionSegmenter().perimeter(grid, region)


def calculate_sides(grid: Grid[Any], region: Region) -> int:
    """Count the straight boundary segments of ``region``."""
    return RegionSegmenter().sides(grid, region)


def get_regions_with_data(grid: Grid[Any]) -> list[AreaData[Any]]:
    """Segment ``grid`` and return the measurements of every region."""
    return RegionSegmenter().analyze(grid)


def total_price(records: Iterable[AreaData[Any]]) -> int:
    """Sum of area * perimeter over all records."""
    return sum(record.price for record in records)


def total_bulk_price(records: Iterable[AreaData[Any]]) -> int:
    """Sum of area * sides over all records."""
    return sum(record.bulk_price for record in records)
