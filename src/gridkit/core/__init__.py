"""Core algorithms for gridkit.

This module contains the algorithms for:

- Cell geometry (adjacency, Manhattan distance, shoelace area, Pick's theorem)
- Shortest-path search over a predicate-defined graph
- Region segmentation with area, perimeter and side counting

All services are:
- Stateless (a segmenter or search call keeps nothing between grids)
- Pure (grids are read, never modified)

Key functions:
- shortest_path: Path between two nodes, empty when unreachable
- find_regions: Group same-labeled connected cells
- get_regions_with_data: Measure every region of a grid
- is_neighbor_of: Orthogonal adjacency predicate for grid search
- make_step_predicate: Adjacency predicate built from search settings

Key classes:
- RegionSegmenter: Segments grids and measures regions
"""

from gridkit.core.geometry import (
    interior_points,
    is_neighbor_of,
    manhattan_distance,
    shoelace_area,
)
from gridkit.core.regions import (
    RegionSegmenter,
    calculate_perimeter,
    calculate_sides,
    find_regions,
    get_regions_with_data,
    total_bulk_price,
    total_price,
)
from gridkit.core.search import elevation, make_step_predicate, shortest_path

__all__ = [
    # Region classes
    "RegionSegmenter",
    # Region functions
    "calculate_perimeter",
    "calculate_sides",
    "find_regions",
    "get_regions_with_data",
    "total_bulk_price",
    "total_price",
    # Geometry functions
    "interior_points",
    "is_neighbor_of",
    "manhattan_distance",
    "shoelace_area",
    # Search functions
    "elevation",
    "make_step_predicate",
    "shortest_path",
]
