"""Grid input for gridkit.

This module handles reading text files into grids.

Key classes:
- GridReader: Loads a text grid from disk

Key functions:
- parse_grid: Build a grid from text lines
- read_grid: Load and parse a grid file
- split_on_empty_line: Split input into blank-line separated blocks
"""

from gridkit.io.reader import GridReader, parse_grid, read_grid, split_on_empty_line

__all__ = [
    "GridReader",
    "parse_grid",
    "read_grid",
    "split_on_empty_line",
]
