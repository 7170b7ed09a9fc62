"""Grid reader for loading plain-text grids.

This module provides the GridReader class for loading text files where every
line is one grid row and every character one cell.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from gridkit.domain import Bordered, Grid
from gridkit.exceptions import GridError, GridLoadError


def split_on_empty_line(lines: Iterable[str]) -> list[list[str]]:
    """Split lines into blocks separated by blank lines.

    Args:
        lines: Input lines, with or without trailing newlines

    Returns:
        List of blocks; consecutive blank lines produce empty blocks
    """
    blocks: list[list[str]] = [[]]
    for line in lines:
        stripped = line.rstrip("\r\n")
        if not stripped.strip():
            blocks.append([])
        else:
            blocks[-1].append(stripped)
    return blocks


def parse_grid(lines: Iterable[str], *, bordered: bool = False) -> Grid[Any]:
    """Build a grid of single-character cells from text lines.

    Blank lines are skipped.

    Args:
        lines: Text rows of the grid
        bordered: Wrap every symbol as ``Bordered(symbol)``

    Returns:
        Grid of symbols, or of Bordered labels

    Raises:
        GridShapeError: If no rows remain or the rows differ in length
    """
    rows = [line.rstrip("\r\n") for line in lines]
    rows = [row for row in rows if row.strip()]
    if bordered:
        return Grid([[Bordered(symbol) for symbol in row] for row in rows])
    return Grid([list(row) for row in rows])


class GridReader:
    """Loads a text grid from disk.

    Example:
        reader = GridReader(Path("garden.txt"))
        reader.load()
        grid = reader.grid(bordered=True)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the grid reader.

        Args:
            path: Path to the text file
        """
        self._path = path
        self._lines: list[str] | None = None

    def load(self) -> None:
        """Read the file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Grid file not found: {self._path}")

        self._lines = self._path.read_text(encoding="utf-8").splitlines()

    @property
    def lines(self) -> list[str]:
        """Return the raw lines of the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._lines is None:
            raise RuntimeError("Grid not loaded. Call load() first.")
        return self._lines

    def grid(self, bordered: bool = False) -> Grid[Any]:
        """Parse the loaded lines into a grid.

        Raises:
            RuntimeError: If the file has not been loaded yet
            GridShapeError: If the content is not a rectangular grid
        """
        return parse_grid(self.lines, bordered=bordered)


def read_grid(path: Path, *, bordered: bool = False) -> Grid[Any]:
    """Load and parse a grid file in one step.

    Raises:
        GridLoadError: If the file cannot be read or is not a valid grid
    """
    reader = GridReader(path)
    try:
        reader.load()
        return reader.grid(bordered=bordered)
    except (OSError, UnicodeDecodeError) as e:
        raise GridLoadError(str(path), str(e)) from e
    except GridError as e:
        raise GridLoadError(str(path), str(e)) from e
