"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from gridkit.domain import AreaData

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]gridkit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_grid_info(grid_path: str, width: int, height: int) -> None:
    """Print grid information.

    Args:
        grid_path: Path to the grid file
        width: Number of columns
        height: Number of rows
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(grid_path)
    console.print(line)
    console.print(f"  {width} columns {SYM_DOT} {height} rows {SYM_DOT} {width * height:,} cells")


def print_regions_table(records: list[AreaData[Any]]) -> None:
    """Print a table with one row per region.

    Args:
        records: Region measurements, printed in the given order
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Label")
    table.add_column("Area", justify="right")
    table.add_column("Perimeter", justify="right")
    table.add_column("Sides", justify="right")

    for record in records:
        table.add_row(
            Text(str(record.id)),
            str(record.area),
            str(record.perimeter),
            str(record.sides),
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_region_summary(
    region_count: int,
    cells: int,
    price: int,
    bulk_price: int,
    total_time_s: float,
) -> None:
    """Print totals of a region analysis.

    Args:
        region_count: Number of regions found
        cells: Number of grid cells analyzed
        price: Sum of area * perimeter
        bulk_price: Sum of area * sides
        total_time_s: Analysis time in seconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} {region_count} regions[/bold green] "
        f"from {cells:,} cells in {_format_time(total_time_s)}"
    )
    console.print(f"  Total price        {price}")
    console.print(f"  Total bulk price   {bulk_price}")


def print_path_found(steps: int, total_time_s: float) -> None:
    """Print the length of a found path.

    Args:
        steps: Number of moves from start to end
        total_time_s: Search time in seconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} Path found[/bold green] {SYM_DOT} {steps} steps "
        f"{SYM_DOT} {_format_time(total_time_s)}"
    )


def print_no_path(start: tuple[int, int], end: tuple[int, int]) -> None:
    """Print that the target cannot be reached.

    Args:
        start: Position of the start cell
        end: Position of the target cell
    """
    console.print(f"\n[bold yellow]{SYM_ERR} No path[/bold yellow] from {start} to {end}")


def print_rendered_grid(rendered: str) -> None:
    """Print a rendered grid without markup interpretation."""
    console.print(Text(rendered))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
