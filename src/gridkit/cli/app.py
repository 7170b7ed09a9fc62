"""CLI application entry point for gridkit.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from gridkit import __version__
from gridkit.cli.output import (
    console,
    print_error,
    print_grid_info,
    print_header,
    print_no_path,
    print_path_found,
    print_region_summary,
    print_regions_table,
    print_rendered_grid,
    print_step,
)
from gridkit.config import GridKitSettings, InputConfig, LoggingConfig, SearchConfig
from gridkit.core import (
    RegionSegmenter,
    make_step_predicate,
    shortest_path,
    total_bulk_price,
    total_price,
)
from gridkit.domain import Grid, Node
from gridkit.exceptions import GridKitError, GridLoadError
from gridkit.io import read_grid
from gridkit.utils import AnalysisLogger, configure_logging

PATH_MARK = "*"

# Create the Typer app
app = typer.Typer(
    name="gridkit",
    help="Analyze labeled grids: region measurements and shortest paths.",
    add_completion=False,
    no_args_is_help=True,
)

LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]gridkit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Analyze labeled grids: region measurements and shortest paths."""


@app.command()
def regions(
    grid_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a text grid, one character per cell",
            show_default=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show a table with every region",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Segment a grid into connected regions and report their measurements.

    Example:
        gridkit regions garden.txt --verbose
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        settings = GridKitSettings(
            input=InputConfig(bordered=True),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=_first_validation_message(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    analysis_logger = _start_logging(settings, quiet)

    try:
        grid = _load_grid(grid_file, settings, analysis_logger, quiet)

        if not quiet:
            print_step("Analyzing regions")

        stats = analysis_logger.stats
        stats.start_time = time.time()
        segmenter = RegionSegmenter()
        records = segmenter.analyze(grid)
        for record in records:
            analysis_logger.log_region(
                str(record.id), record.area, record.perimeter, record.sides
            )
        stats.end_time = time.time()
        analysis_logger.log_regions_complete(
            stats.regions_found, stats.duration_seconds * 1000
        )

        if verbose:
            print_regions_table(records)

        print_region_summary(
            region_count=stats.regions_found,
            cells=stats.cells_processed,
            price=total_price(records),
            bulk_price=total_bulk_price(records),
            total_time_s=stats.duration_seconds,
        )

    except GridLoadError as e:
        print_error(f"Could not load grid: {e.reason}")
        raise typer.Exit(code=1)
    except GridKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def path(
    grid_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a text grid, one character per cell",
            show_default=False,
        ),
    ],
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Symbol marking the start cell"),
    ] = "S",
    end: Annotated[
        str,
        typer.Option("--end", "-e", help="Symbol marking the target cell"),
    ] = "E",
    wall: Annotated[
        str,
        typer.Option("--wall", "-w", help="Symbol of impassable cells"),
    ] = "#",
    climb: Annotated[
        bool,
        typer.Option(
            "--climb",
            help="Treat letters a-z as elevations and limit each step's rise",
        ),
    ] = False,
    max_climb: Annotated[
        int,
        typer.Option(
            "--max-climb",
            help="Largest rise per step with --climb (0-25)",
            min=0,
            max=25,
        ),
    ] = 1,
    show: Annotated[
        bool,
        typer.Option(
            "--show",
            help="Render the grid with the path marked",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Find a shortest path between the start and end symbols of a grid.

    Example:
        gridkit path heightmap.txt --climb --show
    """
    try:
        settings = GridKitSettings(
            input=InputConfig(bordered=False),
            search=SearchConfig(
                start_symbol=start,
                end_symbol=end,
                wall_symbol=wall,
                climb=climb,
                max_climb=max_climb,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=_first_validation_message(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    analysis_logger = _start_logging(settings, quiet)
    search = settings.search

    try:
        grid = _load_grid(grid_file, settings, analysis_logger, quiet)

        source = grid.locate(search.start_symbol)
        target = grid.locate(search.end_symbol)
        if source is None or target is None:
            missing = search.start_symbol if source is None else search.end_symbol
            print_error(f"Symbol '{missing}' not found in grid")
            raise typer.Exit(code=1)

        if not quiet:
            print_step("Searching")

        vertices = grid.filter_cells(lambda cell: cell.value != search.wall_symbol)
        stats = analysis_logger.stats
        stats.start_time = time.time()
        found = shortest_path(vertices, source, target, make_step_predicate(search))
        stats.end_time = time.time()
        duration_ms = stats.duration_seconds * 1000

        if not found:
            analysis_logger.log_path_result(
                source.position, target.position, None, duration_ms
            )
            print_no_path(source.position, target.position)
            raise typer.Exit(code=1)

        steps = len(found) - 1
        analysis_logger.log_path_result(
            source.position, target.position, steps, duration_ms
        )
        print_path_found(steps, stats.duration_seconds)

        if show:
            print_rendered_grid(str(mark_path(grid, found)))

    except GridLoadError as e:
        print_error(f"Could not load grid: {e.reason}")
        raise typer.Exit(code=1)
    except GridKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def mark_path(grid: Grid[Any], nodes: list[Node[Any]]) -> Grid[Any]:
    """Return a copy of ``grid`` with the inner path cells replaced by a mark.

    Start and end cells keep their symbols.

    Args:
        grid: Grid the path was found in
        nodes: Path from start to end inclusive

    Returns:
        New grid; the input grid is not modified
    """
    marked = Grid(grid.to_lists())
    for node in nodes[1:-1]:
        marked.set_cell(node.x, node.y, PATH_MARK)
    return marked


def _start_logging(settings: GridKitSettings, quiet: bool) -> AnalysisLogger:
    """Configure logging from settings and wrap the logger."""
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return AnalysisLogger(logger)


def _load_grid(
    grid_file: Path,
    settings: GridKitSettings,
    analysis_logger: AnalysisLogger,
    quiet: bool,
) -> Grid[Any]:
    """Read the grid file and report its size.

    Raises:
        GridLoadError: If the file is missing, unreadable or not a grid
    """
    if not quiet:
        print_step("Loading grid")

    grid = read_grid(grid_file, bordered=settings.input.bordered)
    analysis_logger.log_grid_loaded(str(grid_file), grid.width, grid.height)

    if not quiet:
        print_grid_info(str(grid_file), grid.width, grid.height)

    return grid


def _first_validation_message(error: ValidationError) -> str:
    """Format the first pydantic error as ``field: message``."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
