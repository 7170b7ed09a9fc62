"""Logging utilities for gridkit."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class AnalysisStats:
    """Statistics from an analysis run."""

    cells_processed: int = 0
    regions_found: int = 0
    paths_found: int = 0
    paths_missing: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate analysis duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("gridkit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AnalysisLogger:
    """Logger for tracking analysis progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = AnalysisStats()

    def log_grid_loaded(self, source: str, width: int, height: int) -> None:
        """Log a grid read from input."""
        self._logger.info("Grid loaded", source=source, width=width, height=height)
        self._stats.cells_processed += width * height

    def log_region(self, label: str, area: int, perimeter: int, sides: int) -> None:
        """Log the measurements of one region."""
        self._logger.debug(
            "Region measured",
            label=label,
            area=area,
            perimeter=perimeter,
            sides=sides,
        )
        self._stats.regions_found += 1

    def log_regions_complete(self, region_count: int, duration_ms: float) -> None:
        """Log completion of a region analysis."""
        self._logger.info(
            "Region analysis complete",
            regions=region_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_path_result(
        self,
        start: tuple[int, int],
        end: tuple[int, int],
        length: int | None,
        duration_ms: float,
    ) -> None:
        """Log the outcome of a shortest-path search.

        Args:
            start: Position of the start cell
            end: Position of the target cell
            length: Number of steps, or None when unreachable
            duration_ms: Search time in milliseconds
        """
        if length is None:
            self._logger.warning(
                "No path found",
                start=start,
                end=end,
                duration_ms=round(duration_ms, 2),
            )
            self._stats.paths_missing += 1
        else:
            self._logger.info(
                "Path found",
                start=start,
                end=end,
                steps=length,
                duration_ms=round(duration_ms, 2),
            )
            self._stats.paths_found += 1

    @property
    def stats(self) -> AnalysisStats:
        """Get current analysis statistics."""
        return self._stats
