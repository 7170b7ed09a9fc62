"""Unit tests for logging utilities."""

import logging
from unittest.mock import MagicMock

from gridkit.utils import AnalysisLogger, AnalysisStats, configure_logging


class TestAnalysisStats:
    """Tests for AnalysisStats."""

    def test_defaults(self):
        stats = AnalysisStats()
        assert stats.regions_found == 0
        assert stats.duration_seconds == 0.0

    def test_duration(self):
        stats = AnalysisStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5


class TestAnalysisLogger:
    """Tests for AnalysisLogger event tracking."""

    def test_grid_loaded(self):
        logger = MagicMock()
        analysis_logger = AnalysisLogger(logger)

        analysis_logger.log_grid_loaded("garden.txt", 4, 3)

        logger.info.assert_called_once_with(
            "Grid loaded", source="garden.txt", width=4, height=3
        )
        assert analysis_logger.stats.cells_processed == 12

    def test_regions(self):
        logger = MagicMock()
        analysis_logger = AnalysisLogger(logger)

        analysis_logger.log_region("A", 4, 10, 4)
        analysis_logger.log_region("B", 1, 4, 4)
        analysis_logger.log_regions_complete(2, 1.23456)

        assert analysis_logger.stats.regions_found == 2
        assert logger.debug.call_count == 2
        logger.info.assert_called_once_with(
            "Region analysis complete", regions=2, duration_ms=1.23
        )

    def test_path_results(self):
        logger = MagicMock()
        analysis_logger = AnalysisLogger(logger)

        analysis_logger.log_path_result((0, 0), (3, 2), 5, 0.5)
        analysis_logger.log_path_result((0, 0), (3, 2), None, 0.5)

        assert analysis_logger.stats.paths_found == 1
        assert analysis_logger.stats.paths_missing == 1
        logger.warning.assert_called_once()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "gridkit.log"

        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Test event", answer=42)

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "Test event" in content

        configure_logging(quiet=True)

    def test_reconfigure_replaces_handlers(self, tmp_path):
        configure_logging(quiet=True)
        root_logger = logging.getLogger()
        before = len(root_logger.handlers)

        configure_logging(log_file=tmp_path / "first.log", quiet=True)
        configure_logging(log_file=tmp_path / "second.log", quiet=True)
        assert len(root_logger.handlers) == before + 1

        configure_logging(quiet=True)
        assert len(root_logger.handlers) == before
