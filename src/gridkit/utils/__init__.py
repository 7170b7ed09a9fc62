"""Utility functions for gridkit.

This module provides utility functions including:

- Logging setup and configuration
- Analysis statistics tracking
"""

from gridkit.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
]
