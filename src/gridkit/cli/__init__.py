"""Command-line interface for gridkit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Region table with area, perimeter and side counts
- Shortest-path search with optional elevation limits
- Path rendering on the grid
- Detailed error reporting
"""

from gridkit.cli.app import cli, main

__all__ = ["cli", "main"]
