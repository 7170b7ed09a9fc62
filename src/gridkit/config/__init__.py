"""Configuration management for gridkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- InputConfig: Grid reading settings
- SearchConfig: Shortest-path search settings
- LoggingConfig: Logging settings
- GridKitSettings: Main application settings
"""

from gridkit.config.settings import (
    GridKitSettings,
    InputConfig,
    LoggingConfig,
    SearchConfig,
    get_default_settings,
)

__all__ = [
    "GridKitSettings",
    "InputConfig",
    "LoggingConfig",
    "SearchConfig",
    "get_default_settings",
]
