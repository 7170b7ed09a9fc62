"""Configuration settings for gridkit."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class InputConfig(BaseModel):
    """Configuration for reading grids."""

    bordered: bool = Field(
        default=True,
        description="Wrap each symbol as a Bordered label payload",
    )


class SearchConfig(BaseModel):
    """Configuration for shortest-path search on a symbol grid."""

    start_symbol: str = Field(
        default="S",
        description="Symbol marking the start cell",
    )
    end_symbol: str = Field(
        default="E",
        description="Symbol marking the target cell",
    )
    wall_symbol: str = Field(
        default="#",
        description="Symbol of impassable cells",
    )
    climb: bool = Field(
        default=False,
        description="Treat letters a-z as elevations and limit how far a step may climb",
    )
    max_climb: int = Field(
        default=1,
        ge=0,
        le=25,
        description="Largest elevation increase allowed per step when climbing",
    )

    @field_validator("start_symbol", "end_symbol", "wall_symbol")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("symbol must be exactly one character")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


class GridKitSettings(BaseModel):
    """Main application settings."""

    input: InputConfig = Field(default_factory=InputConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GridKitSettings:
    """Get default application settings."""
    return GridKitSettings()
