"""Configuration settings for Gridfont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class UnknownCharacterPolicy(str, Enum):
    """What to do when drawing a character the font has no glyph for."""

    RAISE = "raise"
    PLACEHOLDER = "placeholder"
    SKIP = "skip"


class GridConfig(BaseModel):
    """Geometry of the glyph grid in the source bitmap."""

    glyph_width: int = Field(
        default=8,
        gt=0,
        description="Width of one glyph cell in pixels",
    )
    glyph_height: int = Field(
        default=8,
        gt=0,
        description="Height of one glyph cell in pixels",
    )


class RenderConfig(BaseModel):
    """Configuration for drawing strings."""

    tab_cells: int = Field(
        default=2,
        ge=0,
        description="Horizontal advance of a tab, in cell widths",
    )
    unknown_character: UnknownCharacterPolicy = Field(
        default=UnknownCharacterPolicy.RAISE,
        description="Handling of characters outside the font's code range",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GridFontSettings(BaseModel):
    """Main library settings."""

    grid: GridConfig = Field(default_factory=GridConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GridFontSettings:
    """Get default library settings."""
    return GridFontSettings()
