"""Configuration management for gridfont.

This module provides configuration management using Pydantic models.

Key classes:
- GridConfig: Glyph cell geometry
- RenderConfig: Text drawing settings
- LoggingConfig: Logging settings
- GridFontSettings: Main library settings
"""

from gridfont.config.settings import (
    GridConfig,
    GridFontSettings,
    LoggingConfig,
    RenderConfig,
    UnknownCharacterPolicy,
    get_default_settings,
)

__all__ = [
    "GridConfig",
    "GridFontSettings",
    "LoggingConfig",
    "RenderConfig",
    "UnknownCharacterPolicy",
    "get_default_settings",
]
