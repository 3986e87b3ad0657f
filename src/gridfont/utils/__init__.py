"""Utility functions for gridfont.

This module provides utility functions including:

- Logging setup and configuration
"""

from gridfont.utils.logging import configure_logging, configure_logging_from_settings, get_logger

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
