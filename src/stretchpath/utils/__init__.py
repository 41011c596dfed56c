"""Utility functions for stretchpath.

This module provides utility functions including:

- Logging setup and configuration
- Resize statistics tracking
"""

from stretchpath.utils.logging import (
    ResizeLogger,
    ResizeStats,
    configure_logging,
)

__all__ = [
    "ResizeLogger",
    "ResizeStats",
    "configure_logging",
]
