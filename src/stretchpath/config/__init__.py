"""Configuration management for stretchpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutputConfig: SVG output settings
- LoggingConfig: Logging settings
- StretchPathSettings: Main application settings
"""

from stretchpath.config.settings import (
    LoggingConfig,
    OutputConfig,
    StretchPathSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "StretchPathSettings",
    "get_default_settings",
]
