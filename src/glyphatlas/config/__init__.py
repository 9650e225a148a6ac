"""Configuration management for glyphatlas.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ImageFormat: Supported atlas image formats
- AtlasConfig: Atlas storage settings
- LoggingConfig: Logging settings
- GlyphAtlasSettings: Main application settings
"""

from glyphatlas.config.settings import (
    AtlasConfig,
    GlyphAtlasSettings,
    ImageFormat,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "AtlasConfig",
    "GlyphAtlasSettings",
    "ImageFormat",
    "LoggingConfig",
    "get_default_settings",
]
