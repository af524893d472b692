"""Configuration management for onionmaze.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Sampling area bounds
- SamplingConfig: Allowed point counts
- GeometryConfig: Tolerances and the layer proximity filter
- MazeConfig: Gap carving and exit placement
- LoggingConfig: Logging settings
- OnionMazeSettings: Main application settings
"""

from onionmaze.config.settings import (
    CanvasConfig,
    GeometryConfig,
    LoggingConfig,
    MazeConfig,
    OnionMazeSettings,
    SamplingConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "GeometryConfig",
    "LoggingConfig",
    "MazeConfig",
    "OnionMazeSettings",
    "SamplingConfig",
    "get_default_settings",
]
