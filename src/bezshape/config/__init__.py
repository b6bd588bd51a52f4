"""Configuration management for bezshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Default tolerance, accuracy and flattening settings
- LoggingConfig: Logging settings
- BezshapeSettings: Main application settings
"""

from bezshape.config.settings import (
    BezshapeSettings,
    GeometryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BezshapeSettings",
    "GeometryConfig",
    "LoggingConfig",
    "get_default_settings",
]
