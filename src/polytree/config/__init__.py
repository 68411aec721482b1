"""Configuration management for polytree.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, keyword arguments to
``build()``, or defaults.

Key classes:
- TreeConfig: Tree construction parameters
- LoggingConfig: Logging settings
- PolyTreeSettings: Main application settings
"""

from polytree.config.settings import (
    LoggingConfig,
    PolyTreeSettings,
    TreeConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PolyTreeSettings",
    "TreeConfig",
    "get_default_settings",
]
