"""Configuration management for polyoffset.

This module provides configuration management using Pydantic models.
Every entry point accepts an optional settings object; defaults are used
when none is given.

Key classes:
- OffsetConfig: U-turn and collinearity thresholds and policies
- ToleranceConfig: Numerical tolerances
- LoggingConfig: Logging settings
- PolyoffsetSettings: Main library settings
"""

from polyoffset.config.settings import (
    LoggingConfig,
    OffsetConfig,
    PolyoffsetSettings,
    ToleranceConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OffsetConfig",
    "PolyoffsetSettings",
    "ToleranceConfig",
    "get_default_settings",
]
