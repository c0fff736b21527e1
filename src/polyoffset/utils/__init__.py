"""Utility functions for polyoffset.

This module provides logging setup and the per-call offset statistics.
"""

from polyoffset.utils.logging import (
    OffsetLogger,
    OffsetStats,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "OffsetLogger",
    "OffsetStats",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
