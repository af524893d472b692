"""Utility functions for onionmaze.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
"""

from onionmaze.utils.logging import (
    GenerationStats,
    RunLogger,
    configure_logging,
)

__all__ = [
    "GenerationStats",
    "RunLogger",
    "configure_logging",
]
