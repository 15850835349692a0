"""Utility functions for digitopo.

This module provides:

- Logging setup and configuration
- Extraction statistics
"""

from digitopo.utils.logging import (
    ExtractionLogger,
    ExtractionStats,
    configure_logging,
)

__all__ = [
    "ExtractionLogger",
    "ExtractionStats",
    "configure_logging",
]
