"""Configuration management for digitopo.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TrackingConfig: Bel search and surfel adjacency settings
- SpaceConfig: Khalimsky space settings
- TraversalConfig: Surface traversal settings
- LoggingConfig: Logging settings
- DigitopoSettings: Main application settings
"""

from digitopo.config.settings import (
    DigitopoSettings,
    LoggingConfig,
    SpaceConfig,
    TrackingConfig,
    TraversalConfig,
    TraversalStrategy,
    get_default_settings,
)

__all__ = [
    "DigitopoSettings",
    "LoggingConfig",
    "SpaceConfig",
    "TrackingConfig",
    "TraversalConfig",
    "TraversalStrategy",
    "get_default_settings",
]
