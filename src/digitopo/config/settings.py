"""Configuration settings for digitopo."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class TraversalStrategy(str, Enum):
    """Order in which a surface visitor emits surfels."""

    DEPTH_FIRST = "depth"
    BREADTH_FIRST = "breadth"


class TrackingConfig(BaseModel):
    """Configuration for bel search and boundary tracking."""

    bel_search_budget: int | None = Field(
        default=100_000,
        ge=1,
        description="Maximum number of points examined when searching a bel (None = whole domain)",
    )
    interior_to_exterior: bool = Field(
        default=True,
        description="Surfel adjacency: True links bels through the interior (4/6-connected set)",
    )


class SpaceConfig(BaseModel):
    """Configuration of the Khalimsky space built around a domain."""

    periodic: bool = Field(
        default=False,
        description="Wrap every axis instead of treating points beyond the border as exterior",
    )


class TraversalConfig(BaseModel):
    """Configuration for digital surface traversal."""

    strategy: TraversalStrategy = Field(
        default=TraversalStrategy.BREADTH_FIRST,
        description="Visitor used to walk a surface",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class DigitopoSettings(BaseModel):
    """Main application settings."""

    tracking: TrackingConfig = Field(default_factory=TrackingConfig)
    space: SpaceConfig = Field(default_factory=SpaceConfig)
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DigitopoSettings:
    """Get default application settings."""
    return DigitopoSettings()
