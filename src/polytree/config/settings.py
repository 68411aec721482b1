"""Configuration settings for polytree."""

import math
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TreeConfig(BaseModel):
    """Construction parameters for a polygon tree.

    Every tree carries its own configuration, so trees with different tuning
    can coexist in one process.
    """

    model_config = ConfigDict(frozen=True)

    leaf_threshold: int = Field(
        default=16,
        ge=6,
        description="Maximum total points held by a leaf node",
    )
    slice_coef: float = Field(
        default=2.0,
        gt=0.0,
        description="Scales the number of grid cells per branch",
    )
    seam_epsilon: float = Field(
        default=1e-4,
        gt=0.0,
        lt=0.5,
        description="Fraction of the cell size each clip rectangle is inflated by",
    )
    max_depth: int = Field(
        default=32,
        ge=1,
        description="Depth at which slicing stops and a leaf is emitted",
    )

    def target_parts(self, point_count: int) -> float:
        """Target number of grid cells for a polygon set of point_count points.

        Grows logarithmically with the ratio of points to the leaf threshold.
        """
        return self.slice_coef * math.log(math.e * (point_count / self.leaf_threshold))


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


class PolyTreeSettings(BaseModel):
    """Main application settings."""

    tree: TreeConfig = Field(default_factory=TreeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyTreeSettings:
    """Get default application settings."""
    return PolyTreeSettings()
