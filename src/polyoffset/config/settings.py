"""Configuration settings for polyoffset."""

import math
from pathlib import Path

from pydantic import BaseModel, Field

from polyoffset.domain.policy import UTurn, VarDistParallel


class OffsetConfig(BaseModel):
    """Corner handling defaults for the offset entry points.

    Angles are turn angles between consecutive segments in degrees:
    0 means the polyline runs straight on, 180 means it reverses.
    """

    uturn_threshold_degrees: float = Field(
        default=170.0,
        ge=90.0,
        le=180.0,
        description="Turn angle above which a corner is treated as a U-turn",
    )
    parallel_threshold_degrees: float = Field(
        default=2.5,
        ge=0.0,
        le=45.0,
        description="Turn angle below which two segments count as collinear",
    )
    uturn: UTurn = Field(
        default=UTurn.CHAMFER,
        description="What to do at U-turns",
    )
    var_dist_parallel: VarDistParallel = Field(
        default=VarDistParallel.PROPORTIONAL,
        description="What to do at collinear segments with different distances",
    )

    def uturn_cosine(self) -> float:
        """Get the U-turn threshold as a cosine between segment normals."""
        return math.cos(math.radians(self.uturn_threshold_degrees))

    def parallel_cosine(self) -> float:
        """Get the collinearity threshold as a cosine between segment normals."""
        return math.cos(math.radians(self.parallel_threshold_degrees))


class ToleranceConfig(BaseModel):
    """Numerical tolerances, in the units of the input coordinates."""

    duplicate_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="Consecutive points closer than this are merged",
    )
    closed_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="First and last point closer than this make a closed polyline",
    )
    equal_distance_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="Offset distances closer than this are treated as equal",
    )
    zero_distance_tolerance: float = Field(
        default=1e-12,
        ge=0.0,
        description="Uniform distances below this return a copy of the input",
    )
    reversal_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        description="Cross product below which a U-turn is an exact reversal",
    )

    @property
    def closed_tolerance_sq(self) -> float:
        """Squared closed tolerance, compared against squared distances."""
        return self.closed_tolerance * self.closed_tolerance


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file output)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console output except errors",
    )


class PolyoffsetSettings(BaseModel):
    """Main library settings."""

    offset: OffsetConfig = Field(default_factory=OffsetConfig)
    tolerance: ToleranceConfig = Field(default_factory=ToleranceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyoffsetSettings:
    """Get default library settings."""
    return PolyoffsetSettings()
