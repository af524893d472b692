"""Configuration settings for Onionmaze."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from onionmaze.domain import Point


class CanvasConfig(BaseModel):
    """Bounds of the drawing area points are sampled into."""

    width: int = Field(
        default=900,
        ge=100,
        le=10000,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=600,
        ge=100,
        le=10000,
        description="Canvas height in pixels",
    )
    padding: int = Field(
        default=50,
        ge=0,
        le=500,
        description="Distance kept between sampled points and the canvas border",
    )


class SamplingConfig(BaseModel):
    """Configuration for random point sampling."""

    min_points: int = Field(
        default=3,
        ge=3,
        description="Smallest point count a caller may request",
    )
    max_points: int = Field(
        default=100,
        ge=3,
        le=1000,
        description="Largest point count a caller may request",
    )
    default_points: int = Field(
        default=30,
        ge=3,
        description="Point count used when none is given",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "SamplingConfig":
        if self.min_points > self.max_points:
            raise ValueError("min_points must not exceed max_points")
        if not self.min_points <= self.default_points <= self.max_points:
            raise ValueError("default_points must lie within [min_points, max_points]")
        return self


class GeometryConfig(BaseModel):
    """Tolerances for geometric predicates."""

    epsilon: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Cross products and coordinate differences below this are zero",
    )
    edge_proximity_threshold: float = Field(
        default=15.0,
        gt=0.0,
        le=200.0,
        description="Points closer than this to a peeled hull edge are discarded",
    )


class MazeConfig(BaseModel):
    """Configuration for gap carving and maze endpoints."""

    gap_size: float = Field(
        default=20.0,
        gt=0.0,
        le=200.0,
        description="Width of a carved passage along a hull edge",
    )
    edge_margin: float = Field(
        default=30.0,
        ge=0.0,
        le=200.0,
        description="Minimum distance between a passage and the edge endpoints",
    )
    end_inset_x: float = Field(
        default=70.0,
        ge=0.0,
        description="Horizontal distance of the maze exit from the left border",
    )
    end_inset_y: float = Field(
        default=50.0,
        ge=0.0,
        description="Vertical distance of the maze exit from the bottom border",
    )

    def end_position(self, canvas: CanvasConfig) -> Point:
        """Get the fixed maze exit for the given canvas.

        Args:
            canvas: Canvas the maze is laid out on

        Returns:
            Exit point near the bottom-left corner
        """
        return Point(self.end_inset_x, canvas.height - self.end_inset_y)


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class OnionMazeSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    maze: MazeConfig = Field(default_factory=MazeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OnionMazeSettings:
    """Get default application settings."""
    return OnionMazeSettings()
