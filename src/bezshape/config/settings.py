"""Configuration settings for bezshape."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeometryConfig(BaseModel):
    """Defaults for conversion and measurement.

    Shape methods always take their tolerance explicitly; these values are
    what the consumer algorithms and the CLI pass when the caller does not
    choose one.
    """

    tolerance: float = Field(
        default=0.1,
        ge=0.0,
        le=100.0,
        description="Maximum deviation when approximating curves with cubic Beziers",
    )
    accuracy: float = Field(
        default=1e-6,
        ge=0.0,
        le=1.0,
        description="Accuracy for perimeter (arc length) computation",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=100.0,
        description="Maximum distance between a curve and its flattened polyline",
    )
    max_flatten_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Maximum recursive subdivision depth when flattening a curve",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {_LOG_LEVELS}")
        return level


class BezshapeSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezshapeSettings:
    """Get default application settings."""
    return BezshapeSettings()
