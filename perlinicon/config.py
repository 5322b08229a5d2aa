"""Configuration loading and validation using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from perlinicon.domain import MAX_OCTAVES, MAX_SIZE, MIN_SIZE, FaviconSettings
from perlinicon.domain.values.favicon_settings import (
    DEFAULT_GRAIN_MAGNITUDE,
    DEFAULT_GRAIN_PROBABILITY,
    DEFAULT_INFLUENCE_BASE,
    DEFAULT_INFLUENCE_SLOPE,
    DEFAULT_OCTAVES,
    DEFAULT_OFFSET_RANGE,
    DEFAULT_PERSISTENCE,
    DEFAULT_RADIAL_EXPONENT,
    DEFAULT_SCALE_MAX,
    DEFAULT_SCALE_MIN,
    DEFAULT_SIZE,
)
from perlinicon.infrastructure.config import YAMLConfigLoader


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class FaviconConfig(BaseModel):
    """Favicon generation configuration."""

    size: int = Field(default=DEFAULT_SIZE, ge=MIN_SIZE, le=MAX_SIZE)
    octaves: int = Field(default=DEFAULT_OCTAVES, ge=1, le=MAX_OCTAVES)
    persistence: float = Field(default=DEFAULT_PERSISTENCE, gt=0, lt=1)
    scale_min: float = Field(default=DEFAULT_SCALE_MIN, gt=0)
    scale_max: float = Field(default=DEFAULT_SCALE_MAX, gt=0)
    offset_range: float = Field(default=DEFAULT_OFFSET_RANGE, ge=0)
    radial_exponent: float = Field(default=DEFAULT_RADIAL_EXPONENT, gt=0)
    influence_base: float = DEFAULT_INFLUENCE_BASE
    influence_slope: float = DEFAULT_INFLUENCE_SLOPE
    grain_probability: float = Field(default=DEFAULT_GRAIN_PROBABILITY, ge=0, le=1)
    grain_magnitude: float = Field(default=DEFAULT_GRAIN_MAGNITUDE, ge=0)
    seed: int | None = None

    @model_validator(mode="after")
    def validate_scale_range(self) -> "FaviconConfig":
        """Validate the noise scale range is ordered."""
        if self.scale_max < self.scale_min:
            raise ValueError("scale_max must be >= scale_min")
        return self

    def to_settings(self) -> FaviconSettings:
        """Convert to the domain settings value object."""
        return FaviconSettings(**self.model_dump(exclude={"seed"}))


class Config(BaseModel):
    """Application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    favicon: FaviconConfig = Field(default_factory=FaviconConfig)


def load_config(config_path: Path | str = "config.yaml") -> Config:
    """Load configuration from YAML file.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping.
        pydantic.ValidationError: If a value is out of range.
    """
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)
