"""Favicon generation settings value object."""

from dataclasses import dataclass

# Default aesthetic tuning
DEFAULT_SIZE = 32
DEFAULT_OCTAVES = 3
DEFAULT_PERSISTENCE = 0.5
DEFAULT_SCALE_MIN = 4.0
DEFAULT_SCALE_MAX = 6.0
DEFAULT_OFFSET_RANGE = 1000.0
DEFAULT_RADIAL_EXPONENT = 0.7  # <1 = sharper edge, >1 = softer edge
DEFAULT_INFLUENCE_BASE = 0.3
DEFAULT_INFLUENCE_SLOPE = 0.5
DEFAULT_GRAIN_PROBABILITY = 0.1
DEFAULT_GRAIN_MAGNITUDE = 0.075

MIN_SIZE = 1
MAX_SIZE = 512
MAX_OCTAVES = 8


@dataclass(frozen=True, slots=True)
class FaviconSettings:
    """Structural and aesthetic parameters for one favicon generation."""

    size: int = DEFAULT_SIZE
    octaves: int = DEFAULT_OCTAVES
    persistence: float = DEFAULT_PERSISTENCE
    scale_min: float = DEFAULT_SCALE_MIN
    scale_max: float = DEFAULT_SCALE_MAX
    offset_range: float = DEFAULT_OFFSET_RANGE
    radial_exponent: float = DEFAULT_RADIAL_EXPONENT
    influence_base: float = DEFAULT_INFLUENCE_BASE
    influence_slope: float = DEFAULT_INFLUENCE_SLOPE
    grain_probability: float = DEFAULT_GRAIN_PROBABILITY
    grain_magnitude: float = DEFAULT_GRAIN_MAGNITUDE

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ValueError(f"size must be {MIN_SIZE}-{MAX_SIZE}, got {self.size}")
        if not 1 <= self.octaves <= MAX_OCTAVES:
            raise ValueError(f"octaves must be 1-{MAX_OCTAVES}, got {self.octaves}")
        if not 0 < self.persistence < 1:
            raise ValueError("persistence must be in (0, 1)")
        if self.scale_min <= 0 or self.scale_max < self.scale_min:
            raise ValueError("scale range must be positive and ordered")
        if self.offset_range < 0:
            raise ValueError("offset_range must not be negative")
        if self.radial_exponent <= 0:
            raise ValueError("radial_exponent must be positive")
        if not 0 <= self.grain_probability <= 1:
            raise ValueError("grain_probability must be in [0, 1]")
        if self.grain_magnitude < 0:
            raise ValueError("grain_magnitude must not be negative")

    @classmethod
    def default(cls) -> "FaviconSettings":
        """Create settings with the default 32x32 configuration."""
        return cls()

    @property
    def pixel_count(self) -> int:
        return self.size * self.size
