"""Favicon synthesizer - radial "hole" shaded with fractal noise and grain."""

import math

from ..entities.pixel_buffer import PixelBuffer
from ..ports.random_source import RandomSource
from ..values.favicon_settings import FaviconSettings
from ..values.permutation_table import PermutationTable
from .fractal_noise import octave_noise


def pixel_brightness(
    dist: float,
    noise: float,
    settings: FaviconSettings,
    grain: float = 0.0,
) -> float:
    """Shade one pixel.

    Args:
        dist: Distance from the canvas center, normalized so the edge is 1.
        noise: Fractal noise remapped to [0, 1].
        settings: Exponent and noise influence tuning.
        grain: Signed speckle added after blending.

    Returns:
        Brightness clamped to [0, 1]; 0 is the dark center.
    """
    radial = dist**settings.radial_exponent

    # Edges lean on noise, the center stays dark
    influence = settings.influence_base + radial * settings.influence_slope
    brightness = radial * (1.0 - influence + noise * influence)

    return min(max(brightness + grain, 0.0), 1.0)


def to_byte(brightness: float) -> int:
    """Scale a [0, 1] brightness to a byte, truncating."""
    return int(brightness * 255.0)


class FaviconSynthesizer:
    """Builds the favicon raster.

    Every call shuffles a fresh permutation table and draws a new noise
    offset and scale, so two calls produce different icons unless the
    random source repeats itself.
    """

    def __init__(self, random_source: RandomSource) -> None:
        self._random = random_source

    def synthesize(self, settings: FaviconSettings | None = None) -> PixelBuffer:
        """Produce a fully populated grayscale RGBA buffer."""
        settings = settings or FaviconSettings.default()
        size = settings.size

        perm = PermutationTable.shuffled(self._random)

        # Random offset makes each generation unique
        offset_x = self._random.random() * settings.offset_range
        offset_y = self._random.random() * settings.offset_range

        # Higher scale = more zoomed out noise
        noise_scale = settings.scale_min + self._random.random() * (
            settings.scale_max - settings.scale_min
        )

        buffer = PixelBuffer(width=size, height=size)
        center = size / 2.0

        for y in range(size):
            for x in range(size):
                dist = math.hypot(x - center, y - center) / center

                noise_x = (x / size) * noise_scale + offset_x
                noise_y = (y / size) * noise_scale + offset_y
                noise = octave_noise(
                    noise_x, noise_y, settings.octaves, settings.persistence, perm
                )
                noise = (noise + 1.0) / 2.0

                brightness = pixel_brightness(dist, noise, settings, self._grain(settings))
                buffer.add_gray(to_byte(brightness))

        return buffer

    def _grain(self, settings: FaviconSettings) -> float:
        """Random speckle, present on roughly ``grain_probability`` of pixels."""
        if self._random.random() < settings.grain_probability:
            return (self._random.random() - 0.5) * 2.0 * settings.grain_magnitude
        return 0.0
