"""Domain services - pure noise and raster computation."""

from .favicon_synthesizer import FaviconSynthesizer, pixel_brightness, to_byte
from .fractal_noise import octave_noise
from .gradient_noise import fade, grad, lerp, perlin_noise

__all__ = [
    "fade",
    "lerp",
    "grad",
    "perlin_noise",
    "octave_noise",
    "FaviconSynthesizer",
    "pixel_brightness",
    "to_byte",
]
