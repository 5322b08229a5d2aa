"""Domain entities - objects built up over a generation."""

from .pixel_buffer import OPAQUE, PixelBuffer

__all__ = [
    "PixelBuffer",
    "OPAQUE",
]
