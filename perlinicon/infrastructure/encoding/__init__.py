"""Image encoding infrastructure."""

from .png_encoder import PillowPNGEncoder

__all__ = [
    "PillowPNGEncoder",
]
