"""Pixel channel layouts understood by image encoders."""

from enum import Enum


class ChannelLayout(str, Enum):
    """Channel layout of a flat pixel buffer."""

    RGBA = "RGBA"
    RGB = "RGB"
    L = "L"

    @property
    def channels(self) -> int:
        """Number of bytes per pixel."""
        return len(self.value)
