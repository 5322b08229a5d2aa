"""Domain ports - interfaces for infrastructure to implement."""

from .icon_sink import IconSink
from .image_encoder import ImageEncoder
from .random_source import RandomSource

__all__ = [
    "RandomSource",
    "ImageEncoder",
    "IconSink",
]
