"""Pure domain layer - no infrastructure dependencies."""

# Errors
from .errors import EncodingFailure

# Data URIs
from .data_uri import decode_data_uri, to_data_uri

# Entities
from .entities import OPAQUE, PixelBuffer

# Ports
from .ports import IconSink, ImageEncoder, RandomSource

# Services
from .services import (
    FaviconSynthesizer,
    fade,
    grad,
    lerp,
    octave_noise,
    perlin_noise,
    pixel_brightness,
    to_byte,
)
from .values import (
    MAX_OCTAVES,
    MAX_SIZE,
    MIN_SIZE,
    TABLE_SIZE,
    ChannelLayout,
    FaviconSettings,
    PermutationTable,
)

__all__ = [
    # Values
    "FaviconSettings",
    "MIN_SIZE",
    "MAX_SIZE",
    "MAX_OCTAVES",
    "PermutationTable",
    "TABLE_SIZE",
    "ChannelLayout",
    # Entities
    "PixelBuffer",
    "OPAQUE",
    # Errors
    "EncodingFailure",
    # Data URIs
    "to_data_uri",
    "decode_data_uri",
    # Services
    "fade",
    "lerp",
    "grad",
    "perlin_noise",
    "octave_noise",
    "FaviconSynthesizer",
    "pixel_brightness",
    "to_byte",
    # Ports
    "RandomSource",
    "ImageEncoder",
    "IconSink",
]
