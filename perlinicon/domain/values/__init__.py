"""Domain value objects - immutable data structures."""

from .channel_layout import ChannelLayout
from .favicon_settings import MAX_OCTAVES, MAX_SIZE, MIN_SIZE, FaviconSettings
from .permutation_table import TABLE_SIZE, PermutationTable

__all__ = [
    "FaviconSettings",
    "MIN_SIZE",
    "MAX_SIZE",
    "MAX_OCTAVES",
    "PermutationTable",
    "TABLE_SIZE",
    "ChannelLayout",
]
