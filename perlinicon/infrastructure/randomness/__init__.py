"""Random source implementations."""

from .system_random import SeededRandomSource, SystemRandomSource

__all__ = [
    "SystemRandomSource",
    "SeededRandomSource",
]
