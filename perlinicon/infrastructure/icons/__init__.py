"""Icon sink implementations."""

from .in_memory_slot import InMemoryIconSlot

__all__ = [
    "InMemoryIconSlot",
]
