"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from perlinicon.application.services import FaviconService
from perlinicon.domain import FaviconSettings
from perlinicon.infrastructure.icons import InMemoryIconSlot


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    # Services
    favicon_service: FaviconService

    # Icon sink shared with the presentation layer
    icon_slot: InMemoryIconSlot

    # Configuration
    favicon_settings: FaviconSettings
    server_host: str
    server_port: int
    seed: int | None = None
