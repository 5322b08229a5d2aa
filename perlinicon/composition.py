"""Composition root - the ONLY place where dependencies are wired."""

from pathlib import Path

from perlinicon.application.services import FaviconService
from perlinicon.config import load_config
from perlinicon.container import Container
from perlinicon.domain import RandomSource
from perlinicon.infrastructure.encoding import PillowPNGEncoder
from perlinicon.infrastructure.icons import InMemoryIconSlot
from perlinicon.infrastructure.randomness import SeededRandomSource, SystemRandomSource


def create_random_source(seed: int | None = None) -> RandomSource:
    """Seeded source when a seed is given, system randomness otherwise."""
    if seed is not None:
        return SeededRandomSource(seed)
    return SystemRandomSource()


def create_container(
    config_path: Path | str = "config.yaml",
    seed: int | None = None,
    overrides: dict | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        config_path: Path to config file.
        seed: Seed for reproducible icons; overrides the config file seed.
        overrides: Favicon config values that take precedence over the file
            (e.g. from command line flags).

    Returns:
        Fully wired dependency container.
    """
    config = load_config(config_path)

    favicon_config = config.favicon
    if overrides:
        favicon_config = favicon_config.model_validate(
            {**favicon_config.model_dump(), **overrides}
        )

    effective_seed = seed if seed is not None else favicon_config.seed
    settings = favicon_config.to_settings()

    favicon_service = FaviconService(
        encoder=PillowPNGEncoder(),
        random_source=create_random_source(effective_seed),
        settings=settings,
    )

    return Container(
        favicon_service=favicon_service,
        icon_slot=InMemoryIconSlot(),
        favicon_settings=settings,
        server_host=config.server.host,
        server_port=config.server.port,
        seed=effective_seed,
    )
