"""ASGI application factory for uvicorn.

Usage:
    uvicorn perlinicon.asgi:create_app_from_env --factory
"""

import os

from perlinicon.composition import create_container
from perlinicon.logging_setup import setup_logging_from_env


def create_app_from_env():
    """Create FastAPI app from environment variables.

    This is called by uvicorn when using the --factory flag.
    Environment variables:
        PERLINICON_CONFIG_PATH: Path to config file (default: config.yaml)
        PERLINICON_SEED: Seed for a reproducible favicon
        PERLINICON_LOG_LEVEL: Logging level (default: WARNING)
    """
    from perlinicon.app import create_app

    setup_logging_from_env()

    config_path = os.environ.get("PERLINICON_CONFIG_PATH", "config.yaml")
    seed = os.environ.get("PERLINICON_SEED")

    container = create_container(
        config_path=config_path,
        seed=int(seed) if seed else None,
    )
    return create_app(container)
