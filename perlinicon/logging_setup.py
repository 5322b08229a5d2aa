"""Logging configuration."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "PERLINICON_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("PIL",)


def setup_logging(level: str | int = DEFAULT_LEVEL, rich: bool = True) -> None:
    """Configure root logging.

    Args:
        level: Level name or number.
        rich: Render records with rich; plain stderr lines otherwise.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if rich:
        handler: logging.Handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def setup_logging_from_env(verbose: bool = False) -> None:
    """Configure logging from ``PERLINICON_LOG_LEVEL`` (``-v`` forces DEBUG)."""
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    setup_logging(level)
