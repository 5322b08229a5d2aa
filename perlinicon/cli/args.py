"""Command line argument parsing."""

import argparse

from perlinicon import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - config: Path to the YAML config file
        - output: PNG file to write (optional)
        - size, octaves, persistence: Favicon overrides (optional)
        - seed: Seed for a reproducible favicon (optional)
        - preview: Whether to render the favicon in the terminal
        - serve: Whether to start the HTTP server instead
        - verbose: Whether to show debug logs
    """
    parser = argparse.ArgumentParser(
        prog="perlinicon",
        description="Perlinicon - procedural Perlin noise favicon generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to YAML config file (default: config.yaml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the PNG to this file instead of printing a data URI",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=None,
        help="Canvas width and height in pixels (default: 32)",
    )
    parser.add_argument(
        "--octaves",
        type=int,
        default=None,
        help="Number of noise octaves (default: 3)",
    )
    parser.add_argument(
        "--persistence",
        type=float,
        default=None,
        help="Amplitude decay per octave, between 0 and 1 (default: 0.5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible favicon",
    )
    parser.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="Render the favicon in the terminal",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the favicon over HTTP",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )

    return parser.parse_args(argv)


def favicon_overrides(args: argparse.Namespace) -> dict:
    """Collect favicon config values given on the command line."""
    overrides = {}
    for name in ("size", "octaves", "persistence"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return overrides
