"""Command line interface."""

import logging
from pathlib import Path

from perlinicon.domain import decode_data_uri
from perlinicon.composition import create_container
from perlinicon.logging_setup import setup_logging_from_env

from .args import favicon_overrides, parse_args
from .display import console, display_preview, err_console

logger = logging.getLogger(__name__)


def serve(container) -> None:
    """Run the HTTP server until interrupted."""
    import uvicorn

    from perlinicon.app import create_app

    console.print(
        f"[bold cyan]http://{container.server_host}:{container.server_port}/favicon.png[/bold cyan]"
    )
    uvicorn.run(
        create_app(container),
        host=container.server_host,
        port=container.server_port,
        log_level="warning",
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``perlinicon`` command.

    Returns:
        Process exit code: 0 on success, 1 if no favicon could be
        generated, 2 on invalid configuration.
    """
    args = parse_args(argv)
    setup_logging_from_env(verbose=args.verbose)

    try:
        container = create_container(
            config_path=args.config,
            seed=args.seed,
            overrides=favicon_overrides(args),
        )
    except ValueError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        return 2

    if args.serve:
        serve(container)
        return 0

    data_uri = container.favicon_service.generate_data_uri()
    if not data_uri:
        err_console.print("[red]Favicon generation failed[/red]")
        return 1

    png = decode_data_uri(data_uri)

    if args.preview:
        display_preview(png, container.favicon_settings.size, container.seed)

    if args.output:
        output = Path(args.output)
        output.write_bytes(png)
        logger.info("Favicon written path=%s bytes=%d", output, len(png))
        console.print(f"Saved to {output}")
    elif not args.preview:
        print(data_uri)

    return 0


__all__ = [
    "main",
    "parse_args",
]
