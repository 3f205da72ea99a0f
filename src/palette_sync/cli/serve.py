"""CLI command: palette-sync serve -- expose the palette over HTTP."""

from __future__ import annotations

import click

from palette_sync.cli.common import open_synchroniser, parse_extra, sync_options


@click.command()
@sync_options
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.option(
    "--extra", "extra", multiple=True, callback=parse_extra,
    help="Additional HEX=LABEL swatch for the permissive legacy table (repeatable)",
)
def serve(
    host: str, port: int, debug: bool, extra: list[tuple[str, str]], **options: object
) -> None:
    """Start the palette web server for STYLESHEET."""
    from palette_sync.web.app import create_app

    sync = open_synchroniser(**options)  # type: ignore[arg-type]
    app = create_app(sync, extra=extra)
    click.echo(f"Serving palette of {sync.config.stylesheet_path} on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
