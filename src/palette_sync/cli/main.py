"""Palette Sync CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from palette_sync import __version__


@click.group()
@click.version_option(version=__version__, prog_name="palette-sync")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug)")
def cli(verbose: int) -> None:
    """Palette Sync - color palettes from a stylesheet's :root variables."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from palette_sync.cli.scan import scan  # noqa: E402
from palette_sync.cli.show import css, legacy, palette  # noqa: E402
from palette_sync.cli.serve import serve  # noqa: E402

cli.add_command(scan)
cli.add_command(palette)
cli.add_command(legacy)
cli.add_command(css)
cli.add_command(serve)
