"""CLI commands: palette-sync palette / legacy / css -- print derived palettes."""

from __future__ import annotations

import json

import click

from palette_sync.cli.common import (
    handle_parse_errors,
    open_synchroniser,
    parse_extra,
    sync_options,
)


@click.command()
@sync_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the block-editor palette as JSON")
@handle_parse_errors
def palette(as_json: bool, **options: object) -> None:
    """Build the palette of STYLESHEET and print it."""
    sync = open_synchroniser(**options)  # type: ignore[arg-type]
    if as_json:
        click.echo(json.dumps(sync.editor_palette(), indent=2))
        return
    if not len(sync.palette):
        click.echo("Palette is empty")
        return
    width = max(len(entry.slug) for entry in sync.palette)
    for entry in sync.palette:
        click.echo(f"  {entry.slug:<{width}}  {entry.color:<12}  {entry.name}")


@click.command()
@sync_options
@click.option(
    "--extra", "extra", multiple=True, callback=parse_extra,
    help="Additional HEX=LABEL swatch for the permissive table (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the legacy editor options as JSON")
@handle_parse_errors
def legacy(extra: list[tuple[str, str]], as_json: bool, **options: object) -> None:
    """Print the legacy toolbar table and its grid for STYLESHEET."""
    sync = open_synchroniser(**options)  # type: ignore[arg-type]
    result = sync.legacy_palette(extra=extra)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    click.echo(f"Grid: {result.rows} row(s) x {result.cols} col(s)")
    for hex_code, label in result.pairs():
        click.echo(f"  {hex_code:<8}  {label}")


@click.command()
@sync_options
@handle_parse_errors
def css(**options: object) -> None:
    """Print the color helper classes for STYLESHEET."""
    sync = open_synchroniser(**options)  # type: ignore[arg-type]
    click.echo(sync.css_classes(), nl=False)
