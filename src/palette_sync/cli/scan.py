"""CLI command: palette-sync scan -- list the :root custom properties."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from palette_sync.css import read_stylesheet
from palette_sync.css import scan as scan_declarations
from palette_sync.errors import ParseError


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def scan(stylesheet: str) -> None:
    """List the custom properties declared in the :root block of STYLESHEET.

    Exits with code 1 if the stylesheet cannot be parsed.
    """
    path = Path(stylesheet)
    try:
        declarations = scan_declarations(read_stylesheet(path))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not declarations:
        click.echo(f"{path.name}: no custom properties in :root")
        return
    click.echo(f"{path.name}: {len(declarations)} custom propert{'y' if len(declarations) == 1 else 'ies'}")
    for decl in declarations:
        suffix = " !important" if decl.important else ""
        click.echo(f"  --{decl.name}: {decl.value}{suffix}")
