"""Show command: values and formats of one enum."""

from __future__ import annotations

import json
from pathlib import Path

import click

from ._sources import build_registry, sources_argument


@click.command("show")
@click.argument("name", type=str)
@sources_argument
@click.option("--json", "as_json", is_flag=True, help="Print definitions as JSON")
def show_cmd(name: str, sources: tuple[Path, ...], as_json: bool):
    """Show the values of enum NAME defined in SOURCES."""
    registry = build_registry(sources)
    enum = registry[name]
    if enum is None:
        raise click.ClickException(f"enum {name} not found")
    if as_json:
        click.echo(json.dumps({enum.name: enum.definitions()}, indent=2))
        return
    for value in enum:
        formats = " ".join(f"{k}={v}" for k, v in value.formats.items())
        click.echo(f"{value.value}  {formats}".rstrip())


__all__ = ["show_cmd"]
