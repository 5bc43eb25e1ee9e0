"""List command: names of all enums defined by the given sources."""

from __future__ import annotations

from pathlib import Path

import click

from ._sources import build_registry, sources_argument


@click.command("list")
@sources_argument
def list_cmd(sources: tuple[Path, ...]):
    """List enums defined in SOURCES (default: ENUM_X_LOAD_PATHS)."""
    registry = build_registry(sources)
    for enum in registry:
        click.echo(f"{enum.name} ({len(enum)} values)")


__all__ = ["list_cmd"]
