"""Check command: exit non-zero when a value is not part of an enum."""

from __future__ import annotations

from pathlib import Path

import click

from ._sources import build_registry, sources_argument


@click.command("check")
@click.argument("name", type=str)
@click.argument("value", type=str)
@sources_argument
@click.option(
    "--format",
    "format_name",
    default=None,
    help="Match VALUE against this format instead of the canonical value.",
)
def check_cmd(name: str, value: str, sources: tuple[Path, ...], format_name: str | None):
    """Check that VALUE belongs to enum NAME defined in SOURCES."""
    registry = build_registry(sources)
    enum = registry[name]
    if enum is None:
        raise click.ClickException(f"enum {name} not found")
    found = (
        enum.value_with_format(format_name, value)
        if format_name
        else enum.lookup(value)
    )
    if found is None:
        allowed = ", ".join(v.value for v in enum)
        click.echo(f"'{value}' is not a value of {enum.name} (allowed: {allowed})")
        raise SystemExit(1)
    click.echo(f"{found.value}")


__all__ = ["check_cmd"]
