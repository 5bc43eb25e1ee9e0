"""Shared option handling for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import EnumSettings
from ..registry import Registry

sources_argument = click.argument(
    "sources",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def build_registry(sources: tuple[Path, ...]) -> Registry:
    """Registry over SOURCES, or over ENUM_X_LOAD_PATHS when none are given."""
    if sources:
        return Registry(load_paths=list(sources)).init()
    return Registry.from_settings(EnumSettings.from_env()).init()


__all__ = ["sources_argument", "build_registry"]
