"""CLI command group for enum definitions.

This module exposes the root Click command group `enum_x` which aggregates
subcommands implemented in sibling modules.

Example usage:

        enum-x list config/enums/*.yml
        enum-x show statuses config/enums/statuses.yml --json
        enum-x check statuses draft config/enums/statuses.yml
"""

from __future__ import annotations

import click

from .check import check_cmd
from .list_enums import list_cmd
from .show import show_cmd


@click.group()
def enum_x():  # pragma: no cover - thin group wrapper
    """Enum definition inspection commands."""


# Register subcommands
enum_x.add_command(list_cmd)
enum_x.add_command(show_cmd)
enum_x.add_command(check_cmd)

__all__ = ["enum_x"]
