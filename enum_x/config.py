"""Runtime configuration: enum load paths and logging.

Settings are read from the environment (optionally seeded from a ``.env``
file):

* ``ENUM_X_LOAD_PATHS``: enum definition files or glob patterns, separated by
  ``os.pathsep`` (``:`` on POSIX). Patterns expand in sorted order.
* ``ENUM_X_LOG_LEVEL``: logging level name (default ``WARNING``).
"""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path

import dotenv
from pydantic import BaseModel, Field, field_validator

LOAD_PATHS_ENV = "ENUM_X_LOAD_PATHS"
LOG_LEVEL_ENV = "ENUM_X_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure ``enum_x`` logging once per process (lightweight, idempotent).

    An explicit ``level`` is applied to the ``enum_x`` logger on every call,
    so settings loaded after the first registry still take effect.
    """
    if level is not None:
        logging.getLogger("enum_x").setLevel(
            getattr(logging, level.upper(), logging.WARNING)
        )
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        return
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING), format=LOG_FORMAT
    )
    configure_logging._done = True  # type: ignore[attr-defined]


def expand_load_paths(patterns: list[str | Path]) -> list[Path]:
    """Expand glob patterns; plain paths are kept even if they do not exist."""
    paths: list[Path] = []
    for pattern in patterns:
        text = str(Path(pattern).expanduser())
        if any(ch in text for ch in "*?["):
            paths.extend(Path(p) for p in sorted(glob.glob(text, recursive=True)))
        else:
            paths.append(Path(text))
    return paths


class EnumSettings(BaseModel):
    """Settings used to build a :class:`~enum_x.registry.Registry`."""

    load_paths: list[Path] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("load_paths", mode="before")
    @classmethod
    def _expand(cls, value):
        if value is None:
            return []
        if isinstance(value, str | Path):
            value = [value]
        return expand_load_paths(list(value))

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> EnumSettings:
        """Build settings from environment variables (and ``.env`` if present)."""
        if dotenv_path is not None:
            dotenv.load_dotenv(dotenv_path=dotenv_path)
        raw_paths = os.getenv(LOAD_PATHS_ENV, "")
        return cls(
            load_paths=[p for p in raw_paths.split(os.pathsep) if p.strip()],
            log_level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        )


__all__ = [
    "EnumSettings",
    "configure_logging",
    "expand_load_paths",
    "LOAD_PATHS_ENV",
    "LOG_LEVEL_ENV",
]
