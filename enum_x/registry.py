"""Named enum store with lazy population from definition files.

Usage::

    registry = Registry(load_paths=["config/enums/statuses.yml"])
    registry["statuses"]   # loads all sources on first access, then looks up
    registry.statuses      # same, but raises NotFound for unknown names

Sources are classified by suffix:

* ``.yml`` / ``.yaml`` -> ``yaml``: a flat mapping of enum name to values.
* ``.py`` -> ``script``: executed with ``registry`` bound in its globals so it
  can call ``registry.define(...)``.
* anything else -> ``other``: skipped.

A custom ``loader`` replaces this interpretation entirely. It is either a
callable ``loader(path, kind)`` or an object with a
``load_enums_from(path, kind)`` method, and should call :meth:`Registry.define`.

Population happens once, on the first lookup while the store is still
uninitialized; :meth:`Registry.init` and :meth:`Registry.reset` control the
lifecycle explicitly (useful for test isolation).
"""

from __future__ import annotations

import logging
import runpy
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml

from .config import EnumSettings, configure_logging
from .enumeration import Enum
from .errors import InvalidArgument, NotFound, UnsupportedQuery
from .support import is_scalar, value_of
from .translation import Translator

logger = logging.getLogger("enum_x.registry")


class SourceKind(StrEnum):
    YAML = "yaml"
    SCRIPT = "script"
    OTHER = "other"


def classify(path: str | Path) -> SourceKind:
    """Classify an enum source by its file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix in (".yml", ".yaml"):
        return SourceKind.YAML
    if suffix == ".py":
        return SourceKind.SCRIPT
    return SourceKind.OTHER


Loader = Callable[[Path, SourceKind], Any]


class Registry:
    """Process- or test-scoped mapping of enum names to :class:`Enum` instances."""

    def __init__(
        self,
        load_paths: str | Path | Iterable[str | Path] | None = None,
        loader: Loader | Any | None = None,
        translator: Translator | None = None,
    ):
        configure_logging()
        self._lock = threading.RLock()
        self._enums: dict[str, Enum] | None = None
        self.load_paths = load_paths
        self.loader = loader
        self.translator = translator

    @classmethod
    def from_settings(
        cls, settings: EnumSettings | None = None, **kwargs: Any
    ) -> Registry:
        """Build a registry from :class:`EnumSettings` (default: the environment)."""
        settings = settings if settings is not None else EnumSettings.from_env()
        configure_logging(settings.log_level)
        return cls(load_paths=settings.load_paths, **kwargs)

    # Configuration -----------------------------------------------------------
    @property
    def load_paths(self) -> list[Path]:
        return self._load_paths

    @load_paths.setter
    def load_paths(self, paths: str | Path | Iterable[str | Path] | None) -> None:
        if paths is None:
            paths = []
        elif isinstance(paths, str | Path):
            paths = [paths]
        self._load_paths = [Path(p) for p in paths]

    # Definition --------------------------------------------------------------
    def define(self, name: Any, values: Iterable[Any]) -> Enum:
        """Create an enum and store it under ``name``, replacing any existing one."""
        enum = Enum(name, values, translator=self.translator)
        with self._lock:
            self._store()[enum.name] = enum
        logger.debug("Defined enum '%s' (%d values)", enum.name, len(enum))
        return enum

    def undefine(self, name: Any) -> None:
        """Remove the enum ``name`` if it is defined."""
        with self._lock:
            removed = self._store().pop(value_of(name), None)
        if removed is not None:
            logger.debug("Undefined enum '%s'", removed.name)

    # Lookup ------------------------------------------------------------------
    def lookup(self, name: Any) -> Enum | None:
        """Return the enum ``name``, loading sources first if needed."""
        with self._lock:
            if self._enums is None:
                self._load_enums()
            return self._store().get(value_of(name))

    def __getitem__(self, name: Any) -> Enum | None:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return self.lookup(name) is not None

    def names(self) -> list[str]:
        """Names of all defined enums, in definition order."""
        with self._lock:
            if self._enums is None:
                self._load_enums()
            return list(self._store())

    def __iter__(self) -> Iterator[Enum]:
        with self._lock:
            names = self.names()
            return iter([self._store()[name] for name in names])

    def __len__(self) -> int:
        return len(self.names())

    def __getattr__(self, name: str) -> Enum:
        if name.startswith("_"):
            raise AttributeError(name)
        enum = self.lookup(name)
        if enum is not None:
            return enum
        if name.startswith("to_"):
            raise UnsupportedQuery(f"registry does not support conversion '{name}'")
        raise NotFound(f"enum {name} not found")

    # Lifecycle ---------------------------------------------------------------
    def init(self) -> Registry:
        """Discard all enums and populate the store from ``load_paths`` now."""
        with self._lock:
            self._enums = None
            self._load_enums()
        return self

    def reset(self) -> None:
        """Return to the uninitialized state; the next lookup loads again."""
        with self._lock:
            self._enums = None

    # Loading -----------------------------------------------------------------
    def _store(self) -> dict[str, Enum]:
        if self._enums is None:
            self._enums = {}
        return self._enums

    def _load_enums(self) -> None:
        self._store()
        for path in self.load_paths:
            self._load_source(path)

    def _load_source(self, path: Path) -> None:
        kind = classify(path)
        loader = self.loader
        logger.debug("Loading enums from %s (%s)", path, kind)
        if loader is not None and hasattr(loader, "load_enums_from"):
            loader.load_enums_from(path, kind)
        elif callable(loader):
            loader(path, kind)
        elif kind is SourceKind.SCRIPT:
            self.load_script(path)
        elif kind is SourceKind.YAML:
            self.load_yaml(path)
        else:
            logger.debug("Skipping unrecognized enum source %s", path)

    def load_yaml(self, path: str | Path) -> list[Enum]:
        """Define every enum in a YAML file of ``name: [values...]`` entries."""
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        return self.load_definitions(data, source=str(path))

    def load_definitions(
        self, data: Mapping[Any, Any], source: str = "<definitions>"
    ) -> list[Enum]:
        """Define every enum of an already parsed ``name -> values`` mapping."""
        if not isinstance(data, Mapping):
            raise InvalidArgument(
                f"{source}: expected a mapping of enum names to values, "
                f"got {type(data).__name__}"
            )
        enums = []
        for name, values in data.items():
            if values is None:
                values = []
            elif is_scalar(values):
                raise InvalidArgument(
                    f"{source}: enum '{name}' must list its values as a sequence"
                )
            enums.append(self.define(name, values))
        return enums

    def load_script(self, path: str | Path) -> None:
        """Execute a Python definition file with this registry in its globals."""
        runpy.run_path(str(path), init_globals={"registry": self, "Enum": Enum})


__all__ = ["Registry", "SourceKind", "classify"]
