"""Translation backends for enum values.

Enum values are translated by key (their canonical string) within the scope
``["enums", <enum name>]``. The backend is injected: an enum carries an
optional ``translator`` and falls back to :class:`NullTranslator`, which only
ever yields the supplied default.

Locale files use the nested layout::

    en:
      enums:
        statuses:
          draft: Draft
          sent: Sent to %{recipient}
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml

from .errors import TranslationMissing

_INTERPOLATION = re.compile(r"%\{(\w+)\}")


def humanize(text: str) -> str:
    """Return a human-readable form of an identifier.

    Leading underscores and a trailing ``_id`` are removed, underscores
    become spaces and the first letter is capitalized::

        >>> humanize("author_id")
        'Author'
        >>> humanize("in_progress")
        'In progress'
    """
    result = re.sub(r"\A_+", "", text)
    result = re.sub(r"_id\Z", "", result)
    result = result.replace("_", " ").lower()
    return result[:1].upper() + result[1:]


def _interpolate(text: str, options: Mapping[str, Any]) -> str:
    if not options:
        return text
    return _INTERPOLATION.sub(
        lambda m: str(options[m.group(1)]) if m.group(1) in options else m.group(0),
        text,
    )


def _missing_text(key: str, scope: Sequence[str], locale: str) -> str:
    return f"translation missing: {'.'.join([locale, *scope, key])}"


class Translator(Protocol):
    """Lookup service used by :meth:`Value.translate`."""

    def translate(
        self,
        key: str,
        *,
        scope: Sequence[str] = (),
        default: str | None = None,
        raise_error: bool = False,
        **options: Any,
    ) -> str: ...


class NullTranslator:
    """Translator without any messages: defaults or failures only."""

    def __init__(self, locale: str = "en"):
        self.locale = locale

    def translate(
        self,
        key: str,
        *,
        scope: Sequence[str] = (),
        default: str | None = None,
        raise_error: bool = False,
        locale: str | None = None,
        **options: Any,
    ) -> str:
        locale = locale or self.locale
        if raise_error:
            raise TranslationMissing(key, scope, locale)
        if default is not None:
            return _interpolate(default, options)
        return _missing_text(key, scope, locale)


class CatalogTranslator:
    """Translator backed by nested ``{locale: {scope...: {key: text}}}`` messages."""

    def __init__(self, messages: Mapping[str, Any] | None = None, locale: str = "en"):
        self.messages: dict[str, Any] = {}
        self.locale = locale
        if messages:
            self.merge(messages)

    @classmethod
    def from_yaml(cls, *paths: str | Path, locale: str = "en") -> CatalogTranslator:
        """Build a translator from one or more YAML locale files (later files win)."""
        translator = cls(locale=locale)
        for path in paths:
            with open(Path(path).expanduser(), encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            translator.merge(data)
        return translator

    def merge(self, messages: Mapping[str, Any]) -> None:
        _deep_merge(self.messages, messages)

    def lookup(self, key: str, scope: Sequence[str], locale: str) -> str | None:
        node: Any = self.messages.get(locale)
        for part in [*scope, key]:
            if not isinstance(node, Mapping):
                return None
            node = node.get(str(part))
        return None if node is None or isinstance(node, Mapping) else str(node)

    def translate(
        self,
        key: str,
        *,
        scope: Sequence[str] = (),
        default: str | None = None,
        raise_error: bool = False,
        locale: str | None = None,
        **options: Any,
    ) -> str:
        locale = locale or self.locale
        text = self.lookup(key, scope, locale)
        if text is not None:
            return _interpolate(text, options)
        if raise_error:
            raise TranslationMissing(key, scope, locale)
        if default is not None:
            return _interpolate(default, options)
        return _missing_text(key, scope, locale)


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, item in source.items():
        key = str(key)
        if isinstance(item, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], item)
        elif isinstance(item, Mapping):
            target[key] = {}
            _deep_merge(target[key], item)
        else:
            target[key] = item


_NULL_TRANSLATOR = NullTranslator()


def resolve_translator(translator: Translator | None) -> Translator:
    """Return ``translator`` or the shared :class:`NullTranslator`."""
    return translator if translator is not None else _NULL_TRANSLATOR


__all__ = [
    "Translator",
    "NullTranslator",
    "CatalogTranslator",
    "humanize",
    "resolve_translator",
]
