"""Named, ordered, finite sets of enum values.

An :class:`Enum` is built from raw value definitions in the same shapes
accepted by the YAML files::

    statuses = Enum("statuses", ["draft", "sent", {"value": "returned", "legacy": "back"}])

    statuses["draft"]                           # <Value statuses:draft>
    statuses["unknown"]                         # None
    statuses["returned"].format("legacy")       # 'back'
    statuses.value_with_format("legacy", "back")  # <Value statuses:returned>

Keys are normalized to strings, so ``Enum("sizes", [50, 100])[50]`` and
``[..]["50"]`` return the same value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import InvalidArgument
from .support import value_of
from .translation import Translator
from .value import Value


class Enum:
    """An ordered collection of :class:`Value` instances keyed by canonical string.

    Parameters
    ----------
    name : Any
        Enum name (stringified); used as registry key and translation scope.
    values : Iterable
        Raw values: scalars, ``{"value": ..., <format>: ...}`` mappings or
        existing :class:`Value` instances (which are duplicated, never shared).
    translator : Translator | None
        Translation backend for the values of this enum.
    """

    def __init__(
        self,
        name: Any,
        values: Iterable[Any] | None = None,
        translator: Translator | None = None,
    ):
        self.name = str(name)
        self.translator = translator
        self._values: dict[str, Value] = {}
        for value in values or ():
            self._add_value(value)

    # Attributes --------------------------------------------------------------
    @property
    def values(self) -> list[Value]:
        """All allowed values, in definition order."""
        return list(self._values.values())

    @property
    def i18n_scope(self) -> list[str]:
        """Translation scope for the values of this enum."""
        return ["enums", self.name]

    # Lookup ------------------------------------------------------------------
    def lookup(self, key: Any) -> Value | None:
        """Return the value for ``key`` (string, number or Value), or ``None``."""
        if key is None:
            return None
        return self._values.get(value_of(key))

    def __getitem__(self, key: Any) -> Value | None:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        return key is not None and value_of(key) in self._values

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self._values)

    def definitions(self) -> list[str | dict[str, str]]:
        """Raw definitions in the enum file layout (inverse of construction)."""
        return [
            {"value": v.value, **v.formats} if v.formats else v.value
            for v in self.values
        ]

    def __repr__(self) -> str:
        return f"<Enum {self.name}: [{', '.join(self._values)}]>"

    # Derivation --------------------------------------------------------------
    def dup(self) -> Enum:
        """Return a copy with freshly owned values."""
        return Enum(self.name, self.values, translator=self.translator)

    def without(self, *values: Any) -> Enum:
        """Return a copy of this enum without the given values."""
        return Enum(
            self.name,
            [v for v in self.values if not _matches_any(v, values)],
            translator=self.translator,
        )

    def only(self, *values: Any) -> Enum:
        """Return a copy of this enum holding only the given values."""
        return Enum(
            self.name,
            [v for v in self.values if _matches_any(v, values)],
            translator=self.translator,
        )

    def extend(self, *values: Any) -> Enum:
        """Add values to this enum in place and return it."""
        for value in values:
            self._add_value(value)
        return self

    # Formats -----------------------------------------------------------------
    def value_with_format(self, format: Any, search: Any) -> Value | None:
        """Find the first value whose ``format`` representation equals ``search``.

        Undefined formats fall back to the canonical value, so
        ``value_with_format("anything", "one")`` finds the value ``one``.
        """
        target = value_of(search)
        return next((v for v in self.values if v.format(format) == target), None)

    def finder(self, format: Any) -> Callable[..., Value | None]:
        """Build a ``value_with_<format>`` lookup function for one format.

        The returned callable takes exactly one search argument::

            by_number = enum.finder("number")
            by_number("3")  # same as enum.value_with_format("number", "3")
        """
        format_name = value_of(format)
        method_name = f"value_with_{format_name}"

        def find(*args: Any) -> Value | None:
            if len(args) != 1:
                raise InvalidArgument(
                    f"`{method_name}' accepts one argument, {len(args)} given"
                )
            return self.value_with_format(format_name, args[0])

        find.__name__ = method_name
        return find

    # Host lookup -------------------------------------------------------------
    @staticmethod
    def find(host: Any, name: str) -> Enum | None:
        """Return the enum exposed as attribute ``name`` on ``host``, if any.

        This is a probe: any failure while reading the attribute yields ``None``.
        """
        if host is None:
            return None
        try:
            enum = getattr(host, name, None)
        except Exception:
            return None
        return enum if isinstance(enum, Enum) else None

    # Internal ----------------------------------------------------------------
    def _add_value(self, value: Any) -> Value:
        if isinstance(value, Value):
            value = value.dup(self)
        else:
            value = Value(self, value)
        self._values[value.value] = value
        return value


def _matches_any(value: Value, candidates: tuple[Any, ...]) -> bool:
    return any(value == candidate for candidate in candidates)


__all__ = ["Enum"]
