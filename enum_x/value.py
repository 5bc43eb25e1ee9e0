"""A single enumeration member: a canonical string plus named formats.

Values compare *loosely* with anything whose string form matches the
canonical string, so they can be used directly wherever a plain string
would be expected::

    status = statuses["draft"]
    status == "draft"           # True
    "draft" == status           # True (reflected comparison)
    status in {"draft", "sent"} # True (hash of the canonical string)

    match status:
        case "draft":
            ...

Strict, owner-scoped identity is available through :meth:`Value.eql`.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_core import core_schema

from .errors import InvalidArgument, UnsupportedQuery
from .support import loose_float, loose_int, value_of
from .translation import humanize, resolve_translator

if TYPE_CHECKING:  # pragma: no cover
    from .enumeration import Enum


class Value:
    """One member of an :class:`~enum_x.enumeration.Enum`.

    Parameters
    ----------
    enum : Enum
        The owning enum. Required.
    value : Mapping | Any
        Either a scalar (stringified to become the canonical value) or a
        mapping holding a ``value`` entry plus any number of named formats,
        e.g. ``{"value": "returned", "legacy": "back"}``.
    """

    __slots__ = ("_enum", "_value", "_formats")

    def __init__(self, enum: Enum, value: Mapping[Any, Any] | Any):
        if enum is None:
            raise InvalidArgument("enum required")
        self._enum = enum
        self._formats: dict[str, str] = {}

        if isinstance(value, Mapping):
            self._process_mapping(value)
        else:
            self._value = value_of(value)

        if not self._value:
            raise InvalidArgument("enum values must not be blank")

    def _process_mapping(self, mapping: Mapping[Any, Any]) -> None:
        data = {value_of(key): item for key, item in mapping.items()}
        raw = data.pop("value", None)
        if raw is None:
            raise InvalidArgument(
                "key 'value' is required when a mapping value is specified"
            )
        self._value = value_of(raw)

        # Every other entry is a named format.
        for key, item in data.items():
            self._formats[key] = value_of(item)

    # Attributes --------------------------------------------------------------
    @property
    def enum(self) -> Enum:
        """The enum defining this value."""
        return self._enum

    @property
    def value(self) -> str:
        """The canonical string value."""
        return self._value

    @property
    def formats(self) -> dict[str, str]:
        """Explicitly defined formats (a copy)."""
        return dict(self._formats)

    @property
    def symbol(self) -> str:
        """The canonical value as an interned identifier."""
        return sys.intern(self._value)

    # Conversions -------------------------------------------------------------
    def format(self, name: Any) -> str:
        """Return the value in format ``name``, falling back to the canonical value.

        Any format name is accepted; undeclared formats simply yield the
        canonical string.
        """
        return self._formats.get(value_of(name), self._value)

    def to_int(self) -> int:
        return loose_int(self._value)

    def to_float(self) -> float:
        return loose_float(self._value)

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"<Value {self._enum.name}:{self._value}>"

    # Mnemonics ---------------------------------------------------------------
    def has_mnemonic(self, name: Any) -> bool:
        """Return True if ``name`` is a value of the owning enum."""
        return value_of(name) in self._enum

    def mnemonic(self, name: Any) -> bool:
        """Return whether this value is the enum option ``name``.

        Raises:
            UnsupportedQuery: If the owning enum does not define ``name``.
        """
        key = value_of(name)
        if key not in self._enum:
            raise UnsupportedQuery(
                f"enum {self._enum.name} does not define a value {key!r}"
            )
        return self == key

    # Duplication -------------------------------------------------------------
    def dup(self, enum: Enum | None = None) -> Value:
        """Return a copy of this value, optionally owned by another enum."""
        owner = enum if enum is not None else self._enum
        return Value(owner, {**self._formats, "value": self._value})

    # Translation -------------------------------------------------------------
    def translate(self, **options: Any) -> str:
        """Localized text for this value, defaulting to its humanized form."""
        translator = resolve_translator(getattr(self._enum, "translator", None))
        kwargs = {
            **options,
            "scope": self._enum.i18n_scope,
            "default": humanize(self._value).lower(),
        }
        return translator.translate(self._value, **kwargs)

    def translate_strict(self, **options: Any) -> str:
        """Localized text for this value.

        Raises:
            TranslationMissing: If no translation is available.
        """
        translator = resolve_translator(getattr(self._enum, "translator", None))
        kwargs = {**options, "scope": self._enum.i18n_scope, "raise_error": True}
        return translator.translate(self._value, **kwargs)

    # Equality ----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        return self._value == value_of(other)

    def eql(self, other: object) -> bool:
        """Strict equality: same owning enum and same canonical value."""
        if other is None:
            return False
        return (
            isinstance(other, Value)
            and other._enum is self._enum
            and other._value == self._value
        )

    def __hash__(self) -> int:
        return hash(self._value)

    # Serialization -----------------------------------------------------------
    def as_json(self) -> str:
        return self._value

    def to_json(self) -> str:
        return json.dumps(self._value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
        return {"type": "string"}


def _represent_value(dumper, data: Value):
    """Represent a Value as its bare canonical string (no tag)."""
    return dumper.represent_scalar("tag:yaml.org,2002:str", data.value)


yaml.add_representer(Value, _represent_value, Dumper=yaml.SafeDumper)
yaml.add_representer(Value, _represent_value, Dumper=yaml.Dumper)


__all__ = ["Value"]
