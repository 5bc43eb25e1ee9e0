"""Attach enums to attributes of ordinary classes and pydantic models.

Descriptor usage::

    class Post:
        status = EnumAttribute(registry=registry)           # enum 'statuses'
        kind = EnumAttribute(["normal", "special"])         # ad-hoc 'post_kinds'
        roles = EnumAttribute(registry=registry, flags=True)  # enum 'roles'

    post = Post()
    post.status = "draft"     # stored as registry.statuses["draft"]
    post.status = "bogus"     # kept as "bogus"; reported by validate()
    post.roles = ["admin"]    # stored as ValueList(registry.roles, ["admin"])
    Post.statuses             # the enum, also inherited by subclasses
    validate_enums(post)      # ["status: 'bogus' is not included in the list"]

Flat storage of values goes through :class:`SingleSerializer` (canonical
string) and :class:`FlagsSerializer` (``"|admin|user|"``).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from .enumeration import Enum
from .equality import matches
from .errors import InvalidArgument
from .registry import Registry
from .support import value_of
from .value import Value
from .value_list import ValueList

ENUM_ATTRIBUTES = "__enum_attributes__"

logger = logging.getLogger("enum_x.attributes")


# Inflection ------------------------------------------------------------------
def pluralize(word: str) -> str:
    """Pluralize an English attribute name (``status`` -> ``statuses``)."""
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


def underscore(name: str) -> str:
    """Convert a CamelCase class name to snake_case (``BlogPost`` -> ``blog_post``)."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


# Coercion --------------------------------------------------------------------
def coerce_value(enum: Enum, raw: Any) -> Value | Any:
    """Resolve ``raw`` to a value of ``enum``; unknown input passes through."""
    if raw is None or isinstance(raw, Value):
        return raw
    found = enum.lookup(raw)
    return found if found is not None else raw


def coerce_flags(enum: Enum, raw: Any) -> ValueList | None:
    """Resolve ``raw`` (one item or many) to a :class:`ValueList` of ``enum``."""
    if raw is None or isinstance(raw, ValueList):
        return raw
    return ValueList(enum, raw)


# Serializers -----------------------------------------------------------------
class SingleSerializer:
    """Store a single value as its canonical string."""

    def __init__(self, enum: Enum):
        self.enum = enum

    def load(self, text: str | None) -> Value | None:
        return self.enum.lookup(text)

    def dump(self, value: Any) -> str | None:
        return None if value is None else value_of(value)


class FlagsSerializer:
    """Store a value list as a pipe-delimited string, e.g. ``"|admin|user|"``."""

    def __init__(self, enum: Enum):
        self.enum = enum

    def load(self, text: str | None) -> ValueList:
        parts = "" if text is None else str(text)
        return ValueList(self.enum, [p for p in parts.split("|") if p.strip()])

    def dump(self, values: Any) -> str:
        if isinstance(values, str) or values is None:
            values = self.load(values)
        elif not isinstance(values, ValueList):
            values = ValueList(self.enum, values)
        return "|" + "|".join(value_of(v) for v in values) + "|"

    @staticmethod
    def like_pattern(value: Any) -> str:
        """SQL ``LIKE`` pattern matching stored lists that contain ``value``."""
        return f"%|{value_of(value)}|%"


# Descriptor ------------------------------------------------------------------
class EnumAttribute:
    """Data descriptor that coerces an attribute through an enum.

    Parameters
    ----------
    enum : Enum | str | Iterable | None
        The enum itself, a registry name, raw values for an ad-hoc enum
        named ``<owner>_<plural>``, or ``None`` to look up the pluralized
        attribute name (the attribute name itself for flags).
    registry : Registry | None
        Registry used for name lookups.
    flags : bool
        Store a :class:`ValueList` instead of a single value.
    validation : bool
        Include this attribute in :func:`validate_enums`.
    allow_blank : bool
        Accept ``None`` / empty lists during validation.
    mnemonics : bool
        Generate ``is_<value>()`` predicates on the owner class.
    """

    def __init__(
        self,
        enum: Enum | str | Iterable[Any] | None = None,
        *,
        registry: Registry | None = None,
        flags: bool = False,
        validation: bool = True,
        allow_blank: bool = True,
        mnemonics: bool = False,
    ):
        self._enum_option = enum
        self.registry = registry
        self.flags = flags
        self.validation = validation
        self.allow_blank = allow_blank
        self.mnemonics = mnemonics
        self.name = ""
        self.reader_name = ""
        self.enum: Enum | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        # Flags attributes are named in the plural already ("roles").
        self.reader_name = name if self.flags else pluralize(name)
        self.enum = self._resolve_enum(owner)

        attributes = dict(getattr(owner, ENUM_ATTRIBUTES, {}))
        attributes[name] = self
        setattr(owner, ENUM_ATTRIBUTES, attributes)

        if self.reader_name != name and self.reader_name not in vars(owner):
            setattr(owner, self.reader_name, self.enum)
        if self.mnemonics:
            define_mnemonics(owner, name, self.enum)

    def _resolve_enum(self, owner: type) -> Enum:
        option = self._enum_option
        if isinstance(option, Enum):
            return option
        if option is None or isinstance(option, str):
            enum_name = self.reader_name if option is None else option
            if self.registry is None:
                raise InvalidArgument(
                    f"a registry is required to look up enum {enum_name!r}"
                )
            enum = self.registry.lookup(enum_name)
            if enum is None:
                raise InvalidArgument(f"cannot find enum {enum_name!r}")
            return enum
        name = f"{underscore(owner.__name__)}_{self.reader_name}"
        logger.debug(
            "Creating ad-hoc enum '%s' for %s.%s", name, owner.__name__, self.name
        )
        return Enum(name, option)

    def _current_enum(self, owner: type) -> Enum:
        # Subclasses may replace the class-level enum accessor.
        found = Enum.find(owner, self.reader_name)
        return found if found is not None else self.enum

    def coerce(self, owner: type, raw: Any) -> Any:
        enum = self._current_enum(owner)
        return coerce_flags(enum, raw) if self.flags else coerce_value(enum, raw)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self.enum
        raw = instance.__dict__.get(self.name)
        return self.coerce(type(instance), raw)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = self.coerce(type(instance), value)

    @property
    def allowed_values(self) -> list[Value]:
        """Values accepted by validation."""
        return self.enum.values

    def serializer(self) -> SingleSerializer | FlagsSerializer:
        return FlagsSerializer(self.enum) if self.flags else SingleSerializer(self.enum)

    def validate(self, instance: Any) -> list[str]:
        """Return validation messages for this attribute on ``instance``."""
        if not self.validation:
            return []
        value = getattr(instance, self.name)
        allowed = self._current_enum(type(instance)).values

        if self.flags:
            if value is None or len(value) == 0:
                return [] if self.allow_blank else [f"{self.name}: can't be blank"]
            invalid = next((v for v in value if v not in allowed), None)
            if invalid is not None:
                return [f"{self.name}: {value_of(invalid)!r} is not included in the list"]
            return []

        if value is None or value == "":
            return [] if self.allow_blank else [f"{self.name}: can't be blank"]
        if value not in allowed:
            return [f"{self.name}: {value_of(value)!r} is not included in the list"]
        return []


def define_mnemonics(owner: type, attribute: str, enum: Enum) -> None:
    """Add an ``is_<value>()`` predicate to ``owner`` for every value of ``enum``.

    Predicates use case equality, so they work for single and flags attributes.
    """
    for value in enum.values:
        key = value.value

        def predicate(self, _key: str = key) -> bool:
            return matches(_key, getattr(self, attribute))

        method_name = "is_" + re.sub(r"\W", "_", key)
        predicate.__name__ = method_name
        setattr(owner, method_name, predicate)


def validate_enums(instance: Any) -> list[str]:
    """Validate every :class:`EnumAttribute` declared on ``type(instance)``."""
    issues: list[str] = []
    for attribute in getattr(type(instance), ENUM_ATTRIBUTES, {}).values():
        issues.extend(attribute.validate(instance))
    return issues


# Pydantic --------------------------------------------------------------------
def enum_type(enum: Enum, *, flags: bool = False, strict: bool = True) -> Any:
    """Annotated type coercing a pydantic field through ``enum``.

    With ``strict`` (default) values outside the enum fail validation;
    otherwise they pass through unchanged. Values serialize to their
    canonical strings (lists of them for ``flags``)::

        class Post(BaseModel):
            status: enum_type(statuses)
            roles: enum_type(roles, flags=True)
    """

    def _validate(raw: Any) -> Any:
        coerced = coerce_flags(enum, raw) if flags else coerce_value(enum, raw)
        if strict and coerced is not None:
            items = coerced if flags else [coerced]
            for item in items:
                if item not in enum.values:
                    raise ValueError(
                        f"{value_of(item)!r} is not a value of enum {enum.name}"
                    )
        return coerced

    def _serialize(value: Any) -> Any:
        if value is None:
            return None
        if flags:
            return [value_of(item) for item in value]
        return value_of(value)

    return Annotated[Any, BeforeValidator(_validate), PlainSerializer(_serialize)]


__all__ = [
    "EnumAttribute",
    "SingleSerializer",
    "FlagsSerializer",
    "coerce_value",
    "coerce_flags",
    "define_mnemonics",
    "validate_enums",
    "enum_type",
    "pluralize",
    "underscore",
]
