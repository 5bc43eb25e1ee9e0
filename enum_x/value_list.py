"""Ordered multi-value collection used for flag-style attributes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

import yaml
from pydantic_core import core_schema

from .support import is_scalar, value_of
from .value import Value

if TYPE_CHECKING:  # pragma: no cover
    from .enumeration import Enum


class ValueList(Sequence):
    """A list of values resolved against one enum.

    Each raw item is looked up indifferently in ``enum``; items without a
    matching value are kept exactly as given so that validation further up
    can report them. Order and duplicates are preserved.
    """

    def __init__(self, enum: Enum, values: Any = None):
        self._enum = enum
        if values is None:
            raw: list[Any] = []
        elif is_scalar(values):
            raw = [values]
        else:
            raw = list(values)
        self._values: list[Value | Any] = [self._resolve(item) for item in raw]

    def _resolve(self, item: Any) -> Value | Any:
        found = self._enum.lookup(item)
        return found if found is not None else item

    # Attributes --------------------------------------------------------------
    @property
    def enum(self) -> Enum:
        return self._enum

    @property
    def values(self) -> list[Value | Any]:
        """The resolved items (a copy)."""
        return list(self._values)

    # Sequence protocol -------------------------------------------------------
    @overload
    def __getitem__(self, index: int) -> Value | Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Value | Any]: ...

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value | Any]:
        return iter(self._values)

    # Queries -----------------------------------------------------------------
    def by_name(self, name: Any) -> Value | Any | None:
        """Return the first item whose string form equals ``name``."""
        key = value_of(name)
        return next((item for item in self._values if value_of(item) == key), None)

    def __contains__(self, name: object) -> bool:
        key = value_of(name)
        return any(value_of(item) == key for item in self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, list | tuple):
            return self._values == list(other)
        if isinstance(other, ValueList):
            return self._values == other._values
        if isinstance(other, Value):
            return self._values == [other]
        return False

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return ", ".join(value_of(item) for item in self._values)

    def __repr__(self) -> str:
        return f"<ValueList {self._enum.name}: [{str(self)}]>"

    # Serialization -----------------------------------------------------------
    def as_json(self) -> list[str]:
        return [value_of(item) for item in self._values]

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda items: items.as_json(),
                return_schema=core_schema.list_schema(core_schema.str_schema()),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
        return {"type": "array", "items": {"type": "string"}}


def _represent_value_list(dumper, data: ValueList):
    return dumper.represent_list(data.as_json())


yaml.add_representer(ValueList, _represent_value_list, Dumper=yaml.SafeDumper)
yaml.add_representer(ValueList, _represent_value_list, Dumper=yaml.Dumper)


__all__ = ["ValueList"]
