"""Key normalization and loose numeric parsing shared by the value model.

Every mapping boundary (enum construction, lookup, registry storage)
funnels keys through :func:`value_of`, so strings, integers, ``Value``
instances and stdlib enum members all compare as one string form.
"""

from __future__ import annotations

import enum as _stdlib_enum
import re
from collections.abc import Iterable, Mapping
from typing import Any

# Leading numeric prefix, digits may be grouped with underscores ("1_000").
_INT_PREFIX = re.compile(r"\s*([+-]?\d+(?:_\d+)*)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+)?)"
)


def value_of(value: Any) -> str:
    """Return the string key for a raw value, enum value or stdlib enum member."""
    if isinstance(value, _stdlib_enum.Enum):
        return str(value.value)
    if isinstance(value, bytes):
        # Undecodable bytes keep a key that never matches a defined value.
        return value.decode("utf-8", errors="surrogateescape")
    return str(value)


def is_scalar(value: Any) -> bool:
    """Return True when ``value`` must be wrapped rather than iterated.

    Strings, bytes and mappings are iterable but represent one raw value.
    """
    if isinstance(value, str | bytes | Mapping):
        return True
    return not isinstance(value, Iterable)


def loose_int(text: str) -> int:
    """Parse the leading integer of ``text``; ``0`` when there is none.

    >>> loose_int("12abc"), loose_int("abc"), loose_int(" -3")
    (12, 0, -3)
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    return int(match.group(1).replace("_", ""))


def loose_float(text: str) -> float:
    """Parse the leading decimal number of ``text``; ``0.0`` when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(1).replace("_", ""))


__all__ = ["value_of", "is_scalar", "loose_int", "loose_float"]
