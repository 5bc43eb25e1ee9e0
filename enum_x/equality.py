"""Case-equality adapter between plain identifiers and enum values.

``Value.__eq__`` already makes ``"draft" == value`` and ``match`` literal
patterns work. :func:`matches` adds the membership rule for flag lists, for
callers that branch on one pattern against either kind of attribute::

    if matches("admin", user.roles):   # ValueList -> membership
        ...
    if matches("draft", post.status):  # Value -> canonical equality
        ...
"""

from __future__ import annotations

from typing import Any

from .value import Value
from .value_list import ValueList


def matches(pattern: Any, subject: Any) -> bool:
    """Return True if ``subject`` matches the identifier ``pattern``."""
    if isinstance(subject, ValueList):
        return pattern in subject
    if isinstance(subject, Value):
        return subject == pattern
    return pattern == subject


__all__ = ["matches"]
