"""Exception hierarchy for enum definition, lookup and translation."""

from __future__ import annotations


class EnumXError(Exception):
    """Base class for all enum_x errors."""


class InvalidArgument(EnumXError, ValueError):
    """Raised for malformed construction input or wrong call arity."""


class NotFound(EnumXError, AttributeError):
    """Raised when a bare-name registry access resolves to no enum."""


class UnsupportedQuery(EnumXError, AttributeError):
    """Raised for queries that do not apply to the receiver.

    A mnemonic query for a name the owning enum does not define, or a
    conversion-style attribute access on a registry.
    """


class TranslationMissing(EnumXError, KeyError):
    """Raised by strict translation when no localized text exists."""

    def __init__(self, key: str, scope: list[str] | tuple[str, ...], locale: str):
        self.key = key
        self.scope = list(scope)
        self.locale = locale
        super().__init__(f"translation missing: {locale}.{'.'.join([*self.scope, key])}")

    def __str__(self) -> str:  # KeyError quotes its argument otherwise
        return self.args[0]


__all__ = [
    "EnumXError",
    "InvalidArgument",
    "NotFound",
    "UnsupportedQuery",
    "TranslationMissing",
]
