import importlib.metadata

from .enumeration import Enum
from .equality import matches
from .errors import (
    EnumXError,
    InvalidArgument,
    NotFound,
    TranslationMissing,
    UnsupportedQuery,
)
from .registry import Registry, SourceKind
from .value import Value
from .value_list import ValueList

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# During test collection (editable / in-tree execution) the distribution
# metadata may not yet be built. We normalise all failures to a neutral
# "0.0.0" placeholder so tests do not error during collection.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("enum-x")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Enum",
    "Value",
    "ValueList",
    "Registry",
    "SourceKind",
    "matches",
    "EnumXError",
    "InvalidArgument",
    "NotFound",
    "UnsupportedQuery",
    "TranslationMissing",
]
