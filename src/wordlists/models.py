"""Domain model dataclasses and enums for wordlists."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wordlists.exceptions import InvalidMetadataKeyError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class MetadataKey(str, Enum):
    """Keys accepted by :meth:`Wordlist.get_metadata`."""

    NAME = "name"
    SOURCE = "source"
    VERSION = "version"
    DESCRIPTION = "description"
    AUTHORS = "authors"
    LOCALE = "locale"
    LICENSE = "license"
    URL = "url"
    KEYWORDS = "keywords"
    ENCODING = "encoding"


class Backend(str, Enum):
    """Storage backends a list can be loaded from."""

    TEXT = "text"
    STORE = "store"

    @property
    def suffix(self) -> str:
        return _BACKEND_SUFFIXES[self]

    @classmethod
    def for_path(cls, path: Any) -> Backend | None:
        """Return the backend handling *path*, judged by its suffix."""
        name = str(path).lower()
        for backend, suffix in _BACKEND_SUFFIXES.items():
            if name.endswith(suffix):
                return backend
        return None


_BACKEND_SUFFIXES = {
    Backend.TEXT: ".txt",
    Backend.STORE: ".sqlite",
}

# Keys injected by the wordlist itself rather than parsed from the source.
BUILTIN_KEYS = frozenset({MetadataKey.NAME, MetadataKey.SOURCE})

MULTI_VALUED_KEYS = frozenset({MetadataKey.AUTHORS, MetadataKey.KEYWORDS})

_KEY_ALIASES = {
    "author": MetadataKey.AUTHORS,
    "keyword": MetadataKey.KEYWORDS,
    "licence": MetadataKey.LICENSE,
    "file": MetadataKey.SOURCE,
    "sourcelocation": MetadataKey.SOURCE,
}


def resolve_key(key: str | MetadataKey) -> MetadataKey:
    """Map a metadata key or one of its aliases to a :class:`MetadataKey`.

    Raises:
        InvalidMetadataKeyError: *key* is not recognized.
    """
    if isinstance(key, MetadataKey):
        return key
    if not isinstance(key, str):
        raise InvalidMetadataKeyError(f"Invalid metadata type {key!r}")
    normalized = key.strip().lower()
    if normalized in _KEY_ALIASES:
        return _KEY_ALIASES[normalized]
    try:
        return MetadataKey(normalized)
    except ValueError:
        raise InvalidMetadataKeyError(
            f"Invalid metadata type {key!r}"
        ) from None


# ---------------------------------------------------------------------------
# Metadata record
# ---------------------------------------------------------------------------

@dataclass
class WordlistMetadata:
    """Metadata parsed from a list source.

    Single-valued fields are ``None`` when the source does not provide
    them; multi-valued fields keep the source order.
    """

    version: str | None = None
    description: str | None = None
    authors: list[str] = field(default_factory=list)
    locale: str | None = None
    license: str | None = None
    url: str | None = None
    keywords: list[str] = field(default_factory=list)
    encoding: str | None = None

    def set(self, key: str | MetadataKey, value: str) -> None:
        """Store *value* under *key*, appending for multi-valued keys."""
        mkey = resolve_key(key)
        if mkey in BUILTIN_KEYS:
            raise InvalidMetadataKeyError(
                f"Metadata type {mkey.value!r} cannot be set from a source"
            )
        if mkey in MULTI_VALUED_KEYS:
            getattr(self, mkey.value).append(value)
        else:
            setattr(self, mkey.value, value)

    def get(self, key: str | MetadataKey) -> str | tuple[str, ...] | None:
        mkey = resolve_key(key)
        if mkey in BUILTIN_KEYS:
            raise InvalidMetadataKeyError(
                f"Metadata type {mkey.value!r} is not stored in the record"
            )
        value = getattr(self, mkey.value)
        if mkey in MULTI_VALUED_KEYS:
            return tuple(value)
        return value

    def items(self) -> list[tuple[str, str]]:
        """Return ``(type, value)`` rows in insertion order per key."""
        rows: list[tuple[str, str]] = []
        for mkey in MetadataKey:
            if mkey in BUILTIN_KEYS:
                continue
            value = getattr(self, mkey.value)
            if mkey in MULTI_VALUED_KEYS:
                rows.extend((mkey.value, v) for v in value)
            elif value is not None:
                rows.append((mkey.value, value))
        return rows
