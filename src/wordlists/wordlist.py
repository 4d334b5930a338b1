"""Read-only wordlists backed by text sources or indexed stores."""

from __future__ import annotations

import logging
import re
import sqlite3
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from wordlists import db as _db
from wordlists.collation import Collator
from wordlists.encoding import (
    DEFAULT_ENCODING,
    detect_bom,
    lookup,
    same_encoding,
    to_unicode,
)
from wordlists.exceptions import (
    EncodingMismatchError,
    InvalidArgumentError,
    InvalidMetadataKeyError,
    ReadOnlyViolationError,
    UnreadableSourceError,
)
from wordlists.models import (
    BUILTIN_KEYS,
    Backend,
    MetadataKey,
    WordlistMetadata,
    resolve_key,
)
from wordlists.words import is_word

logger = logging.getLogger(__name__)

# Trailing blanks, line breaks, and the blank lines that follow them.
_LINE_BREAKS = re.compile(r"[ \t]*[\r\n]+[ \t\r\n]*")
_BLANKS = " \t\r\n"


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class Wordlist(ABC):
    """An immutable, collation-ordered list of words plus metadata.

    Wordlists support ``len()``, indexing by rank, iteration and the
    ``in`` operator. Any attempt to modify one raises
    :class:`ReadOnlyViolationError`.
    """

    def __init__(
        self,
        name: str,
        source: str | Path,
        metadata: WordlistMetadata,
        collator: Collator,
    ) -> None:
        self._name = name
        self._source = str(source)
        self._metadata = metadata
        self._collator = collator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._source!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> str:
        return self._source

    @property
    def collator(self) -> Collator:
        return self._collator

    def metadata_rows(self) -> list[tuple[str, str]]:
        """Return the parsed metadata as ``(type, value)`` rows."""
        return self._metadata.items()

    @property
    def backend(self) -> Backend:
        raise NotImplementedError

    # -- queries -----------------------------------------------------------

    @abstractmethod
    def count(self) -> int:
        """Return the number of words in the list."""

    @abstractmethod
    def _word_at(self, rank: int) -> str | None: ...

    @abstractmethod
    def find_canonical(self, word: str) -> str | None:
        """Look for *word* in the list.

        Returns the word as it appears in the list (possibly with case or
        accent differences from *word*), or ``None`` if it is absent.
        """

    def word_at(self, rank: int) -> str | None:
        """Return the word at *rank* in collation order.

        Raises:
            InvalidArgumentError: *rank* is not an integer.
        """
        if not isinstance(rank, int) or isinstance(rank, bool):
            raise InvalidArgumentError(
                f"An integer was expected, got {type(rank).__name__}"
            )
        if rank < 0:
            return None
        return self._word_at(rank)

    def contains(self, word: str) -> bool:
        """Test whether *word* is in the list, using collation equality."""
        if not isinstance(word, str):
            return False
        return self.find_canonical(word) is not None

    def get_metadata(self, key: str | MetadataKey) -> Any:
        """Return the metadata stored under *key*.

        ``name`` and ``source`` are always available. Single-valued keys
        return a string or ``None``; multi-valued keys return a (possibly
        empty) tuple.

        Raises:
            InvalidMetadataKeyError: *key* is not a recognized key.
        """
        mkey = resolve_key(key)
        if mkey is MetadataKey.NAME:
            return self._name
        if mkey is MetadataKey.SOURCE:
            return self._source
        return self._metadata.get(mkey)

    # -- mutation (always refused) ----------------------------------------

    def set_at(self, rank: Any, value: Any) -> None:
        raise ReadOnlyViolationError(f"Wordlist {self._name!r} is read-only")

    def remove_at(self, rank: Any) -> None:
        raise ReadOnlyViolationError(f"Wordlist {self._name!r} is read-only")

    # -- container protocol ------------------------------------------------

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, rank: int) -> str | None:
        return self.word_at(rank)

    def __setitem__(self, rank: Any, value: Any) -> None:
        self.set_at(rank, value)

    def __delitem__(self, rank: Any) -> None:
        self.remove_at(rank)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        for rank in range(self.count()):
            word = self._word_at(rank)
            if word is not None:
                yield word

    def close(self) -> None:
        """Release resources held by the list (no-op by default)."""


# ---------------------------------------------------------------------------
# Text-source backend
# ---------------------------------------------------------------------------

def parse_text_source(data: bytes) -> tuple[WordlistMetadata, list[str]]:
    """Parse the raw content of a text list.

    Returns the metadata declared in the header (with the resolved
    encoding under ``encoding``) and the valid, case-folded words in
    source order.

    Raises:
        EncodingMismatchError: The BOM contradicts the declared encoding.
        UnsupportedEncodingError: The declared encoding has no codec.
    """
    bom_encoding, data = detect_bom(data)
    if bom_encoding is not None:
        text = to_unicode(data, bom_encoding)
    else:
        # Bytes passed through one code point each until the
        # encoding is known.
        text = data.decode("latin-1")

    text = _LINE_BREAKS.sub("\n", text).strip(_BLANKS)
    lines = text.split("\n") if text else []

    header: list[tuple[str, str]] = []
    while lines and lines[0].startswith("#"):
        key, sep, value = lines[0][1:].partition(":")
        if not sep:
            break
        lines.pop(0)
        header.append((key.strip().lower(), value.strip()))

    declared = next((v for k, v in header if k == MetadataKey.ENCODING.value), None)
    encoding = _resolve_encoding(bom_encoding, declared)
    if bom_encoding is None:
        header = [(k, to_unicode(v, encoding)) for k, v in header]
        lines = [to_unicode(line, encoding) for line in lines]

    metadata = WordlistMetadata()
    for key, value in header:
        try:
            mkey = resolve_key(key)
        except InvalidMetadataKeyError:
            logger.debug("Ignoring unknown header key %r", key)
            continue
        if mkey in BUILTIN_KEYS:
            logger.debug("Ignoring reserved header key %r", key)
            continue
        metadata.set(mkey, value)
    metadata.encoding = encoding

    words = []
    rejected = 0
    for line in lines:
        word = line.casefold()
        if is_word(word):
            words.append(word)
        else:
            rejected += 1
    if rejected:
        logger.debug("Discarded %d malformed line(s)", rejected)
    return metadata, words


def _resolve_encoding(bom_encoding: str | None, declared: str | None) -> str:
    if bom_encoding is not None and declared is not None:
        if not same_encoding(bom_encoding, declared):
            raise EncodingMismatchError(
                f"Byte-order mark says {bom_encoding}, "
                f"header says {declared}"
            )
    encoding = bom_encoding or declared or DEFAULT_ENCODING
    lookup(encoding)
    return encoding


class TextWordlist(Wordlist):
    """Wordlist parsed from a text file and held in memory.

    Words are sorted once with the list's collator; lookups are binary
    searches over that order.
    """

    def __init__(
        self,
        name: str,
        source: str | Path,
        metadata: WordlistMetadata,
        collator: Collator,
        words: list[str],
    ) -> None:
        super().__init__(name, source, metadata, collator)
        collator.sort(words)
        self._words = tuple(words)

    @classmethod
    def from_bytes(
        cls, name: str, data: bytes, source: str | Path = "<memory>"
    ) -> TextWordlist:
        metadata, words = parse_text_source(data)
        collator = Collator(metadata.locale)
        return cls(name, source, metadata, collator, words)

    @classmethod
    def from_file(cls, name: str, path: str | Path) -> TextWordlist:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise UnreadableSourceError(f"Cannot read {path}: {e}") from e
        wordlist = cls.from_bytes(name, data, path)
        logger.debug("Loaded %d word(s) from %s", len(wordlist._words), path)
        return wordlist

    @property
    def backend(self) -> Backend:
        return Backend.TEXT

    def count(self) -> int:
        return len(self._words)

    def _word_at(self, rank: int) -> str | None:
        if rank >= len(self._words):
            return None
        return self._words[rank]

    def find_canonical(self, word: str) -> str | None:
        if not is_word(word):
            return None
        compare = self._collator.compare
        low, high = 0, len(self._words)
        while low < high:
            middle = (low + high) // 2
            candidate = self._words[middle]
            order = compare(candidate, word)
            if order < 0:
                low = middle + 1
            elif order > 0:
                high = middle
            else:
                return candidate
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


# ---------------------------------------------------------------------------
# Indexed-store backend
# ---------------------------------------------------------------------------

class StoreWordlist(Wordlist):
    """Wordlist backed by an SQLite store.

    Only metadata is loaded in memory; counting, rank access and lookups
    are delegated to the store, which keeps the words ordered by a
    precomputed sort key.
    """

    def __init__(self, name: str, path: str | Path) -> None:
        conn = _db.connect_readonly(path)
        try:
            metadata = self._read_metadata(conn)
            collator = Collator(metadata.locale)
        except BaseException:
            conn.close()
            raise
        super().__init__(name, path, metadata, collator)
        self._conn = conn
        self._lock = threading.Lock()

    @staticmethod
    def _read_metadata(conn: sqlite3.Connection) -> WordlistMetadata:
        metadata = WordlistMetadata()
        try:
            rows = conn.execute(_db.METADATA_QUERY).fetchall()
        except sqlite3.DatabaseError as e:
            raise UnreadableSourceError(f"Cannot read metadata: {e}") from e
        for row in rows:
            try:
                mkey = resolve_key(row["type"])
            except InvalidMetadataKeyError:
                logger.debug("Ignoring unknown metadata type %r", row["type"])
                continue
            if mkey in BUILTIN_KEYS or row["value"] is None:
                continue
            metadata.set(mkey, row["value"])
        return metadata

    @property
    def backend(self) -> Backend:
        return Backend.STORE

    def _fetch_value(self, query: str, params: tuple = ()) -> Any:
        with self._lock:
            row = self._conn.execute(query, params).fetchone()
        return None if row is None else row[0]

    def count(self) -> int:
        return int(self._fetch_value(_db.COUNT_QUERY))

    def _word_at(self, rank: int) -> str | None:
        # OFFSET only takes 64-bit integers.
        if rank >= self.count():
            return None
        value = self._fetch_value(_db.RANK_QUERY, (rank,))
        return value or None

    def find_canonical(self, word: str) -> str | None:
        if not is_word(word):
            return None
        key = self._collator.sort_key(word)
        return self._fetch_value(_db.KEY_QUERY, (key,))

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            rows = self._conn.execute(_db.ITER_QUERY).fetchall()
        return (row[0] for row in rows)

    def close(self) -> None:
        self._conn.close()


def open_wordlist(
    name: str, path: str | Path, backend: Backend | None = None
) -> Wordlist:
    """Open the list stored at *path*, choosing the backend by suffix."""
    if backend is None:
        backend = Backend.for_path(path)
    if backend is Backend.TEXT:
        return TextWordlist.from_file(name, path)
    if backend is Backend.STORE:
        return StoreWordlist(name, path)
    raise UnreadableSourceError(f"Unrecognized wordlist file: {path}")
