"""SQLite connection, DDL and writer for indexed wordlist stores."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from operator import itemgetter
from pathlib import Path

from wordlists.collation import Collator
from wordlists.exceptions import UnreadableSourceError

# ---------------------------------------------------------------------------
# DDL statements
# ---------------------------------------------------------------------------

_DDL = """
CREATE TABLE IF NOT EXISTS metadata (
    id INTEGER PRIMARY KEY,
    type TEXT NOT NULL,
    value TEXT,
    insertion_order INTEGER NOT NULL DEFAULT 0
);
CREATE INDEX IF NOT EXISTS metadata_type_index ON metadata (type, insertion_order);

CREATE TABLE IF NOT EXISTS words (
    value TEXT NOT NULL,
    sortkey BLOB NOT NULL
);
CREATE INDEX IF NOT EXISTS words_sortkey_index ON words (sortkey);
"""

_REQUIRED_TABLES = frozenset({"metadata", "words"})

# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

METADATA_QUERY = (
    "SELECT type, value FROM metadata "
    "ORDER BY type ASC, insertion_order ASC, id ASC"
)
COUNT_QUERY = "SELECT COUNT(1) FROM words"
RANK_QUERY = "SELECT value FROM words ORDER BY sortkey ASC, rowid ASC LIMIT 1 OFFSET ?"
KEY_QUERY = "SELECT value FROM words WHERE sortkey = ? LIMIT 1"
ITER_QUERY = "SELECT value FROM words ORDER BY sortkey ASC, rowid ASC"


def connect_readonly(db_path: str | Path) -> sqlite3.Connection:
    """Open an existing store read-only and check its layout.

    Raises:
        UnreadableSourceError: The file is missing, is not an SQLite
            database, or lacks the ``metadata``/``words`` tables.
    """
    path = Path(db_path)
    if not path.is_file():
        raise UnreadableSourceError(f"No such store: {path}")
    uri = path.resolve().as_uri() + "?mode=ro"
    try:
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
    except sqlite3.Error as e:
        raise UnreadableSourceError(f"Cannot open store {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    try:
        check_layout(conn)
    except BaseException:
        conn.close()
        raise
    return conn


def check_layout(conn: sqlite3.Connection) -> None:
    """Verify the store provides the tables the reader needs."""
    try:
        rows = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        ).fetchall()
    except sqlite3.DatabaseError as e:
        raise UnreadableSourceError(f"Not a wordlist store: {e}") from e
    missing = _REQUIRED_TABLES - {row[0] for row in rows}
    if missing:
        raise UnreadableSourceError(
            f"Not a wordlist store (missing tables: {', '.join(sorted(missing))})"
        )


def create_store(
    db_path: str | Path,
    words: Iterable[str],
    metadata: Iterable[tuple[str, str]],
    collator: Collator,
    *,
    overwrite: bool = False,
) -> int:
    """Write a new store at *db_path*.

    *metadata* is a sequence of ``(type, value)`` rows; repeated types
    keep their relative order. Words are stored with their sort key and
    inserted in sort-key order. Returns the number of words written.
    """
    path = Path(db_path)
    if path.exists():
        if not overwrite:
            raise FileExistsError(f"Store already exists: {path}")
        path.unlink()

    rows = sorted(
        ((word, collator.sort_key(word)) for word in words),
        key=itemgetter(1),
    )
    order: dict[str, int] = {}
    conn = sqlite3.connect(str(path))
    try:
        with conn:
            conn.executescript(_DDL)
            for type_, value in metadata:
                position = order.get(type_, 0)
                order[type_] = position + 1
                conn.execute(
                    "INSERT INTO metadata (type, value, insertion_order) "
                    "VALUES (?, ?, ?)",
                    (type_, value, position),
                )
            conn.executemany(
                "INSERT INTO words (value, sortkey) VALUES (?, ?)",
                rows,
            )
    finally:
        conn.close()
    return len(rows)
