"""Shared test fixtures for wordlists."""

import codecs

import pytest

from wordlists import WordlistManager
from wordlists import db

# Sample lists, keyed by file name. Words are deliberately out of order.
SAMPLES = {
    "utf-8.txt": "# locale: fr_FR\nsaoûl\népithète\nlà\n".encode("utf-8"),
    "iso-8859-1.txt": (
        "# locale: fr\n# encoding: ISO-8859-1\npère\nça\nouïe\n"
    ).encode("iso-8859-1"),
    "iso-8859-15.txt": (
        "# locale: fr\n# encoding: ISO-8859-15\nsœur\nété\noù\n"
    ).encode("iso-8859-15"),
    "utf-16be.txt": codecs.BOM_UTF16_BE
    + "# locale: fr\nmère\nbalançoire\ndégénère\n".encode("utf-16-be"),
    "utf-16le.txt": codecs.BOM_UTF16_LE
    + "# locale: fr\r\nphénomène\r\ndû\r\nambigü\r\n".encode("utf-16-le"),
}


@pytest.fixture
def lists_dir(tmp_path):
    """Directory holding the sample text lists."""
    directory = tmp_path / "lists"
    directory.mkdir()
    for filename, data in SAMPLES.items():
        (directory / filename).write_bytes(data)
    return directory


@pytest.fixture
def store_path(tmp_path):
    """An indexed store with a few French words and metadata."""
    from wordlists import Collator

    path = tmp_path / "store" / "animaux.sqlite"
    path.parent.mkdir()
    db.create_store(
        path,
        ["zèbre", "âne", "Éléphant", "chat", "castor"],
        [
            ("locale", "fr_FR"),
            ("version", "1.2"),
            ("author", "Alice"),
            ("author", "Bob"),
            ("keyword", "animals"),
            ("description", "Some animals"),
            ("colour", "blue"),
        ],
        Collator("fr_FR"),
    )
    return path


@pytest.fixture
def manager(lists_dir):
    """Manager with the sample list directory registered."""
    mgr = WordlistManager()
    mgr.register_path(lists_dir)
    return mgr
