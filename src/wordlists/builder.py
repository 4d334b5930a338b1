"""Builders producing indexed stores from other sources."""

from __future__ import annotations

import logging
from pathlib import Path

from wordlists import db as _db
from wordlists.collation import Collator
from wordlists.exceptions import UnknownListError
from wordlists.models import MetadataKey, WordlistMetadata
from wordlists.wordlist import TextWordlist
from wordlists.words import is_word

logger = logging.getLogger(__name__)


def build_store(
    source: str | Path,
    destination: str | Path,
    *,
    overwrite: bool = False,
) -> int:
    """Convert the text list at *source* into a store at *destination*.

    Returns the number of words written.
    """
    source = Path(source)
    wordlist = TextWordlist.from_file(source.stem.lower(), source)
    rows = [
        (type_, value)
        for type_, value in wordlist.metadata_rows()
        if type_ != MetadataKey.ENCODING.value
    ]
    count = _db.create_store(
        destination, wordlist, rows, wordlist.collator, overwrite=overwrite
    )
    logger.info("Wrote %d word(s) from %s to %s", count, source, destination)
    return count


def build_store_from_wordnet(
    specifier: str,
    destination: str | Path,
    *,
    locale: str | None = None,
    overwrite: bool = False,
) -> int:
    """Export the lemmas of an installed WordNet lexicon as a store.

    *specifier* is a lexicon id or ``id:version`` known to ``wn``. The
    lexicon's language is used as locale unless *locale* is given.
    Lemmas that are not valid words are skipped.

    Raises:
        UnknownListError: The lexicon is not installed.
    """
    import wn

    try:
        lexicons = wn.lexicons(lexicon=specifier)
    except wn.Error as e:
        raise UnknownListError(f"Lexicon not found in wn: {specifier!r}") from e
    if not lexicons:
        raise UnknownListError(f"Lexicon not found in wn: {specifier!r}")
    lexicon = lexicons[0]

    metadata = WordlistMetadata(
        version=lexicon.version,
        description=lexicon.label,
        locale=locale or lexicon.language,
        license=lexicon.license,
        url=lexicon.url,
        keywords=["wordnet", lexicon.id],
    )
    collator = Collator(metadata.locale)

    lemmas: dict[str, None] = {}
    skipped = 0
    for word in wn.Wordnet(lexicon=lexicon.specifier()).words():
        lemma = str(word.lemma()).casefold()
        if is_word(lemma):
            lemmas.setdefault(lemma)
        else:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d lemma(s) that are not words", skipped)

    count = _db.create_store(
        destination, lemmas, metadata.items(), collator, overwrite=overwrite
    )
    logger.info("Wrote %d lemma(s) from %s to %s", count, specifier, destination)
    return count
