"""Recognition of (composed) words."""

from __future__ import annotations

from typing import Any

import regex

# A "word" is a run of Unicode letters/numbers plus a few extra characters,
# optionally followed by a single space and another such run.
WORD_FILTER = regex.compile(
    r"""
    [\p{N}\p{L}\-.()_']+
    (?:\ [\p{N}\p{L}\-.()_']+)?
    """,
    regex.VERBOSE,
)


def is_word(candidate: Any) -> bool:
    """Return True if *candidate* is a well-formed word.

    The definition is rather broad: ``"Fo'o. B4-r_"`` is a word, while
    ``""``, ``"foo  bar"`` and ``"a b c"`` are not. Non-string input is
    never a word.
    """
    if not isinstance(candidate, str):
        return False
    return WORD_FILTER.fullmatch(candidate) is not None
