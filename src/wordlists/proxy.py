"""Handles given out by :class:`~wordlists.manager.WordlistManager`."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from wordlists.exceptions import NotCheckedOutError, ProxyCopyError

if TYPE_CHECKING:
    from wordlists.collation import Collator
    from wordlists.manager import WordlistManager
    from wordlists.models import Backend, MetadataKey
    from wordlists.wordlist import Wordlist


class WordlistProxy:
    """Read-only view of a shared wordlist.

    The proxy offers the same queries as :class:`~wordlists.wordlist.Wordlist`
    but keeps the list itself out of reach, so the manager can count the
    borrowers of each list. The list is released exactly once: on
    :meth:`release`, when leaving a ``with`` block, or when the proxy is
    garbage collected. Proxies cannot be copied; check the list out again
    to get another one.
    """

    __slots__ = ("_list", "_finalizer", "__weakref__")

    def __init__(self, manager: WordlistManager, wordlist: Wordlist) -> None:
        self._list = wordlist
        self._finalizer = weakref.finalize(self, manager.release, wordlist)

    def __repr__(self) -> str:
        state = "released" if self.released else "active"
        return f"<WordlistProxy {self._list.name!r} ({state})>"

    # -- lifecycle ---------------------------------------------------------

    @property
    def released(self) -> bool:
        return not self._finalizer.alive

    def release(self) -> None:
        """Give the list back to its manager. Further calls do nothing."""
        self._finalizer()

    def __enter__(self) -> WordlistProxy:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.release()

    def __copy__(self) -> WordlistProxy:
        raise ProxyCopyError("Copying a wordlist handle is forbidden")

    def __deepcopy__(self, memo: dict) -> WordlistProxy:
        raise ProxyCopyError("Copying a wordlist handle is forbidden")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise ProxyCopyError("Wordlist handles cannot be pickled")

    @property
    def _wordlist(self) -> Wordlist:
        if not self._finalizer.alive:
            raise NotCheckedOutError(
                f"Handle on {self._list.name!r} was already released"
            )
        return self._list

    # -- forwarded queries -------------------------------------------------

    @property
    def name(self) -> str:
        return self._list.name

    @property
    def backend(self) -> Backend:
        return self._wordlist.backend

    @property
    def collator(self) -> Collator:
        return self._wordlist.collator

    def count(self) -> int:
        return self._wordlist.count()

    def word_at(self, rank: int) -> str | None:
        return self._wordlist.word_at(rank)

    def contains(self, word: str) -> bool:
        return self._wordlist.contains(word)

    def find_canonical(self, word: str) -> str | None:
        return self._wordlist.find_canonical(word)

    def get_metadata(self, key: str | MetadataKey) -> Any:
        return self._wordlist.get_metadata(key)

    def set_at(self, rank: Any, value: Any) -> None:
        self._wordlist.set_at(rank, value)

    def remove_at(self, rank: Any) -> None:
        self._wordlist.remove_at(rank)

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, rank: int) -> str | None:
        return self._wordlist[rank]

    def __setitem__(self, rank: Any, value: Any) -> None:
        self.set_at(rank, value)

    def __delitem__(self, rank: Any) -> None:
        self.remove_at(rank)

    def __contains__(self, word: object) -> bool:
        return word in self._wordlist

    def __iter__(self) -> Iterator[str]:
        return iter(self._wordlist)
