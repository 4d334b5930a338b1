"""WordlistManager: discovery, policy and reference-counted sharing of lists."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Union

from wordlists.exceptions import NotCheckedOutError, UnknownListError
from wordlists.models import Backend
from wordlists.policy import Matcher, compile_policy, filter_lists
from wordlists.proxy import WordlistProxy
from wordlists.registry import PathRegistry
from wordlists.wordlist import Wordlist, open_wordlist

if TYPE_CHECKING:
    from wordlists.config import WordlistsConfig

logger = logging.getLogger(__name__)

PolicySpec = Union[str, Iterable[str], None]


@dataclass
class _RefEntry:
    instance: Wordlist
    counter: int = 1


class WordlistManager:
    """Shares wordlists between the modules that need them.

    Lists are discovered in the registered directories, filtered through
    the policy, and opened on first checkout. Later checkouts of the same
    list reuse the open instance; it is closed once every handle has been
    released.

    *policy* is either a policy (a space-separated string or a list of
    patterns) or a callable returning one. A callable is consulted again
    whenever the discovery cache is rebuilt.
    """

    def __init__(
        self,
        policy: PolicySpec | Callable[[], PolicySpec] = None,
        *,
        backends: Iterable[Backend] = (Backend.TEXT, Backend.STORE),
    ) -> None:
        self._backends = tuple(Backend(b) for b in backends)
        self._registry = PathRegistry(b.suffix for b in self._backends)
        if callable(policy):
            self._policy_source = policy
        else:
            self._policy_source = lambda: policy
        self._available: dict[str, Path] | None = None
        self._refs: dict[str, _RefEntry] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: WordlistsConfig) -> WordlistManager:
        manager = cls(lambda: config.policy, backends=config.backends)
        for path in config.paths:
            manager.register_path(path)
        return manager

    # ------------------------------------------------------------------
    # Paths and discovery
    # ------------------------------------------------------------------

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._registry.paths

    @property
    def backends(self) -> tuple[Backend, ...]:
        return self._backends

    def register_path(self, path: str | Path) -> Path:
        """Register a directory containing wordlists."""
        with self._lock:
            canonical = self._registry.register(path)
            self._available = None
        return canonical

    def unregister_path(self, path: str | Path) -> None:
        """Unregister a directory added with :meth:`register_path`.

        Raises:
            NotRegisteredError: The path is not registered.
        """
        with self._lock:
            self._registry.unregister(path)
            self._available = None

    def invalidate(self) -> None:
        """Forget discovered lists; the policy is read again on next use."""
        with self._lock:
            self._registry.invalidate()
            self._available = None

    def policy(self) -> Matcher:
        return compile_policy(self._policy_source())

    def _available_lists(self) -> dict[str, Path]:
        with self._lock:
            if self._available is None:
                self._available = filter_lists(
                    self._registry.discover(), self.policy()
                )
            return self._available

    def get_available_names(self) -> list[str]:
        """Return the names of the lists the policy exposes."""
        return list(self._available_lists())

    def locate(self, name: str) -> Path:
        """Return the file backing the list *name*.

        Raises:
            UnknownListError: No such list is available.
        """
        try:
            return self._available_lists()[name]
        except KeyError:
            raise UnknownListError(f"No such wordlist: {name!r}") from None

    # ------------------------------------------------------------------
    # Checkout / release
    # ------------------------------------------------------------------

    def checkout(self, name: str) -> WordlistProxy:
        """Return a handle on the list *name*, opening it if needed.

        Raises:
            UnknownListError: No such list is available.
        """
        with self._lock:
            entry = self._refs.get(name)
            if entry is not None:
                entry.counter += 1
                logger.debug("Reusing wordlist %r (%d users)", name, entry.counter)
            else:
                path = self.locate(name)
                entry = _RefEntry(open_wordlist(name, path))
                self._refs[name] = entry
                logger.debug("Opened wordlist %r from %s", name, path)
            return WordlistProxy(self, entry.instance)

    def release(self, wordlist: Wordlist) -> None:
        """Drop one reference to *wordlist*, closing it after the last one.

        Raises:
            NotCheckedOutError: The list is not checked out.
        """
        name = wordlist.name
        with self._lock:
            entry = self._refs.get(name)
            if entry is None or entry.instance is not wordlist:
                raise NotCheckedOutError(f"Wordlist {name!r} is not checked out")
            entry.counter -= 1
            if entry.counter > 0:
                logger.debug("Released wordlist %r (%d users)", name, entry.counter)
                return
            del self._refs[name]
        wordlist.close()
        logger.debug("Closed wordlist %r", name)

    def is_loaded(self, name: str) -> bool:
        with self._lock:
            return name in self._refs

    def ref_count(self, name: str) -> int:
        """Return the number of outstanding handles on *name*."""
        with self._lock:
            entry = self._refs.get(name)
            return entry.counter if entry is not None else 0

    def loaded_names(self) -> list[str]:
        with self._lock:
            return list(self._refs)
