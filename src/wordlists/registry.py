"""Registered directories and discovery of the lists they contain."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from wordlists.exceptions import NotRegisteredError
from wordlists.models import Backend

logger = logging.getLogger(__name__)


class PathRegistry:
    """Ordered set of directories scanned for wordlist files.

    The result of :meth:`discover` is cached until a path is registered
    or unregistered.
    """

    def __init__(self, suffixes: Iterable[str] | None = None) -> None:
        if suffixes is None:
            suffixes = [backend.suffix for backend in Backend]
        self._suffixes = tuple(s.lower() for s in suffixes)
        self._paths: list[Path] = []
        self._cache: dict[str, Path] | None = None

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return self._suffixes

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    @staticmethod
    def canonicalize(path: str | Path) -> Path:
        return Path(path).expanduser().resolve()

    def register(self, path: str | Path) -> Path:
        """Add *path* to the registry (no-op if already present)."""
        canonical = self.canonicalize(path)
        if canonical not in self._paths:
            self._paths.append(canonical)
            self.invalidate()
        return canonical

    def unregister(self, path: str | Path) -> None:
        """Remove *path* from the registry.

        Raises:
            NotRegisteredError: *path* was not registered.
        """
        canonical = self.canonicalize(path)
        if canonical not in self._paths:
            raise NotRegisteredError(f"No such path registered: {canonical}")
        self._paths.remove(canonical)
        self.invalidate()

    def invalidate(self) -> None:
        self._cache = None

    def _logical_name(self, filename: str) -> str | None:
        lowered = filename.lower()
        for suffix in self._suffixes:
            if lowered.endswith(suffix) and len(lowered) > len(suffix):
                return lowered[: -len(suffix)]
        return None

    def discover(self) -> dict[str, Path]:
        """Map logical list names to files found in the registered paths.

        Directories are scanned in registration order, files within a
        directory in name order. When a name is found twice, the first
        location wins and a warning is logged.
        """
        if self._cache is not None:
            return dict(self._cache)

        lists: dict[str, Path] = {}
        for directory in self._paths:
            try:
                entries = sorted(directory.iterdir())
            except OSError as e:
                logger.warning("Cannot scan %s: %s", directory, e)
                continue
            for entry in entries:
                name = self._logical_name(entry.name)
                if name is None or not entry.is_file():
                    continue
                if name in lists:
                    logger.warning(
                        "Duplicate wordlist %r: keeping %s, ignoring %s",
                        name, lists[name], entry,
                    )
                    continue
                lists[name] = entry

        self._cache = lists
        return dict(lists)
