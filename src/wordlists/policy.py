"""Allow/deny policies deciding which wordlists are exposed.

A policy is an ordered list of glob patterns. ``?`` matches exactly one
character and ``*`` any run of characters; a leading ``!`` turns the
pattern into a rejection rule. Rules are tried in order and the first
one that matches decides; names no rule matches are accepted. Hence
``["bar", "!*"]`` only accepts ``bar`` while ``["!*", "foo"]`` rejects
everything, ``foo`` included.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

_V = TypeVar("_V")


def glob_to_regex(glob: str) -> re.Pattern[str]:
    """Compile *glob* into an anchored, case-insensitive pattern."""
    parts = []
    for char in glob:
        if char == "?":
            parts.append(".")
        elif char == "*":
            parts.append(".*")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------

class Matcher(ABC):
    """Predicate over list names."""

    @abstractmethod
    def __call__(self, name: str) -> bool: ...

    def rules(self) -> list[str]:
        """Return the patterns this matcher was built from, in order."""
        return []


@dataclass(frozen=True)
class AcceptAll(Matcher):
    def __call__(self, name: str) -> bool:
        return True


@dataclass(frozen=True)
class Allow(Matcher):
    """Accept names matching *glob*, defer to *fallback* otherwise."""

    glob: str
    fallback: Matcher

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", glob_to_regex(self.glob))

    def __call__(self, name: str) -> bool:
        if self._regex.fullmatch(name):  # type: ignore[attr-defined]
            return True
        return self.fallback(name)

    def rules(self) -> list[str]:
        return [self.glob, *self.fallback.rules()]


@dataclass(frozen=True)
class Deny(Matcher):
    """Reject names matching *glob*, defer to *fallback* otherwise."""

    glob: str
    fallback: Matcher

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", glob_to_regex(self.glob))

    def __call__(self, name: str) -> bool:
        if self._regex.fullmatch(name):  # type: ignore[attr-defined]
            return False
        return self.fallback(name)

    def rules(self) -> list[str]:
        return ["!" + self.glob, *self.fallback.rules()]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_policy(policy: str | None) -> list[str]:
    """Split a space-separated policy string into patterns."""
    if not policy:
        return []
    return policy.split()


def compile_policy(patterns: Iterable[str] | str | None) -> Matcher:
    """Build a single matcher from an ordered list of patterns.

    Blank patterns and a lone ``!`` are ignored. An empty policy accepts
    every name.
    """
    if patterns is None or isinstance(patterns, str):
        patterns = parse_policy(patterns)
    matcher: Matcher = AcceptAll()
    for raw in reversed(list(patterns)):
        pattern = raw.strip()
        if pattern in ("", "!"):
            continue
        if pattern.startswith("!"):
            matcher = Deny(pattern[1:], matcher)
        else:
            matcher = Allow(pattern, matcher)
    return matcher


def filter_lists(lists: Mapping[str, _V], matcher: Matcher) -> dict[str, _V]:
    """Return the entries of *lists* whose name *matcher* accepts."""
    return {name: location for name, location in lists.items() if matcher(name)}
