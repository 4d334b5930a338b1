"""Locale-aware collation at primary strength.

Two words collate equal when they only differ in case, accents, spaces or
punctuation, following the tailoring of their locale (in Swedish ``ö``
is a letter of its own, sorted after ``z``; in English it is an ``o``).
Locales are validated against the CLDR data shipped with Babel and the
relation itself is an ICU collator, so the byte order of sort keys and
the order used by :meth:`Collator.compare` always agree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence
from enum import Enum

import icu
from babel import Locale, UnknownLocaleError

from wordlists.exceptions import InvalidLocaleError

logger = logging.getLogger(__name__)


class LocaleResolution(str, Enum):
    """How a requested locale identifier was resolved."""

    EXACT = "exact"
    DEFAULT_VARIANT = "default-variant"
    FALLBACK = "fallback"


def canonicalize_locale(identifier: str) -> str:
    return identifier.strip().replace("-", "_")


def resolve_locale(identifier: str | None) -> tuple[Locale, LocaleResolution]:
    """Resolve *identifier* to a Babel :class:`~babel.Locale`.

    Raises:
        InvalidLocaleError: The identifier is absent, malformed, or names
            a language for which no locale data exists.
    """
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidLocaleError("Missing locale")
    canonical = canonicalize_locale(identifier)
    try:
        locale = Locale.parse(canonical)
    except (ValueError, TypeError) as e:
        raise InvalidLocaleError(f"Invalid locale ({identifier}): {e}") from e
    except UnknownLocaleError:
        language = canonical.split("_", 1)[0]
        if language == canonical:
            raise InvalidLocaleError(
                f"Invalid locale ({identifier}): unknown language"
            ) from None
        try:
            locale = Locale.parse(language)
        except (ValueError, UnknownLocaleError) as e:
            raise InvalidLocaleError(
                f"Invalid locale ({identifier}): {e}"
            ) from e
        logger.debug("Locale %s resolved to fallback %s", identifier, locale)
        return locale, LocaleResolution.FALLBACK

    if str(locale).lower() == canonical.lower():
        return locale, LocaleResolution.EXACT
    logger.debug("Locale %s resolved to %s", identifier, locale)
    return locale, LocaleResolution.DEFAULT_VARIANT


def create_icu_collator(locale_id: str) -> icu.Collator:
    """Return an ICU collator for *locale_id* at primary strength.

    Spaces and punctuation are "shifted", i.e. ignored at that strength.
    """
    collator = icu.Collator.createInstance(icu.Locale(locale_id))
    collator.setStrength(icu.Collator.PRIMARY)
    collator.setAttribute(
        icu.UCollAttribute.ALTERNATE_HANDLING,
        icu.UCollAttributeValue.SHIFTED,
    )
    return collator


class Collator:
    """Ordering and equality relation for the words of one locale."""

    def __init__(self, locale: str | None) -> None:
        self.requested = locale
        self.locale, self.resolution = resolve_locale(locale)
        self._icu = create_icu_collator(str(self.locale))

    def __repr__(self) -> str:
        return f"Collator({str(self.locale)!r})"

    @property
    def locale_id(self) -> str:
        return str(self.locale)

    def sort_key(self, word: str) -> bytes:
        """Return a byte string whose ordering matches :meth:`compare`.

        The trailing NUL appended by ICU is stripped, so keys stay
        comparable with stores written by other ICU versions.
        """
        return bytes(self._icu.getSortKey(word)).rstrip(b"\x00")

    def compare(self, first: str, second: str) -> int:
        """Return -1, 0 or 1 as *first* sorts before, with or after *second*."""
        order = self._icu.compare(first, second)
        return (order > 0) - (order < 0)

    def equal(self, first: str, second: str) -> bool:
        return self.compare(first, second) == 0

    def sort(self, words: MutableSequence[str]) -> None:
        """Sort *words* in place. Words that collate equal keep no particular order."""
        words.sort(key=self.sort_key)  # type: ignore[attr-defined]

    def sorted(self, words: Iterable[str]) -> list[str]:
        return sorted(words, key=self.sort_key)
