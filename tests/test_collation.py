"""Tests for the collation engine."""

import pytest

from wordlists import Collator, InvalidLocaleError, TextWordlist
from wordlists.collation import LocaleResolution


@pytest.fixture
def collator():
    return Collator("fr_FR")


class TestLocale:
    def test_exact_match(self):
        assert Collator("fr_FR").resolution is LocaleResolution.EXACT

    def test_dash_is_canonicalized(self):
        collator = Collator("en-US")
        assert collator.locale_id == "en_US"

    def test_unknown_territory_falls_back_to_language(self):
        collator = Collator("fr_XX")
        assert collator.locale.language == "fr"
        assert collator.resolution is not LocaleResolution.EXACT

    @pytest.mark.parametrize("locale", [None, "", "   ", "zz", "zz_ZZ", "12", "not a locale"])
    def test_invalid_locales(self, locale):
        with pytest.raises(InvalidLocaleError):
            Collator(locale)


class TestOrdering:
    def test_primary_strength_equality(self, collator):
        assert collator.compare("là", "la") == 0
        assert collator.compare("LÀ", "là") == 0
        assert collator.compare("sœur", "SOEUR") == 0
        assert collator.compare("arc-en-ciel", "arcenciel") == 0
        assert collator.equal("Éléphant", "elephant")

    def test_order(self, collator):
        assert collator.compare("âne", "chat") < 0
        assert collator.compare("zèbre", "éléphant") > 0

    def test_sort(self, collator):
        words = ["saoûl", "épithète", "là"]
        collator.sort(words)
        assert words == ["épithète", "là", "saoûl"]

    def test_sort_keys_follow_compare(self, collator):
        words = ["zèbre", "âne", "Éléphant", "chat", "castor", "ça"]
        by_key = sorted(words, key=collator.sort_key)
        assert by_key == collator.sorted(words)
        for first, second in zip(by_key, by_key[1:]):
            assert collator.compare(first, second) <= 0
            assert collator.sort_key(first) <= collator.sort_key(second)

    def test_sort_key_has_no_trailing_nul(self, collator):
        assert not collator.sort_key("chat").endswith(b"\x00")
        assert collator.sort_key("Chât") == collator.sort_key("chat")

    def test_spaces_and_punctuation_are_ignored(self, collator):
        assert collator.equal("ice cream", "ICE-CREAM")
        assert collator.sort_key("(l')été") == collator.sort_key("lete")


class TestTailoring:
    def test_swedish_letters_sort_after_z(self):
        swedish = Collator("sv_SE")
        assert swedish.compare("ö", "z") > 0
        assert swedish.compare("å", "z") > 0
        assert not swedish.equal("ö", "o")
        assert swedish.sorted(["öl", "zon", "ost"]) == ["ost", "zon", "öl"]

    def test_english_folds_the_same_letters(self):
        english = Collator("en_US")
        assert english.compare("ö", "z") < 0
        assert english.equal("ö", "o")
        assert english.sorted(["öl", "zon", "ost"]) == ["öl", "ost", "zon"]

    def test_sort_keys_depend_on_locale(self):
        assert Collator("sv_SE").sort_key("ö") != Collator("en_US").sort_key("ö")

    def test_tailoring_drives_membership(self):
        data = "# locale: {}\nöl\nzon\n"
        swedish = TextWordlist.from_bytes("sv", data.format("sv").encode("utf-8"))
        english = TextWordlist.from_bytes("en", data.format("en").encode("utf-8"))
        assert list(swedish) == ["zon", "öl"]
        assert list(english) == ["öl", "zon"]
        assert not swedish.contains("ol")
        assert english.contains("ol")
