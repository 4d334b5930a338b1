"""Tests for byte-order mark detection and decoding."""

import codecs

import pytest

from wordlists import UnsupportedEncodingError, detect_bom, to_unicode, to_utf8
from wordlists.encoding import same_encoding


class TestDetectBom:
    @pytest.mark.parametrize(
        "bom, expected",
        [
            (codecs.BOM_UTF8, "UTF-8"),
            (codecs.BOM_UTF32_BE, "UTF-32BE"),
            (codecs.BOM_UTF32_LE, "UTF-32LE"),
            (codecs.BOM_UTF16_BE, "UTF-16BE"),
            (codecs.BOM_UTF16_LE, "UTF-16LE"),
        ],
    )
    def test_detects_and_strips(self, bom, expected):
        encoding, rest = detect_bom(bom + b"payload")
        assert encoding == expected
        assert rest == b"payload"

    def test_utf32le_is_not_mistaken_for_utf16le(self):
        data = codecs.BOM_UTF32_LE + "a".encode("utf-32-le")
        encoding, rest = detect_bom(data)
        assert encoding == "UTF-32LE"
        assert rest.decode("utf-32-le") == "a"

    def test_no_bom(self):
        assert detect_bom(b"plain") == (None, b"plain")
        assert detect_bom(b"") == (None, b"")


class TestConversion:
    def test_decodes_declared_encoding(self):
        assert to_unicode("père".encode("iso-8859-1"), "ISO-8859-1") == "père"

    def test_to_utf8(self):
        assert to_utf8("sœur".encode("iso-8859-15"), "ISO-8859-15") == "sœur".encode("utf-8")

    def test_accepts_byte_transparent_text(self):
        raw = "ça".encode("utf-8").decode("latin-1")
        assert to_unicode(raw, "UTF-8") == "ça"

    def test_unmappable_bytes_degrade(self):
        assert to_unicode(b"a\xffb", "UTF-8") == "a\ufffdb"

    def test_unknown_encoding(self):
        with pytest.raises(UnsupportedEncodingError):
            to_unicode(b"abc", "klingon-1")

    def test_same_encoding_handles_aliases(self):
        assert same_encoding("utf-8", "UTF8")
        assert same_encoding("latin-1", "ISO-8859-1")
        assert not same_encoding("UTF-8", "ISO-8859-1")
        assert not same_encoding("UTF-8", "klingon-1")
