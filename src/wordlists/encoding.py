"""Byte-order mark detection and conversion to Unicode text."""

from __future__ import annotations

import codecs

from wordlists.exceptions import UnsupportedEncodingError

DEFAULT_ENCODING = "UTF-8"

# 4-byte marks come before the 2-byte ones: the UTF-32LE mark starts
# with the UTF-16LE one.
BOMS: tuple[tuple[str, bytes], ...] = (
    ("UTF-8", codecs.BOM_UTF8),
    ("UTF-32BE", codecs.BOM_UTF32_BE),
    ("UTF-32LE", codecs.BOM_UTF32_LE),
    ("UTF-16BE", codecs.BOM_UTF16_BE),
    ("UTF-16LE", codecs.BOM_UTF16_LE),
)


def detect_bom(data: bytes) -> tuple[str | None, bytes]:
    """Detect a byte-order mark at the start of *data*.

    Returns:
        A ``(encoding, remainder)`` pair. *encoding* is ``None`` when no
        mark was found, in which case *remainder* is *data* unchanged.
    """
    for name, bom in BOMS:
        if data.startswith(bom):
            return name, data[len(bom):]
    return None, data


def lookup(encoding: str) -> codecs.CodecInfo:
    """Return the codec for *encoding* or raise UnsupportedEncodingError."""
    try:
        return codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise UnsupportedEncodingError(
            f"Unsupported encoding: {encoding!r}"
        ) from e


def same_encoding(first: str, second: str) -> bool:
    """Case-insensitive comparison of two encoding names, aliases included."""
    if first.strip().lower() == second.strip().lower():
        return True
    try:
        return codecs.lookup(first).name == codecs.lookup(second).name
    except LookupError:
        return False


def to_unicode(data: bytes | str, from_encoding: str) -> str:
    """Decode *data* from *from_encoding* into text.

    Undecodable sequences are replaced by U+FFFD instead of failing.
    Text input is assumed to carry raw bytes (one code point per byte,
    as produced by a latin-1 pass-through) and is re-decoded.

    Raises:
        UnsupportedEncodingError: No codec exists for *from_encoding*.
    """
    codec = lookup(from_encoding)
    if isinstance(data, str):
        data = data.encode("latin-1")
    text, _ = codec.decode(data, "replace")
    return text


def to_utf8(data: bytes | str, from_encoding: str) -> bytes:
    """Convert *data* from *from_encoding* into UTF-8 encoded bytes."""
    return to_unicode(data, from_encoding).encode("utf-8")
