"""Custom exception hierarchy for wordlists."""


class WordlistsError(Exception):
    """Base exception for all wordlists errors."""


class UnreadableSourceError(WordlistsError):
    """List source (text file or store) is missing or cannot be read."""


class EncodingMismatchError(WordlistsError):
    """Byte-order mark contradicts the encoding declared in the header."""


class UnsupportedEncodingError(WordlistsError):
    """No codec is available for the requested encoding."""


class InvalidLocaleError(WordlistsError):
    """Locale metadata is missing or cannot be resolved."""


class InvalidMetadataKeyError(WordlistsError, KeyError):
    """Metadata key is not one of the recognized keys."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ReadOnlyViolationError(WordlistsError, TypeError):
    """Attempt to modify a wordlist."""


class UnknownListError(WordlistsError):
    """No list with that name is available (or the policy hides it)."""


class NotRegisteredError(WordlistsError):
    """Path was never registered."""


class NotCheckedOutError(WordlistsError):
    """Release of a list that has no outstanding checkout."""


class InvalidArgumentError(WordlistsError, TypeError):
    """Argument of the wrong type (e.g. non-integer rank)."""


class ProxyCopyError(WordlistsError, TypeError):
    """Wordlist handles cannot be copied."""


class ConfigError(WordlistsError):
    """Error parsing a wordlists configuration."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)
