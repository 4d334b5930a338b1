"""Locale-aware, reference-counted read-only wordlists."""

__version__ = "0.1.0"

from wordlists.collation import Collator
from wordlists.config import WordlistsConfig, load_config
from wordlists.encoding import detect_bom, to_unicode, to_utf8
from wordlists.exceptions import (
    ConfigError,
    EncodingMismatchError,
    InvalidArgumentError,
    InvalidLocaleError,
    InvalidMetadataKeyError,
    NotCheckedOutError,
    NotRegisteredError,
    ProxyCopyError,
    ReadOnlyViolationError,
    UnknownListError,
    UnreadableSourceError,
    UnsupportedEncodingError,
    WordlistsError,
)
from wordlists.manager import WordlistManager
from wordlists.models import Backend, MetadataKey, WordlistMetadata
from wordlists.policy import compile_policy, filter_lists
from wordlists.proxy import WordlistProxy
from wordlists.registry import PathRegistry
from wordlists.wordlist import (
    StoreWordlist,
    TextWordlist,
    Wordlist,
    open_wordlist,
)
from wordlists.words import is_word

__all__ = [
    "__version__",
    # Manager and handles
    "WordlistManager",
    "WordlistProxy",
    "PathRegistry",
    # Wordlists
    "Wordlist",
    "TextWordlist",
    "StoreWordlist",
    "open_wordlist",
    # Models
    "Backend",
    "MetadataKey",
    "WordlistMetadata",
    # Helpers
    "Collator",
    "compile_policy",
    "filter_lists",
    "is_word",
    "detect_bom",
    "to_unicode",
    "to_utf8",
    # Configuration
    "WordlistsConfig",
    "load_config",
    # Exceptions
    "WordlistsError",
    "UnreadableSourceError",
    "EncodingMismatchError",
    "UnsupportedEncodingError",
    "InvalidLocaleError",
    "InvalidMetadataKeyError",
    "ReadOnlyViolationError",
    "UnknownListError",
    "NotRegisteredError",
    "NotCheckedOutError",
    "InvalidArgumentError",
    "ProxyCopyError",
    "ConfigError",
]
