"""Caw: armor bytes as ordinary-looking words with a shared seed and date.

This is a keyed substitution transform, not encryption.
"""

from .api import doff, don, mappings_for
from .config import ArmorConfig
from .dictionary import Dictionary, load_dictionary
from .exceptions import (
    AmbiguousOrder,
    CawError,
    ConfigurationError,
    DecodeError,
    DictionaryError,
    DictionaryTooSmall,
    DuplicateFragment,
    IncompleteMessage,
    OddLengthMessage,
)

__all__ = [
    "AmbiguousOrder",
    "ArmorConfig",
    "CawError",
    "ConfigurationError",
    "DecodeError",
    "Dictionary",
    "DictionaryError",
    "DictionaryTooSmall",
    "DuplicateFragment",
    "IncompleteMessage",
    "OddLengthMessage",
    "doff",
    "don",
    "load_dictionary",
    "mappings_for",
]
