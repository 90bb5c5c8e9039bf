"""Word-armor codec: mapping construction, encoding and decoding."""

from .cache import MappingCache, default_cache
from .decoder import ParsedFragment, doff, order_fragments, parse_fragment
from .encoder import don, pair_codes
from .mapping import (
    ALIASES_PER_MARKER,
    DATA_SLOTS,
    MARKER_SLOTS,
    MIN_DICTIONARY_SIZE,
    Assignment,
    DictMappings,
    Role,
)

__all__ = [
    "ALIASES_PER_MARKER",
    "Assignment",
    "DATA_SLOTS",
    "DictMappings",
    "MARKER_SLOTS",
    "MIN_DICTIONARY_SIZE",
    "MappingCache",
    "ParsedFragment",
    "Role",
    "default_cache",
    "doff",
    "don",
    "order_fragments",
    "pair_codes",
    "parse_fragment",
]
