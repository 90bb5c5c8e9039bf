"""Shared word list used by both peers.

The dictionary is an ordered list of distinct words.  Its order is part of
the shared contract: reordering or editing the file breaks every existing
seed/date pairing.
"""
from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from .exceptions import ConfigurationError, DictionaryError

logger = logging.getLogger(__name__)

DICTIONARY_ENV = "CAW_DICTIONARY"


class Dictionary(Sequence[str]):
    """Immutable ordered word list with constant-time reverse lookup."""

    def __init__(self, words: Iterable[str]) -> None:
        ordered: Tuple[str, ...] = tuple(words)
        index: Dict[str, int] = {}
        for position, word in enumerate(ordered):
            if not word or any(ch.isspace() for ch in word):
                raise DictionaryError(f"invalid dictionary entry #{position + 1}: {word!r}")
            if word in index:
                raise DictionaryError(
                    f"duplicate dictionary entry {word!r} (entries #{index[word] + 1} and #{position + 1})"
                )
            index[word] = position
        self._words = ordered
        self._index = index
        self._fingerprint: Optional[str] = None

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, position):  # type: ignore[override]
        return self._words[position]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __repr__(self) -> str:
        return f"Dictionary(<{len(self)} words>)"

    def index_of(self, word: str) -> Optional[int]:
        """Return the position of *word*, or ``None`` if it is not listed."""

        return self._index.get(word)

    @property
    def fingerprint(self) -> str:
        """SHA-256 over the newline-joined words; identifies the list in caches."""

        if self._fingerprint is None:
            hasher = hashlib.sha256()
            for word in self._words:
                hasher.update(word.encode("utf-8"))
                hasher.update(b"\n")
            self._fingerprint = hasher.hexdigest()
        return self._fingerprint


def parse_dictionary(text: str) -> Dictionary:
    """Build a :class:`Dictionary` from line-delimited *text*.

    Surrounding whitespace is stripped and blank lines are ignored.
    """

    return Dictionary(line.strip() for line in text.splitlines() if line.strip())


def resolve_dictionary_path(path: Union[str, Path, None] = None) -> Path:
    """Return *path*, falling back to the ``CAW_DICTIONARY`` environment variable."""

    candidate = path or os.getenv(DICTIONARY_ENV)
    if not candidate:
        raise ConfigurationError(
            f"no dictionary given; pass a path or set the {DICTIONARY_ENV} environment variable"
        )
    return Path(candidate)


def load_dictionary(path: Union[str, Path, None] = None) -> Dictionary:
    """Load a UTF-8, one-word-per-line dictionary file."""

    resolved = resolve_dictionary_path(path)
    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"cannot read dictionary {resolved}: {exc}") from exc
    dictionary = parse_dictionary(text)
    logger.debug("loaded %d words from %s", len(dictionary), resolved)
    return dictionary


__all__ = [
    "DICTIONARY_ENV",
    "Dictionary",
    "load_dictionary",
    "parse_dictionary",
    "resolve_dictionary_path",
]
