"""Bidirectional mapping between dictionary words and armor roles."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Final, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..exceptions import DictionaryError, DictionaryTooSmall
from ..keying import permutation as derive_permutation
from ..keying.pcg import DateLike

logger = logging.getLogger(__name__)

ALIASES_PER_MARKER: Final[int] = 5
MARKER_SLOTS: Final[int] = 3 * ALIASES_PER_MARKER
DATA_SLOTS: Final[int] = 1 << 16
MIN_DICTIONARY_SIZE: Final[int] = MARKER_SLOTS + DATA_SLOTS


class Role(str, Enum):
    """Meaning carried by a mapped word."""

    BEGIN = "begin"
    END = "end"
    FRAGMENT = "fragment"
    DATA = "data"


@dataclass(frozen=True)
class Assignment:
    """A word's role; ``value`` is the data code or the alias slot."""

    role: Role
    value: int


def _check_size(size: int) -> None:
    if size < MIN_DICTIONARY_SIZE:
        raise DictionaryTooSmall(size=size, required=MIN_DICTIONARY_SIZE)


@dataclass(frozen=True, eq=False)
class DictMappings:
    """Word indices for every marker alias and 16-bit data code.

    ``words[c]`` is the dictionary index of the word that denotes code ``c``.
    Instances are never mutated after :meth:`build` and may be shared freely
    between threads.
    """

    begin: Tuple[int, ...]
    end: Tuple[int, ...]
    fragment: Tuple[int, ...]
    words: np.ndarray
    dictionary_size: int
    _reverse: Mapping[int, Assignment] = field(repr=False)

    @classmethod
    def build(cls, dictionary: Sequence[str], permutation: Sequence[int]) -> "DictMappings":
        """Partition *permutation* into marker aliases and data codes."""

        _check_size(len(dictionary))
        if len(permutation) != len(dictionary):
            raise DictionaryError(
                f"permutation covers {len(permutation)} indices but the dictionary has {len(dictionary)}"
            )

        perm = np.asarray(permutation, dtype=np.uint32)
        begin = tuple(int(i) for i in perm[0:ALIASES_PER_MARKER])
        end = tuple(int(i) for i in perm[ALIASES_PER_MARKER : 2 * ALIASES_PER_MARKER])
        fragment = tuple(int(i) for i in perm[2 * ALIASES_PER_MARKER : MARKER_SLOTS])
        words = perm[MARKER_SLOTS:MIN_DICTIONARY_SIZE].copy()
        words.setflags(write=False)

        reverse: Dict[int, Assignment] = {}
        for role, aliases in ((Role.BEGIN, begin), (Role.END, end), (Role.FRAGMENT, fragment)):
            for slot, index in enumerate(aliases):
                reverse[index] = Assignment(role, slot)
        for code, index in enumerate(words.tolist()):
            reverse[index] = Assignment(Role.DATA, code)
        if len(reverse) != MIN_DICTIONARY_SIZE:
            raise DictionaryError("permutation repeats an index")

        return cls(
            begin=begin,
            end=end,
            fragment=fragment,
            words=words,
            dictionary_size=len(dictionary),
            _reverse=MappingProxyType(reverse),
        )

    @classmethod
    def from_seed(cls, seed: int, date: DateLike, dictionary: Sequence[str]) -> "DictMappings":
        """Build the mappings both peers derive from a shared seed and date."""

        _check_size(len(dictionary))
        started = time.perf_counter()
        perm = derive_permutation(seed, date, len(dictionary))
        mappings = cls.build(dictionary, perm)
        logger.info(
            "built dictionary mappings for %d words in %.2fs",
            len(dictionary),
            time.perf_counter() - started,
        )
        return mappings

    def aliases(self, role: Role) -> Tuple[int, ...]:
        if role is Role.BEGIN:
            return self.begin
        if role is Role.END:
            return self.end
        if role is Role.FRAGMENT:
            return self.fragment
        raise ValueError("data codes have no aliases")

    def index_for(self, code: int) -> int:
        """Return the dictionary index that denotes 16-bit *code*."""

        if not 0 <= code < DATA_SLOTS:
            raise ValueError(f"data code out of range: {code}")
        return int(self.words[code])

    def lookup(self, index: int) -> Optional[Assignment]:
        """Return the role of dictionary *index*, or ``None`` for unmapped words."""

        return self._reverse.get(index)

    def reverse_lookup(self, index: int) -> Optional[int]:
        """Look up the 16-bit code denoted by dictionary *index*."""

        assignment = self._reverse.get(index)
        if assignment is None or assignment.role is not Role.DATA:
            return None
        return assignment.value

    def data_word(self, code: int, dictionary: Sequence[str]) -> str:
        return dictionary[self.index_for(code)]

    def alias_words(self, role: Role, dictionary: Sequence[str]) -> Tuple[str, ...]:
        return tuple(dictionary[index] for index in self.aliases(role))


__all__ = [
    "ALIASES_PER_MARKER",
    "Assignment",
    "DATA_SLOTS",
    "DictMappings",
    "MARKER_SLOTS",
    "MIN_DICTIONARY_SIZE",
    "Role",
]
