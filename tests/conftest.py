"""Shared fixtures: synthetic dictionaries and mappings built once per session."""

from __future__ import annotations

import itertools
from datetime import date
from pathlib import Path
from typing import List

import pytest

from caw.codec.mapping import MIN_DICTIONARY_SIZE, DictMappings
from caw.dictionary import Dictionary
from caw.keying import permutation

SEED = 69
KEY_DATE = date(2024, 3, 5)
DICTIONARY_SIZE = MIN_DICTIONARY_SIZE + 49

_CONSONANTS = "bcdfghjklmnprstvwz"
_VOWELS = "aeiou"


def _syllables() -> List[str]:
    return [c + v for c in _CONSONANTS for v in _VOWELS]


@pytest.fixture(scope="session")
def words() -> List[str]:
    """Distinct three-syllable pseudo-words, e.g. ``bababa``."""

    syllables = _syllables()
    product = itertools.product(syllables, repeat=3)
    return ["".join(parts) for parts in itertools.islice(product, DICTIONARY_SIZE)]


@pytest.fixture(scope="session")
def dictionary(words: List[str]) -> Dictionary:
    return Dictionary(words)


@pytest.fixture(scope="session")
def min_dictionary(words: List[str]) -> Dictionary:
    return Dictionary(words[:MIN_DICTIONARY_SIZE])


@pytest.fixture(scope="session")
def mappings(dictionary: Dictionary) -> DictMappings:
    return DictMappings.from_seed(SEED, KEY_DATE, dictionary)


@pytest.fixture(scope="session")
def min_permutation():
    return permutation(SEED, KEY_DATE, MIN_DICTIONARY_SIZE)


@pytest.fixture(scope="session")
def dictionary_file(words: List[str], tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("dictionary") / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path
