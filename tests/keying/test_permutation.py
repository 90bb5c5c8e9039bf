"""Tests for the deterministic dictionary permutation."""

from __future__ import annotations

from datetime import date

import numpy as np
import pytest

from caw.keying import PCG64, permutation, shuffle_indices

KEY_DATE = date(2024, 3, 5)

GOLDEN_HEAD = [
    45002, 41842, 34178, 56422, 55839, 22904, 62523, 30123, 18689, 49843,
    282, 49203, 6947, 6828, 8870, 19373, 22633, 27879, 55805, 5191,
]


def test_permutation_matches_golden_vectors(min_permutation) -> None:
    assert len(min_permutation) == 65551
    assert min_permutation[:20].tolist() == GOLDEN_HEAD
    assert int(min_permutation[18552]) == 65446
    assert int(min_permutation[-1]) == 49764


def test_short_permutation_matches_golden_vector() -> None:
    assert permutation(69, KEY_DATE, 10).tolist() == [3, 8, 9, 6, 1, 0, 2, 5, 4, 7]


def test_permutation_is_a_bijection(min_permutation) -> None:
    assert np.array_equal(np.sort(min_permutation), np.arange(65551, dtype=np.uint32))


def test_permutation_is_deterministic(min_permutation) -> None:
    assert np.array_equal(permutation(69, KEY_DATE, 65551), min_permutation)


def test_permutation_is_read_only(min_permutation) -> None:
    with pytest.raises(ValueError):
        min_permutation[0] = 1


def test_permutation_depends_on_seed_and_date() -> None:
    base = permutation(69, KEY_DATE, 1000)
    assert not np.array_equal(base, permutation(70, KEY_DATE, 1000))
    assert not np.array_equal(base, permutation(69, date(2024, 3, 6), 1000))


def test_shuffle_handles_trivial_lengths() -> None:
    assert shuffle_indices(0, PCG64(1, 1)) == []
    assert shuffle_indices(1, PCG64(1, 1)) == [0]


def test_shuffle_rejects_negative_length() -> None:
    with pytest.raises(ValueError):
        shuffle_indices(-1, PCG64(1, 1))
