"""Deterministic permutation of dictionary indices."""
from __future__ import annotations

from typing import List

import numpy as np

from .pcg import PCG64, DateLike


def shuffle_indices(length: int, rng: PCG64) -> List[int]:
    """Shuffle ``range(length)`` with a single descending exchange pass."""

    if length < 0:
        raise ValueError("length must be non-negative")
    indices = list(range(length))
    below = rng.below
    for i in range(length - 1, 0, -1):
        j = below(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def permutation(seed: int, date: DateLike, length: int) -> np.ndarray:
    """Return the read-only permutation of ``{0, ..., length - 1}`` for a secret.

    The result is a pure function of ``(seed, date, length)``.
    """

    rng = PCG64.from_secret(seed, date)
    result = np.asarray(shuffle_indices(length, rng), dtype=np.uint32)
    result.setflags(write=False)
    return result


__all__ = ["permutation", "shuffle_indices"]
