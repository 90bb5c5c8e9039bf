"""Key schedule: seed + date to a reproducible index permutation."""

from .pcg import PCG64, derive_stream, seed_material
from .permutation import permutation, shuffle_indices

__all__ = [
    "PCG64",
    "derive_stream",
    "permutation",
    "seed_material",
    "shuffle_indices",
]
