"""High level armoring API keyed by a shared seed and date."""
from __future__ import annotations

from concurrent.futures import Executor
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .codec import MappingCache, default_cache
from .codec import doff as codec_doff
from .codec import don as codec_don
from .codec.mapping import DictMappings
from .config import ArmorConfig
from .dictionary import Dictionary
from .keying.pcg import DateLike


def today() -> DateLike:
    """Return the current UTC calendar date, the default key date."""

    return datetime.now(timezone.utc).date()


def mappings_for(
    seed: int,
    dictionary: Dictionary,
    *,
    date: Optional[DateLike] = None,
    cache: Optional[MappingCache] = None,
) -> DictMappings:
    """Return the (cached) mappings for *seed* on *date*."""

    return (cache or default_cache()).get(seed, date or today(), dictionary)


def don(
    data: bytes,
    seed: int,
    dictionary: Dictionary,
    *,
    date: Optional[DateLike] = None,
    config: Optional[ArmorConfig] = None,
    cache: Optional[MappingCache] = None,
) -> List[str]:
    """Armor *data* for a peer sharing *seed*, *date* and *dictionary*."""

    cfg = config or ArmorConfig()
    mappings = mappings_for(seed, dictionary, date=date, cache=cache)
    return codec_don(data, mappings, dictionary, config=cfg)


def doff(
    fragments: Iterable[str],
    seed: int,
    dictionary: Dictionary,
    *,
    date: Optional[DateLike] = None,
    cache: Optional[MappingCache] = None,
    executor: Optional[Executor] = None,
) -> bytes:
    """Recover the bytes armored by :func:`don`.

    A peer with a different seed or date gets garbage rather than an error;
    the format carries nothing that could detect the mismatch.
    """

    mappings = mappings_for(seed, dictionary, date=date, cache=cache)
    return codec_doff(fragments, mappings, dictionary, executor=executor)


__all__ = ["doff", "don", "mappings_for", "today"]
