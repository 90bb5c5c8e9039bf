"""Process-wide cache of dictionary mappings."""
from __future__ import annotations

import logging
from datetime import date as Date
from threading import Lock
from typing import Callable, Dict, Optional, Tuple

from ..dictionary import Dictionary
from ..keying.pcg import DateLike, calendar_date, seed_material
from .mapping import DictMappings

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, Date, str]
Builder = Callable[[int, DateLike, Dictionary], DictMappings]


class MappingCache:
    """Build each (seed, date, dictionary) mapping at most once.

    Concurrent first requests for the same key wait on a per-key lock while
    a single caller builds; other keys proceed independently.
    """

    def __init__(self, builder: Optional[Builder] = None) -> None:
        self._builder: Builder = builder or DictMappings.from_seed
        self._entries: Dict[CacheKey, DictMappings] = {}
        self._key_locks: Dict[CacheKey, Lock] = {}
        self._lock = Lock()

    @staticmethod
    def key(seed: int, date: DateLike, dictionary: Dictionary) -> CacheKey:
        seed_material(seed, date)  # rejects out-of-range seeds
        return (seed, calendar_date(date), dictionary.fingerprint)

    def get(self, seed: int, date: DateLike, dictionary: Dictionary) -> DictMappings:
        key = self.key(seed, date, dictionary)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                return cached
            key_lock = self._key_locks.setdefault(key, Lock())

        with key_lock:
            with self._lock:
                cached = self._entries.get(key)
            if cached is not None:
                logger.debug("mapping for %s built by another caller", key[1])
                return cached
            try:
                mappings = self._builder(seed, key[1], dictionary)
                with self._lock:
                    self._entries[key] = mappings
            finally:
                with self._lock:
                    self._key_locks.pop(key, None)
            return mappings

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_DEFAULT_CACHE: MappingCache | None = None
_DEFAULT_LOCK = Lock()


def default_cache() -> MappingCache:
    """Return the shared cache used by :mod:`caw.api`."""

    global _DEFAULT_CACHE
    with _DEFAULT_LOCK:
        if _DEFAULT_CACHE is None:
            _DEFAULT_CACHE = MappingCache()
        return _DEFAULT_CACHE


__all__ = ["MappingCache", "default_cache"]
