"""Transposition cache keyed by canonical position.

One cache lives for one top-level search (a single ``best_move`` call),
and every node of that search shares it. Entries map a CanonicalKey to
the exact minimax score of that position, so a hit can be returned
without looking at the children.

Usage (example):

    from nim_solver.search.transposition import TranspositionCache

    cache = TranspositionCache()
    score = cache.get(key)
    if score is None:
        score = ...  # search the children
        cache.store(key, score)

The cache is not thread-safe; the search is single-threaded.
"""
from __future__ import annotations

from typing import Dict, NamedTuple, Optional

from nim_solver.core.hashing import CanonicalKey


class CacheStats(NamedTuple):
    """Counters for one cache's lifetime."""

    entries: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.lookups if self.lookups else 0.0


class TranspositionCache:
    """Dict-backed score cache with hit/miss counters.

    Methods:
      - get(key) -> Optional[int]
      - store(key, score)
      - clear()
      - stats -> CacheStats
    """

    def __init__(self):
        self._table: Dict[CanonicalKey, int] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: CanonicalKey) -> Optional[int]:
        score = self._table.get(key)
        if score is None:
            self._misses += 1
        else:
            self._hits += 1
        return score

    def store(self, key: CanonicalKey, score: int) -> None:
        self._table[key] = score

    def clear(self) -> None:
        self._table.clear()
        self._hits = 0
        self._misses = 0

    @property
    def stats(self) -> CacheStats:
        return CacheStats(len(self._table), self._hits, self._misses)

    def __contains__(self, key: CanonicalKey) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)
