"""
Search module - minimax evaluation and the transposition cache.
"""

from nim_solver.search.minimax import evaluate, SearchStats
from nim_solver.search.transposition import TranspositionCache, CacheStats

__all__ = [
    "evaluate",
    "SearchStats",
    "TranspositionCache",
    "CacheStats",
]
