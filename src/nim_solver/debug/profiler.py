"""
Profiling utility for search performance analysis.

Usage:
    from nim_solver.debug.profiler import (
        compare_cache_modes,
        profile_function,
        timed,
        print_timing_summary,
    )

    # Nodes and time with vs. without the transposition cache
    compare_cache_modes([3, 4, 5])

    # Time specific blocks
    with timed("best_move"):
        best_move(piles)
    print_timing_summary()
"""

import cProfile
import io
import pstats
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from nim_solver.search.minimax import SearchStats
from nim_solver.search.transposition import TranspositionCache
from nim_solver.selection import inference, score_moves


# ---------------------------------------------------------------------------
# Timing Context Manager
# ---------------------------------------------------------------------------

@dataclass
class TimingStats:
    """Accumulated timing statistics."""
    total_time: float = 0.0
    call_count: int = 0
    min_time: float = float('inf')
    max_time: float = 0.0

    @property
    def avg_time(self) -> float:
        return self.total_time / self.call_count if self.call_count else 0.0

    def record(self, elapsed: float) -> None:
        self.total_time += elapsed
        self.call_count += 1
        self.min_time = min(self.min_time, elapsed)
        self.max_time = max(self.max_time, elapsed)


# Global timing registry
_timing_registry: Dict[str, TimingStats] = {}


@contextmanager
def timed(name: str, print_immediate: bool = False):
    """
    Context manager to time a block of code.

    Usage:
        with timed("best_move"):
            move = best_move(piles)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if name not in _timing_registry:
            _timing_registry[name] = TimingStats()
        _timing_registry[name].record(elapsed)

        if print_immediate:
            print(f"[{name}] {elapsed*1000:.2f}ms")


def print_timing_summary():
    """Print summary of all timed operations."""
    if not _timing_registry:
        print("No timing data collected.")
        return

    print("\n" + "=" * 72)
    print(f"{'TIMING SUMMARY':^72}")
    print("=" * 72)
    print(f"{'Operation':<30} {'Calls':>8} {'Total':>10} {'Avg':>10} {'Max':>10}")
    print("-" * 72)

    for name, stats in sorted(_timing_registry.items(), key=lambda x: x[1].total_time, reverse=True):
        print(
            f"{name:<30} "
            f"{stats.call_count:>8} "
            f"{stats.total_time*1000:>8.1f}ms "
            f"{stats.avg_time*1000:>8.3f}ms "
            f"{stats.max_time*1000:>8.3f}ms"
        )
    print("=" * 72)


def clear_timing_stats():
    """Reset the timing registry."""
    _timing_registry.clear()


def get_timing_stats() -> Dict[str, TimingStats]:
    """Snapshot of the timing registry."""
    return dict(_timing_registry)


# ---------------------------------------------------------------------------
# Search Profiles
# ---------------------------------------------------------------------------

@dataclass
class SearchProfile:
    """Outcome of one full root search."""
    label: str
    move: tuple
    score: int
    nodes: int
    cache_entries: int
    cache_hits: int
    elapsed: float


def profile_search(piles: Sequence[int], use_cache: bool = True) -> SearchProfile:
    """Run one root search and collect node and cache counters."""
    label = "cached" if use_cache else "uncached"
    cache = TranspositionCache() if use_cache else None
    stats = SearchStats()

    with timed(f"search ({label})"):
        start = time.perf_counter()
        scored = score_moves(piles, cache, use_cache=use_cache, stats=stats)
        move, score = inference.best_move(scored)
        elapsed = time.perf_counter() - start

    cache_stats = cache.stats if cache is not None else None
    return SearchProfile(
        label=label,
        move=tuple(move),
        score=score,
        nodes=stats.nodes,
        cache_entries=cache_stats.entries if cache_stats else 0,
        cache_hits=cache_stats.hits if cache_stats else 0,
        elapsed=elapsed,
    )


def compare_cache_modes(piles: Sequence[int], include_uncached: bool = True) -> List[SearchProfile]:
    """
    Profile the same root with and without memoization and print a table.

    The uncached run grows exponentially with the object count; pass
    ``include_uncached=False`` for large piles.
    """
    profiles = [profile_search(piles, use_cache=True)]
    if include_uncached:
        profiles.append(profile_search(piles, use_cache=False))

    print(f"\nSearch profile for piles {list(piles)}")
    print(f"{'Mode':<10} {'Move':>10} {'Score':>6} {'Nodes':>12} {'Entries':>9} {'Hits':>9} {'Time':>10}")
    print("-" * 72)
    for p in profiles:
        print(
            f"{p.label:<10} {str(p.move):>10} {p.score:>+6d} {p.nodes:>12} "
            f"{p.cache_entries:>9} {p.cache_hits:>9} {p.elapsed*1000:>8.1f}ms"
        )
    return profiles


def profile_function(func: Callable, *args, top_n: int = 20, **kwargs):
    """Run ``func`` under cProfile and print the top entries by cumulative time."""
    pr = cProfile.Profile()
    pr.enable()
    try:
        result = func(*args, **kwargs)
    finally:
        pr.disable()

    s = io.StringIO()
    pstats.Stats(pr, stream=s).sort_stats("cumulative").print_stats(top_n)
    print(s.getvalue())
    return result
