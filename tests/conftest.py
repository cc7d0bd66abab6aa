"""
Shared test fixtures for nim_solver tests.

Design principles:
- Small pile configurations so uncached searches stay fast
- Independent brute-force oracle (plain tuples, no package code)
- Minimal, focused fixtures
"""

import tempfile
from functools import lru_cache
from itertools import permutations
from pathlib import Path
from typing import Callable, Generator, List, Set, Tuple

import pytest

from nim_solver.core.types import Player
from nim_solver.games.game_state import GameState
from nim_solver.games.nim import Nim, generate_children
from nim_solver.search.transposition import TranspositionCache


# Roots small enough for the uncached search
SMALL_ROOTS = [
    (1,),
    (5,),
    (1, 1),
    (1, 2),
    (2, 2),
    (1, 2, 3),
    (0, 3, 1),
    (2, 0, 2),
    (1, 1, 1),
    (3, 4),
]


# =============================================================================
# Oracle
# =============================================================================

@lru_cache(maxsize=None)
def brute_force_score(piles: Tuple[int, ...], player: int) -> int:
    """
    Plain recursive minimax over tuples, Player 2 maximizing.

    Shares no code with the package under test. Memoized on the exact
    (unsorted) tuple, so it does not rely on canonical keys either.
    """
    if all(p == 0 for p in piles):
        return -1 if player == 2 else 1

    nxt = 1 if player == 2 else 2
    scores = []
    for i, p in enumerate(piles):
        for take in range(1, p + 1):
            child = piles[:i] + (p - take,) + piles[i + 1:]
            scores.append(brute_force_score(child, nxt))
    return max(scores) if player == 2 else min(scores)


def reachable_states(root: GameState) -> List[GameState]:
    """Every distinct (ordered) position reachable from ``root``, root included."""
    seen: Set[Tuple[Tuple[int, ...], int]] = set()
    out: List[GameState] = []
    stack = [root]
    while stack:
        state = stack.pop()
        ident = (tuple(state.piles.tolist()), int(state.current_player))
        if ident in seen:
            continue
        seen.add(ident)
        out.append(state)
        stack.extend(generate_children(state))
    return out


def all_permutations(piles: Tuple[int, ...]) -> List[Tuple[int, ...]]:
    return sorted(set(permutations(piles)))


@pytest.fixture
def oracle() -> Callable[[Tuple[int, ...], int], int]:
    return brute_force_score


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove solver environment overrides."""
    monkeypatch.delenv("NIM_SOLVER_CONFIG", raising=False)
    monkeypatch.delenv("NIM_SOLVER_LOG_LEVEL", raising=False)


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def start_state() -> GameState:
    """Classic 3-4-5 opening with the AI to move."""
    return GameState([3, 4, 5], Player.B)


@pytest.fixture
def empty_state() -> GameState:
    return GameState([0, 0, 0], Player.B)


@pytest.fixture
def cache() -> TranspositionCache:
    return TranspositionCache()


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> Nim:
    """Fresh 3-4-5 match, human first."""
    return Nim([3, 4, 5], Player.HUMAN)


# =============================================================================
# I/O Fixtures
# =============================================================================

class ScriptedIO:
    """Feeds canned input lines and records everything printed."""

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def scripted_io() -> Callable[[List[str]], ScriptedIO]:
    return ScriptedIO
