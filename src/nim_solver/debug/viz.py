"""
Terminal visualizer for root move scores.

Shows every move the automated player could make, its minimax score and
what Nim theory predicts for the resulting position, with the chosen move
highlighted.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from nim_solver.core.theory import nim_sum
from nim_solver.core.types import WIN_SCORE, Move
from nim_solver.selection.inference import winning_moves

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "gray": "\033[38;5;245m",
    "cyan": "\033[38;5;37m",
}

BG = {
    "selected": "\033[48;5;22m",  # Dark green
}


def score_color(score: int) -> str:
    return FG["green"] if score == WIN_SCORE else FG["red"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    return text + " " * gap


# ═══════════════════════════════════════════════════════════════════════════════
# Table rendering
# ═══════════════════════════════════════════════════════════════════════════════

COLUMNS = (("Pile", 6), ("Take", 6), ("Leaves", 18), ("Nim-sum", 9), ("Score", 7))


def _result_piles(piles: Sequence[int], move: Move) -> List[int]:
    out = list(piles)
    out[move.pile_index] -= move.count
    return out


def render_scores(
    piles: Sequence[int],
    scored: List[Tuple[Move, int]],
    selected: Optional[Move] = None,
    color: bool = True,
) -> List[str]:
    """
    Render one table row per root move.

    Args:
        piles: Root pile counts
        scored: (move, score) pairs as returned by score_moves()
        selected: Move to highlight
        color: Emit ANSI codes

    Returns:
        Lines ready to print
    """
    def style(code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if color else text

    header = " ".join(pad(name, width) for name, width in COLUMNS)
    lines = [style(BOLD, header), style(DIM, "─" * visible_len(header))]

    for move, score in scored:
        after = _result_piles(piles, move)
        cells = [
            str(move.pile_index + 1),
            str(move.count),
            str(after),
            str(nim_sum(after)),
            style(score_color(score), f"{score:+d}"),
        ]
        row = " ".join(pad(cell, width) for cell, (_, width) in zip(cells, COLUMNS))
        if move == selected:
            row = style(BG["selected"], row)
        lines.append(row)

    wins = winning_moves(scored, WIN_SCORE)
    summary = f"{len(wins)} of {len(scored)} moves win"
    lines.append(style(FG["cyan"], summary))
    return lines


def render_debug(
    piles: Sequence[int],
    scored: List[Tuple[Move, int]],
    selected: Optional[Move] = None,
    color: bool = True,
) -> str:
    """Full debug block for one AI decision."""
    title = f"Move scores for piles {list(piles)} (nim-sum {nim_sum(piles)})"
    body = render_scores(piles, scored, selected, color=color)
    return "\n".join([title, *body])
