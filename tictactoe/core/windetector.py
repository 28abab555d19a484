"""
Win detection over a single board.

Stateless: every function takes a Board and returns a fresh answer.
"""
from __future__ import annotations

from typing import Optional, Tuple

from tictactoe.core.board import Board, Player

Line = Tuple[int, int, int]

# Winning lines (rows, columns, diagonals). Order matters: the first complete
# line wins.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def winning_line(board: Board) -> Optional[Line]:
    """Return the first complete line, or None."""
    for a, b, c in WIN_LINES:
        mark = board[a]
        if mark != Player.EMPTY and mark == board[b] and mark == board[c]:
            return (a, b, c)
    return None


def evaluate(board: Board) -> Optional[Player]:
    """Return the winning mark, or None (in progress or drawn)."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_draw(board: Board) -> bool:
    """Full board with no complete line."""
    return board.is_full() and winning_line(board) is None
