from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tictactoe.core.board import Board, Player
from tictactoe.core.move import Move


@dataclass(frozen=True)
class Snapshot:
    """One history entry: the board after `move_index` moves."""
    board: Board
    move_index: int
    move: Optional[Move] = None


@dataclass(frozen=True)
class MoveEntry:
    """One row of the move list; activating it means jump_to(step)."""
    label: str
    step: int
    move: Optional[Move] = None
    is_current: bool = False


@dataclass(frozen=True)
class GameState:
    """Read-only view of the game handed to observers and renderers."""
    cells: Tuple[Player, ...]
    current_step: int
    history_length: int
    status: str
    moves: Tuple[MoveEntry, ...] = ()
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False

    @property
    def next_player(self) -> Player:
        return Player.X if self.current_step % 2 == 0 else Player.O

    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw
