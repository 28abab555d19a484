from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from tictactoe.core.board import Player, Position


@dataclass(frozen=True)
class Move:
    """Represents a mark placed on the board."""
    index: int
    player: Player

    @property
    def position(self) -> Position:
        return Position.from_index(self.index)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.player.name} at {self.position}"


class MoveError(Enum):
    CELL_OCCUPIED = "Cell is already occupied."
    GAME_ALREADY_WON = "Game is already over."
    OUT_OF_BOUNDS = "Move is out of bounds."
    STEP_OUT_OF_RANGE = "No such step in history."


@dataclass
class MoveResult:
    """Result of a move or a jump."""
    success: bool
    is_winning_move: bool = False
    error: Optional[MoveError] = None
    error_message: str = ""

    @staticmethod
    def ok(*, is_winning_move: bool = False) -> "MoveResult":
        return MoveResult(
            success=True,
            is_winning_move=is_winning_move,
        )

    @staticmethod
    def fail(error: MoveError, msg: str = "") -> "MoveResult":
        return MoveResult(
            success=False,
            is_winning_move=False,
            error=error,
            error_message=msg or error.value,
        )
