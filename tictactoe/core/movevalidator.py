from __future__ import annotations

from tictactoe.core.board import Board, CELL_COUNT
from tictactoe.core.move import Move, MoveError, MoveResult
from tictactoe.core import windetector


class MoveValidator:
    """
    Validates moves against a board.

    A move is legal when:
      - the index is an int in 0..8
      - the board has no winner yet
      - the cell is empty
    The winner check comes before the occupancy check.
    """

    def validate(self, board: Board, move: Move) -> MoveResult:
        if isinstance(move.index, bool) or not isinstance(move.index, int):
            return MoveResult.fail(MoveError.OUT_OF_BOUNDS)
        if not 0 <= move.index < CELL_COUNT:
            return MoveResult.fail(MoveError.OUT_OF_BOUNDS)

        if windetector.evaluate(board) is not None:
            return MoveResult.fail(MoveError.GAME_ALREADY_WON)

        if not board.is_empty(move.index):
            return MoveResult.fail(
                MoveError.CELL_OCCUPIED,
                f"Cell {move.position} is already occupied.",
            )

        # virtual placement: does this move complete a line?
        winning = windetector.evaluate(board.with_mark(move.index, move.player)) is not None
        return MoveResult.ok(is_winning_move=winning)
