from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from tictactoe.core.board import Board, Player, CELL_COUNT
from tictactoe.core.move import Move, MoveError, MoveResult
from tictactoe.core.gamestate import GameState, MoveEntry, Snapshot
from tictactoe.core.movevalidator import MoveValidator
from tictactoe.core import windetector

logger = logging.getLogger(__name__)

Observer = Callable[[GameState], None]


class Game:
    """
    Main game object: the single source of truth for game progress.

    Owns:
      - history of board snapshots (history[0] is the empty board)
      - current step pointer into history
      - MoveValidator
      - observers notified after every state change

    Turn parity is derived from the current step (X moves on even steps),
    never stored.

    Only `apply_move` and `jump_to` change state. Illegal requests leave the
    state untouched, notify nobody, and return a failed MoveResult.
    """

    def __init__(self, *, announce_draw: bool = False) -> None:
        """
        Initialize game.

        Args:
            announce_draw: Report "Draw" as status on a full board with no
                winner instead of the next player (default: False)
        """
        self.validator = MoveValidator()
        self.announce_draw = announce_draw

        self._history: Tuple[Snapshot, ...] = (Snapshot(board=Board.empty(), move_index=0),)
        self._current_step: int = 0
        self._observers: List[Observer] = []

        logger.info("New game started (announce_draw=%s)", announce_draw)

    # -------------------------
    # State helpers
    # -------------------------

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return self._history

    @property
    def current_step(self) -> int:
        return self._current_step

    def current_board(self) -> Board:
        return self._history[self._current_step].board

    def x_is_next(self) -> bool:
        return self._current_step % 2 == 0

    def current_player(self) -> Player:
        return Player.X if self.x_is_next() else Player.O

    def winner(self) -> Optional[Player]:
        return windetector.evaluate(self.current_board())

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return windetector.winning_line(self.current_board())

    def is_draw(self) -> bool:
        return windetector.is_draw(self.current_board())

    def status_text(self) -> str:
        winner = self.winner()
        if winner is not None:
            return f"Winner: {winner.name}"
        if self.announce_draw and self.is_draw():
            return "Draw"
        return f"Next player: {self.current_player().name}"

    def move_list(self) -> Tuple[Tuple[str, int], ...]:
        """(label, step) pairs in history order."""
        return tuple((self._label(step), step) for step in range(len(self._history)))

    def get_state(self) -> GameState:
        """Get current game state."""
        board = self.current_board()
        moves = tuple(
            MoveEntry(
                label=self._label(step),
                step=step,
                move=snap.move,
                is_current=(step == self._current_step),
            )
            for step, snap in enumerate(self._history)
        )
        return GameState(
            cells=board.cells(),
            current_step=self._current_step,
            history_length=len(self._history),
            status=self.status_text(),
            moves=moves,
            winner=windetector.evaluate(board),
            winning_line=windetector.winning_line(board),
            is_draw=windetector.is_draw(board),
        )

    @staticmethod
    def _label(step: int) -> str:
        return "Go to game start" if step == 0 else f"Go to move #{step}"

    # -------------------------
    # Move / validation
    # -------------------------

    def can_move(self, index: int) -> bool:
        """Check if current player can mark cell `index`."""
        move = Move(index=index, player=self.current_player())
        return self.validator.validate(self.current_board(), move).success

    def valid_moves(self) -> List[int]:
        return [i for i in range(CELL_COUNT) if self.can_move(i)]

    def apply_move(self, index: int) -> MoveResult:
        """
        Mark cell `index` for the current player.

        Snapshots after the current step are discarded first, so playing
        while rewound starts a new branch.

        Returns:
            MoveResult (success, error, is_winning_move)
        """
        move = Move(index=index, player=self.current_player())
        board = self.current_board()

        result = self.validator.validate(board, move)
        if not result.success:
            logger.debug("Rejected move %r at step %d: %s", index, self._current_step, result.error_message)
            return result

        step = self._current_step + 1
        snapshot = Snapshot(board=board.with_mark(index, move.player), move_index=step, move=move)
        self._history, self._current_step = self._history[:step] + (snapshot,), step
        logger.debug("Step %d: %s", step, move)

        if result.is_winning_move:
            logger.info("Winner: %s after %d moves", move.player.name, step)

        self._notify()
        return result

    def jump_to(self, step: int) -> MoveResult:
        """
        Move the step pointer to `step`; history is kept until the next move.
        Out-of-range steps are rejected, not clamped.
        """
        if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < len(self._history):
            logger.debug("Rejected jump to %r (history length %d)", step, len(self._history))
            return MoveResult.fail(MoveError.STEP_OUT_OF_RANGE)

        self._current_step = step
        logger.debug("Jumped to step %d", step)
        self._notify()
        return MoveResult.ok()

    # -------------------------
    # Observers
    # -------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register `observer` to be called with the new GameState after every
        state change. Returns a function that unsubscribes it.
        """
        if observer not in self._observers:
            self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        if not self._observers:
            return
        state = self.get_state()
        for observer in list(self._observers):
            observer(state)
