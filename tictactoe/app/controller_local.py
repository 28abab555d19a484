from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tictactoe.app.controller_base import BaseController, InputReader
from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.board import Position
from tictactoe.core.game import Game

logger = logging.getLogger(__name__)


@dataclass
class LocalConfig:
    announce_draw: bool = False
    descending: bool = False
    clear_screen: bool = True
    prompt: str = "> "


class LocalController(BaseController):
    """
    Hot-seat controller: two players share one terminal.

    Key rules:
      - A move is always played by the side to move (X on even steps).
      - /jump N, /back, /forward move through history without changing it;
        the next move played from an earlier step discards the later steps.
      - /restart replaces the game with a fresh one.
      - /sort and /history only change how the move list is shown.
    """

    def __init__(self, *, config: Optional[LocalConfig] = None, reader: Optional[InputReader] = None, view: Optional[CliView] = None) -> None:
        self.cfg = config or LocalConfig()

        game = Game(announce_draw=self.cfg.announce_draw)

        view = view or CliView(
            prompt=self.cfg.prompt,
            descending=self.cfg.descending,
            clear=self.cfg.clear_screen,
        )

        super().__init__(game=game, view=view, command_processor=CommandProcessor(), reader=reader)

    # ---------- Moves ----------

    def handle_move(self, pos: Position) -> None:
        player = self.game.current_player()
        result = self.game.apply_move(pos.to_index())
        if not result.success:
            self.view.set_error(result.error_message)
            self._dirty = True
            return

        if result.is_winning_move:
            self.view.set_message(Message(MessageType.MOVE, f"{player.name} at {pos} wins!"))
        else:
            self.view.set_message(Message(MessageType.MOVE, f"{player.name} at {pos}"))

    # ---------- Commands ----------

    def handle_command(self, command: Command) -> None:
        t = command.type

        if t == CommandType.JUMP:
            self._jump(command.arg if command.arg is not None else -1)
            return

        if t == CommandType.BACK:
            if self.game.current_step == 0:
                self.view.set_error("Already at game start.")
                self._dirty = True
                return
            self._jump(self.game.current_step - 1)
            return

        if t == CommandType.FORWARD:
            if self.game.current_step == len(self.game.history) - 1:
                self.view.set_error("Already at the latest move.")
                self._dirty = True
                return
            self._jump(self.game.current_step + 1)
            return

        if t == CommandType.RESTART:
            logger.info("Restarting game")
            self.attach(Game(announce_draw=self.cfg.announce_draw))
            self.view.set_message(Message(MessageType.RESTART, "New game"))
            return

        if t == CommandType.SORT:
            descending = self.view.toggle_sort()
            self.view.set_info("Move list: newest first" if descending else "Move list: oldest first")
            self._dirty = True
            return

        if t == CommandType.HISTORY:
            shown = self.view.toggle_history()
            self.view.set_info("Move list shown" if shown else "Move list hidden")
            self._dirty = True
            return

        self.view.set_error(f"Unsupported command: {command.raw}")
        self._dirty = True

    def _jump(self, step: int) -> None:
        result = self.game.jump_to(step)
        if not result.success:
            last = len(self.game.history) - 1
            self.view.set_error(f"{result.error_message} (0..{last})")
            self._dirty = True
            return
        self.view.set_message(Message(MessageType.JUMP, "Game start" if step == 0 else f"Move #{step}"))
