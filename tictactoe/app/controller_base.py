from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.board import Position
from tictactoe.core.game import Game
from tictactoe.core.gamestate import GameState

logger = logging.getLogger(__name__)


# =========================
# Blocking line input
# =========================

class InputReader:
    """
    Blocking line input.
    Returns None at end of input (EOF / Ctrl-D).
    """
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def read_line(self) -> Optional[str]:
        stream = self._stream or sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.strip()


# =========================
# Base Controller
# =========================

class BaseController(ABC):
    """
    Common controller loop:
      - render (only when dirty)
      - read one line of input
      - parse input into Command/Position
      - handle it to completion before reading the next line

    The controller subscribes to the Game; every state change marks the
    screen dirty. Each input runs exactly one Game operation (or none).

    Concrete controllers implement:
      - handle_command()
      - handle_move()
      - on_quit_requested() (optional override)

    OOP rule:
      - Controller orchestrates.
      - Game handles gameplay.
      - View renders only.
      - CommandProcessor parses only.
    """

    def __init__(
        self,
        *,
        game: Game,
        view: CliView,
        command_processor: CommandProcessor,
        reader: Optional[InputReader] = None,
    ) -> None:
        self.view = view
        self.cmd = command_processor
        self._input = reader or InputReader()
        self._running = True
        self._unsubscribe: Optional[Callable[[], None]] = None

        self.game = game
        self.attach(game)

        # If controllers want to show a one-off message, set it and mark dirty
        self._dirty = True

    # ---------- Game wiring ----------

    def attach(self, game: Game) -> None:
        """Observe `game` (replacing any previously observed one)."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.game = game
        self._unsubscribe = game.subscribe(self.on_state_changed)
        self._dirty = True

    def on_state_changed(self, state: GameState) -> None:
        self._dirty = True

    # ---------- Main loop ----------

    def run(self) -> None:
        """
        Main loop:
          1) render if dirty
          2) read a line (blocking)
          3) handle parsed input
        """
        self.on_start()
        self._dirty = True

        while self._running:
            self._render()

            line = self._input.read_line()
            if line is None:
                logger.debug("End of input")
                break

            parsed = self.cmd.parse(line)
            if not parsed.ok:
                # empty input is ok-noop
                if parsed.error:
                    self.view.set_message(Message(MessageType.ERR, parsed.error))
                    self._dirty = True
                continue

            if parsed.command is not None:
                self._handle_command(parsed.command)
            elif parsed.position is not None:
                self._handle_move(parsed.position)

        self.on_stop()

    # ---------- Rendering ----------

    def _render(self) -> None:
        if not self._dirty:
            return
        self.view.render(self.game.get_state())
        self._dirty = False

    # ---------- Input dispatch ----------

    def _handle_command(self, command: Command) -> None:
        # Common /help handling
        if command.type == CommandType.HELP:
            self.view.set_message(Message(MessageType.INFO, self.cmd.help_text()))
            self._dirty = True
            return

        # Common /quit handling (controllers can override behavior)
        if command.type == CommandType.QUIT:
            self.on_quit_requested()
            self._running = False
            return

        self.handle_command(command)

    def _handle_move(self, pos: Position) -> None:
        self.handle_move(pos)

    # =========================
    # Hooks / Abstract methods
    # =========================

    def on_start(self) -> None:
        """Optional hook before loop starts."""
        pass

    def on_stop(self) -> None:
        """Optional hook after loop ends."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_quit_requested(self) -> None:
        """Default quit behavior: show a last frame with the message."""
        self.view.set_message(Message(MessageType.QUIT, "Exiting..."))
        self._dirty = True
        self._render()

    @abstractmethod
    def handle_command(self, command: Command) -> None:
        """Handle commands except /help and /quit (already processed)."""
        raise NotImplementedError

    @abstractmethod
    def handle_move(self, pos: Position) -> None:
        """Handle a user move input (Position)."""
        raise NotImplementedError
