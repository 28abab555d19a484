from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TextIO

from tictactoe.core.board import Board, Position
from tictactoe.core.gamestate import GameState, MoveEntry


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    JUMP = "JUMP"
    RESTART = "RESTART"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and status.
    Examples:
      [ERR] Cell B2 is already occupied.
      [JUMP] Step 3
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


# =========================
# View (board + message + status + move list)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) status line
      4) move list (time-travel targets)

    It does NOT:
      - parse input
      - execute game logic
    """

    def __init__(
        self,
        *,
        prompt: str = "> ",
        descending: bool = False,
        show_history: bool = True,
        clear: bool = True,
        out: Optional[TextIO] = None,
    ) -> None:
        self.prompt = prompt
        self.descending = descending
        self.show_history = show_history
        self.clear = clear
        self.out = out

        self._message: Optional[Message] = None

    # ---------- Message API ----------

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    def set_error(self, text: str) -> None:
        self._message = Message(MessageType.ERR, text)

    def set_info(self, text: str = "") -> None:
        self._message = Message(MessageType.INFO, text) if text else None

    @property
    def message(self) -> Optional[Message]:
        return self._message

    # ---------- Display toggles ----------

    def toggle_sort(self) -> bool:
        self.descending = not self.descending
        return self.descending

    def toggle_history(self) -> bool:
        self.show_history = not self.show_history
        return self.show_history

    # ---------- Render ----------

    def render(self, state: GameState) -> None:
        """
        Render:
          - board
          - message
          - status
          - move list
          - prompt
        """
        if self.clear:
            clear_screen()
        out = self.out or sys.stdout

        print(self.render_text(state), file=out)
        print(self.prompt, end="", flush=True, file=out)

    def render_text(self, state: GameState) -> str:
        lines: List[str] = []

        # 1) board
        lines.append(Board(state.cells).to_cli())
        lines.append("")

        # 2) message
        lines.append(self._message.render() if self._message is not None else "")

        # 3) status
        lines.append(self._status_line(state))

        # 4) move list
        if self.show_history:
            lines.append("")
            lines.extend(self._move_lines(state))
        return "\n".join(lines)

    def _status_line(self, state: GameState) -> str:
        line = state.status
        if state.winning_line is not None:
            cells = " ".join(str(Position.from_index(i)) for i in state.winning_line)
            line += f"   ({cells})"
        return line

    def _move_lines(self, state: GameState) -> List[str]:
        entries = list(state.moves)
        if self.descending:
            entries.reverse()
        return [self._move_line(entry) for entry in entries]

    @staticmethod
    def _move_line(entry: MoveEntry) -> str:
        marker = ">" if entry.is_current else " "
        text = f"{marker} {str(entry.step).rjust(2)}. {entry.label}"
        if entry.move is not None:
            text += f" ({entry.move})"
        return text
