from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe.core.board import BOARD_SIZE, Position


class CommandType(Enum):
    QUIT = "quit"
    HELP = "help"
    RESTART = "restart"

    # Time travel
    JUMP = "jump"
    BACK = "back"
    FORWARD = "forward"

    # Move list display
    HISTORY = "history"
    SORT = "sort"


# commands taking no argument
_SIMPLE = {
    "quit": CommandType.QUIT,
    "help": CommandType.HELP,
    "restart": CommandType.RESTART,
    "back": CommandType.BACK,
    "forward": CommandType.FORWARD,
    "history": CommandType.HISTORY,
    "sort": CommandType.SORT,
}


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str
    arg: Optional[int] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, position) should be set on success.
    """
    command: Optional[Command] = None
    position: Optional[Position] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.position is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /jump 3)
      - Position (e.g. '2 2' or 'B2')

    This class does NOT execute anything. Controllers decide what to do.
    """

    def __init__(self, board_size: int = BOARD_SIZE) -> None:
        if board_size <= 0:
            raise ValueError("board_size must be positive")
        self.board_size = board_size

    @property
    def help_cmds(self) -> str:
        cmds = ["/jump N", "/back", "/forward", "/history", "/sort", "/restart", "/help", "/quit"]
        return ", ".join(cmds)

    def help_text(self) -> str:
        col_end = chr(ord("A") + self.board_size - 1)
        return (
            f"Input: 'x y' (e.g. 2 2) or 'B2' (A-{col_end} + 1-{self.board_size}).\n"
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        """
        Parse a raw input line.
        Returns ParseResult with either command or position on success.
        """
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        if raw.startswith("/"):
            return self._parse_command(raw)

        # move: "x y" (1..board_size, 1..board_size)
        parts = raw.split()
        if len(parts) == 2 and parts[0].isdecimal() and parts[1].isdecimal():
            x, y = int(parts[0]), int(parts[1])
            if not self._is_in_bounds(x, y):
                return ParseResult(error=self._oob_msg(x, y))
            return ParseResult(position=Position(x, y))

        # move: "B2" (A..col_for_size + 1..board_size)
        if len(raw) >= 2 and raw[0].isalpha():
            col = raw[0].upper()
            rest = raw[1:].strip()
            if rest.isdecimal():
                x = ord(col) - ord("A") + 1
                y = int(rest)
                if not self._is_in_bounds(x, y):
                    return ParseResult(error=self._oob_msg(x, y))
                return ParseResult(position=Position(x, y))

        return ParseResult(error="Invalid input. Use 'x y' or 'B2' or /help")

    # ---------- Helpers ----------

    def _parse_command(self, raw: str) -> ParseResult:
        parts = raw[1:].split()
        name = parts[0].lower() if parts else ""
        args = parts[1:]

        if name == "jump":
            if len(args) != 1 or not args[0].isdecimal():
                return ParseResult(error="Usage: /jump N (N = step number, 0 = game start)")
            return ParseResult(command=Command(CommandType.JUMP, raw, int(args[0])))

        if name in _SIMPLE:
            if args:
                return ParseResult(error=f"/{name} takes no arguments")
            return ParseResult(command=Command(_SIMPLE[name], raw))

        return ParseResult(error=f"Unknown command: {raw}")

    def _is_in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.board_size and 1 <= y <= self.board_size

    def _oob_msg(self, x: int, y: int) -> str:
        return f"Out of bounds: {x}, {y} (must be 1..{self.board_size})"
