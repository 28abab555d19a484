from typing import Iterable, Iterator, List, Optional, Tuple
import numpy as np
from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """Cell / mark constants."""
    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        return {0: ".", 1: "X", 2: "O"}[self.value]

    def __str__(self) -> str:
        return self.name if self != Player.EMPTY else ""


@dataclass(frozen=True)
class Position:
    """
    Immutable position on the board.
    Coordinates are 1-based: (1..3, 1..3), x is the column, y the row.
    """
    x: int
    y: int

    def __post_init__(self):
        if not isinstance(self.x, int) or not isinstance(self.y, int):
            raise TypeError("Position coordinates must be integers")
        if self.x < 1 or self.y < 1:
            raise ValueError("Position coordinates must be >= 1")

    def __str__(self) -> str:
        """Return human-readable form like B2."""
        col = chr(ord("A") + self.x - 1)
        return f"{col}{self.y}"

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        """Check if this position is within board size."""
        return 1 <= self.x <= size and 1 <= self.y <= size

    def to_index(self) -> int:
        """Row-major board index (0..8)."""
        if not self.in_bounds():
            raise ValueError(f"Out of bounds: {self}")
        return (self.y - 1) * BOARD_SIZE + (self.x - 1)

    @staticmethod
    def from_index(index: int) -> "Position":
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Index out of range: {index}")
        row, col = divmod(index, BOARD_SIZE)
        return Position(col + 1, row + 1)


class Board:
    """
    Immutable 3x3 board.

    - Cells are indexed 0..8 in row-major order.
    - Internally stores a read-only numpy array of Player values.
    - `with_mark` returns a new Board; an existing Board never changes.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable[Player]] = None) -> None:
        if cells is None:
            cells = [Player.EMPTY] * CELL_COUNT
        values = [p.value for p in cells]
        if len(values) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells, got {len(values)}")
        grid = np.array(values, dtype=np.int8)
        grid.flags.writeable = False
        self._cells: np.ndarray = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from 9 symbols, e.g. "XO.X.O..."; whitespace is ignored.
        '.', '_' and '-' mean EMPTY.
        """
        symbols = {"X": Player.X, "O": Player.O, ".": Player.EMPTY, "_": Player.EMPTY, "-": Player.EMPTY}
        chars = [ch for ch in text.upper() if not ch.isspace()]
        if len(chars) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells, got {len(chars)}")
        try:
            return cls(symbols[ch] for ch in chars)
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol: {e.args[0]!r}") from None

    # ---------- Cell access ----------

    def get(self, index: int) -> Player:
        """
        Raises:
            ValueError if index is outside 0..8.
        """
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Out of bounds: {index}")
        return Player(int(self._cells[index]))

    def __getitem__(self, index: int) -> Player:
        return self.get(index)

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self) -> Iterator[Player]:
        for v in self._cells:
            yield Player(int(v))

    def cells(self) -> Tuple[Player, ...]:
        return tuple(self)

    def is_empty(self, index: int) -> bool:
        return self.get(index) == Player.EMPTY

    def with_mark(self, index: int, player: Player) -> "Board":
        """
        Return a new board with `player` placed at `index`.

        Raises:
            ValueError if out of bounds, occupied, or player is EMPTY.
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Out of bounds: {index}")
        if self._cells[index] != Player.EMPTY.value:
            raise ValueError(f"Cell occupied at {Position.from_index(index)}")
        grid = np.copy(self._cells)
        grid[index] = player.value
        new_board = Board.__new__(Board)
        grid.flags.writeable = False
        new_board._cells = grid
        return new_board

    # ---------- Iteration / helpers ----------

    def marks(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self._cells))

    def is_full(self) -> bool:
        return self.marks() == CELL_COUNT

    def diff(self, other: "Board") -> List[int]:
        """Indices where the two boards differ."""
        return [int(i) for i in np.flatnonzero(self._cells != other._cells)]

    # ---------- Equality ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({''.join(p.symbol() for p in self)!r})"

    # ---------- Rendering ----------

    def to_cli(self) -> str:
        letters = [chr(ord("A") + i) for i in range(BOARD_SIZE)]
        lines = []
        lines.append("     " + " ".join(letters))
        for y in range(BOARD_SIZE):
            row = [Player(int(v)).symbol() for v in self._cells[y * BOARD_SIZE:(y + 1) * BOARD_SIZE]]
            lines.append(f"{str(y + 1).rjust(3)}  " + " ".join(row))
        return "\n".join(lines)
