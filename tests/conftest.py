from __future__ import annotations

import io
from typing import Callable, List

import pytest

from tictactoe.core.game import Game
from tictactoe.core.gamestate import GameState


@pytest.fixture
def game() -> Game:
    return Game()


@pytest.fixture
def play() -> Callable[..., Game]:
    """Play `moves` (cell indices) on `game` (a fresh one by default)."""

    def _play(moves: List[int], game: Game | None = None) -> Game:
        g = game or Game()
        for index in moves:
            result = g.apply_move(index)
            assert result.success, f"move {index} rejected: {result.error_message}"
        return g

    return _play


@pytest.fixture
def recorder():
    """Observer that keeps every GameState it receives."""

    class Recorder:
        def __init__(self) -> None:
            self.states: List[GameState] = []

        def __call__(self, state: GameState) -> None:
            self.states.append(state)

    return Recorder()


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()
