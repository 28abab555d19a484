import pytest

from tictactoe.core.board import Board, Player
from tictactoe.core.game import Game
from tictactoe.core.move import MoveError


def test_new_game(game) -> None:
    assert len(game.history) == 1
    assert game.current_step == 0
    assert game.current_board() == Board.empty()
    assert game.history[0].move is None
    assert game.x_is_next()
    assert game.status_text() == "Next player: X"
    assert game.move_list() == (("Go to game start", 0),)


def test_old_snapshots_are_untouched(play) -> None:
    game = play([4])
    before = game.history
    boards = [snap.board.cells() for snap in before]

    game.apply_move(0)

    assert game.history[: len(before)] == before
    assert [snap.board.cells() for snap in before] == boards
    assert all(a is b for a, b in zip(before, game.history))


def test_each_move_changes_exactly_one_cell(play) -> None:
    game = play([4, 0, 8, 2, 6])
    for i in range(1, len(game.history)):
        prev, cur = game.history[i - 1].board, game.history[i].board
        changed = cur.diff(prev)
        assert len(changed) == 1
        assert prev[changed[0]] == Player.EMPTY
        assert cur[changed[0]] != Player.EMPTY
        assert game.history[i].move_index == i
        assert game.history[i].move.index == changed[0]


def test_turns_alternate_x_first(play) -> None:
    game = play([0, 1, 2, 4, 3, 5, 7, 6])
    for i in range(1, len(game.history)):
        changed = game.history[i].board.diff(game.history[i - 1].board)[0]
        expected = Player.X if i % 2 == 1 else Player.O
        assert game.history[i].board[changed] == expected


def test_occupied_cell_is_a_no_op(play) -> None:
    game = play([4])
    history, step = game.history, game.current_step

    result = game.apply_move(4)

    assert not result.success
    assert result.error == MoveError.CELL_OCCUPIED
    assert game.history is history
    assert game.current_step == step


def test_move_after_win_is_a_no_op(play) -> None:
    game = play([0, 4, 1, 3, 2])
    history = game.history

    result = game.apply_move(5)

    assert result.error == MoveError.GAME_ALREADY_WON
    assert game.history is history
    assert game.current_step == 5


def test_winner_checked_before_occupancy(play) -> None:
    game = play([0, 4, 1, 3, 2])
    assert game.apply_move(0).error == MoveError.GAME_ALREADY_WON


@pytest.mark.parametrize("index", [-1, 9, 100, "4", None, 1.0, True])
def test_out_of_bounds_move_is_a_no_op(game, index) -> None:
    result = game.apply_move(index)
    assert result.error == MoveError.OUT_OF_BOUNDS
    assert len(game.history) == 1
    assert game.current_step == 0


def test_winning_scenario(play) -> None:
    game = play([0, 4, 1, 3, 2])

    assert game.current_board() == Board.from_string("XXX OO. ...")
    assert game.winner() == Player.X
    assert game.winning_line() == (0, 1, 2)
    assert game.status_text() == "Winner: X"
    assert not game.apply_move(5).success
    assert game.current_board() == Board.from_string("XXX OO. ...")
    assert game.valid_moves() == []


def test_winning_move_is_flagged(play) -> None:
    game = play([0, 4, 1, 3])
    assert game.apply_move(2).is_winning_move


def test_o_can_win(play) -> None:
    game = play([0, 3, 1, 4, 8, 5])
    assert game.winner() == Player.O
    assert game.status_text() == "Winner: O"


def test_jump_to_start(play) -> None:
    game = play([0, 4, 1])

    assert game.jump_to(0).success

    assert game.current_board() == Board.empty()
    assert game.status_text() == "Next player: X"
    assert len(game.history) == 4


def test_jump_keeps_history_and_recomputes_turn(play) -> None:
    game = play([0, 4, 1, 3])
    game.jump_to(1)
    assert game.current_player() == Player.O
    assert game.status_text() == "Next player: O"
    game.jump_to(3)
    assert game.current_board() == game.history[3].board
    assert len(game.history) == 5


@pytest.mark.parametrize("step", [-1, 5, 99, "1", None, True])
def test_jump_out_of_range_is_rejected(play, step) -> None:
    game = play([0, 4, 1, 3])
    game.jump_to(2)

    result = game.jump_to(step)

    assert result.error == MoveError.STEP_OUT_OF_RANGE
    assert game.current_step == 2


def test_move_after_rewind_discards_later_steps(play) -> None:
    game = play([0, 4, 1, 3, 8])
    kept = game.history[:3]
    game.jump_to(2)

    assert game.apply_move(6).success

    assert len(game.history) == 2 + 2
    assert game.current_step == 3
    assert game.history[:3] == kept
    assert game.current_board() == Board.from_string("X.. .O. X..")


def test_rewind_from_won_position_allows_replay(play) -> None:
    game = play([0, 4, 1, 3, 2])
    game.jump_to(4)
    assert game.winner() is None
    assert game.apply_move(8).success
    assert game.winner() is None
    assert game.current_board()[2] == Player.EMPTY
    assert len(game.history) == 6


def test_move_list_labels(play) -> None:
    game = play([0, 4])
    assert game.move_list() == (
        ("Go to game start", 0),
        ("Go to move #1", 1),
        ("Go to move #2", 2),
    )


def test_draw_status_reference_behavior(play) -> None:
    game = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert game.is_draw()
    assert game.winner() is None
    assert game.status_text() == "Next player: O"
    assert game.apply_move(0).error == MoveError.CELL_OCCUPIED


def test_draw_can_be_announced(play) -> None:
    game = play([0, 1, 2, 4, 3, 5, 7, 6, 8], Game(announce_draw=True))
    assert game.status_text() == "Draw"
    assert game.get_state().is_game_over()


def test_get_state(play) -> None:
    game = play([0, 4, 1])
    game.jump_to(2)

    state = game.get_state()

    assert state.cells == game.current_board().cells()
    assert state.current_step == 2
    assert state.history_length == 4
    assert state.status == "Next player: X"
    assert state.next_player == Player.X
    assert [m.step for m in state.moves] == [0, 1, 2, 3]
    assert [m.is_current for m in state.moves] == [False, False, True, False]
    assert state.moves[3].move.index == 1
    assert state.winner is None
    assert not state.is_game_over()


def test_observers_see_each_change(game, recorder) -> None:
    game.subscribe(recorder)

    game.apply_move(4)
    game.apply_move(0)
    game.jump_to(1)

    assert [s.current_step for s in recorder.states] == [1, 2, 1]
    assert [s.history_length for s in recorder.states] == [2, 3, 3]
    assert recorder.states[-1].cells[4] == Player.X


def test_observers_not_called_on_rejected_requests(game, recorder) -> None:
    game.apply_move(4)
    game.subscribe(recorder)

    game.apply_move(4)
    game.apply_move(42)
    game.jump_to(7)

    assert recorder.states == []


def test_observer_sees_complete_state(game) -> None:
    seen = []

    def observer(state):
        seen.append((len(game.history), game.current_step, game.current_board()[state.moves[-1].move.index]))

    game.subscribe(observer)
    game.apply_move(2)

    assert seen == [(2, 1, Player.X)]


def test_unsubscribe(game, recorder) -> None:
    unsubscribe = game.subscribe(recorder)
    game.subscribe(recorder)
    game.apply_move(0)
    unsubscribe()
    unsubscribe()
    game.apply_move(1)

    assert len(recorder.states) == 1
