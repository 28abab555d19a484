from tictactoe.cli.view import CliView, Message, MessageType


def test_render_text_layout(play) -> None:
    game = play([0, 4])
    view = CliView(clear=False)
    view.set_message(Message(MessageType.MOVE, "O at B2"))

    lines = view.render_text(game.get_state()).splitlines()

    assert lines[:4] == [
        "     A B C",
        "  1  X . .",
        "  2  . O .",
        "  3  . . .",
    ]
    assert "[MOVE] O at B2" in lines
    assert "Next player: X" in lines
    assert lines[-3:] == [
        "   0. Go to game start",
        "   1. Go to move #1 (X at A1)",
        ">  2. Go to move #2 (O at B2)",
    ]


def test_descending_move_list(play) -> None:
    game = play([0, 4])
    game.jump_to(1)
    view = CliView(clear=False, descending=True)

    lines = view.render_text(game.get_state()).splitlines()

    assert lines[-3:] == [
        "   2. Go to move #2 (O at B2)",
        ">  1. Go to move #1 (X at A1)",
        "   0. Go to game start",
    ]


def test_hidden_move_list(game) -> None:
    view = CliView(clear=False, show_history=False)
    assert "Go to game start" not in view.render_text(game.get_state())
    assert view.toggle_history() is True
    assert "Go to game start" in view.render_text(game.get_state())


def test_winner_line_is_shown(play) -> None:
    game = play([0, 4, 1, 3, 2])
    text = CliView(clear=False).render_text(game.get_state())
    assert "Winner: X   (A1 B1 C1)" in text


def test_render_writes_prompt(game, out) -> None:
    view = CliView(clear=False, out=out, prompt="ttt> ")
    view.render(game.get_state())
    assert out.getvalue().endswith("ttt> ")
    assert "Next player: X" in out.getvalue()


def test_message_api() -> None:
    view = CliView(clear=False)
    view.set_error("bad")
    assert view.message.render() == "[ERR] bad"
    view.set_info("")
    assert view.message is None
    assert Message(MessageType.QUIT).render() == "[QUIT]"
    assert view.toggle_sort() is True
