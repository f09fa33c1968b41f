"""
Tests for the console front end.
"""

from colorama import Style

from logic.game_state import GameState, Player
from main import TicTacToeConsole, format_board, run_self_play


def strip_colors(text: str) -> str:
    for code in ("\x1b[32m", "\x1b[31m", Style.DIM, Style.RESET_ALL, Style.BRIGHT):
        text = text.replace(code, "")
    return text


def test_format_board_has_three_rows():
    board = strip_colors(format_board(GameState.from_string("O-XOX----")))
    assert board.splitlines() == ["O - X", "O X -", "- - -"]


def test_console_rejects_bad_input(capsys):
    console = TicTacToeConsole(Player.O)
    console.start()
    before = console.session.game_state

    console.move("abc")
    console.move("12")
    out = capsys.readouterr().out

    assert "Please type a square" in out
    assert "Invalid move 12" in out
    assert console.session.game_state == before


def test_console_move_and_engine_reply(capsys):
    console = TicTacToeConsole(Player.O)
    console.start()
    console.move("4")
    out = capsys.readouterr().out

    assert "User move: 4" in out
    assert "Engine move: 0" in out
    assert console.session.game_state.count_pieces() == 2


def test_console_reports_game_over(capsys):
    console = TicTacToeConsole(Player.O)
    console.session.game_state = GameState.from_string("OO-XX----", Player.O)
    console.move("2")
    out = strip_colors(capsys.readouterr().out)

    assert "Game over. The winner is O." in out
    assert "You won" in out

    console.move("5")
    assert "Game is already over" in capsys.readouterr().out


def test_self_play_prints_draw(capsys):
    run_self_play()
    assert "The game is drawn." in capsys.readouterr().out
