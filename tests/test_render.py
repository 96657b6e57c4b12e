import pytest

from hardwordle.game import TileState
from hardwordle.render import (
    BOLD,
    CLEAR_SCREEN,
    EMPTY_ROW,
    GRAY,
    GREEN,
    RESET,
    YELLOW,
    keyboard_states,
    render_board,
    render_stats,
    render_tile,
    win_message,
)
from hardwordle.scores import Scores

C, P, A, U = TileState.CORRECT, TileState.PRESENT, TileState.ABSENT, TileState.UNKNOWN


def test_render_tile_colors():
    assert render_tile("a", C) == GREEN + "  A  " + RESET
    assert render_tile("b", P) == YELLOW + "  B  " + RESET
    assert render_tile("c", A) == GRAY + "  C  " + RESET
    assert render_tile("d", U) == "     "


def test_keyboard_states_takes_best():
    states = keyboard_states(
        ["abcde", "abcde"],
        [(A, A, A, A, A), (C, P, A, A, A)],
    )
    assert states["a"] is C
    assert states["b"] is P
    assert states["c"] is A
    assert "z" not in states


def test_keyboard_states_repeated_letter_in_guess():
    states = keyboard_states(["aabcd"], [(P, C, A, A, A)])
    assert states["a"] is C


def test_render_board_empty():
    board = render_board([], [])
    assert board.startswith(CLEAR_SCREEN + BOLD + "   W O R D L E  [HARD]" + RESET)
    assert board.count(EMPTY_ROW) == 6
    assert "Q W E R T Y U I O P " in board


def test_render_board_with_guess():
    board = render_board(["crane"], [(C, P, A, A, A)])
    assert board.count(EMPTY_ROW) == 5
    assert GREEN + "  C  " + RESET in board
    assert YELLOW + "  R  " + RESET in board
    assert GREEN + "C" + RESET + " " in board
    assert GRAY + "N" + RESET + " " in board


def test_render_stats_win_highlight():
    s = Scores()
    s.record_win(3)
    text = render_stats(s, 3, True)
    assert f"Played: 1   Win%: {s.win_percentage()}   Streak: 1   Best: 1" in text
    assert f"  3 {GREEN}{' ' * 12}{RESET} 1" in text
    assert f"  1 {GRAY}{' ' * 12}{RESET} 0" in text


def test_render_stats_loss_has_no_green():
    s = Scores()
    s.record_win(2)
    s.record_loss()
    text = render_stats(s, 0, False)
    assert GREEN not in text
    assert f"  2 {GRAY}{' ' * 12}{RESET} 1" in text


def test_render_stats_small_bar_at_least_one():
    s = Scores(played=30, wins=30, distribution=[0, 0, 0, 29, 1, 0, 0])
    text = render_stats(s, 4, True)
    assert f"  5 {GRAY}{' ' + ' ' * 11}{RESET} 1" in text


def test_win_messages():
    assert win_message(1) == "Genius!"
    assert win_message(6) == "Phew!"
    with pytest.raises(ValueError):
        win_message(7)