"""Rendering of the board, keyboard and statistics as ANSI text."""

from __future__ import annotations

from collections.abc import Sequence

from hardwordle.game import MAX_GUESSES, TileState
from hardwordle.scores import Scores

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[42;30m"
YELLOW = "\033[43;30m"
GRAY = "\033[100;37m"
CLEAR_SCREEN = "\033[H\033[2J"
EMPTY_ROW = "\033[90m[   ][   ][   ][   ][   ]\033[0m"

_STATE_COLORS = {
    TileState.CORRECT: GREEN,
    TileState.PRESENT: YELLOW,
    TileState.ABSENT: GRAY,
}
_KEYBOARD_ROWS = (("qwertyuiop", ""), ("asdfghjkl", " "), ("zxcvbnm", "   "))
_WIN_MESSAGES = ("Genius!", "Magnificent!", "Impressive!", "Splendid!", "Great!", "Phew!")
_BAR_WIDTH = 12


def render_tile(letter: str, state: TileState) -> str:
    """A coloured tile with the upper-cased letter, or blank if unknown."""
    color = _STATE_COLORS.get(state)
    if color is None:
        return "     "
    return f"{color}  {letter.upper()}  {RESET}"


def keyboard_states(
    guesses: Sequence[str], results: Sequence[Sequence[TileState]]
) -> dict[str, TileState]:
    """The most informative state seen for each guessed letter."""
    best: dict[str, TileState] = {}
    for guess, result in zip(guesses, results):
        for letter, state in zip(guess, result):
            if state > best.get(letter, TileState.UNKNOWN):
                best[letter] = state
    return best


def render_board(guesses: Sequence[str], results: Sequence[Sequence[TileState]]) -> str:
    """The full screen: header, six rows of tiles and the keyboard."""
    lines = [CLEAR_SCREEN + BOLD + "   W O R D L E  [HARD]" + RESET, ""]
    for row in range(MAX_GUESSES):
        if row < len(guesses):
            tiles = "".join(
                render_tile(letter, state) for letter, state in zip(guesses[row], results[row])
            )
        else:
            tiles = EMPTY_ROW
        lines.extend(["  " + tiles, ""])

    best = keyboard_states(guesses, results)
    lines.append("")
    for letters, pad in _KEYBOARD_ROWS:
        keys = []
        for letter in letters:
            color = _STATE_COLORS.get(best.get(letter, TileState.UNKNOWN))
            upper = letter.upper()
            keys.append(f"{color}{upper}{RESET} " if color else f"{upper} ")
        lines.append("  " + pad + "".join(keys))
    lines.append("")
    return "\n".join(lines) + "\n"


def render_stats(scores: Scores, guesses_used: int, won: bool) -> str:
    """Statistics summary with a bar chart of the guess distribution."""
    lines = [
        "",
        "  " + BOLD + "STATISTICS" + RESET,
        f"  Played: {scores.played}   Win%: {scores.win_percentage()}"
        f"   Streak: {scores.streak}   Best: {scores.max_streak}",
        "",
        "  " + BOLD + "GUESS DISTRIBUTION" + RESET,
    ]
    counts = scores.distribution[1 : MAX_GUESSES + 1]
    largest = max([1, *counts])
    for used, count in enumerate(counts, start=1):
        bar = count * _BAR_WIDTH // largest
        if bar < 1 and count > 0:
            bar = 1
        color = GREEN if won and used == guesses_used else GRAY
        lines.append(f"  {used} {color}{' ' * bar:<{_BAR_WIDTH}}{RESET} {count}")
    lines.append("")
    return "\n".join(lines) + "\n"


def win_message(guesses_used: int) -> str:
    """The congratulation shown after winning in the given number of guesses."""
    if not 1 <= guesses_used <= len(_WIN_MESSAGES):
        raise ValueError(f"guesses used must be between 1 and 6, got {guesses_used}")
    return _WIN_MESSAGES[guesses_used - 1]