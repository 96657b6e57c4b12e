"""Command-line entry point for the interactive game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

import colorama

from hardwordle.game import HINT_COMMAND, MAX_GUESSES, Game, InvalidGuessError, normalize_guess
from hardwordle.render import BOLD, RESET, render_board, render_stats, win_message
from hardwordle.scores import default_scores_path, load_scores, save_scores
from hardwordle.words import choose_target


def enable_ansi() -> None:
    """Make ANSI escape sequences work on consoles that need it."""
    colorama.just_fix_windows_console()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hardwordle", description="Play Wordle in hard mode.")
    parser.add_argument("--seed", type=int, help="seed for choosing the word")
    parser.add_argument("--scores", type=Path, help="path of the statistics file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round on standard input and output."""
    args = _parse_args(argv)
    enable_ansi()
    path = args.scores if args.scores is not None else default_scores_path()
    scores = load_scores(path)
    game = Game(choose_target(random.Random(args.seed)))
    out = sys.stdout

    while True:
        out.write(render_board(game.guesses, game.results))
        used = len(game.guesses)

        if game.won:
            out.write(f"  {BOLD}{win_message(used)}{RESET}\n")
            scores.record_win(used)
            save_scores(scores, path)
            out.write(render_stats(scores, used, True))
            return 0
        if game.lost:
            out.write(f"  The word was: {BOLD}{game.target.upper()}{RESET}\n")
            scores.record_loss()
            save_scores(scores, path)
            out.write(render_stats(scores, 0, False))
            return 0

        while True:
            out.write(f"  Guess {used + 1}/{MAX_GUESSES} (or {HINT_COMMAND}): ")
            out.flush()
            line = sys.stdin.readline()
            if not line:
                return 0
            text = normalize_guess(line)
            if text == HINT_COMMAND:
                out.write(f"  {game.next_hint()}\n")
                continue
            try:
                game.submit(text)
            except InvalidGuessError as err:
                out.write(f"  {err}\n")
                continue
            break


if __name__ == "__main__":
    sys.exit(main())