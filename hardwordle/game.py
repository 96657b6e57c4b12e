"""Core game rules: scoring guesses, validation, hard mode and hints."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Collection
from dataclasses import dataclass, field
from enum import IntEnum

from hardwordle.words import VALID_WORDS

WORD_LENGTH = 5
MAX_GUESSES = 6
HINT_COMMAND = "/hint"
_VOWELS = frozenset("aeiou")


class TileState(IntEnum):
    """State of a tile, ordered so that a higher value carries more information."""

    UNKNOWN = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3


class InvalidGuessError(ValueError):
    """Raised when a guess is rejected; the message explains why."""


def evaluate(guess: str, target: str) -> tuple[TileState, ...]:
    """Score a guess against the target.

    A letter is marked present or correct only as many times as it occurs
    in the target.
    """
    result = [
        TileState.CORRECT if g == t else TileState.UNKNOWN
        for g, t in zip(guess, target)
    ]
    remaining = Counter(t for g, t in zip(guess, target) if g != t)
    for i, letter in enumerate(guess):
        if result[i] is TileState.CORRECT:
            continue
        if remaining[letter] > 0:
            result[i] = TileState.PRESENT
            remaining[letter] -= 1
        else:
            result[i] = TileState.ABSENT
    return tuple(result)


def normalize_guess(text: str) -> str:
    """Trim surrounding whitespace and lower-case the input."""
    return text.strip().lower()


def validate_guess(guess: str, valid_words: Collection[str] = VALID_WORDS) -> str:
    """Check length, alphabet and dictionary membership; return the guess."""
    if len(guess) != WORD_LENGTH:
        raise InvalidGuessError("Enter a 5-letter word.")
    if not all(ch in string.ascii_lowercase for ch in guess):
        raise InvalidGuessError("Letters only.")
    if guess not in valid_words:
        raise InvalidGuessError("Not in word list.")
    return guess


def hint(target: str, n: int) -> str:
    """Return the n-th hint, each more specific than the last."""
    if n == 1:
        vowels = sum(ch in _VOWELS for ch in target)
        return f"Hint: The word contains {vowels} vowel(s)."
    if n == 2:
        return f"Hint: The word ends with '{target[-1].upper()}'."
    return f"Hint: The word begins with '{target[0].upper()}'."


@dataclass
class HardModeRules:
    """Clues revealed so far that every later guess must respect."""

    fixed: list[str | None] = field(default_factory=lambda: [None] * WORD_LENGTH)
    must_have: list[str] = field(default_factory=list)

    def check(self, guess: str) -> None:
        """Raise InvalidGuessError if the guess ignores a revealed clue."""
        for position, (wanted, got) in enumerate(zip(self.fixed, guess), start=1):
            if wanted is not None and got != wanted:
                raise InvalidGuessError(f"Position {position} must be {wanted.upper()}.")
        for letter in self.must_have:
            if letter not in guess:
                raise InvalidGuessError(f"Guess must contain {letter.upper()}.")

    def update(self, guess: str, result: tuple[TileState, ...]) -> None:
        """Record the clues revealed by a scored guess."""
        for i, (letter, state) in enumerate(zip(guess, result)):
            if state is TileState.CORRECT:
                self.fixed[i] = letter
            elif state is TileState.PRESENT and letter not in self.must_have:
                self.must_have.append(letter)


class Game:
    """A single hard-mode round against a fixed target word."""

    def __init__(self, target: str, valid_words: Collection[str] | None = None) -> None:
        self.target = target
        self.valid_words = VALID_WORDS if valid_words is None else valid_words
        self.guesses: list[str] = []
        self.results: list[tuple[TileState, ...]] = []
        self.hint_count = 0
        self.rules = HardModeRules()

    @property
    def won(self) -> bool:
        return bool(self.guesses) and self.guesses[-1] == self.target

    @property
    def lost(self) -> bool:
        return not self.won and len(self.guesses) >= MAX_GUESSES

    @property
    def finished(self) -> bool:
        return self.won or self.lost

    def submit(self, text: str) -> tuple[TileState, ...]:
        """Validate and score a guess, returning the tile states."""
        if self.finished:
            raise RuntimeError("The game is over.")
        guess = validate_guess(normalize_guess(text), self.valid_words)
        self.rules.check(guess)
        result = evaluate(guess, self.target)
        self.guesses.append(guess)
        self.results.append(result)
        self.rules.update(guess, result)
        return result

    def next_hint(self) -> str:
        """Return the next, more specific hint."""
        self.hint_count += 1
        return hint(self.target, self.hint_count)