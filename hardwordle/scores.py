"""Persistent player statistics."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SCORES_FILENAME = ".wordle_scores.json"
_DISTRIBUTION_SIZE = 7  # index 1..6 = guesses used


@dataclass
class Scores:
    """Games played, wins, streaks and the guess distribution."""

    played: int = 0
    wins: int = 0
    streak: int = 0
    max_streak: int = 0
    distribution: list[int] = field(default_factory=lambda: [0] * _DISTRIBUTION_SIZE)

    def record_win(self, guesses_used: int) -> None:
        """Count a win that took the given number of guesses."""
        if not 1 <= guesses_used < _DISTRIBUTION_SIZE:
            raise ValueError(f"guesses used must be between 1 and 6, got {guesses_used}")
        self.played += 1
        self.wins += 1
        self.streak += 1
        self.max_streak = max(self.max_streak, self.streak)
        self.distribution[guesses_used] += 1

    def record_loss(self) -> None:
        """Count a loss and reset the current streak."""
        self.played += 1
        self.streak = 0

    def win_percentage(self) -> int:
        """Whole-number percentage of games won."""
        return self.wins * 100 // self.played if self.played > 0 else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "played": self.played,
            "wins": self.wins,
            "streak": self.streak,
            "max_streak": self.max_streak,
            "distribution": list(self.distribution),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scores:
        def as_int(value: Any) -> int:
            return value if isinstance(value, int) and not isinstance(value, bool) else 0

        raw = data.get("distribution")
        values = [as_int(v) for v in raw] if isinstance(raw, list) else []
        values = (values + [0] * _DISTRIBUTION_SIZE)[:_DISTRIBUTION_SIZE]
        return cls(
            played=as_int(data.get("played", 0)),
            wins=as_int(data.get("wins", 0)),
            streak=as_int(data.get("streak", 0)),
            max_streak=as_int(data.get("max_streak", 0)),
            distribution=values,
        )


def default_scores_path() -> Path:
    """The scores file in the home directory, or the working directory if unknown."""
    try:
        return Path.home() / SCORES_FILENAME
    except RuntimeError:
        return Path(SCORES_FILENAME)


def load_scores(path: Path | str | None = None) -> Scores:
    """Load scores, falling back to empty ones if the file is missing or unreadable."""
    target = Path(path) if path is not None else default_scores_path()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return Scores()
    if not isinstance(data, dict):
        return Scores()
    return Scores.from_dict(data)


def save_scores(scores: Scores, path: Path | str | None = None) -> None:
    """Write scores as JSON; failures to write are ignored."""
    target = Path(path) if path is not None else default_scores_path()
    try:
        target.write_text(json.dumps(scores.to_dict(), separators=(",", ":")), encoding="utf-8")
    except OSError:
        pass