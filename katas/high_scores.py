"""A player's list of game scores."""

from __future__ import annotations

from collections.abc import Iterable


class HighScores:
    """Scores in the order they were achieved."""

    def __init__(self, scores: Iterable[int]) -> None:
        self._scores = list(scores)

    def __repr__(self) -> str:
        return f"HighScores({self._scores!r})"

    def scores(self) -> list[int]:
        """Return all scores in their original order."""
        return list(self._scores)

    def latest(self) -> int | None:
        """Return the most recent score, or None if there are none."""
        return self._scores[-1] if self._scores else None

    def personal_best(self) -> int | None:
        """Return the highest score, or None if there are none."""
        return max(self._scores, default=None)

    def personal_top_three(self) -> list[int]:
        """Return up to three highest scores, highest first."""
        return sorted(self._scores, reverse=True)[:3]