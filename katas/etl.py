"""Convert scrabble scores from score-to-letters to letter-to-score form."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def _ascii_lower(letter: str) -> str:
    return letter.lower() if letter.isascii() else letter


def transform(legacy: Mapping[int, Iterable[str]]) -> dict[str, int]:
    """Return a mapping from lower-case letter to score, ordered by letter.

    Scores are visited in ascending order, so a letter listed under several
    scores keeps the highest one.
    """
    result = {
        _ascii_lower(letter): score
        for score in sorted(legacy)
        for letter in legacy[score]
    }
    return dict(sorted(result.items()))