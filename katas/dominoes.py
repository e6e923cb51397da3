"""Arrange dominoes into a closed chain."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

Domino = tuple[int, int]


def chain(dominoes: Sequence[Domino]) -> list[Domino] | None:
    """Return the dominoes ordered into a closed chain, or None if there is none.

    Stones may be flipped; each neighbouring pair shares a number and the
    last stone's second half matches the first stone's first half.
    """
    stones = [tuple(d) for d in dominoes]
    if not stones:
        return []

    degrees: Counter[int] = Counter()
    for a, b in stones:
        degrees[a] += 1
        degrees[b] += 1
    if any(d % 2 for d in degrees.values()):
        return None

    used = [False] * len(stones)
    path: list[Domino] = []

    def extend(current: int) -> bool:
        if len(path) == len(stones):
            return True
        for i, (a, b) in enumerate(stones):
            if used[i] or current not in (a, b):
                continue
            used[i] = True
            if a == current:
                path.append((a, b))
                following = b
            else:
                path.append((b, a))
                following = a
            if extend(following):
                return True
            path.pop()
            used[i] = False
        return False

    return list(path) if extend(stones[0][0]) else None