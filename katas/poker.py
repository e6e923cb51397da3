"""Pick the winning hands from a list of five-card poker hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from enum import IntEnum


class Rank(IntEnum):
    """Card ranks, ordered from lowest to highest."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Category(IntEnum):
    """Hand categories, ordered from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


_RANKS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}
_SUITS = frozenset("CDHS")
_BABY_STRAIGHT = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]
_HAND_SIZE = 5


def _parse_card(text: str) -> tuple[Rank, str]:
    rank_text, suit = text[:-1], text[-1:]
    if rank_text not in _RANKS or suit not in _SUITS:
        raise ValueError(f"invalid card: {text!r}")
    return _RANKS[rank_text], suit


def _score(hand: str) -> tuple[int, ...]:
    """Return a tuple that orders hands by strength."""
    cards = [_parse_card(token) for token in hand.split()]
    if len(cards) != _HAND_SIZE:
        raise ValueError(f"a hand needs {_HAND_SIZE} cards: {hand!r}")

    ranks = sorted((rank for rank, _ in cards), reverse=True)
    flush = len({suit for _, suit in cards}) == 1
    baby = ranks == _BABY_STRAIGHT
    straight = baby or all(a == b + 1 for a, b in zip(ranks, ranks[1:]))
    straight_high = Rank.FIVE if baby else ranks[0]

    if flush and straight:
        if ranks[0] == Rank.ACE and ranks[1] == Rank.KING:
            return (Category.ROYAL_FLUSH,)
        return (Category.STRAIGHT_FLUSH, straight_high)

    groups = sorted(Counter(ranks).items(), key=lambda item: (item[1], item[0]), reverse=True)
    shape = [n for _, n in groups]
    grouped = [rank for rank, _ in groups]

    if shape == [4, 1]:
        return (Category.FOUR_OF_A_KIND, *grouped)
    if shape == [3, 2]:
        return (Category.FULL_HOUSE, *grouped)
    if shape == [3, 1, 1]:
        return (Category.THREE_OF_A_KIND, *grouped)
    if shape == [2, 2, 1]:
        return (Category.TWO_PAIRS, *grouped)
    if shape == [2, 1, 1, 1]:
        return (Category.PAIR, *grouped)
    if flush:
        return (Category.FLUSH, *ranks)
    if straight:
        return (Category.STRAIGHT, straight_high)
    return (Category.HIGH_CARD, *ranks)


def winning_hands(hands: Sequence[str]) -> list[str]:
    """Return the strongest hands, in their input order; ties give several winners."""
    scored = [(hand, _score(hand)) for hand in hands]
    if not scored:
        return []
    best = max(score for _, score in scored)
    return [hand for hand, score in scored if score == best]