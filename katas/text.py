"""Small text puzzles: replies, songs, proverbs, slices and bracket matching."""

from __future__ import annotations

from collections.abc import Sequence

import regex

_NUMBER_WORDS = (
    "no", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
)

_CLOSERS = {"{": "}", "[": "]", "(": ")"}
_CLOSING = frozenset(_CLOSERS.values())


def _is_yelling(message: str) -> bool:
    return any(ch.isalpha() for ch in message) and message.upper() == message


def reply(message: str) -> str:
    """Return what a lackadaisical teenager answers to ``message``."""
    message = message.strip()
    if not message:
        return "Fine. Be that way!"
    question = message.endswith("?")
    yelling = _is_yelling(message)
    if question and yelling:
        return "Calm down, I know what I'm doing!"
    if question:
        return "Sure."
    if yelling:
        return "Whoa, chill out!"
    return "Whatever."


def _bottles(count: int) -> str:
    noun = "bottle" if count == 1 else "bottles"
    return f"{_NUMBER_WORDS[count]} green {noun}"


def recite(start_bottles: int, take_down: int) -> str:
    """Return ``take_down`` verses of the bottle song, starting at ``start_bottles``."""
    if not 0 <= start_bottles < len(_NUMBER_WORDS):
        raise ValueError(f"start must be between 0 and {len(_NUMBER_WORDS) - 1}")
    if not 0 <= take_down <= start_bottles:
        raise ValueError("cannot take down more bottles than there are")
    verses = []
    for count in range(start_bottles, start_bottles - take_down, -1):
        line = f"{_bottles(count).capitalize()} hanging on the wall,"
        verses.append(
            f"{line}\n{line}\n"
            "And if one green bottle should accidentally fall,\n"
            f"There'll be {_bottles(count - 1)} hanging on the wall."
        )
    return "\n\n".join(verses)


def build_proverb(words: Sequence[str]) -> str:
    """Return the 'for want of a nail' proverb built from ``words``."""
    words = list(words)
    if not words:
        return ""
    lines = [
        f"For want of a {first} the {second} was lost."
        for first, second in zip(words, words[1:])
    ]
    lines.append(f"And all for the want of a {words[0]}.")
    return "\n".join(lines)


def series(digits: str, length: int) -> list[str]:
    """Return every contiguous substring of ``digits`` of the given length, in order."""
    if length < 0:
        raise ValueError("length must not be negative")
    return [digits[i:i + length] for i in range(len(digits) - length + 1)]


def reverse(text: str) -> str:
    """Return ``text`` with its code points in reverse order."""
    return text[::-1]


def reverse_graphemes(text: str) -> str:
    """Return ``text`` with its extended grapheme clusters in reverse order."""
    return "".join(reversed(regex.findall(r"\X", text)))


def brackets_are_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order."""
    expected: list[str] = []
    for ch in text:
        if ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
        elif ch in _CLOSING:
            if not expected or expected.pop() != ch:
                return False
    return not expected