"""A small evaluator for a subset of the Forth language."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_ARITHMETIC = frozenset({"+", "-", "*", "/"})
_STACK_EFFECT = {
    "+": -1,
    "-": -1,
    "*": -1,
    "/": -1,
    "drop": -1,
    "swap": 0,
    "over": 1,
    "dup": 1,
}


class ForthError(Exception):
    """Base class for errors raised while evaluating Forth."""


class DivisionByZeroError(ForthError):
    """Raised when dividing by zero."""


class StackUnderflowError(ForthError):
    """Raised when an operation needs more values than the stack holds."""


class UnknownWordError(ForthError):
    """Raised when a word is neither built in, user defined nor a number."""


class InvalidWordError(ForthError):
    """Raised when a word definition is malformed."""


def _parse_value(token: str) -> int | None:
    """Return the 32-bit integer ``token`` spells, or None if it spells none."""
    if not _NUMBER.fullmatch(token):
        return None
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class Forth:
    """A Forth evaluator holding a data stack and user-defined words."""

    def __init__(self) -> None:
        self._stack: list[int] = []
        self._words: dict[str, list[str]] = {}

    def __repr__(self) -> str:
        return f"Forth(stack={self._stack!r})"

    def stack(self) -> list[int]:
        """Return the current stack, bottom first."""
        return list(self._stack)

    def evaluate(self, text: str) -> None:
        """Evaluate ``text``, raising a ForthError subclass on failure."""
        tokens = (token.lower() for token in text.split())
        for token in tokens:
            if token == ":":
                self._define(tokens)
            elif token in self._words:
                for word in list(self._words[token]):
                    self._eval_token(word)
            else:
                self._eval_token(token)

    def _define(self, tokens) -> None:
        name = next(tokens, None)
        if name is None or _parse_value(name) is not None:
            raise InvalidWordError("invalid word definition")
        definition: list[str] = []
        for token in tokens:
            if token == ";":
                break
            definition.extend(self._words.get(token, [token]))
        optimized = self._optimize(definition)
        if optimized:
            self._words[name] = optimized
        else:
            self._words.pop(name, None)

    def _stack_effect(self, definition: list[str]) -> int:
        effect = 0
        pending = list(definition)
        while pending:
            token = pending.pop()
            if token in _STACK_EFFECT:
                effect += _STACK_EFFECT[token]
            elif _parse_value(token) is not None:
                effect += 1
            elif token in self._words:
                pending.extend(reversed(self._words[token]))
        return effect

    def _optimize(self, definition: list[str]) -> list[str]:
        """Return ``definition``, or an empty list if it leaves the stack as it was."""
        if self._stack_effect(definition) != 0:
            return list(definition)
        simulated: list[str] = []
        for token in definition:
            if token == "drop":
                if simulated:
                    simulated.pop()
            elif token == "dup":
                if simulated:
                    simulated.append(simulated[-1])
            elif token == "swap":
                if len(simulated) >= 2:
                    simulated[-1], simulated[-2] = simulated[-2], simulated[-1]
            elif token == "over":
                if len(simulated) >= 2:
                    simulated.append(simulated[-2])
            elif token in _ARITHMETIC:
                if len(simulated) >= 2:
                    del simulated[-2:]
                    simulated.append("0")
            elif _parse_value(token) is not None:
                simulated.append(token)
            elif token in self._words:
                simulated.extend(self._words[token])
        if not simulated:
            return []
        return list(definition)

    def _pop(self) -> int:
        try:
            return self._stack.pop()
        except IndexError:
            raise StackUnderflowError("stack underflow") from None

    def _pop_two(self) -> tuple[int, int]:
        b = self._pop()
        a = self._pop()
        return a, b

    def _eval_token(self, token: str) -> None:
        stack = self._stack
        if token == "+":
            a, b = self._pop_two()
            stack.append(a + b)
        elif token == "-":
            a, b = self._pop_two()
            stack.append(a - b)
        elif token == "*":
            a, b = self._pop_two()
            stack.append(a * b)
        elif token == "/":
            a, b = self._pop_two()
            if b == 0:
                raise DivisionByZeroError("division by zero")
            stack.append(_truncating_div(a, b))
        elif token == "dup":
            a = self._pop()
            stack.extend((a, a))
        elif token == "drop":
            self._pop()
        elif token == "swap":
            a, b = self._pop_two()
            stack.extend((b, a))
        elif token == "over":
            a, b = self._pop_two()
            stack.extend((a, b, a))
        else:
            value = _parse_value(token)
            if value is None:
                raise UnknownWordError(f"unknown word: {token!r}")
            stack.append(value)