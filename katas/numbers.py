"""Small number puzzles: primes, digit sums, bit counts and friends."""

from __future__ import annotations

from itertools import count
from math import isqrt

_BOARD_SQUARES = 64


def is_armstrong_number(num: int) -> bool:
    """Return True if ``num`` equals the sum of its digits each raised to the digit count."""
    if num < 10:
        return True
    digits = str(num)
    power = len(digits)
    return sum(int(digit) ** power for digit in digits) == num


def collatz(n: int) -> int | None:
    """Return the number of Collatz steps needed to reach 1, or None for non-positive input."""
    if n < 1:
        return None
    steps = 0
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        steps += 1
    return steps


def egg_count(display_value: int) -> int:
    """Return the number of set bits in ``display_value``."""
    if display_value < 0:
        raise ValueError("display value must not be negative")
    return bin(display_value).count("1")


def square(s: int) -> int:
    """Return the number of grains on square ``s`` (1 to 64) of a chessboard."""
    if not 1 <= s <= _BOARD_SQUARES:
        raise ValueError(f"square must be between 1 and {_BOARD_SQUARES}")
    return 2 ** (s - 1)


def total() -> int:
    """Return the number of grains on the whole chessboard."""
    return sum(square(s) for s in range(1, _BOARD_SQUARES + 1))


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the Gregorian calendar."""
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def nth(n: int) -> int:
    """Return the prime at zero-based position ``n`` (``nth(0) == 2``)."""
    if n < 0:
        raise ValueError("position must not be negative")
    primes: list[int] = []
    for candidate in count(2):
        limit = isqrt(candidate)
        is_prime = True
        for prime in primes:
            if prime > limit:
                break
            if candidate % prime == 0:
                is_prime = False
                break
        if is_prime:
            if len(primes) == n:
                return candidate
            primes.append(candidate)
    raise AssertionError("unreachable")


def factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order."""
    result: list[int] = []
    if n < 2:
        return result
    divisor = 2
    while n > 1:
        if n % divisor == 0:
            n //= divisor
            result.append(divisor)
        else:
            divisor += 1
    return result


def raindrops(n: int) -> str:
    """Return the raindrop sounds for ``n``, or ``n`` itself as text when silent."""
    sounds = "".join(
        sound
        for divisor, sound in ((3, "Pling"), (5, "Plang"), (7, "Plong"))
        if n % divisor == 0
    )
    return sounds or str(n)


def square_of_sum(n: int) -> int:
    """Return the square of the sum of the first ``n`` natural numbers."""
    return (n * (n + 1) // 2) ** 2


def sum_of_squares(n: int) -> int:
    """Return the sum of the squares of the first ``n`` natural numbers."""
    return n * (n + 1) * (2 * n + 1) // 6


def difference(n: int) -> int:
    """Return the absolute difference between square_of_sum and sum_of_squares."""
    return abs(square_of_sum(n) - sum_of_squares(n))


def sum_of_multiples(limit: int, divisors) -> int:
    """Return the sum of all numbers below ``limit`` divisible by any of ``divisors``."""
    divisors = list(divisors)
    return sum(x for x in range(1, limit) if any(x % d == 0 for d in divisors))