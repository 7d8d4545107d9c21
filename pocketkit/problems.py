"""Small solutions to classic programming exercises."""

from __future__ import annotations

from collections.abc import Iterable


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - _trunc_div(a, b) * b


def equalize_cost(values: Iterable[int]) -> int:
    """Return how much must be removed in total to bring every value down to the smallest."""
    items = list(values)
    if not items:
        return 0
    smallest = min(items)
    return sum(value - smallest for value in items)


def best_balance(n: int) -> int:
    """Return the largest of n, n without its last digit, and n without its next-to-last digit."""
    without_last = _trunc_div(n, 10)
    without_second_last = _trunc_div(n, 100) * 10 + _trunc_mod(n, 10)
    return max(n, without_last, without_second_last)


def count_even_digit_numbers(nums: Iterable[int]) -> int:
    """Return how many numbers have an even length when written out, sign included."""
    return sum(1 for number in nums if len(str(number)) % 2 == 0)