"""Day 3: picking the largest joltage from each bank of batteries."""

from collections.abc import Iterable, Iterator
from typing import TextIO

_PICKS = 12


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip("\n").removesuffix("\r")


def _banks(stream: TextIO) -> Iterator[list[int]]:
    for line in _lines(stream):
        yield [ord(char) - ord("0") for char in line]


def _best_pair(digits: list[int]) -> int:
    first = -1
    second = -1
    for index, digit in enumerate(digits[:-1]):
        if digit <= first:
            continue
        first = digit
        second = max([-1, *digits[index + 1 :]])
    return first * 10 + second


def _next_best(digits: list[int], after: int, remaining: int) -> tuple[int, int]:
    best = -1
    best_index = -1
    for index in range(after + 1, len(digits) - remaining + 1):
        if digits[index] <= best:
            continue
        best = digits[index]
        best_index = index
    return best_index, best


def _best_dozen(digits: list[int]) -> int:
    total = 0
    position = -1
    for pick in range(_PICKS):
        position, best = _next_best(digits, position, _PICKS - pick)
        total = total * 10 + best
    return total


def part1(stream: TextIO) -> str:
    """Sum the largest two-digit number each bank can form in order."""
    return str(sum(_best_pair(bank) for bank in _banks(stream)))


def part2(stream: TextIO) -> str:
    """Sum the largest twelve-digit number each bank can form in order."""
    return str(sum(_best_dozen(bank) for bank in _banks(stream)))