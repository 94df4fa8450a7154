"""Day 2: summing product IDs made of repeated digit sequences."""

from collections.abc import Callable, Iterator
from typing import TextIO

from aoc2025.arith import parse_int


def _ids(stream: TextIO) -> Iterator[int]:
    for part in stream.read().strip().split(","):
        bounds = part.split("-")
        first = parse_int(bounds[0])
        if len(bounds) < 2:
            raise ValueError(f"range {part!r} has no upper bound")
        last = parse_int(bounds[1])
        yield from range(first, last + 1)


def _sum_matching(stream: TextIO, predicate: Callable[[str], bool]) -> str:
    return str(sum(number for number in _ids(stream) if predicate(str(number))))


def _is_doubled(text: str) -> bool:
    half, rest = divmod(len(text), 2)
    return rest == 0 and text[:half] == text[half:]


def _is_repeated(text: str) -> bool:
    return any(
        text[:width] * (len(text) // width) == text for width in range(1, len(text))
    )


def part1(stream: TextIO) -> str:
    """Sum the IDs whose digits are one sequence written twice."""
    return _sum_matching(stream, _is_doubled)


def part2(stream: TextIO) -> str:
    """Sum the IDs whose digits are one sequence written at least twice."""
    return _sum_matching(stream, _is_repeated)