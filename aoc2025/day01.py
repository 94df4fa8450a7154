"""Day 1: counting how often a dial points at zero."""

from collections.abc import Iterable, Iterator
from typing import TextIO

from aoc2025.arith import modulo_sane, parse_int

_START = 50
_DIAL_SIZE = 100


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip("\n").removesuffix("\r")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _rotations(stream: TextIO) -> Iterator[tuple[str, int]]:
    for line in _lines(stream):
        if not line:
            raise ValueError("empty rotation line")
        yield line[0], parse_int(line[1:])


def part1(stream: TextIO) -> str:
    """Count the rotations after which the dial rests on zero."""
    position = _START
    zeros = 0
    for direction, amount in _rotations(stream):
        if direction == "L":
            position = modulo_sane(position - amount, _DIAL_SIZE)
        elif direction == "R":
            position = modulo_sane(position + amount, _DIAL_SIZE)
        if position == 0:
            zeros += 1
    return str(zeros)


def part2(stream: TextIO) -> str:
    """Count every time the dial passes or lands on zero."""
    position = _START
    zeros = 0
    for direction, amount in _rotations(stream):
        if direction == "L":
            if position <= amount:
                if position == 0:
                    zeros += _trunc_div(amount, _DIAL_SIZE)
                else:
                    zeros += 1 + _trunc_div(amount - position, _DIAL_SIZE)
            position = modulo_sane(position - amount, _DIAL_SIZE)
        elif direction == "R":
            zeros += _trunc_div(position + amount, _DIAL_SIZE)
            position = modulo_sane(position + amount, _DIAL_SIZE)
    return str(zeros)