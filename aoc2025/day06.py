"""Day 6: evaluating a worksheet of column-wise arithmetic problems."""

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from aoc2025.arith import parse_int
from aoc2025.matrix import rotate_counter_clockwise


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip("\n").removesuffix("\r")


def _non_blank(stream: TextIO) -> Iterator[str]:
    return (line for line in _lines(stream) if line.strip())


def _apply(operator: str, numbers: Sequence[int]) -> int:
    if operator == "+":
        return sum(numbers)
    if operator == "*":
        return math.prod(numbers)
    raise ValueError(f"unknown operator {operator!r}")


def part1(stream: TextIO) -> str:
    """Evaluate each column read as whole numbers above its operator."""
    columns: list[list[str]] = []
    for line in _non_blank(stream):
        fields = line.split()
        if not columns:
            columns = [[] for _ in fields]
        if len(fields) > len(columns):
            raise ValueError(f"line {line!r} has more columns than the first line")
        for column, field in zip(columns, fields):
            column.append(field)

    return str(
        sum(
            _apply(column[-1], [parse_int(field) for field in column[:-1]])
            for column in columns
        )
    )


def _evaluate(rows: Sequence[str]) -> int:
    *heads, tail = rows
    operator, last_number = tail[-1], tail[:-1]
    numbers = [parse_int(text.strip()) for text in (*heads, last_number)]
    return _apply(operator, numbers)


def part2(stream: TextIO) -> str:
    """Evaluate each problem with numbers read top to bottom, right to left."""
    lines = list(_non_blank(stream))
    rotated = ["".join(row) for row in rotate_counter_clockwise(lines)]

    total = 0
    problem: list[str] = []
    for row in rotated:
        if row and not row.strip():
            total += _evaluate(problem)
            problem = []
            continue
        problem.append(row)
    total += _evaluate(problem)
    return str(total)