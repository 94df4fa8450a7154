"""Day 4: finding paper rolls that a forklift can reach."""

from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

_ROLL = "@"
_MAX_NEIGHBOURS = 4
_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip("\n").removesuffix("\r")


def _read_grid(stream: TextIO) -> list[list[int]]:
    return [[1 if char == _ROLL else 0 for char in line] for line in _lines(stream)]


def _neighbours(grid: Sequence[Sequence[int]], x: int, y: int) -> int:
    max_x = len(grid) - 1
    max_y = len(grid[x]) - 1
    return sum(
        1
        for dx, dy in _OFFSETS
        if 0 <= x + dx <= max_x
        and 0 <= y + dy <= max_y
        and grid[x + dx][y + dy] == 1
    )


def _accessible(grid: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    return [
        (x, y)
        for x, row in enumerate(grid)
        for y, cell in enumerate(row)
        if cell != 0 and _neighbours(grid, x, y) < _MAX_NEIGHBOURS
    ]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid as rows of digits, one line per row."""
    return "".join("".join(str(cell) for cell in row) + "\n" for row in grid)


def part1(stream: TextIO) -> str:
    """Count the rolls with fewer than four neighbouring rolls."""
    return str(len(_accessible(_read_grid(stream))))


def part2(stream: TextIO) -> str:
    """Repeatedly remove accessible rolls and count how many go in total."""
    grid = _read_grid(stream)
    total = 0
    while True:
        reachable = _accessible(grid)
        if not reachable:
            break
        grid = [list(row) for row in grid]
        for x, y in reachable:
            grid[x][y] = 0
        total += len(reachable)
    return str(total)