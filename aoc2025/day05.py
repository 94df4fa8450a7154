"""Day 5: checking ingredient IDs against fresh ranges."""

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple, TextIO

from aoc2025.arith import parse_int

logger = logging.getLogger(__name__)


class _Range(NamedTuple):
    first: int
    last: int

    def __contains__(self, number: object) -> bool:
        return isinstance(number, int) and self.first <= number <= self.last


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw.rstrip("\n").removesuffix("\r")


def _parse_range(text: str) -> _Range:
    bounds = text.split("-")
    first = parse_int(bounds[0])
    if len(bounds) < 2:
        raise ValueError(f"range {text!r} has no upper bound")
    return _Range(first, parse_int(bounds[1]))


def part1(stream: TextIO) -> str:
    """Count the listed IDs that fall into at least one fresh range."""
    ranges: list[_Range] = []
    ids: list[int] = []
    in_ids = False
    for line in _lines(stream):
        if not line:
            in_ids = True
        elif in_ids:
            ids.append(parse_int(line))
        else:
            ranges.append(_parse_range(line))
    return str(sum(1 for number in ids if any(number in r for r in ranges)))


def _merge(ranges: Iterable[_Range]) -> list[_Range]:
    merged: list[_Range] = []
    for current in sorted(ranges):
        if merged and current.first <= merged[-1].last:
            previous = merged[-1]
            merged[-1] = _Range(previous.first, max(previous.last, current.last))
        else:
            merged.append(current)
    return merged


def part2(stream: TextIO) -> str:
    """Count the IDs covered by the union of all fresh ranges."""
    ranges: list[_Range] = []
    for line in _lines(stream):
        if not line:
            break
        ranges.append(_parse_range(line))
    if not ranges:
        raise ValueError("no fresh ranges given")

    merged = _merge(ranges)
    logger.info("merged ranges: %d -> %d", len(ranges), len(merged))
    return str(sum(r.last - r.first + 1 for r in merged))