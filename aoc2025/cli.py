"""Command line entry point: solve one part of one day's puzzle."""

import logging
import os
import sys
import time
from collections.abc import Callable, Sequence
from typing import TextIO

from aoc2025 import day01, day02, day03, day04, day05, day06
from aoc2025.arith import parse_int
from aoc2025.download import DownloadError, download_input

AOC_YEAR = 2025
LAST_DAY = 25
INPUT_FOLDER = "./inputs"
SESSION_ENV_VAR = "AOC_SESSION_COOKIE"

Solver = Callable[[TextIO], str]

_SOLVERS: dict[int, tuple[Solver, Solver]] = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
    6: (day06.part1, day06.part2),
}

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised for a bad day or part on the command line."""


def solver(day: int, part: int) -> Solver:
    """Return the function that solves ``part`` of ``day``."""
    if not 1 <= day <= LAST_DAY:
        raise UsageError(f"expected day between 1 and {LAST_DAY}, but got {day}")
    if part not in (1, 2):
        raise UsageError(f"expected part to be 1 or 2, but got {part}")
    try:
        return _SOLVERS[day][part - 1]
    except KeyError:
        raise UsageError(f"day {day} has no solution") from None


def _parse_arg(name: str, text: str) -> int:
    try:
        return parse_int(text)
    except ValueError as exc:
        raise UsageError(f"converting {name} {text!r} to int: {exc}") from exc


def _input_path(day: int) -> str:
    return f"{INPUT_FOLDER}/{day:02d}.txt"


def _open_input(day: int) -> TextIO:
    path = _input_path(day)
    try:
        return open(path, encoding="utf-8")
    except FileNotFoundError:
        pass

    logger.info("downloading input for day %d", day)
    session_cookie = os.environ.get(SESSION_ENV_VAR, "")
    if not session_cookie:
        raise DownloadError(f"no session cookie in env var {SESSION_ENV_VAR!r} found")
    download_input(session_cookie, AOC_YEAR, day, "")
    return open(path, encoding="utf-8")


def run(argv: Sequence[str]) -> str:
    """Solve the day and part named by ``argv`` and return the answer."""
    if len(argv) < 2:
        raise UsageError(f"expected 2 args (day and part), but got {len(argv)}")

    day = _parse_arg("day", argv[0])
    if not 1 <= day <= LAST_DAY:
        raise UsageError(f"expected day between 1 and {LAST_DAY}, but got {day}")
    part = _parse_arg("part", argv[1])
    solve = solver(day, part)

    logger.info("running day %d part %d", day, part)
    with _open_input(day) as stream:
        start = time.perf_counter()
        try:
            result = solve(stream)
        except ValueError as exc:
            raise ValueError(f"day={day} part={part}: {exc}") from exc
        elapsed = time.perf_counter() - start

    logger.info("day %d part %d took %.6fs", day, part, elapsed)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and print the result; return the exit status."""
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        result = run(args)
    except (UsageError, DownloadError, ValueError, OSError) as exc:
        logger.error("during run: %s", exc)
        return 1
    print("Result:")
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())