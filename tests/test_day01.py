import io

import pytest

from aoc2025.day01 import part1, part2

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82"


def test_part1_example():
    assert part1(io.StringIO(EXAMPLE)) == "3"


def test_part2_example():
    assert part2(io.StringIO(EXAMPLE)) == "6"


def test_trailing_newline_and_crlf_are_ignored():
    text = EXAMPLE.replace("\n", "\r\n") + "\r\n"
    assert part1(io.StringIO(text)) == "3"
    assert part2(io.StringIO(text)) == "6"


def test_empty_input_counts_nothing():
    assert part1(io.StringIO("")) == "0"
    assert part2(io.StringIO("")) == "0"


def test_part2_never_less_than_part1():
    assert int(part2(io.StringIO(EXAMPLE))) >= int(part1(io.StringIO(EXAMPLE)))


@pytest.mark.parametrize("func", [part1, part2])
def test_bad_number_raises(func):
    with pytest.raises(ValueError):
        func(io.StringIO("L68\nRabc\n"))


@pytest.mark.parametrize("func", [part1, part2])
def test_empty_line_raises(func):
    with pytest.raises(ValueError):
        func(io.StringIO("L68\n\nR5\n"))