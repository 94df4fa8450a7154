import pytest

from aoc2025.matrix import rotate_counter_clockwise


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        (
            [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
            [[3, 6, 9], [2, 5, 8], [1, 4, 7]],
        ),
        (
            [[1, 2, 3], [4, 5, 6], [7, 8, 9], [0, 11, 12]],
            [[3, 6, 9, 12], [2, 5, 8, 11], [1, 4, 7, 0]],
        ),
        (
            [[1, 2, 3, 0], [4, 5, 6, 11], [7, 8, 9, 12]],
            [[0, 11, 12], [3, 6, 9], [2, 5, 8], [1, 4, 7]],
        ),
    ],
    ids=["same dimensions", "different dimensions 1", "different dimensions 2"],
)
def test_rotate_ints(matrix, expected):
    assert rotate_counter_clockwise(matrix) == expected


def test_rotate_strings():
    matrix = [["1", "2", "3"], ["4", "5", "6"], ["7", "8", "9"]]
    assert rotate_counter_clockwise(matrix) == [
        ["3", "6", "9"],
        ["2", "5", "8"],
        ["1", "4", "7"],
    ]


def test_rotate_bytes_rows():
    assert rotate_counter_clockwise([b"ab", b"cd"]) == [[ord("b"), ord("d")], [ord("a"), ord("c")]]


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_rotate_empty(matrix):
    assert rotate_counter_clockwise(matrix) == []


def test_four_rotations_restore_matrix():
    matrix = [[1, 2, 3, 0], [4, 5, 6, 11], [7, 8, 9, 12]]
    result = matrix
    for _ in range(4):
        result = rotate_counter_clockwise(result)
    assert result == matrix