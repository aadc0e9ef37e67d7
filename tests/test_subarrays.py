import pytest

from algopack.subarrays import maximal_square, maximum_subarray


def test_maximal_square_empty():
    assert maximal_square([]) == 0


def test_maximal_square_diagonal():
    assert maximal_square([[0, 1], [1, 0]]) == 1


def test_maximal_square_example():
    matrix = [
        [1, 0, 1, 0, 0],
        [1, 0, 1, 1, 1],
        [1, 1, 1, 1, 1],
        [1, 0, 0, 1, 0],
    ]
    assert maximal_square(matrix) == 4


def test_maximal_square_single_zero():
    assert maximal_square([[0]]) == 0


def test_maximal_square_full_and_unchanged():
    matrix = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    assert maximal_square(matrix) == 9
    assert matrix == [[1, 1, 1], [1, 1, 1], [1, 1, 1]]


def test_maximum_subarray_non_negative():
    assert maximum_subarray([1, 0, 5, 8]) == 14


def test_maximum_subarray_negative():
    assert maximum_subarray([-3, -1, -8, -2]) == -1


def test_maximum_subarray_normal():
    assert maximum_subarray([-4, 3, -2, 5, -8]) == 6


def test_maximum_subarray_single_element():
    assert maximum_subarray([6]) == 6
    assert maximum_subarray([-6]) == -6


def test_maximum_subarray_empty():
    with pytest.raises(ValueError):
        maximum_subarray([])