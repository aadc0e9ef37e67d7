import pytest

from algopack.ternary_search import ternary_search, ternary_search_rec

LONG = list(range(5, 100, 5))


def test_returns_none_if_empty_list():
    assert ternary_search("a", [], 1, 10) is None
    assert ternary_search_rec("a", [], 1, 10) is None


def test_returns_none_if_range_is_invalid():
    assert ternary_search(1, [1, 2, 3], 2, 1) is None
    assert ternary_search_rec(1, [1, 2, 3], 2, 1) is None


def test_returns_index_if_list_has_one_item():
    assert ternary_search(1, [1], 0, 1) == 0
    assert ternary_search_rec(1, [1], 0, 1) == 0


def test_returns_first_index():
    assert ternary_search(1, [1, 2, 3], 0, 2) == 0
    assert ternary_search_rec(1, [1, 2, 3], 0, 2) == 0


def test_returns_first_index_if_end_out_of_bounds():
    assert ternary_search(1, [1, 2, 3], 0, 3) == 0
    assert ternary_search_rec(1, [1, 2, 3], 0, 3) == 0


def test_returns_last_index():
    assert ternary_search(3, [1, 2, 3], 0, 2) == 2
    assert ternary_search_rec(3, [1, 2, 3], 0, 2) == 2


def test_returns_last_index_if_end_out_of_bounds():
    assert ternary_search(3, [1, 2, 3], 0, 3) == 2
    assert ternary_search_rec(3, [1, 2, 3], 0, 3) == 2


def test_returns_middle_index():
    assert ternary_search(2, [1, 2, 3], 0, 2) == 1
    assert ternary_search_rec(2, [1, 2, 3], 0, 2) == 1


def test_returns_middle_index_if_end_out_of_bounds():
    assert ternary_search(2, [1, 2, 3], 0, 3) == 1
    assert ternary_search_rec(2, [1, 2, 3], 0, 3) == 1


def test_finds_every_element_of_longer_list():
    for index, value in enumerate(LONG):
        assert ternary_search(value, LONG, 0, len(LONG) - 1) == index
        assert ternary_search_rec(value, LONG, 0, len(LONG) - 1) == index


@pytest.mark.parametrize("target", [0, 7, 200])
def test_missing_value(target):
    assert ternary_search(target, LONG, 0, len(LONG) - 1) is None
    assert ternary_search_rec(target, LONG, 0, len(LONG) - 1) is None