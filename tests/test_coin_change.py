import pytest

from algopack.coin_change import coin_change


def test_basic():
    assert coin_change([1, 2, 5], 11) == 3
    assert coin_change([2, 3, 5, 7, 11], 119) == 12


def test_coins_empty():
    assert coin_change([], 1) is None


def test_amount_zero():
    assert coin_change([1, 2, 3], 0) == 0


def test_fail_change():
    assert coin_change([2], 3) is None
    assert coin_change([10, 20, 50, 100], 5) is None


def test_single_coin_exact():
    assert coin_change([7], 21) == 3


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        coin_change([1], -1)