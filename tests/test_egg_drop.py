import pytest

from algopack.egg_drop import egg_drop


def test_zero_floors():
    assert egg_drop(5, 0) == 0


def test_one_egg():
    assert egg_drop(1, 8) == 8


def test_eggs2_floors2():
    assert egg_drop(2, 2) == 2


def test_eggs3_floors5():
    assert egg_drop(3, 5) == 3


def test_eggs2_floors10():
    assert egg_drop(2, 10) == 4


def test_eggs2_floors36():
    assert egg_drop(2, 36) == 8


def test_large_floors():
    assert egg_drop(2, 100) == 14


def test_one_floor():
    assert egg_drop(4, 1) == 1


def test_more_eggs_never_worse():
    assert egg_drop(3, 36) <= egg_drop(2, 36)


def test_no_eggs_rejected():
    with pytest.raises(ValueError):
        egg_drop(0, 10)


def test_negative_floors_rejected():
    with pytest.raises(ValueError):
        egg_drop(2, -1)