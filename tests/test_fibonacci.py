import pytest

from algopack.fibonacci import (
    classical_fibonacci,
    fibonacci,
    logarithmic_fibonacci,
    memoized_fibonacci,
    recursive_fibonacci,
)

COMBINATORIAL_CASES = [
    (0, 1),
    (1, 1),
    (2, 2),
    (3, 3),
    (4, 5),
    (5, 8),
    (10, 89),
    (20, 10946),
    (100, 573147844013817084101),
    (184, 205697230343233228174223751303346572685),
]

CLASSICAL_CASES = [
    (0, 0),
    (1, 1),
    (2, 1),
    (3, 2),
    (4, 3),
    (5, 5),
    (10, 55),
    (20, 6765),
    (21, 10946),
    (100, 354224848179261915075),
    (184, 127127879743834334146972278486287885163),
]


@pytest.mark.parametrize("n, expected", COMBINATORIAL_CASES)
def test_fibonacci(n, expected):
    assert fibonacci(n) == expected


@pytest.mark.parametrize("n, expected", COMBINATORIAL_CASES)
def test_recursive_fibonacci(n, expected):
    assert recursive_fibonacci(n) == expected


@pytest.mark.parametrize("n, expected", CLASSICAL_CASES)
def test_classical_fibonacci(n, expected):
    assert classical_fibonacci(n) == expected


@pytest.mark.parametrize("n, expected", CLASSICAL_CASES)
def test_logarithmic_fibonacci(n, expected):
    assert logarithmic_fibonacci(n) == expected


@pytest.mark.parametrize("n, expected", CLASSICAL_CASES)
def test_memoized_fibonacci(n, expected):
    assert memoized_fibonacci(n) == expected


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 10, 20, 100, 184])
def test_iterative_and_recursive_equivalence(n):
    assert fibonacci(n) == recursive_fibonacci(n)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 10, 19, 20, 100, 184])
def test_classical_and_combinatorial_are_off_by_one(n):
    assert classical_fibonacci(n + 1) == fibonacci(n)


def test_logarithmic_at_186():
    assert logarithmic_fibonacci(186) == classical_fibonacci(186)
    assert logarithmic_fibonacci(186) == fibonacci(185)


@pytest.mark.parametrize(
    "func",
    [
        fibonacci,
        recursive_fibonacci,
        classical_fibonacci,
        logarithmic_fibonacci,
        memoized_fibonacci,
    ],
)
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-1)