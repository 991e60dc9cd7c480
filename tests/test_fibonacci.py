import pytest

from turbolib.fibonacci import cached, simple, tabulated


@pytest.mark.parametrize("fun", [simple, cached, tabulated])
def test_ninth_number(fun):
    assert fun(9) == 34


@pytest.mark.parametrize("fun", [simple, cached, tabulated])
def test_first_numbers(fun):
    assert fun(1) == 1
    assert fun(2) == 1


@pytest.mark.parametrize("n", range(1, 20))
def test_implementations_agree(n):
    assert simple(n) == cached(n) == tabulated(n)


@pytest.mark.parametrize("fun", [cached, tabulated])
def test_recurrence_holds(fun):
    for n in range(3, 30):
        assert fun(n) == fun(n - 1) + fun(n - 2)


def test_tabulated_zero():
    assert tabulated(0) == 0


def test_tabulated_large_input_no_recursion_limit():
    big = tabulated(1000)
    assert big == tabulated(999) + tabulated(998)


def test_cached_rejects_non_positive():
    with pytest.raises(ValueError):
        cached(0)


def test_tabulated_rejects_negative():
    with pytest.raises(ValueError):
        tabulated(-1)