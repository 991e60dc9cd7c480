import copy

import pytest

from turbolib.object_copy import String


def test_copy_does_not_change_original():
    first = String("test")
    second = first.copy()
    second[2] = "n"
    assert str(first) == "test"
    assert str(second) == "tent"


def test_copy_module_gives_independent_buffer():
    first = String("abc")
    second = copy.copy(first)
    second[0] = "x"
    assert str(first) == "abc"
    assert str(second) == "xbc"


def test_deepcopy_is_independent():
    first = String("abc")
    second = copy.deepcopy(first)
    second[1] = "z"
    assert str(first) == "abc"
    assert str(second) == "azc"


def test_length():
    assert len(String("test")) == 4
    assert len(String("")) == 0


def test_getitem_and_terminator():
    s = String("abc")
    assert s[0] == "a"
    assert s[2] == "c"
    assert s[3] == "\0"


def test_out_of_bounds():
    s = String("abc")
    with pytest.raises(IndexError, match="out of bounds"):
        s[4]
    with pytest.raises(IndexError):
        s[-1]
    with pytest.raises(IndexError):
        s[10] = "a"
    assert str(s) == "abc"
    assert len(s) == 3
    assert s[3] == "\0"


def test_setitem_requires_single_character():
    s = String("abc")
    with pytest.raises(ValueError):
        s[0] = "xy"
    assert str(s) == "abc"
    assert s[0] == "a"


def test_nul_truncates_text():
    s = String("hello")
    s[2] = "\0"
    assert str(s) == "he"
    assert len(s) == 5