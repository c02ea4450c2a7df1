import pytest

from datakit.fstring import FString, cstring_length, reserved_size


HELLO = "Hello, World!\n"
LONGER = "Hello, World!\nThis is C language.\n"


def test_set_and_length_like_source():
    string = FString(HELLO)
    assert str(string) == HELLO
    assert cstring_length(str(string)) == 15
    assert string.size == 15
    assert string.reserved == 16


def test_reset_to_longer_text_like_source():
    string = FString(HELLO)
    assert string.reset(LONGER) is None
    assert str(string) == LONGER
    assert cstring_length(str(string)) == 35
    assert string.size == 35
    assert string.reserved == 48


def test_reset_shorter_keeps_reserved():
    string = FString(LONGER)
    string.reset("hi")
    assert str(string) == "hi"
    assert string.size == 3
    assert string.reserved == 48


def test_reset_none_raises():
    string = FString(HELLO)
    with pytest.raises(TypeError):
        string.reset(None)
    assert str(string) == HELLO


def test_init_none_raises():
    with pytest.raises(TypeError):
        FString(None)


@pytest.mark.parametrize(
    "size, expected",
    [(0, 16), (15, 16), (16, 32), (31, 32), (35, 48)],
)
def test_reserved_size(size, expected):
    assert reserved_size(size) == expected


def test_reserved_size_negative():
    with pytest.raises(ValueError):
        reserved_size(-1)


def test_cstring_length_none_and_nul():
    assert cstring_length(None) == 0
    assert cstring_length("") == 1
    assert cstring_length("ab\0cd") == 3


def test_text_is_cut_at_nul():
    assert str(FString("ab\0cd")) == "ab"


def test_fill_keeps_length():
    string = FString("abcd")
    string.fill("x")
    assert str(string) == "xxxx"
    assert string.size == 5


def test_fill_rejects_bad_char():
    string = FString("abcd")
    with pytest.raises(ValueError):
        string.fill("xy")
    assert str(string) == "abcd"


def test_resize_grows_and_rejects_too_small():
    string = FString(LONGER)
    string.resize(100)
    assert string.reserved == reserved_size(100)
    with pytest.raises(ValueError):
        string.resize(2)
    assert string.reserved == reserved_size(100)