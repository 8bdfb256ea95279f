import pytest

from swaypix.strutil import (
    ConfigValueError,
    parse_bool,
    search_index,
    split,
    to_num,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc,def", ["abc", "def"]),
        ("  a ,  b  ", ["a", "b"]),
        ("a,,b", ["a", "", "b"]),
        ("a, ,b", ["a", "", "b"]),
        (",a", ["", "a"]),
        ("a,", ["a"]),
        ("a,  ", ["a"]),
        ("a,,", ["a", ""]),
        ("", []),
        ("   ", []),
        ("one two,three", ["one two", "three"]),
    ],
)
def test_split(text, expected):
    assert split(text, ",") == expected


def test_split_other_delimiter():
    assert split("full.topleft", ".") == ["full", "topleft"]


def test_search_index_found():
    assert search_index(["none", "alpha", "random"], "alpha") == 1


def test_search_index_missing():
    assert search_index(["none", "alpha", "random"], "alph") is None


def test_search_index_empty_value():
    assert search_index(["a", "", "b"], "") == 1


def test_to_num_decimal():
    assert to_num("255") == 255
    assert to_num("-5") == -5
    assert to_num("+7") == 7
    assert to_num("  12") == 12


def test_to_num_prefixes_match_decimal():
    assert to_num("0x10") == to_num("16")
    assert to_num("010") == to_num("8")
    assert to_num("ff", 16) == to_num("255")
    assert to_num("0xff", 16) == to_num("255")


def test_to_num_zero():
    assert to_num("0") == 0
    assert to_num("") == 0


@pytest.mark.parametrize("text", ["12abc", "abc", "-", "0x", "1_0", "12 ", " ", "089"])
def test_to_num_invalid(text):
    with pytest.raises(ValueError):
        to_num(text)


def test_to_num_range():
    assert to_num("9223372036854775807") == 9223372036854775807
    with pytest.raises(ValueError):
        to_num("9223372036854775808")


def test_to_num_bad_base():
    with pytest.raises(ValueError):
        to_num("1", 1)


@pytest.mark.parametrize("value, expected", [("yes", True), ("true", True), ("no", False), ("false", False)])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_bool_invalid():
    with pytest.raises(ConfigValueError):
        parse_bool("maybe")