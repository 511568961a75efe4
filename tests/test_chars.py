import string

import pytest

from webnook.chars import (
    ALPHA,
    ALPHANUMERIC,
    NUMERIC,
    WHITESPACE,
    CharClass,
    is_alphabetical,
    is_alphanumeric,
    is_hex_numeric,
    is_newline,
    is_numeric,
    is_whitespace,
    lower,
)


@pytest.mark.parametrize(
    "char, expected",
    [("\n", True), ("\r", True), (" ", False), ("a", False), ("", False)],
)
def test_is_newline(char, expected):
    assert is_newline(char) is expected


@pytest.mark.parametrize(
    "char, expected",
    [(" ", True), ("\t", True), ("\n", True), ("\r", True), ("x", False), ("\v", False)],
)
def test_is_whitespace(char, expected):
    assert is_whitespace(char) is expected


def test_is_alphabetical_covers_ascii_letters_only():
    assert all(is_alphabetical(c) for c in string.ascii_letters)
    assert not any(is_alphabetical(c) for c in string.digits + " _-@[`{")
    assert is_alphabetical("é") is False


def test_is_numeric_covers_ascii_digits_only():
    assert all(is_numeric(c) for c in string.digits)
    assert not any(is_numeric(c) for c in "a/:x ")
    assert is_numeric("٣") is False


def test_is_hex_numeric():
    assert all(is_hex_numeric(c) for c in string.hexdigits)
    assert not any(is_hex_numeric(c) for c in "gGzZ-")


def test_is_alphanumeric():
    assert all(is_alphanumeric(c) for c in string.ascii_letters + string.digits)
    assert not any(is_alphanumeric(c) for c in string.punctuation + " ")


def test_lower_maps_capitals_to_small_letters():
    for upper, small in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert lower(upper) == small


@pytest.mark.parametrize("char", ["a", "z", "5", "-", "É", " "])
def test_lower_leaves_other_characters(char):
    assert lower(char) == char


def test_predefined_classes():
    assert ALPHA.matches("q") and not ALPHA.matches("7")
    assert NUMERIC.matches("7") and not NUMERIC.matches("q")
    assert ALPHANUMERIC.matches("q") and ALPHANUMERIC.matches("7")
    assert not ALPHANUMERIC.matches("_")
    assert WHITESPACE.matches("\t") and not WHITESPACE.matches("x")


def test_include_chars():
    operators = CharClass(include_chars="+-=")
    assert operators.matches("=")
    assert not operators.matches("a")


def test_ignore_case_on_included_chars():
    klass = CharClass(include_chars="x")
    assert klass.matches("X", ignore_case=True)
    assert not klass.matches("X")


def test_invert_flips_members_only():
    klass = CharClass(include_alpha=True, invert=True)
    assert klass.matches("a") is False
    assert klass.matches("1") is False