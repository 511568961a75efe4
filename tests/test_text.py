import pytest

from webnook.text import (
    MatchFlag,
    StringList,
    bool_from_str,
    cut_count,
    cut_find,
    find,
    float_from_str,
    int_from_hex_str,
    int_from_str,
    match,
    match_any,
    match_prefix,
    substr,
    substr_from_finds,
)


@pytest.mark.parametrize("count", [0, 1, 3, 5])
def test_cut_count_splits_in_place(count):
    first, second = cut_count("hello", count)
    assert first + second == "hello"
    assert len(first) == count


def test_cut_count_beyond_end():
    assert cut_count("hello", 50) == ("hello", "")


def test_cut_find_found():
    assert cut_find("key:value", ":") == ("key", "value")


def test_cut_find_uses_first_occurrence():
    first, second = cut_find("a::b::c", "::")
    assert first == "a"
    assert second == "b::c"


def test_cut_find_missing():
    assert cut_find("abc", "=") == ("abc", "")


def test_match_respects_case_flag():
    assert match("Host", "host") is False
    assert match("Host", "host", MatchFlag.IGNORE_CASE) is True
    assert match("Host", "Hosts", MatchFlag.IGNORE_CASE) is False


def test_match_any_methods():
    methods = ["GET", "POST"]
    assert match_any("post", methods, MatchFlag.IGNORE_CASE) == 1
    assert match_any("GET", methods) == 0
    assert match_any("PUT", methods) == -1


def test_match_any_skips_empty_candidates():
    assert match_any("", ["", ""]) == -1


def test_match_prefix():
    assert match_prefix("Content-Length: 5", "content-length", MatchFlag.IGNORE_CASE)
    assert not match_prefix("Content-Length: 5", "content-length")
    assert not match_prefix("ab", "abc")


def test_find_line_break():
    request = "GET / HTTP/1.1\r\nHost: x\r\n"
    index = find(request, "\r\n")
    assert request[index:index + 2] == "\r\n"
    assert "\r\n" not in request[:index]


def test_find_with_repeated_prefix_character():
    text = "ab\r\r\nrest"
    index = find(text, "\r\n")
    assert text[index:index + 2] == "\r\n"


def test_find_missing_and_case():
    assert find("abc", "x") == -1
    assert find("ABC", "bc") == -1
    assert find("ABC", "bc", MatchFlag.IGNORE_CASE) == 1


def test_substr_clamps():
    text = "abcdef"
    assert substr(text, 1, 100) == text[1:]
    assert substr(text, 10, 2) == ""
    assert substr(text, 2, 3) == text[2:5]


def test_substr_from_finds():
    html = "<a>text</a>"
    assert substr_from_finds(html, "<a>", "</a>", True) == "text"
    assert substr_from_finds("<a>text", "<a>", "</a>", True) == ""
    assert substr_from_finds("<a>text", "<a>", "</a>", False) == "text"
    assert substr_from_finds("text</a>", "<a>", "</a>", False) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", (123, "")),
        ("-42px", (-42, "px")),
        ("abc", (0, "abc")),
        ("", (0, "")),
        ("7 rest", (7, " rest")),
    ],
)
def test_int_from_str(text, expected):
    assert int_from_str(text) == expected


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_int_from_hex_str_round_trip(number):
    assert int_from_hex_str(format(number, "x")) == (number, "")
    assert int_from_hex_str(format(number, "X")) == (number, "")


def test_int_from_hex_str_remainder_and_sign():
    assert int_from_hex_str("FFg") == (0xFF, "g")
    assert int_from_hex_str("-a") == (-0xA, "")


def test_bool_from_str():
    assert bool_from_str("true") is True
    assert bool_from_str("false") is False
    assert bool_from_str("True") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", (1.5, "")),
        ("-2.25x", (-2.25, "x")),
        ("3", (3.0, "")),
        ("4.", (4.0, "")),
    ],
)
def test_float_from_str(text, expected):
    assert float_from_str(text) == expected


def test_float_from_str_limits_fraction_digits():
    value, rest = float_from_str("0.123456")
    assert value == pytest.approx(0.1234)
    assert rest == "56"


def test_string_list_push_and_join():
    parts = StringList(["b"])
    parts.push("c")
    parts.push_front("a")
    assert parts.to_str() == "abc"
    assert parts.count == 3
    assert list(parts) == ["a", "b", "c"]


def test_string_list_concat_keeps_originals():
    left = StringList(["ab"])
    right = StringList(["cd", "e"])
    joined = left.concat(right)
    assert joined.to_str() == left.to_str() + right.to_str()
    assert joined.count == left.count + right.count
    assert left.to_str() == "ab"


def test_string_list_concat_with_empty():
    right = StringList(["x", "y"])
    assert StringList().concat(right).to_str() == right.to_str()
    assert right.concat(StringList()).to_str() == right.to_str()
    assert StringList().count == 0