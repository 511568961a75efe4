import base64

import pytest

from webnook.encoding import (
    BASE64_DIGITS,
    base64_decode,
    base64_encode,
    escape,
    format_binary,
    format_bool,
    format_float,
    format_hex,
    format_int,
    format_uint,
    format_uint_no_trailing_zeros,
    unescape,
    url_escape,
    url_unescape,
)

SAMPLES = [b"", b"A", b"AB", b"ABC", b"hello world", bytes(range(256))]


@pytest.mark.parametrize("number", [0, 1, 9, 42, -42, 123456789, -2**40])
def test_format_int_round_trips(number):
    assert int(format_int(number)) == number


def test_format_int_pads_digits_after_sign():
    result = format_int(-7, 3)
    assert result.startswith("-")
    assert len(result) == 4
    assert int(result) == -7


def test_format_int_zero_has_one_digit():
    assert format_int(0) == "0"


@pytest.mark.parametrize("number", [0, 5, 1000, 2**63])
def test_format_uint_round_trips(number):
    assert int(format_uint(number)) == number


def test_format_uint_wraps_to_u64():
    assert int(format_uint(-1)) == 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("number", [7, 500, 1200, 1234])
def test_no_trailing_zeros_keeps_leading_digits(number):
    result = format_uint_no_trailing_zeros(number, 0)
    assert not result.endswith("0")
    assert str(number).startswith(result)
    assert set(str(number)[len(result):]) <= {"0"}


def test_no_trailing_zeros_pads_before_stripping():
    result = format_uint_no_trailing_zeros(50, 4)
    assert len(result) == 3
    assert int(result) == 5


@pytest.mark.parametrize("number", [1, 15, 255, 0xDEADBEEF, 2**64 - 1])
def test_format_hex_round_trips(number):
    result = format_hex(number)
    assert int(result, 16) == number
    assert result == result.lower()


def test_format_hex_min_digits_pads():
    result = format_hex(10, 8)
    assert len(result) == 8
    assert int(result, 16) == 10


def test_format_bool():
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


@pytest.mark.parametrize("value", [1.5, 2.25, -3.75, 10.0, 0.0625])
def test_format_float_round_trips(value):
    assert float(format_float(value)) == value


def test_format_float_whole_number_has_no_point():
    assert "." not in format_float(2.0)


@pytest.mark.parametrize("text", ["plain", "line\nbreak", 'say "hi"', "it's", "back\\slash"])
def test_escape_round_trips(text):
    assert unescape(escape(text)) == text


def test_escape_known_sequences():
    assert escape("\n") == "\\n"
    assert escape("\\") == "\\\\"


def test_escape_adds_quotes():
    result = escape("abc", add_quotes=True)
    assert result[0] == result[-1] == '"'
    assert result[1:-1] == escape("abc")


def test_unescape_unknown_escape_gives_the_character():
    assert unescape("\\q") == "q"
    assert unescape("\\0") == "\0"


def test_unescape_trailing_backslash_drops_pending_text():
    assert unescape("ab\\") == ""


@pytest.mark.parametrize("text", ["hello world", "a/b?c=d&e", "<tag> {x}", "100%", "tab\tend"])
def test_url_escape_round_trips(text):
    assert url_unescape(url_escape(text)) == text


def test_url_escape_leaves_safe_characters():
    safe = "abcXYZ019-_.~\x10"
    assert url_escape(safe) == safe


@pytest.mark.parametrize("char", list('<>#%" {}|\\^[]`;/?:@&=$,'))
def test_url_escape_reserved(char):
    result = url_escape(char)
    assert result.startswith("%")
    assert int(result[1:], 16) == ord(char)


def test_url_unescape_plus_is_space():
    assert url_unescape("x+y") == "x y"


@pytest.mark.parametrize("data", [b"\x01", b"\xff\x00", b"\x12\x34\x56"])
def test_format_binary_full_bytes(data):
    result = format_binary(data)
    assert len(result) == 8 * len(data)
    assert int(result, 2) == int.from_bytes(data, "little")


def test_format_binary_partial_bits():
    data = b"\xff\x05"
    result = format_binary(data, 11)
    assert len(result) == 11
    assert int(result, 2) == int.from_bytes(data, "little") & ((1 << 11) - 1)


def test_format_binary_rejects_too_many_bits():
    with pytest.raises(ValueError):
        format_binary(b"\x00", 9)


@pytest.mark.parametrize("data", SAMPLES)
def test_base64_encode_matches_standard(data):
    assert base64_encode(data) == base64.b64encode(data).decode()


@pytest.mark.parametrize("data", SAMPLES)
def test_base64_round_trip(data):
    assert base64_decode(base64_encode(data)) == data


def test_base64_custom_padding():
    data = b"AB"
    assert base64_encode(data, "*") == base64.b64encode(data).decode().replace("=", "*")
    assert base64_decode(base64_encode(data, "*"), "*") == data


def test_base64_alphabet_is_standard():
    encoded = base64_encode(bytes(range(256)))
    assert set(encoded) <= set(BASE64_DIGITS) | {"="}


def test_base64_decode_short_group_fills_zeros():
    assert base64_decode("QQ") == b"A\x00\x00"