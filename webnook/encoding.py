"""Number formatting, string escaping, binary dumps and base64."""

from __future__ import annotations

from webnook.text import int_from_hex_str

__all__ = [
    "BASE64_DIGITS",
    "base64_decode",
    "base64_encode",
    "escape",
    "format_binary",
    "format_bool",
    "format_float",
    "format_hex",
    "format_int",
    "format_uint",
    "format_uint_no_trailing_zeros",
    "unescape",
    "url_escape",
    "url_unescape",
]

BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_U64 = 0xFFFFFFFFFFFFFFFF
_FLOAT_PRECISION = 4

_UNESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}

_ESCAPES = {
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
}

_URL_UNSAFE = frozenset(
    [chr(code) for code in range(0x01, 0x10)]
    + [chr(code) for code in range(0x11, 0x20)]
    + list('<>#%" {}|\\^[]`;/?:@&=$,')
)

_BASE64_VALUES = {digit: value for value, digit in enumerate(BASE64_DIGITS)}


def format_int(number: int, min_digits: int = 0) -> str:
    """Write a signed integer in decimal, zero-padded to ``min_digits`` digits."""
    min_digits = max(min_digits, 1)
    sign = "-" if number < 0 else ""
    return sign + str(abs(number)).rjust(min_digits, "0")


def format_uint(number: int) -> str:
    """Write an unsigned 64-bit integer in decimal."""
    return str(number & _U64)


def format_uint_no_trailing_zeros(number: int, min_digits: int = 0) -> str:
    """Write ``number`` zero-padded to ``min_digits`` digits, dropping trailing zeros.

    Zero gives an empty string.
    """
    number &= _U64
    if number == 0:
        return ""
    return str(number).rjust(min_digits, "0").rstrip("0")


def format_hex(number: int, min_digits: int = 0) -> str:
    """Write an unsigned 64-bit integer in lower-case hexadecimal.

    Zero with no minimum width gives an empty string.
    """
    number &= _U64
    digits = format(number, "x") if number else ""
    return digits.rjust(min_digits, "0")


def format_bool(value: bool) -> str:
    """Write ``true`` or ``false``."""
    return "true" if value else "false"


def format_float(value: float) -> str:
    """Write a number with up to four fractional digits, without trailing zeros.

    The whole part is truncated toward zero and carries the sign.
    """
    text = format_int(int(value))
    magnitude = abs(value)
    fraction = int((magnitude - int(magnitude)) * 10**_FLOAT_PRECISION)
    if fraction:
        text += "."
    return text + format_uint_no_trailing_zeros(fraction, _FLOAT_PRECISION)


def unescape(text: str) -> str:
    """Resolve backslash escapes.

    A backslash as the very last character ends the output before the text
    that precedes it since the last escape.
    """
    pieces: list[str] = []
    segment_start = 0
    index = 0
    while index < len(text):
        if text[index] == "\\":
            if index + 1 >= len(text):
                return "".join(pieces)
            pieces.append(text[segment_start:index])
            escaped = text[index + 1]
            pieces.append(_UNESCAPES.get(escaped, escaped))
            index += 2
            segment_start = index
        else:
            index += 1
    pieces.append(text[segment_start:])
    return "".join(pieces)


def escape(text: str, add_quotes: bool = False) -> str:
    """Backslash-escape newlines, backslashes and quotes."""
    body = "".join(_ESCAPES.get(char, char) for char in text)
    return f'"{body}"' if add_quotes else body


def url_unescape(text: str) -> str:
    """Decode ``%XX`` sequences and turn ``+`` into a space.

    A ``%`` without two characters after it ends the output before the text
    that precedes it since the last decoded sequence.
    """
    pieces: list[str] = []
    segment_start = 0
    index = 0
    while index < len(text):
        char = text[index]
        if char == "%":
            if index + 2 >= len(text):
                return "".join(pieces)
            pieces.append(text[segment_start:index])
            value, _ = int_from_hex_str(text[index + 1:index + 3])
            pieces.append(chr(value & 0xFF))
            index += 3
            segment_start = index
        elif char == "+":
            pieces.append(text[segment_start:index])
            pieces.append(" ")
            index += 1
            segment_start = index
        else:
            index += 1
    pieces.append(text[segment_start:])
    return "".join(pieces)


def url_escape(text: str) -> str:
    """Percent-encode control characters and URL-reserved characters."""
    return "".join(
        "%" + format_hex(ord(char), 2) if char in _URL_UNSAFE else char
        for char in text
    )


def format_binary(data: bytes, bit_count: int | None = None) -> str:
    """Write the low ``bit_count`` bits of little-endian ``data`` as binary digits.

    The most significant bit comes first. ``bit_count`` defaults to every bit
    of ``data``.
    """
    if bit_count is None:
        bit_count = len(data) * 8
    if bit_count < 0:
        raise ValueError("bit count must not be negative")
    whole, leftover = divmod(bit_count, 8)
    if whole + (1 if leftover else 0) > len(data):
        raise ValueError("bit count exceeds the data given")
    pieces = []
    if leftover:
        pieces.append(format(data[whole] & ((1 << leftover) - 1), f"0{leftover}b"))
    pieces.extend(format(byte, "08b") for byte in reversed(data[:whole]))
    return "".join(pieces)


def base64_encode(data: bytes, padding: str = "=") -> str:
    """Encode bytes as base64, using ``padding`` to fill the last group."""
    pieces: list[str] = []
    for start in range(0, len(data), 3):
        group = data[start:start + 3]
        byte0 = group[0]
        byte1 = group[1] if len(group) > 1 else 0
        byte2 = group[2] if len(group) > 2 else 0
        digits = (
            (byte0 & 0xFC) >> 2,
            ((byte0 & 0x03) << 4) | ((byte1 & 0xF0) >> 4),
            ((byte1 & 0x0F) << 2) | ((byte2 & 0xC0) >> 6),
            byte2 & 0x3F,
        )
        symbols = [BASE64_DIGITS[digit] for digit in digits]
        pad_count = 3 - len(group)
        if pad_count:
            symbols[4 - pad_count:] = [padding] * pad_count
        pieces.append("".join(symbols))
    return "".join(pieces)


def base64_decode(text: str, padding: str = "=") -> bytes:
    """Decode base64 text.

    Unknown characters count as zero digits, a short final group is filled
    with zero digits, and decoding stops after the first group holding padding.
    """
    out = bytearray()
    for start in range(0, len(text), 4):
        group = text[start:start + 4].ljust(4, "\0")
        values = []
        ending = 0
        for digit in group:
            value = _BASE64_VALUES.get(digit, 0)
            if digit == padding:
                value = 0
                ending += 1
            values.append(value)
        decoded = (
            ((values[0] & 0x3F) << 2) | ((values[1] & 0x30) >> 4),
            ((values[1] & 0x0F) << 4) | ((values[2] & 0x3C) >> 2),
            ((values[2] & 0x03) << 6) | (values[3] & 0x3F),
        )
        out.extend(decoded[:max(0, 3 - ending)])
        if ending:
            break
    return bytes(out)