"""Reading and writing code points in UTF-8, UTF-16 and UTF-32."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

__all__ = [
    "REPLACEMENT",
    "UNICODE_ERROR",
    "utf16_from_utf32",
    "utf16_from_utf8",
    "utf16_read",
    "utf16_write",
    "utf32_from_utf16",
    "utf32_from_utf8",
    "utf32_read",
    "utf8_from_utf16",
    "utf8_from_utf32",
    "utf8_read",
    "utf8_write",
]

UNICODE_ERROR = 0x80000000
"""Code point value reported for malformed input."""

REPLACEMENT = 0xFFFD
"""Code point written in place of ``UNICODE_ERROR``."""

_U32 = 0xFFFFFFFF

# lead-byte mask, expected lead bits, sequence length, payload bits, payload mask
_UTF8_LEADS = (
    (0xF8, 0xF0, 4, 3, 0x07),
    (0xF0, 0xE0, 3, 4, 0x0F),
    (0xE0, 0xC0, 2, 5, 0x1F),
)

_S = TypeVar("_S", bytes, Sequence[int])


def utf8_read(data: bytes) -> tuple[int, bytes]:
    """Decode one code point from the front of ``data``.

    Returns the code point and the remaining bytes. Malformed input gives
    ``UNICODE_ERROR`` and skips a single byte.
    """
    first = data[0]
    if first & 0x80 == 0:
        return first, data[1:]

    for lead_mask, lead_bits, length, code_bits, mask in _UTF8_LEADS:
        if first & lead_mask == lead_bits:
            break
    else:
        return UNICODE_ERROR, data[1:]

    total_bits = 5 * length + 1 if length > 2 else 11
    codepoint = 0
    offset = 0
    for index in range(length):
        if index >= len(data):
            return UNICODE_ERROR, data[1:]
        byte = data[index]
        if index > 0 and byte & 0xC0 != 0x80:
            return UNICODE_ERROR, data[1:]
        codepoint |= (byte & mask) << (total_bits - offset - code_bits)
        offset += code_bits
        code_bits, mask = 6, 0x3F
    return codepoint, data[length:]


def utf16_read(units: Sequence[int]) -> tuple[int, Sequence[int]]:
    """Decode one code point from the front of a sequence of UTF-16 units.

    Returns the code point and the remaining units. An unpaired surrogate
    gives ``UNICODE_ERROR`` and skips a single unit.
    """
    first = units[0]
    if first & 0xF800 != 0xD800:
        return first, units[1:]
    if first & 0x0400:
        return UNICODE_ERROR, units[1:]
    if len(units) < 2 or units[1] & 0xFC00 != 0xDC00:
        return UNICODE_ERROR, units[1:]
    codepoint = ((first & 0x3FF) << 10) | (units[1] & 0x3FF)
    return codepoint + 0x10000, units[2:]


def utf32_read(units: Sequence[int]) -> tuple[int, Sequence[int]]:
    """Take one code point from a sequence of UTF-32 units.

    Values beyond 21 bits give ``UNICODE_ERROR``.
    """
    value = units[0]
    if value > 0x1FFFFF:
        return UNICODE_ERROR, units[1:]
    return value, units[1:]


def utf8_write(codepoint: int) -> bytes:
    """Encode a code point as UTF-8; values of 22 bits or more give no bytes."""
    if codepoint == UNICODE_ERROR:
        codepoint = REPLACEMENT
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | (codepoint & 0x7C0) >> 6, 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes((
            0xE0 | (codepoint & 0xF000) >> 12,
            0x80 | (codepoint & 0xFC0) >> 6,
            0x80 | (codepoint & 0x3F),
        ))
    if codepoint < 0x200000:
        return bytes((
            0xF0 | (codepoint & 0x1C0000) >> 18,
            0x80 | (codepoint & 0x3F000) >> 12,
            0x80 | (codepoint & 0xFC0) >> 6,
            0x80 | (codepoint & 0x3F),
        ))
    return b""


def utf16_write(codepoint: int) -> list[int]:
    """Encode a code point as one UTF-16 unit or a surrogate pair."""
    if codepoint == UNICODE_ERROR:
        codepoint = REPLACEMENT
    if codepoint < 0xFFFF:
        return [codepoint]
    offset = (codepoint - 0x10000) & _U32
    return [0xD800 | (offset & 0xFFC00) >> 10, 0xDC00 | (offset & 0x3FF)]


def _codepoints(
    data: _S, reader: Callable[[_S], tuple[int, _S]]
) -> Iterator[int]:
    while data:
        codepoint, data = reader(data)
        yield codepoint


def utf8_from_utf16(units: Sequence[int], null_terminate: bool = False) -> bytes:
    """Convert UTF-16 units to UTF-8 bytes."""
    out = b"".join(utf8_write(cp) for cp in _codepoints(units, utf16_read))
    return out + b"\0" if null_terminate else out


def utf8_from_utf32(units: Sequence[int], null_terminate: bool = False) -> bytes:
    """Convert UTF-32 units to UTF-8 bytes."""
    out = b"".join(utf8_write(cp) for cp in _codepoints(units, utf32_read))
    return out + b"\0" if null_terminate else out


def utf16_from_utf8(data: bytes, null_terminate: bool = False) -> list[int]:
    """Convert UTF-8 bytes to UTF-16 units."""
    out = [unit for cp in _codepoints(data, utf8_read) for unit in utf16_write(cp)]
    if null_terminate:
        out.append(0)
    return out


def utf16_from_utf32(units: Sequence[int], null_terminate: bool = False) -> list[int]:
    """Convert UTF-32 units to UTF-16 units."""
    out = [unit for cp in _codepoints(units, utf32_read) for unit in utf16_write(cp)]
    if null_terminate:
        out.append(0)
    return out


def utf32_from_utf8(data: bytes, null_terminate: bool = False) -> list[int]:
    """Convert UTF-8 bytes to code points; malformed input stays ``UNICODE_ERROR``."""
    out = list(_codepoints(data, utf8_read))
    if null_terminate:
        out.append(0)
    return out


def utf32_from_utf16(units: Sequence[int], null_terminate: bool = False) -> list[int]:
    """Convert UTF-16 units to code points; malformed input stays ``UNICODE_ERROR``."""
    out = list(_codepoints(units, utf16_read))
    if null_terminate:
        out.append(0)
    return out