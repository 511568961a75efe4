"""String matching, cutting, number parsing and a simple string list."""

from __future__ import annotations

import enum
import string as _string
from collections.abc import Callable, Iterable, Iterator, Sequence

from webnook.chars import is_hex_numeric, is_numeric

__all__ = [
    "MatchFlag",
    "StringList",
    "bool_from_str",
    "cut_count",
    "cut_find",
    "find",
    "float_from_str",
    "int_from_hex_str",
    "int_from_str",
    "match",
    "match_any",
    "match_prefix",
    "substr",
    "substr_from_finds",
]

_FOLD = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_DECIMAL_PLACES = 4


class MatchFlag(enum.IntFlag):
    """Options for string comparison."""

    NORMAL = 0
    IGNORE_CASE = 1


def _fold(text: str, flags: MatchFlag) -> str:
    return text.translate(_FOLD) if flags & MatchFlag.IGNORE_CASE else text


def cut_count(string: str, count: int) -> tuple[str, str]:
    """Split ``string`` after at most ``count`` characters."""
    count = max(count, 0)
    return string[:count], string[count:]


def cut_find(string: str, match: str) -> tuple[str, str]:
    """Split ``string`` around the first occurrence of ``match``.

    When ``match`` is absent the whole string is the first part.
    """
    index = find(string, match)
    if index == -1:
        return string, ""
    return string[:index], string[index + len(match):]


def match(string: str, other: str, flags: MatchFlag = MatchFlag.NORMAL) -> bool:
    """Tell whether two strings are equal, optionally ignoring ASCII case."""
    if len(string) != len(other):
        return False
    return _fold(string, flags) == _fold(other, flags)


def match_any(
    string: str, candidates: Iterable[str], flags: MatchFlag = MatchFlag.NORMAL
) -> int:
    """Return the index of the first non-empty candidate equal to ``string``, or -1."""
    for index, candidate in enumerate(candidates):
        if candidate and match(string, candidate, flags):
            return index
    return -1


def match_prefix(string: str, prefix: str, flags: MatchFlag = MatchFlag.NORMAL) -> bool:
    """Tell whether ``string`` starts with ``prefix``."""
    return match(substr(string, 0, len(prefix)), prefix, flags)


def find(string: str, match: str, flags: MatchFlag = MatchFlag.NORMAL) -> int:
    """Return the index of the first occurrence of ``match``, or -1."""
    return _fold(string, flags).find(_fold(match, flags))


def substr(string: str, start: int, count: int) -> str:
    """Return up to ``count`` characters from ``start``, clamped to the string."""
    start = min(max(start, 0), len(string))
    count = max(count, 0)
    return string[start:start + count]


def substr_from_finds(string: str, start: str, end: str, require_end: bool = True) -> str:
    """Return the text between the first ``start`` and the following ``end``.

    An empty string comes back when ``start`` is missing, or when ``end`` is
    missing and ``require_end`` is set; otherwise a missing ``end`` means the
    rest of the string.
    """
    start_index = find(string, start)
    if start_index == -1:
        return ""
    rest = string[start_index + len(start):]
    end_index = find(rest, end)
    if end_index == -1:
        if require_end:
            return ""
        end_index = len(rest)
    return rest[:end_index]


def _parse_integer(
    string: str, is_digit: Callable[[str], bool], base: int
) -> tuple[int, str]:
    negative = string.startswith("-")
    start = 1 if negative else 0
    end = start
    while end < len(string) and is_digit(string[end]):
        end += 1
    digits = string[start:end]
    value = int(digits, base) if digits else 0
    return (-value if negative else value), string[end:]


def int_from_str(string: str) -> tuple[int, str]:
    """Parse a leading, optionally negative, decimal integer.

    Returns the value and the unparsed remainder.
    """
    return _parse_integer(string, is_numeric, 10)


def int_from_hex_str(string: str) -> tuple[int, str]:
    """Parse a leading, optionally negative, hexadecimal integer.

    Returns the value and the unparsed remainder.
    """
    return _parse_integer(string, is_hex_numeric, 16)


def bool_from_str(string: str) -> bool:
    """Return True only for the exact text ``true``."""
    return string == "true"


def float_from_str(string: str) -> tuple[float, str]:
    """Parse a leading decimal number with at most four fractional digits.

    Returns the value and the unparsed remainder.
    """
    value, rest = int_from_str(string)
    negative = string.startswith("-")
    result = float(abs(value))
    if rest.startswith("."):
        rest = rest[1:]
        window = min(_DECIMAL_PLACES, len(rest))
        length = 0
        while length < window and is_numeric(rest[length]):
            length += 1
        if length:
            result += int(rest[:length]) / 10**length
        rest = rest[length:]
    return (-result if negative else result), rest


class StringList:
    """An ordered list of string pieces that can be joined into one string."""

    def __init__(self, strings: Sequence[str] = ()) -> None:
        self._parts: list[str] = list(strings)

    @property
    def count(self) -> int:
        """Total number of characters over all pieces."""
        return sum(len(part) for part in self._parts)

    def push(self, string: str) -> None:
        """Append a piece at the end."""
        self._parts.append(string)

    def push_front(self, string: str) -> None:
        """Insert a piece at the front."""
        self._parts.insert(0, string)

    def concat(self, other: StringList) -> StringList:
        """Return a new list holding this list's pieces followed by ``other``'s."""
        return StringList([*self._parts, *other._parts])

    def to_str(self) -> str:
        """Join all pieces in order."""
        return "".join(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"StringList({self._parts!r})"