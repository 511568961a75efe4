"""ASCII character predicates and character classes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ALPHA",
    "ALPHANUMERIC",
    "NUMERIC",
    "WHITESPACE",
    "CharClass",
    "is_alphabetical",
    "is_alphanumeric",
    "is_hex_numeric",
    "is_newline",
    "is_numeric",
    "is_whitespace",
    "lower",
]


def is_newline(char: str) -> bool:
    """Return True for a carriage return or a line feed."""
    return char in ("\n", "\r")


def is_whitespace(char: str) -> bool:
    """Return True for a space, a tab or a newline character."""
    return char in (" ", "\t") or is_newline(char)


def is_alphabetical(char: str) -> bool:
    """Return True for an ASCII letter."""
    return "a" <= char <= "z" or "A" <= char <= "Z"


def is_numeric(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return "0" <= char <= "9"


def is_hex_numeric(char: str) -> bool:
    """Return True for an ASCII hexadecimal digit, in either case."""
    if is_numeric(char):
        return True
    return "a" <= lower(char) <= "f"


def is_alphanumeric(char: str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alphabetical(char) or is_numeric(char)


def lower(char: str) -> str:
    """Lower-case an ASCII capital letter; any other character is returned as is."""
    if "A" <= char <= "Z":
        return chr(ord(char) + (ord("a") - ord("A")))
    return char


@dataclass(frozen=True)
class CharClass:
    """A set of characters described by explicit members and broad categories."""

    include_chars: str = ""
    include_alpha: bool = False
    include_numeric: bool = False
    include_whitespace: bool = False
    invert: bool = False

    def matches(self, char: str, ignore_case: bool = False) -> bool:
        """Tell whether ``char`` belongs to the class.

        A character that belongs to the class gives ``not invert``; a character
        outside it always gives False.
        """
        member = (
            (self.include_numeric and is_numeric(char))
            or (self.include_alpha and is_alphabetical(char))
            or (self.include_whitespace and is_whitespace(char))
        )
        if not member:
            if ignore_case:
                folded = lower(char)
                member = any(lower(c) == folded for c in self.include_chars)
            else:
                member = char in self.include_chars if char else False
        if member:
            return not self.invert
        return False


ALPHA = CharClass(include_alpha=True)
NUMERIC = CharClass(include_numeric=True)
ALPHANUMERIC = CharClass(include_alpha=True, include_numeric=True)
WHITESPACE = CharClass(include_whitespace=True)