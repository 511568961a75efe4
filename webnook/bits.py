"""Byte-order swaps, flag bits, and splitting or joining machine words."""

from __future__ import annotations

__all__ = [
    "I16_MAX",
    "I32_MAX",
    "I64_MAX",
    "I8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U8_MAX",
    "get_flag",
    "high_byte",
    "high_dword",
    "high_word",
    "low_byte",
    "low_dword",
    "low_word",
    "make_dword",
    "make_qword",
    "make_word",
    "set_flag",
    "swap_byte_order_u128",
    "swap_byte_order_u16",
    "swap_byte_order_u32",
    "swap_byte_order_u64",
    "toggle_flag",
    "unset_flag",
]

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

I8_MAX = 0x7F
I16_MAX = 0x7FFF
I32_MAX = 0x7FFFFFFF
I64_MAX = 0x7FFFFFFFFFFFFFFF


def _swap(value: int, size: int) -> int:
    mask = (1 << (8 * size)) - 1
    return int.from_bytes((value & mask).to_bytes(size, "little"), "big")


def swap_byte_order_u16(value: int) -> int:
    """Reverse the bytes of a 16-bit value."""
    return _swap(value, 2)


def swap_byte_order_u32(value: int) -> int:
    """Reverse the bytes of a 32-bit value."""
    return _swap(value, 4)


def swap_byte_order_u64(value: int) -> int:
    """Reverse the bytes of a 64-bit value."""
    return _swap(value, 8)


def swap_byte_order_u128(a: int, b: int) -> tuple[int, int]:
    """Reverse the bytes of a 128-bit value held as two 64-bit halves.

    Returns the new pair ``(swapped b, swapped a)``.
    """
    return swap_byte_order_u64(b), swap_byte_order_u64(a)


def set_flag(flags: int, bit: int) -> int:
    """Return ``flags`` with the bits of ``bit`` set."""
    return (flags | bit) & U8_MAX


def unset_flag(flags: int, bit: int) -> int:
    """Return ``flags`` with the bits of ``bit`` cleared."""
    return flags & ~bit & U8_MAX


def toggle_flag(flags: int, bit: int) -> int:
    """Return ``flags`` with the bits of ``bit`` flipped."""
    return (flags ^ bit) & U8_MAX


def get_flag(flags: int, bit: int) -> bool:
    """Tell whether any of the bits of ``bit`` is set in ``flags``."""
    return bool(flags & bit & U8_MAX)


def make_qword(low: int, high: int) -> int:
    """Join two 32-bit halves into a 64-bit value."""
    return (low & U32_MAX) | ((high & U32_MAX) << 32)


def make_dword(low: int, high: int) -> int:
    """Join two 16-bit halves into a 32-bit value."""
    return (low & U16_MAX) | ((high & U16_MAX) << 16)


def make_word(low: int, high: int) -> int:
    """Join two bytes into a 16-bit value."""
    return (low & U8_MAX) | ((high & U8_MAX) << 8)


def high_dword(qword: int) -> int:
    """Upper 32 bits of a 64-bit value."""
    return (qword & U64_MAX) >> 32


def low_dword(qword: int) -> int:
    """Lower 32 bits of a 64-bit value."""
    return qword & U32_MAX


def high_word(dword: int) -> int:
    """Upper 16 bits of a 32-bit value."""
    return (dword & U32_MAX) >> 16


def low_word(dword: int) -> int:
    """Lower 16 bits of a 32-bit value."""
    return dword & U16_MAX


def high_byte(word: int) -> int:
    """Upper 8 bits of a 16-bit value."""
    return (word & U16_MAX) >> 8


def low_byte(word: int) -> int:
    """Lower 8 bits of a 16-bit value."""
    return word & U8_MAX