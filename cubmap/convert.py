"""Integer parsing and formatting in the C library style."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _parse(text: str, bits: int) -> int:
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    if not digits:
        return 0
    return _wrap(sign * int(digits), bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text with no digits gives 0.
    """
    return _parse(text, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 64-bit value."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)