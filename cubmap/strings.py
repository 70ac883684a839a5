"""C-style string and byte-buffer helpers.

Positions are returned as indices into the given text, with ``None`` for
"not found". Comparisons return the difference of the first pair of
characters that differ, so the sign tells the ordering.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

_TERMINATOR = "\0"


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _byte(c: Union[int, bytes]) -> int:
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    return c & 0xFF


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "sep")
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator is found at ``len(s)``."""
    _single_char(c, "c")
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator is found at ``len(s)``."""
    _single_char(c, "c")
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings character by character."""
    for a, b in zip_longest(s1, s2, fillvalue=_TERMINATOR):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _non_negative(n, "n")
    if n == 0:
        return 0
    return strcmp(s1[:n], s2[:n])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters."""
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``, so truncation
    happened when that length is ``size`` or more.
    """
    _non_negative(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    dst_len = len(dst)
    if size <= dst_len:
        return dst, len(src) + size
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def memchr(data: bytes, c: Union[int, bytes], n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    _non_negative(n, "n")
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the buffer length ({len(data)})")
    index = bytes(data[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers."""
    _non_negative(n, "n")
    if n > len(a) or n > len(b):
        raise ValueError(f"n ({n}) exceeds a buffer length")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0