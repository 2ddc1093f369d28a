"""Searching, comparing, splitting and slicing of text."""

from __future__ import annotations

from typing import List, Optional

_NUL = "\0"


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _non_negative(n: int, what: str) -> int:
    if n < 0:
        raise ValueError(f"{what} must not be negative")
    return n


def split(text: str, delimiter: str) -> List[str]:
    """Split text on delimiter, dropping the empty pieces between repeats."""
    _single_char(delimiter, "delimiter")
    return [piece for piece in text.split(delimiter) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first c in text, or None.

    The terminating NUL is never matched.
    """
    _single_char(c, "c")
    if c == _NUL:
        return None
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last c in text, or None.

    Searching for NUL gives the index of the terminator, len(text).
    """
    _single_char(c, "c")
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    # The shorter string ends in a terminator that compares as zero.
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strcmp(a: str, b: str) -> int:
    """Return the difference of the first unequal characters, or 0."""
    return _compare(a, b)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters, as strcmp does."""
    _non_negative(n, "n")
    return _compare(a[:n], b[:n])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle inside the first length characters of haystack.

    An empty needle is found at index 0; a needle that is absent or would run
    past length gives None.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]