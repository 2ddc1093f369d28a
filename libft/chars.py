"""Single-character classification and case conversion on the ASCII range."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset((9, 10, 11, 12, 13, 32))


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return.

    The value is reduced to its low byte first, as an unsigned char would be.
    """
    return (_code(c) & 0xFF) in _SPACE_CODES


def _convert(c: CharLike, low: int, high: int, delta: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; anything else is unchanged.

    A string argument gives a string back, an int gives an int.
    """
    return _convert(c, 97, 122, -32)


def to_lower(c: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; anything else is unchanged.

    A string argument gives a string back, an int gives an int.
    """
    return _convert(c, 65, 90, 32)