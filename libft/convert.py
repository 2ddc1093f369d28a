"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    """Parse leading whitespace, one optional sign and ASCII digits."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - 48)
    return sign * value


def atoi(text: str) -> int:
    """Convert the leading decimal number in text, wrapping to 32 bits.

    Text with no digits after optional whitespace and sign gives 0.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Convert the leading decimal number in text, wrapping to 64 bits."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)