"""Formatted output and writers for characters, strings and numbers."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

from libft.convert import itoa

_UINT32_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _as_int(value: Any, specifier: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{specifier} expects an int, got {type(value).__name__}"
        )
    return value


def _signed32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Union[str, int]) -> str:
    """Return one character from a one-character string or the low byte of an int."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"expected a character or an int, got {type(value).__name__}"
        )
    return chr(value & 0xFF)


def format_hex(n: int, uppercase: bool = False) -> str:
    """Return n as hexadecimal digits, treated as an unsigned 64-bit value."""
    value = _as_int(n, "x") & _ULONG_MASK
    return format(value, "X" if uppercase else "x")


def format_pointer(ptr: Optional[int]) -> str:
    """Return a pointer value as 0x-prefixed hex, or (nil) for zero."""
    if ptr is None or _as_int(ptr, "p") & _ULONG_MASK == 0:
        return "(nil)"
    return "0x" + format_hex(ptr)


def _format_one(specifier: str, args: list) -> str:
    def take() -> Any:
        if not args:
            raise TypeError(f"not enough arguments for %{specifier}")
        return args.pop(0)

    if specifier == "c":
        return _char(take())
    if specifier == "s":
        value = take()
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if specifier == "p":
        return format_pointer(take())
    if specifier in ("d", "i"):
        return str(_signed32(_as_int(take(), specifier)))
    if specifier == "u":
        return str(_as_int(take(), specifier) & _UINT32_MASK)
    if specifier == "x":
        return format_hex(_as_int(take(), specifier) & _UINT32_MASK)
    if specifier == "X":
        return format_hex(_as_int(take(), specifier) & _UINT32_MASK, True)
    # "%%" and any unknown specifier print the specifier character itself.
    return specifier


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with the %c %s %p %d %i %u %x %X %% conversions.

    Integers wrap to 32 bits as the C int and unsigned int would. Extra
    arguments are ignored; a missing one raises TypeError, and a format
    ending in a lone '%' raises ValueError.
    """
    pending = list(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        specifier = next(chars, None)
        if specifier is None:
            raise ValueError("format ends with an incomplete '%' specifier")
        pieces.append(_format_one(specifier, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def putchar_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character to stream."""
    stream.write(_char(c))


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write s to stream; None writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write s followed by a newline; None writes only the newline."""
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer to stream."""
    stream.write(itoa(n))