"""Building new strings: joining, mapping, duplicating and bounded copies."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

_NUL = "\0"


def _require_text(text: object, what: str = "text") -> str:
    if not isinstance(text, str):
        raise TypeError(f"{what} must be a str, got {type(text).__name__}")
    return text


def _non_negative(n: int, what: str) -> int:
    if n < 0:
        raise ValueError(f"{what} must not be negative")
    return n


def _terminated(text: str) -> str:
    """Return text up to its first NUL, as a C string would end there."""
    return text.split(_NUL, 1)[0]


def strjoin(a: Optional[str], b: str) -> str:
    """Concatenate a and b; a missing first string counts as empty."""
    _require_text(b, "b")
    if a is None:
        return b
    return _require_text(a, "a") + b


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of func(index, char) for every character."""
    _require_text(text)
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) for every character and return the result.

    func may return a replacement character; None leaves the character as it is.
    """
    _require_text(text)
    if func is None:
        raise TypeError("func must be callable")
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)


def strdup(text: str) -> str:
    """Return a copy of text up to its first NUL."""
    return _terminated(_require_text(text))


def strndup(text: str, n: int) -> str:
    """Return a copy of at most n characters of text, stopping at a NUL."""
    _require_text(text)
    _non_negative(n, "n")
    return _terminated(text[:n])


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, so truncation shows
    as a length greater than or equal to size.
    """
    src = _terminated(_require_text(src, "src"))
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length the untruncated result would
    have had: the length of dst found within size, plus the length of src.
    """
    dst = _terminated(_require_text(dst, "dst"))
    src = _terminated(_require_text(src, "src"))
    _non_negative(size, "size")
    dst_len = min(len(dst), size)
    room = max(0, size - dst_len - 1)
    return dst[:dst_len] + src[:room], dst_len + len(src)