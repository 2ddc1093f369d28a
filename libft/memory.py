"""Byte-buffer operations on mutable and read-only bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers: memoryview) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for view in buffers:
        if n > view.nbytes:
            raise ValueError(f"length {n} exceeds buffer of {view.nbytes} bytes")


def memset(buffer, value: int, length: int):
    """Fill the first length bytes of buffer with the low byte of value."""
    view = memoryview(buffer).cast("B")
    _check_length(length, view)
    view[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer, length: int):
    """Set the first length bytes of buffer to zero."""
    return memset(buffer, 0, length)


def memcpy(dest, src, n: int):
    """Copy n bytes from src to the start of dest and return dest."""
    dest_view = memoryview(dest).cast("B")
    src_view = memoryview(src).cast("B")
    _check_length(n, dest_view, src_view)
    dest_view[:n] = bytes(src_view[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest; the regions may overlap."""
    # The bytes are taken out of src before any are written, so overlap is safe.
    return memcpy(dest, src, n)


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value's low byte, or None."""
    view = memoryview(data).cast("B")
    _check_length(n, view)
    index = bytes(view[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    view_a = memoryview(a).cast("B")
    view_b = memoryview(b).cast("B")
    _check_length(n, view_a, view_b)
    for byte_a, byte_b in zip(view_a[:n], view_b[:n]):
        if byte_a != byte_b:
            return byte_a - byte_b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises MemoryError when the product would overflow a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} overflows the size limit")
    return bytearray(count * size)