"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


class LineReader:
    """Return successive lines of a text or binary stream.

    Lines keep their trailing newline; the last line may lack one. The stream
    is read in pieces of buffer_size, and data past the current line is kept
    for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[Chunk] = None

    def _newline_at(self) -> int:
        if self._buffer is None:
            return -1
        newline = "\n" if isinstance(self._buffer, str) else b"\n"
        return self._buffer.find(newline)

    def _fill(self) -> None:
        while self._newline_at() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._buffer is None:
                self._buffer = chunk
            else:
                self._buffer += chunk

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None when no data is left."""
        try:
            self._fill()
        except OSError:
            self._buffer = None
            raise
        if not self._buffer:
            self._buffer = None
            return None
        index = self._newline_at()
        if index < 0:
            line, self._buffer = self._buffer, None
        else:
            line = self._buffer[: index + 1]
            self._buffer = self._buffer[index + 1:]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line