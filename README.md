# libft

This is a small collection of helpers modelled on the classic C library
routines. It covers character classification, number conversion with C
integer widths, byte-buffer operations, string utilities, a singly linked
list, printf-style formatting and a buffered line reader.

## Installation

```
pip install .
```

To run the tests, install the `test` extra first:

```
pip install ".[test]"
pytest
```

## Modules

- `libft.chars` provides `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`, `to_upper` and `to_lower`.
  - Each one accepts a one-character string or an int code.
  - `to_upper` and `to_lower` return the same kind of value they were given.
- `libft.convert` provides `atoi`, `atol` and `itoa`.
  - `atoi` and `atol` skip leading whitespace and read one optional sign and
    the digits that follow.
  - `atoi` wraps the result to 32 bits and `atol` wraps it to 64 bits.
  - `itoa` raises `OverflowError` when the value is outside the 32-bit range.
- `libft.memory` provides `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`. They work on bytes-like objects.
  - The functions that write need a mutable buffer such as a `bytearray`.
  - `memchr` returns an index, or `None` when the byte is not found.
  - `calloc` returns a zeroed `bytearray`. It raises `MemoryError` if the
    size would overflow.
- `libft.strings` provides `split`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr`, `strtrim` and `substr`.
  - The search functions return an index, or `None` when nothing is found.
- `libft.text` provides `strjoin`, `strmapi`, `striteri`, `strdup`,
  `strndup`, `strlcpy` and `strlcat`.
  - `strlcpy` and `strlcat` return a pair: the resulting text and the length
    the full result would have had.
- `libft.linked_list` provides `Node` and `LinkedList`.
  - The list has `push_front`, `push_back`, `last`, `remove`, `clear`,
    `iterate` and `map`.
  - It also supports `len()` and iteration.
- `libft.output` provides `format_printf` and `printf`.
  - They handle the `%c %s %p %d %i %u %x %X %%` conversions, and integers
    wrap as the C types would.
  - `printf` writes to standard output and returns the number of characters
    written.
  - The module also has `format_hex`, `format_pointer`, `putchar_fd`,
    `putstr_fd`, `putendl_fd` and `putnbr_fd`. The `*_fd` writers take a
    stream.
- `libft.lines` provides `LineReader`, which reads a text or binary stream
  one line at a time.
  - Each line keeps its trailing newline.
  - `read_line` returns `None` at the end of the stream.

## Example

```python
import io

from libft.convert import atoi
from libft.lines import LineReader
from libft.output import format_printf
from libft.strings import split, strtrim

split("  a b  c ", " ")                     # ['a', 'b', 'c']
strtrim("--hello--", "-")                   # 'hello'
atoi("  -42abc")                            # -42
format_printf("%d is %x in hex", 255, 255)  # '255 is ff in hex'

for line in LineReader(io.StringIO("one\ntwo\n"), 4):
    print(line, end="")
```

## Scope

This package is a library only. It has no command-line program.