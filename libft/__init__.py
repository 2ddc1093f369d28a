"""C-style string, memory, list, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "convert",
    "memory",
    "strings",
    "text",
    "linked_list",
    "output",
    "lines",
]