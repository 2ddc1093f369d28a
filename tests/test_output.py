import io

import pytest

from libft.convert import INT_MIN
from libft.output import (
    format_hex,
    format_pointer,
    format_printf,
    printf,
    putchar_fd,
    putendl_fd,
    putnbr_fd,
    putstr_fd,
)


def test_null_string_placeholder():
    assert format_printf("%s", None) == "(null)"


def test_nil_pointer_placeholder():
    assert format_printf("%p", 0) == "(nil)"
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("value", [1, 255, 4096, 0xDEADBEEF, 2**63])
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value


@pytest.mark.parametrize("value", [0, 9, 10, 15, 16, 12345, 2**40 + 7])
def test_hex_round_trip_and_case(value):
    lower = format_hex(value)
    upper = format_hex(value, True)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_negative_wraps_to_unsigned_long():
    assert int(format_hex(-1), 16) == 2**64 - 1


def test_lower_and_upper_hex_specifiers():
    assert format_printf("%x", 255) == "ff"
    assert format_printf("%X", 255) == "FF"


def test_decimal_specifiers():
    assert format_printf("%d %i", -42, 7) == "-42 7"


def test_decimal_wraps_to_int():
    assert int(format_printf("%d", 2**31)) == INT_MIN


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_char_from_int_and_str():
    assert format_printf("%c", ord("Z")) == "Z"
    assert format_printf("%c%c", "a", "b") == "ab"


def test_percent_and_unknown_specifier():
    assert format_printf("100%%") == "100%"
    assert format_printf("%z") == "z"


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_mixed_format():
    assert format_printf("%s=%d", "n", 3) == "n=3"


def test_extra_arguments_ignored():
    assert format_printf("%s", "x", "y") == "x"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "5")


def test_printf_writes_and_counts(capsys):
    count = printf("%s:%d%c", "val", -3, "!")
    out = capsys.readouterr().out
    assert out == format_printf("%s:%d%c", "val", -3, "!")
    assert count == len(out)


def test_putchar_fd():
    stream = io.StringIO()
    putchar_fd("q", stream)
    putchar_fd(ord("r"), stream)
    assert stream.getvalue() == "qr"


def test_putstr_fd():
    stream = io.StringIO()
    putstr_fd("abc", stream)
    putstr_fd(None, stream)
    assert stream.getvalue() == "abc"


def test_putendl_fd():
    stream = io.StringIO()
    putendl_fd("line", stream)
    putendl_fd(None, stream)
    assert stream.getvalue().splitlines() == ["line", ""]
    assert stream.getvalue().endswith("\n")


def test_putnbr_fd_extremes():
    stream = io.StringIO()
    putnbr_fd(INT_MIN, stream)
    assert int(stream.getvalue()) == INT_MIN


def test_putnbr_fd_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, io.StringIO())