import io

import pytest

from zoolworld.output import (
    format_printf,
    hex_lower,
    hex_upper,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_plain_text_passes_through():
    assert format_printf("Error\nBad Parsing\n") == "Error\nBad Parsing\n"


def test_string_conversion():
    assert format_printf("Usage: %s < file_name > ", "game") == "Usage: game < file_name > "


def test_null_string_conversion():
    assert format_printf("%s", None) == "(null)"


def test_char_conversion_from_str_and_int():
    assert format_printf("%c%c", "a", ord("b")) == "ab"


@pytest.mark.parametrize("n", [0, 7, -1, 42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    low = format_printf("%x", n)
    up = format_printf("%X", n)
    assert int(low, 16) == n
    assert low == low.lower()
    assert up == low.upper()


def test_pointer_null():
    assert format_printf("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEAD, 2**48 + 3])
def test_pointer_round_trip(address):
    text = format_printf("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_percent_literal_consumes_no_argument():
    assert format_printf("%%%d", 5) == "%5"


def test_unknown_conversion_emits_nothing():
    assert format_printf("a%qb%d", 3) == "ab3"


def test_lone_percent_raises():
    with pytest.raises(ValueError):
        format_printf("oops %")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "x")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s=%d", "moves", 12, file=buf)
    assert buf.getvalue() == "moves=12"
    assert count == len(buf.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "hello")
    assert capsys.readouterr().out == "hello"
    assert count == 5


@pytest.mark.parametrize("n", [0, 1, 10, 123456])
def test_hex_functions_round_trip(n):
    assert int(hex_lower(n), 16) == n
    assert hex_upper(n) == hex_lower(n).upper()


def test_hex_rejects_negative():
    with pytest.raises(ValueError):
        hex_lower(-1)
    with pytest.raises(ValueError):
        hex_upper(-5)


def test_put_char():
    buf = io.StringIO()
    assert put_char("z", file=buf) == 1
    assert put_char(ord("y"), file=buf) == 1
    assert buf.getvalue() == "zy"


def test_put_str_and_none():
    buf = io.StringIO()
    assert put_str("abc", file=buf) == 3
    assert put_str(None, file=buf) == 0
    assert buf.getvalue() == "abc"


def test_put_endl():
    buf = io.StringIO()
    assert put_endl("line", file=buf) == 5
    assert put_endl(None, file=buf) == 0
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, -2147483648, 99, -7])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    count = put_nbr(n, file=buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())