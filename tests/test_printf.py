import pytest

from minitalk.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


@pytest.mark.parametrize("value", [0, 7, 42, -1, -123456, 2147483647, -2147483648])
def test_decimal_matches_str(value):
    assert format_string("%d", value) == str(value)
    assert format_string("%i", value) == str(value)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2**32 + 5) == str(5)


def test_unsigned_of_negative_one():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 3735928559])
def test_hex_matches_format(value):
    assert format_string("%x", value) == format(value, "x")
    assert format_string("%X", value) == format(value, "X")


def test_hex_of_negative_one():
    assert format_string("%x", -1) == "ffffffff"


def test_char_from_int_and_str():
    assert format_string("%c", ord("A")) == "A"
    assert format_string("%c%c", "x", "y") == "xy"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_string_stops_at_nul():
    assert format_string("%s", "ab\0cd") == "ab"


def test_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"
    assert format_string("%p", 255) == "0x" + format(255, "x")


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_specifier_is_dropped():
    assert format_string("a%zb") == "ab"


def test_trailing_percent_ends_output():
    assert format_string("abc%") == "abc"


def test_pid_line():
    assert format_string("PID:%d\n", 1234) == "PID:" + str(1234) + "\n"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_format_none_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_printf_writes_and_counts(capsys):
    count = printf("x=%d %s%c", -5, "ok", "!")
    out = capsys.readouterr().out
    assert out == format_string("x=%d %s%c", -5, "ok", "!")
    assert count == len(out)


def test_printf_none_returns_minus_one(capsys):
    assert printf(None) == -1
    assert capsys.readouterr().out == ""