import io

import pytest

from minitalk.printf import format_message, print_formatted, write_number


def test_plain_text_is_unchanged():
    assert format_message("Server PID: ready") == "Server PID: ready"


def test_percent_escape():
    assert format_message("a%%b") == "a%b"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -2147483648, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_message("%d", n)) == n
    assert int(format_message("%i", n)) == n


def test_decimal_wraps_to_int32():
    assert int(format_message("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 3735928559])
def test_hex_round_trip_and_case(n):
    lower = format_message("%x", n)
    upper = format_message("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_negative_hex_is_unsigned():
    assert int(format_message("%x", -1), 16) == 2**32 - 1


def test_unsigned_wraps():
    assert int(format_message("%u", -1)) == 2**32 - 1
    assert int(format_message("%u", 123)) == 123


def test_string_and_null_string():
    assert format_message("[%s]", "abc") == "[abc]"
    assert format_message("%s", None) == "(null)"


def test_char_from_code_and_str():
    assert format_message("%c%c", 65, "z") == "Az"


def test_pointer():
    assert format_message("%p", None) == "(nil)"
    assert format_message("%p", 0) == "(nil)"
    text = format_message("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_unknown_specifier_stands_for_itself_and_keeps_args():
    assert format_message("%q%d", 5) == "q5"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_message("50%")


def test_bad_char_argument_raises():
    with pytest.raises(ValueError):
        format_message("%c", "ab")


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("Waiting: %d Seconds", 3, stream=stream)
    assert stream.getvalue() == format_message("Waiting: %d Seconds", 3)
    assert count == len(stream.getvalue())


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%s!", "hi")
    assert capsys.readouterr().out == "hi!"
    assert count == 3


@pytest.mark.parametrize("n", [0, 9, 10, -5, 147483648, -2147483648])
def test_write_number(n):
    stream = io.StringIO()
    count = write_number(n, stream)
    assert int(stream.getvalue()) == n
    assert count == len(stream.getvalue())


def test_write_number_int_min_text():
    stream = io.StringIO()
    write_number(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"