import pytest

from pipex.cformat import format_c, print_c


def test_plain_text_passes_through():
    assert format_c("Hello, World!") == "Hello, World!"


def test_percent_escape():
    assert format_c("Percentage:%%") == "Percentage:%"


def test_char_from_string_and_int():
    assert format_c("Character:%c", "A") == "Character:A"
    assert format_c("%c", ord("A")) == "A"


def test_string_conversion():
    assert format_c("String:%s", "Hello, World!") == "String:Hello, World!"


def test_null_string():
    assert format_c("%s", None) == "(null)"


def test_null_pointer():
    assert format_c("Pointer:%p", None) == "Pointer:(nil)"
    assert format_c("%p", 0) == "(nil)"


def test_pointer_hex():
    assert format_c("%p", 0xDEADBEEF) == "0xdeadbeef"


def test_int_min():
    assert format_c("%d", -2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert format_c("%i", 2147483648) == "-2147483648"


def test_unsigned_of_negative_one():
    assert format_c("%u", -1) == "4294967295"


@pytest.mark.parametrize("value", [0, 1, 42, 12345, -6789, 2147483647])
def test_signed_round_trip(value):
    assert int(format_c("%d", value)) == value
    assert format_c("%i", value) == format_c("%d", value)


@pytest.mark.parametrize("value", [0, 9, 10, 15, 16, 255, 4294967295])
def test_hex_round_trip(value):
    lower = format_c("%x", value)
    upper = format_c("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_uppercase_value():
    assert format_c("%X", 0xDEADBEEF) == "DEADBEEF"


def test_space_flag_on_positive():
    assert format_c("% d", 42) == " " + format_c("%d", 42)


def test_space_flag_ignored_for_negative():
    assert format_c("%  d", -2147483648) == "-2147483648"


def test_space_flag_needs_space_directly_before():
    assert format_c("% +d", 42) == format_c("%d", 42)


def test_flags_are_skipped_for_other_conversions():
    assert format_c("%-s", "abc") == "abc"


def test_unknown_conversion_is_written():
    assert format_c("%q") == "q"


def test_trailing_percent_writes_nothing():
    assert format_c("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_c("%d")


def test_none_format():
    with pytest.raises(TypeError):
        format_c(None)


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        format_c("%d", "text")


def test_print_returns_length_and_writes(capsys):
    count = print_c("Integer: %d\n", 12345)
    captured = capsys.readouterr().out
    assert captured == format_c("Integer: %d\n", 12345)
    assert count == len(captured)


def test_print_multiple_arguments(capsys):
    count = print_c("%s-%c-%u", "x", "y", 7)
    captured = capsys.readouterr().out
    assert captured == "x-y-7"
    assert count == len(captured)