import pytest

from pipex.text import format_int, parse_int, split_words, substring, trim


def test_split_words_rejoins_to_original_sentence():
    sentence = "Hello This is ft_split example."
    words = split_words(sentence, " ")
    assert " ".join(words) == sentence
    assert all(word and " " not in word for word in words)


def test_split_words_drops_empty_words():
    assert split_words("::a::b:", ":") == ["a", "b"]


def test_split_words_path_like_value():
    value = "/usr/local/bin:/usr/bin:/bin"
    assert split_words(value, ":") == ["/usr/local/bin", "/usr/bin", "/bin"]


@pytest.mark.parametrize("text", ["", "    ", " "])
def test_split_words_without_words_is_empty(text):
    assert split_words(text, " ") == []


@pytest.mark.parametrize("delimiter", ["", "ab"])
def test_split_words_rejects_bad_delimiter(delimiter):
    with pytest.raises(ValueError):
        split_words("a b", delimiter)


def test_parse_int_skips_whitespace_and_sign():
    assert parse_int("\t-1234") == -1234


def test_parse_int_stops_at_first_non_digit():
    assert parse_int(" \n\v\f\r+42abc") == 42


@pytest.mark.parametrize("text", ["abc", "--5", "+-5", "", "   "])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_wraps_past_int_max():
    assert parse_int("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 42, -12345, 2147483647, -2147483648])
def test_format_and_parse_round_trip(n):
    assert parse_int(format_int(n)) == n


def test_format_int_negative():
    assert format_int(-12345) == "-12345"


def test_format_int_zero_is_single_digit():
    assert format_int(0) == "0"


def test_trim_removes_set_from_both_ends():
    original = "abcToday is Sundayabc"
    result = trim(original, "abc")
    assert result in original
    assert result[0] not in "abc"
    assert result[-1] not in "abc"
    assert original.startswith("abc" + result[:1])


def test_trim_everything_leaves_empty():
    assert trim("aaa", "a") == ""


def test_trim_with_empty_set_is_identity():
    assert trim("xy", "") == "xy"


def test_substring_from_middle():
    assert substring("HelloWorld", 5, 10) == "World"


def test_substring_past_end_is_empty():
    assert substring("Hello", 10, 3) == ""


def test_substring_whole_text():
    text = "HelloWorld"
    assert substring(text, 0, len(text)) == text


def test_substring_rejects_negative_start():
    with pytest.raises(ValueError):
        substring("Hello", -1, 2)