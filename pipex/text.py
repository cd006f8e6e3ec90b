"""Word splitting, integer parsing and formatting, trimming and slicing of strings."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_ULONG_MASK = (1 << 64) - 1
_UINT_MASK = (1 << 32) - 1


def split_words(text: str, delimiter: str) -> list[str]:
    """Split text on a single delimiter character, dropping empty words."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return [word for word in text.split(delimiter) if word]


def _to_c_int(value: int) -> int:
    """Reduce an integer to the range of a 32-bit signed int, wrapping around."""
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits are
    read until the first non-digit. A string without digits gives 0. Values
    outside the 32-bit signed range wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = (result * 10 + int(ch)) & _ULONG_MASK
    return _to_c_int(result * sign)


def format_int(n: int) -> str:
    """Return the decimal representation of n, with a leading '-' when negative."""
    return str(int(n))


def trim(text: str, charset: str) -> str:
    """Remove every character found in charset from both ends of text."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or beyond the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]