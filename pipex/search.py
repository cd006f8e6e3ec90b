"""Bounded searching, comparison, copying and concatenation of strings."""

from __future__ import annotations


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def find_substring(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of needle within the first limit characters, or None.

    An empty needle is found at index 0.
    """
    _check_size("limit", limit)
    if not needle:
        return 0
    position = haystack[:limit].find(needle)
    return None if position < 0 else position


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most n characters, treating the end of a string as code 0.

    Returns the difference of the first mismatching character codes, or 0.
    """
    _check_size("n", n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def find_char(text: str, ch: str) -> int | None:
    """Return the index of the first ch in text, or None.

    Searching for '\\0' finds the terminator at len(text).
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    position = text.find(ch)
    return None if position < 0 else position


def rfind_char(text: str, ch: str) -> int | None:
    """Return the index of the last ch in text, or None.

    Searching for '\\0' finds the terminator at len(text).
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    position = text.rfind(ch)
    return None if position < 0 else position


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so truncation shows as
    a length not less than size.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When size does
    not exceed len(dest), dest is left as is and size + len(src) is returned.
    """
    _check_size("size", size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)