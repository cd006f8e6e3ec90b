"""Character classification, case conversion and index-aware string mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c: CharLike) -> bool:
    """True for codes in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_indexed(
    buffer: MutableSequence[T], func: Callable[[int, T], T | None]
) -> None:
    """Call func(index, item) on each item, storing any non-None result in place."""
    for index, item in enumerate(buffer):
        result = func(index, item)
        if result is not None:
            buffer[index] = result