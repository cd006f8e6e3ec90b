"""A small printf-style formatter with the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any

_DIRECTIVE = re.compile(r"%([ +\-]*)(.?)", re.DOTALL)
_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_INT_MIN = -(1 << 31)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_integer(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conversion} needs an integer, got {type(value).__name__}"
        ) from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_integer(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _format_signed(value: Any, conversion: str, put_space: bool) -> str:
    number = _to_int32(_as_integer(value, conversion))
    prefix = " " if number >= 0 and put_space else ""
    return prefix + str(number)


def _format_unsigned(value: Any) -> str:
    return str(_as_integer(value, "u") & _UINT_MASK)


def _format_hex(value: Any, conversion: str) -> str:
    digits = format(_as_integer(value, conversion) & _UINT_MASK, "x")
    return digits.upper() if conversion == "X" else digits


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_integer(value, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def format_c(fmt: str, *args: Any) -> str:
    """Render fmt with args and return the resulting text.

    Flag characters ' ', '+' and '-' after '%' are skipped; a space right before
    a d or i conversion puts a space in front of non-negative numbers. An
    unknown conversion character is written as it stands, and a lone '%' at the
    end of fmt writes nothing.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    remaining = iter(args)

    def render(match: re.Match[str]) -> str:
        flags, conversion = match.group(1), match.group(2)
        put_space = flags.endswith(" ")
        if conversion == "":
            return ""
        if conversion == "%":
            return "%"
        if conversion == "c":
            return _format_char(_next_arg(remaining, conversion))
        if conversion == "s":
            return _format_string(_next_arg(remaining, conversion))
        if conversion in ("d", "i"):
            return _format_signed(_next_arg(remaining, conversion), conversion, put_space)
        if conversion == "u":
            return _format_unsigned(_next_arg(remaining, conversion))
        if conversion in ("x", "X"):
            return _format_hex(_next_arg(remaining, conversion), conversion)
        if conversion == "p":
            return _format_pointer(_next_arg(remaining, conversion))
        return conversion

    return _DIRECTIVE.sub(render, fmt)


def print_c(fmt: str, *args: Any) -> int:
    """Write the rendered fmt to standard output and return its length."""
    text = format_c(fmt, *args)
    sys.stdout.write(text)
    return len(text)