"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(ch: str, stream: TextIO) -> None:
    """Write a single character to stream."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    stream.write(ch)


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write text to stream; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def put_line(text: Optional[str], stream: TextIO) -> None:
    """Write text followed by a newline; None writes nothing at all."""
    if text is None:
        return
    stream.write(text + "\n")


def put_number(n: int, stream: TextIO) -> None:
    """Write the decimal representation of n to stream."""
    stream.write(str(int(n)))