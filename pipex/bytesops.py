"""Byte-buffer searching, comparison, copying and filling."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(name: str, data, n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(data):
        raise IndexError(f"{name} holds {len(data)} bytes, {n} requested")


def find_byte(data: bytes | bytearray | memoryview, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value among the first n, or None."""
    _check_length("data", data, n)
    position = bytes(data[:n]).find(value & 0xFF)
    return None if position < 0 else position


def compare_bytes(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch or 0."""
    _check_length("first", first, n)
    _check_length("second", second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def copy_bytes(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    if dest is not src:
        dest[:n] = src[:n]
    return dest


def move_bytes(
    buffer: bytearray, dest_offset: int, src_offset: int, n: int
) -> bytearray:
    """Copy n bytes within buffer from src_offset to dest_offset, overlap-safe."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length("buffer", buffer, max(dest_offset, src_offset) + n)
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def fill_bytes(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to value (truncated to a byte)."""
    _check_length("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero_bytes(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    fill_bytes(buffer, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """Allocate count * size zero bytes, refusing sizes that overflow."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)