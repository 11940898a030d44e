"""Byte-buffer operations: filling, copying, moving, searching and comparing.

Writable buffers are any mutable byte sequences, such as ``bytearray`` or a
writable ``memoryview``. Read-only data may be any bytes-like object.
Functions that change a buffer do so in place and return it.
"""

from __future__ import annotations

from typing import TypeVar

SIZE_MAX = 2**64 - 1

Buffer = TypeVar("Buffer", bytearray, memoryview)


def _check_count(n: int, *sizes: int) -> None:
    """Reject negative counts and counts larger than any of *sizes*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer length {size}")


def _byte(value: int) -> int:
    """Truncate *value* to an unsigned char, as a C cast would."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte value must be an int, got {type(value).__name__}")
    return value & 0xFF


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first *n* bytes of *buffer* to the low byte of *value*."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([_byte(value)]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> Buffer:
    """Set the first *n* bytes of *buffer* to zero."""
    return memset(buffer, 0, n)


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* to the start of *dest*."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Move *n* bytes inside *buffer* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    for offset in (dest, src):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"offset must be an int, got {type(offset).__name__}")
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` among the
    first *n* bytes of *data*, or None if there is none."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(
    a: bytes | bytearray | memoryview,
    b: bytes | bytearray | memoryview,
    n: int,
) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first unequal pair of bytes, taken as
    unsigned values, or 0 when the regions are equal.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``nmemb * size`` bytes.

    A zero count or size yields a one-byte buffer. A product that would not
    fit in a 64-bit size raises OverflowError.
    """
    for name, value in (("nmemb", nmemb), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    if nmemb > SIZE_MAX // size:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(nmemb * size)