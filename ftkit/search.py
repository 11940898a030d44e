"""Measuring, searching, comparing and bounded copying of strings.

Text is read up to the first NUL character, if it holds one. Searches return
an index into the text, or None when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import NamedTuple

NUL = "\0"


class Bounded(NamedTuple):
    """Result of a size-bounded copy: the text produced and the length the
    full result would have had without the bound."""

    text: str
    length: int


def _c_string(s: str) -> str:
    """Return *s* up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split(NUL, 1)[0]


def _char(c: int | str) -> str:
    """Return *c* as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _size(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"size must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    return n


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_c_string(s))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, n: int) -> int | None:
    """Return the index of the first *little* lying wholly within the first
    *n* characters of *big*. An empty *little* is found at index 0."""
    needle = _c_string(little)
    haystack = _c_string(big)
    limit = _size(n)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    A shorter string compares as if padded with NUL. Returns the difference
    of the code points of the first unequal pair, or 0.
    """
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strncmp compares two str values")
    limit = _size(n)
    for a, b in zip_longest(s1[:limit], s2[:limit], fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> Bounded:
    """Copy *src* into a destination of *size* characters, terminator
    included.

    Returns the copied text, at most ``size - 1`` characters, and the length
    of *src*; a length of ``size`` or more means the copy was truncated.
    """
    text = _c_string(src)
    limit = _size(size)
    if limit == 0:
        return Bounded("", len(text))
    return Bounded(text[: limit - 1], len(text))


def strlcat(dst: str, src: str, size: int) -> Bounded:
    """Append *src* to *dst* within a destination of *size* characters,
    terminator included.

    Returns the resulting text and the length it tried to create. When *dst*
    already fills *size*, it is returned unchanged with ``size + len(src)``.
    """
    head = _c_string(dst)
    tail = _c_string(src)
    limit = _size(size)
    dst_len = min(len(head), limit)
    if limit == 0:
        return Bounded(head, len(tail))
    if limit <= dst_len:
        return Bounded(head, limit + len(tail))
    room = limit - dst_len - 1
    return Bounded(head + tail[:room], dst_len + len(tail))