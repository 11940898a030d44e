"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.numbers import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write a single character (or character code) to *stream*."""
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* to *stream*; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of *n* to *stream*."""
    _target(stream).write(itoa(n))