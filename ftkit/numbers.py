"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce *value* to the range of a 32-bit two's-complement integer."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps to the 32-bit signed range.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    end = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        end += 1
    digits = body[:end]
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)