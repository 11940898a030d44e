"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%.

Field widths, precision and flags are not supported. A specifier that is not
recognised produces no output and consumes no argument. A lone ``%`` at the
end of the format ends the output.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

from ftkit.numbers import INT_MIN, itoa
from ftkit.output import put_str

NUL = "\0"
UINT_MOD = 2**32
ULONG_MOD = 2**64

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _integer(value: object, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _c_string(s: str) -> str:
    return s.split(NUL, 1)[0]


def format_char(c: int | str) -> str:
    """Return the character for %c.

    An integer contributes only its low byte, as a C ``unsigned char`` would.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c expects a single character, got {c!r}")
        return c
    return chr(_integer(c, "c") & 0xFF)


def format_string(s: str | None) -> str:
    """Return the text for %s: the string up to its first NUL, or
    ``(null)`` for None."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"%s expects a str or None, got {type(s).__name__}")
    return _c_string(s)


def format_pointer(addr: int | None) -> str:
    """Return the text for %p: ``0x`` and lower-case hex digits, or ``(nil)``
    for a null address."""
    if addr is None:
        return NULL_POINTER
    value = _integer(addr, "p") % ULONG_MOD
    if value == 0:
        return NULL_POINTER
    return f"0x{value:x}"


def format_decimal(n: int) -> str:
    """Return the text for %d and %i, the value taken as a 32-bit signed int."""
    value = (_integer(n, "d") - INT_MIN) % UINT_MOD + INT_MIN
    return itoa(value)


def format_unsigned(n: int) -> str:
    """Return the text for %u, the value taken as a 32-bit unsigned int."""
    return itoa(_integer(n, "u") % UINT_MOD)


def format_hex(n: int, specifier: str = "x") -> str:
    """Return the text for %x (lower case) or %X (upper case), the value
    taken as a 32-bit unsigned int."""
    if specifier not in ("x", "X"):
        raise ValueError(f"hex specifier must be 'x' or 'X', got {specifier!r}")
    value = _integer(n, specifier) % UINT_MOD
    digits = f"{value:x}"
    return digits.upper() if specifier == "X" else digits


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, "x"),
    "X": lambda n: format_hex(n, "X"),
}


def format_spec(specifier: str, args: Iterator[Any]) -> str:
    """Format one conversion, taking its argument from the iterator *args*.

    ``%`` yields a percent sign and takes no argument; an unknown specifier
    yields nothing and takes no argument.
    """
    if specifier == "%":
        return "%"
    convert = _CONVERSIONS.get(specifier)
    if convert is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{specifier}") from None
    return convert(value)


def render(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*.

    The format is read up to its first NUL. Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    values = iter(args)
    chars = iter(_c_string(fmt))
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        specifier = next(chars, None)
        if specifier is None:
            break
        pieces.append(format_spec(specifier, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output and return the number of
    characters written."""
    text = render(fmt, *args)
    put_str(text, sys.stdout)
    return len(text)