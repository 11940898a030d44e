"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Only the ASCII ranges are considered; anything else is left alone.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of *c*, validating single-character strings."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, codes 32 through 126."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code  # type: ignore[return-value]


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; return anything else unchanged, in the type given."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; return anything else unchanged, in the type given."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + _CASE_OFFSET)
    return c