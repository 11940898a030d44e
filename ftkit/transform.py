"""Building new strings from existing ones: copying, joining, slicing,
trimming, splitting and mapping characters.

Text is read up to its first NUL character, if it holds one.
"""

from __future__ import annotations

from typing import Callable, Optional

NUL = "\0"


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


def _count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _callable(f: object) -> None:
    if not callable(f):
        raise TypeError(f"expected a callable, got {type(f).__name__}")


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words.

    A NUL separator never matches inside the text, so a non-empty *s* comes
    back as a single word.
    """
    text = _c_string(s)
    delimiter = _char(sep)
    if delimiter == NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return _c_string(s)


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return _c_string(s1) + _c_string(s2)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A *start* past the end of *s* yields an empty string.
    """
    text = _c_string(s)
    begin = _count(start, "start")
    size = _count(length, "length")
    if begin > len(text):
        return ""
    return text[begin:begin + size]


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    text = _c_string(s)
    chars = _c_string(charset)
    if not chars:
        return text
    return text.strip(chars)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of *s*.

    Each call must return a single character. A NUL among the results ends
    the new string there.
    """
    text = _c_string(s)
    _callable(f)
    mapped = "".join(_char(f(index, ch)) for index, ch in enumerate(text))
    return _c_string(mapped)


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for each character of *s* in order.

    When *f* returns a character, it takes the place of the one passed in;
    when it returns None, the character is kept. Returns the resulting text,
    which ends at the first NUL, if any was put in.
    """
    text = _c_string(s)
    _callable(f)
    chars = []
    for index, ch in enumerate(text):
        replacement = f(index, ch)
        chars.append(ch if replacement is None else _char(replacement))
    return _c_string("".join(chars))