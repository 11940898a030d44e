# ftkit

A compact library of character, number, string, memory and formatting
helpers. It offers the familiar string and memory routines (`strlen`,
`strlcpy`, `memmove` and the rest) and a small `printf`, as plain Python
functions that take `str`, `bytes` and `bytearray` values.

## Installation

```
pip install ftkit
```

For running the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: ASCII character classes and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each accepts an integer code or a one-character string; `to_upper` and
  `to_lower` return a value of the type they were given.
- `ftkit.numbers`: `atoi` parses a leading signed decimal number (skipping
  leading whitespace, stopping at the first non-digit, wrapping to the 32-bit
  signed range); `itoa` returns the decimal text of an integer. The module
  also defines `INT_MIN` and `INT_MAX`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, standard output when none is given. `put_str` and `put_endl`
  write nothing for `None`.
- `ftkit.memory`: operations on byte buffers. `bzero`, `memset` and `memcpy`
  change a writable buffer in place and return it; `memmove(buffer, dest,
  src, n)` moves bytes between offsets of one buffer, overlap allowed;
  `memchr` returns an index or `None`; `memcmp` returns the difference of the
  first unequal bytes; `calloc` returns a zero-filled `bytearray` and raises
  `OverflowError` when the size would not fit in 64 bits.
- `ftkit.search`: `strlen`, `strchr`, `strrchr`, `strnstr` and `strncmp`,
  with searches returning an index or `None`. `strlcpy(src, size)` and
  `strlcat(dst, src, size)` return a `Bounded` named tuple of the text
  produced and the length the untruncated result would have had.
- `ftkit.transform`: `split`, `strdup`, `strjoin`, `substr`, `strtrim`,
  `strmapi` and `striteri`, each returning a new string.
- `ftkit.printf`: `render` formats text with `%c %s %p %d %i %u %x %X %%`;
  `printf` writes the result to standard output and returns its length. The
  single conversions are also available as `format_char`, `format_string`,
  `format_pointer`, `format_decimal`, `format_unsigned`, `format_hex` and
  `format_spec`.

Strings are read up to their first NUL character, if they hold one.

## Examples

```python
from ftkit.printf import render, printf
from ftkit.transform import split, strtrim
from ftkit.search import strlcpy
from ftkit.numbers import atoi

render("%s has %d items (%x)", "box", 42, 255)   # 'box has 42 items (ff)'
render("%s %p", None, 0)                         # '(null) (nil)'
count = printf("%c%c\n", "o", "k")              # writes "ok\n", returns 3

split("  a b  c ", " ")                          # ['a', 'b', 'c']
strtrim("   Hello World   ", " ")                # 'Hello World'
strlcpy("Hello", 3)                              # Bounded(text='He', length=5)
atoi("   -123abc")                               # -123
```

## What it does not do

The formatter has no field widths, precision, flags or length modifiers.
A specifier it does not recognise produces no output and takes no argument,
and a lone `%` at the end of the format ends the output. Integers are taken
as 32-bit values for `%d %i %u %x %X`. The package provides no command-line
program.