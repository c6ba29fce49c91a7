# ntlib

A small set of low-level helpers: integer-to-text conversion, writing and
reading through raw file descriptors, a growable character buffer and a
compact `printf`.

## Installation

```
pip install .
```

## Modules

### `ntlib.conversion`

- `itochar(n)` returns the character for a single decimal digit
  (`itochar(7) == "7"`). It raises `ValueError` if `n` is not in 0–9.
- `itoa(value)` returns the decimal text for an integer
  (`itoa(-42) == "-42"`, `itoa(0) == "0"`).
- `itohex(value, base)` writes `value` as an unsigned 64-bit number in
  base 16, taking its digits from `base`. A negative value wraps around to
  its two's-complement form. `base` must have at least 16 characters,
  otherwise `ValueError` is raised.

The module also provides the digit sets `BASE_OCTAL`, `BASE_10`,
`HEX_LOWER` and `HEX_UPPER`, and the limits `MIN_INT` and `MAX_INT` of a
32-bit signed integer.

```python
from ntlib.conversion import itoa, itohex, HEX_LOWER, HEX_UPPER

itoa(-2147483648)        # '-2147483648'
itohex(255, HEX_LOWER)   # 'ff'
itohex(255, HEX_UPPER)   # 'FF'
itohex(-1, HEX_LOWER)    # 'ffffffffffffffff'
```

### `ntlib.fd`

Functions that work on an operating-system file descriptor:

- `putchar_fd(c, fd)` writes one character. It raises `ValueError` if `c`
  is not exactly one character.
- `putstr_fd(s, fd)` writes a string. It raises `TypeError` if `s` is
  `None`.
- `putnbr_fd(n, fd)` writes an integer in decimal. It raises
  `OverflowError` if `n` does not fit in a 32-bit signed integer.
- `read_line(fd)` reads one line without its trailing newline. It returns
  `None` at end of input when nothing was read, and raises `ValueError` for
  a negative descriptor.
- `read_lines(fd)` reads every remaining line into a list.

The three writers return the number of bytes written (text is encoded as
UTF-8).

```python
import os
from ntlib.fd import putstr_fd, putnbr_fd, read_lines

r, w = os.pipe()
putstr_fd("one\ntwo\n", w)
putnbr_fd(-42, w)
os.close(w)
print(read_lines(r))   # ['one', 'two', '-42']
os.close(r)
```

### `ntlib.char_buffer`

`CharBuffer(capacity=16)` collects characters one at a time with
`add_char(c)`. `len()` gives how many are held and `str()` gives their
text. The `capacity` attribute doubles whenever it would no longer stay
strictly above the number of stored characters; a capacity of 0 is reset to
16 on the first `add_char`. A negative capacity, or an `add_char` argument
that is not exactly one character, raises `ValueError`.

### `ntlib.printf`

`printf(fmt, *args)` formats its arguments, writes the result to standard
output and returns the number of characters written. Supported conversions:

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | one-character string, or integer (low 8 bits) | the character |
| `%d`, `%i` | 32-bit signed integer | decimal |
| `%s` | string | the string |
| `%p` | integer, or any object (its `id()`) | `0x` followed by lowercase hex |
| `%x`, `%X` | integer (low 32 bits) | lowercase / uppercase hex |
| `%u` | integer (low 64 bits) | unsigned decimal |
| `%o` | integer (low 32 bits) | octal |
| `%%` | none | a literal `%` |

Errors are raised before anything is written:

- an empty format string, or an unknown conversion, raises `ValueError`;
- a missing argument or one of the wrong type raises `TypeError`;
- a `%d`/`%i` value outside the 32-bit signed range raises `OverflowError`.

A lone `%` at the very end of the format is dropped.

```python
from ntlib.printf import printf

printf("%s is %d (0x%x)\n", "answer", 42, 42)   # prints "answer is 42 (0x2a)"
```

## Limitations

`printf` has no field widths, precision, padding or length modifiers; each
`%` is followed directly by one conversion character. The package is a
library only and installs no command.

## Running the tests

```
pip install ".[test]"
pytest
```