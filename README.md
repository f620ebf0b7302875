# libft

Character classification, byte-buffer operations and NUL-terminated
string routines with the behaviour of their classic counterparts, plus a
small `printf` and a buffered line reader for file descriptors.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `libft.chars`

ASCII-only classification and case conversion. Each function takes an
int code or a one-character string.

- `isalpha`, `isdigit`, `isalnum`, `isascii` (0..127), `isprint` (32..126)
  return `bool`.
- `toupper` and `tolower` change only ASCII letters. The result has the
  same type as the argument.

### `libft.memory`

Operations on mutable bytes-like objects such as `bytearray`. A byte
count that is negative or longer than a buffer raises `ValueError`.

- `memset(buf, c, n)` fills the first `n` bytes and returns `buf`.
- `bzero(buf, n)` zeroes the first `n` bytes.
- `memcpy(dest, src, n)` and `memmove(dest, src, n)` copy `n` bytes and
  return `dest`. `memmove` is safe for overlapping views.
- `memchr(data, c, n)` returns the index of the first matching byte, or
  `None`.
- `memcmp(s1, s2, n)` returns the difference of the first differing
  bytes, or 0.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.

### `libft.cstrings`

Routines for strings that end at their first NUL. They accept `str`,
`bytes` or `bytearray`, return positions as indices, and use `None` for
"not found".

- `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`.
- `atoi(s)` skips leading white space, accepts one sign, stops at the
  first non-digit and wraps the result like a 32-bit signed int.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` write into a
  `bytearray` and return the length the full result would have had.

### `libft.transform`

Functions that build new strings.

- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)` splits on one character and drops empty words.
- `itoa(n)` returns the decimal form of an int.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, cell)` for each byte of a `bytearray`,
  where `cell` is a one-byte writable view, so `f` can change it in place.

### `libft.output`

Writes to a file descriptor with `os.write`: `put_char_fd`,
`put_str_fd`, `put_endl_fd` (adds a newline) and `put_nbr_fd`.
`put_str_fd` and `put_endl_fd` write nothing for `None`.

### `libft.printf`

Supports `%c %s %p %d %i %u %x %X %%` with no flags, width or precision.
Unknown conversions produce nothing and use no argument.

- `render(fmt, *args)` returns the formatted output as `bytes`.
- `printf(fmt, *args)` writes it to file descriptor 1 and returns the
  number of bytes written.

`%s` with `None` gives `(null)`, and `%p` with `None` or 0 gives `(nil)`.
`%d` and `%i` wrap to a 32-bit signed int. `%u`, `%x` and `%X` wrap to a
32-bit unsigned int.

### `libft.gnl`

- `LineReader(fd, buffer_size=10)` reads a descriptor in chunks of at most
  `buffer_size` bytes.
  - `readline()` returns the next line as `bytes`, with its trailing
    newline, or `None` at the end of the input.
  - Iterating over the reader yields the lines.
- `get_next_line(fd)` keeps one reader per descriptor between calls and
  returns `None` at the end of the input or on a read error.

## Example

```python
import os
import sys

from libft.transform import split, itoa
from libft.printf import render
from libft.gnl import LineReader

split("Hello World! I am a student", " ")
# ['Hello', 'World!', 'I', 'am', 'a', 'student']

itoa(-42)
# '-42'

render("%s is %d years, %x in hex", "Ann", 30, 255)
# b'Ann is 30 years, ff in hex'

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 10):
    sys.stdout.buffer.write(line)
os.close(fd)
```

## What it does not do

This is a library only. It has no command-line program. `printf` handles
only the conversions listed above.