# cubgrid

cubgrid is a small set of helpers for working with characters, strings,
byte buffers, a singly linked list and streams read line by line. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cubgrid.chars`

ASCII classification and case conversion. Each function takes a
one-character string or an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`
  return `bool`.
- `to_upper`, `to_lower` change ASCII letters only and return a string when
  given a string, an integer when given an integer.

A string longer than one character raises `ValueError`.

### `cubgrid.memory`

Helpers for `bytearray` and other bytes-like objects.

- `memset(buf, value, n)` fills the first `n` bytes with `value & 0xFF` and
  returns `buf`; `bzero(buf, n)` fills them with zeros.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes.
- `memchr(buf, value, n)` returns the index of the first matching byte in
  the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal byte pair,
  or `0`.
- `memcpy(dst, src, n)` copies `n` bytes to the start of `dst` and returns
  `dst`.
- `memmove(buf, dst, src, n)` copies `n` bytes from offset `src` to offset
  `dst` inside `buf`; the regions may overlap.

A negative count, or one larger than a buffer involved, raises `ValueError`.

### `cubgrid.strings`

Bounded search, comparison and copying. Positions are indices, or `None`
when nothing is found; a string behaves as if it ended with `"\0"`.

- `strnlen(s, maxlen)`, `strndup(s, n)`
- `strchr(s, c)`, `strrchr(s, c)`
- `strnstr(big, little, length)` finds `little` wholly inside
  `big[:length]`; an empty `little` is found at `0`.
- `strncmp(a, b, n)` returns the code difference of the first unequal pair
  within `n` characters.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple of the
  resulting text and the length the untruncated result would have had.

```python
from cubgrid.strings import strlcpy

strlcpy("hello", 3)   # ("he", 5)
```

### `cubgrid.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to the text stream
given as `file`, or to standard output.

### `cubgrid.linkedlist`

`LinkedList` holds `Node` objects (`content`, `next`).

```python
from cubgrid.linkedlist import LinkedList

items = LinkedList()
items.add_back(2)
items.add_front(1)
list(items)          # [1, 2]
len(items)           # 2
items.last().content # 2
items.iterate(print)
items.clear()
```

`add_front` and `add_back` return the new node. `clear(delete)` passes each
value to `delete`, when given, before emptying the list.

### `cubgrid.linereader`

`LineReader(stream, buffer_size=10)` reads a text or binary stream
`buffer_size` characters or bytes at a time and returns one line per
`next_line()` call, newline kept, and `None` when the stream is used up.
Iterating over it yields the lines. `read_lines(stream)` is a generator over
the same lines. A buffer size of zero or less raises `ValueError`.

```python
import io
from cubgrid.linereader import read_lines

list(read_lines(io.StringIO("a\nb")))   # ["a\n", "b"]
```

## What it does not do

cubgrid does not read, check or display `.cub` map files. It has no game
state, no window and no command to run; it is used only as a library.