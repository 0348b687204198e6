# ustrkit

Small utilities for working with UTF-8 text by **code point** instead of by byte.

## Installation

```
pip install ustrkit
```

## Modules

### `ustrkit.utf8`

These helpers work on UTF-8 data. Functions that take `data` accept `bytes`,
`bytearray`, `memoryview` or `str`. A `str` is encoded as UTF-8 first.

- `is_ascii(data)`: `True` if every byte is below 128.
- `is_continuation_byte(byte)`: `True` for bytes of the form `10xxxxxx`.
- `codepoint_size(byte)`: the length (1 to 4) of the sequence that a lead byte
  starts. It raises `ValueError` for a byte that cannot start a sequence or a
  value outside 0–255.
- `utf8_strlen(data)`: the number of code points. It raises `ValueError` on an
  invalid lead byte.
- `cpi_of_bi(data, byte_index)`: converts a byte index to a code point index.
  A byte index that falls inside a multi-byte code point maps to the next code
  point. It raises `IndexError` if the index is outside the data.
- `bi_of_cpi(data, codepoint_index)`: converts a code point index to the byte
  offset where that code point starts. The index one past the last code point
  maps to the end of the data. A larger or negative index raises `IndexError`.

### `ustrkit.ustr`

`UStr` is an immutable dataclass that wraps a `str`. You can also build it from
UTF-8 bytes. It has these properties:

- `codepoints`: the number of code points. `len(s)` gives the same value.
- `nbytes`: the length of the UTF-8 encoding.
- `encoded`: the UTF-8 bytes.
- `is_ascii`: `True` if every code point is ASCII.

`str(s)` gives the contents.

```python
from ustrkit.ustr import UStr

s = UStr("apples🍎 and bananas🍌")
len(s)                  # 21
s.reverse()             # UStr("🍌sananab dna 🍎selppa")
s.substring(0, 6)       # UStr("apples")
s.remove_at(3)          # UStr("appes🍎 and bananas🍌")
s.concat(UStr("!"))
print(UStr("cse29🐕").describe())   # cse29🐕 [codepoints: 6 | bytes: 9]
```

Methods that change a string return a new `UStr`:

- `substring(start, end)` returns code points `start` (inclusive) to `end`
  (exclusive). If `start` is negative, `start` or `end` is past the last code
  point, or `end` comes before `start`, it returns an empty `UStr`. Because
  `end` may not be past the last code point, a substring can never include the
  final code point.
- `remove_at(index)` drops one code point. For an out-of-range index it returns
  the string unchanged.
- `concat(other)` and `reverse()` work by code point.

### `ustrkit.ulist`

These functions work on plain Python lists of `UStr`. Wherever a `UStr` is
expected, a `str` is accepted too.

- `join(items, separator)`: returns one `UStr` with the items joined by the
  separator.
- `insert(items, s, index)`: inserts in place. `index` may run from 0 to
  `len(items)`. Any other value raises `IndexError`.
- `remove_at(items, index)`: removes the element at `index` and returns it. It
  raises `IndexError` if there is no such element.
- `split(s, separator)`: splits on a separator, which may be longer than one
  character. An empty separator gives a one-element list that holds `s`. If the
  input ends with the separator, the result ends with an empty string.

```python
from ustrkit.ulist import join, split

join(["hello", "this is", "cse29🐕"], ", ")   # UStr("hello, this is, cse29🐕")
split("a--b--", "--")                         # [UStr("a"), UStr("b"), UStr("")]
```

## What it does not do

ustrkit is a library only. It has no command-line program. It does not repair
invalid UTF-8: the `utf8` helpers raise an error for it, and building a `UStr`
from bytes that are not valid UTF-8 raises `UnicodeDecodeError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```