# jvalue

A small JSON value model for Python: typed leaf values, insertion-ordered objects,
arrays, shallow and deep copying, structural equality, and strict UTF-8 checking.
It has no dependencies outside the standard library.

## Installation

```
pip install jvalue
```

To run the test suite, install the test extra and run pytest:

```
pip install "jvalue[test]"
pytest
```

## Leaf values (`jvalue.value`)

- `JsonString(value)` takes a `str` or `bytes` and stores UTF-8 bytes, which may
  include NUL bytes. Invalid UTF-8 raises `ValueError`. The raw bytes are in
  `.value`, `len()` gives their number, and `.text()` decodes them. `set()` replaces
  the contents with a check and `set_nocheck()` without one. `string_nocheck(value)`
  creates a string without checking.
- `JsonInteger(value)` holds a signed 64-bit integer (`INTEGER_MIN`..`INTEGER_MAX`).
  Values outside that range raise `OverflowError`, both in the constructor and in
  `set()`.
- `JsonReal(value)` holds a finite float. NaN and infinities raise `ValueError`, both
  in the constructor and in `set()`.
- `JsonConstant` has three singletons, `TRUE`, `FALSE` and `NULL`. Only `TRUE` is
  truthy. `boolean(flag)` returns `TRUE` or `FALSE`.

Every value has a `.type`, which is a `JsonType` member. Two values are equal when
they have the same type and the same contents, so an integer never equals a real.
The module also provides these helpers:

- `equal(a, b)` does the same comparison, and is `False` when either side is `None`.
- `number_value(v)` returns an integer or real as a float, and `0.0` for anything
  else.
- `sprintf(fmt, *args)` builds a `JsonString` from `%`-style formatting.

## Containers (`jvalue.containers`)

`JsonObject` maps string keys to values and keeps insertion order:

- `set(key, value)` checks that the key is valid UTF-8; `set_nocheck(key, value)`
  does not.
- `get(key)` returns the value, or `None` if the key is missing.
- `delete(key)` raises `KeyError` if the key is missing.
- `clear()` removes every item.
- `items()`, iteration over the keys, `in` and `len()` all work.
- `update(other)` copies every item of `other`.
- `update_existing(other)` copies only the items whose keys are already present.
- `update_missing(other)` copies only the items whose keys are not yet present.
- `update_recursive(other)` merges nested objects that exist on both sides.

`JsonArray` holds an ordered sequence of values:

- `get(index)` returns `None` when the index is out of range.
- `set(index, value)`, `insert(index, value)` and `remove(index)` raise `IndexError`
  when the index is out of range. For `insert` the index may equal the length.
- `append(value)` adds a value at the end.
- `extend(other)` takes another `JsonArray`.
- `clear()`, iteration and `len()` all work.

Rules that apply to both kinds of container:

- A container cannot hold itself. Trying to add it raises `ValueError`.
- `copy()` shares the members with the original.
- `deep_copy()` copies everything, and raises `ValueError` if it meets a reference
  cycle.

```python
from jvalue.containers import JsonArray, JsonObject
from jvalue.value import JsonInteger, JsonString

obj = JsonObject()
obj.set("name", JsonString("alice"))
obj.set("age", JsonInteger(30))

arr = JsonArray()
arr.append(obj)
assert arr.deep_copy() == arr
```

## Lower-level helpers

- `jvalue.utf` works with UTF-8:
  - `utf8_encode(codepoint)` returns the bytes for a code point, and raises
    `ValueError` when the code point is out of range.
  - `utf8_check_first(byte)` returns the sequence length that a lead byte
    announces, or `0`.
  - `utf8_check_full(buffer)` returns the code point of one complete multi-byte
    sequence, or `None`.
  - `utf8_iterate(buffer, noutf8=False)` returns `(codepoint, consumed)`, and
    raises `ValueError` on invalid input.
  - `utf8_check_string(data)` returns `True` or `False`.
- `jvalue.strconv` converts between floats and text:
  - `strtod(text)` parses a float, and raises `OverflowError` when the value is out
    of range.
  - `dtostr(value, precision=0)` formats a float with 17 significant digits by
    default. The result always contains a `.` or an `e`, and the exponent has no
    `+` and no leading zeros. For example, `dtostr(1.0)` is `"1.0"`.
- `jvalue.strbuffer.StrBuffer` is a growable byte buffer:
  - `append_bytes` adds a run of bytes.
  - `append_byte` adds a single byte.
  - `pop` returns `b""` when the buffer is empty.
  - `clear` empties the buffer.
  - `value` returns the contents.
  - `steal_value(eol=False)` returns the contents, with a trailing newline when
    `eol` is set, and empties the buffer.
- `jvalue.version`:
  - `version_str()` returns `"2.14"`.
  - `version_cmp(major, minor, micro)` is positive when this version is newer than
    the one given.

## What this package does not do

This package holds JSON values in memory and nothing more. It has no parser that
reads JSON text into values and no encoder that writes values out as JSON text. It
has no format-string API for building or taking apart value trees. It provides no
command-line tool.