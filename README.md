# chbaselib

A collection of small building blocks with no dependencies outside the standard library.

## Modules

- `chbaselib.text_object`: `TextObject` holds text as a list of lines split on a
  separator (`cut_char`, `"\r\n"` by default). It offers `text`, `line()`, indexing,
  `substring()`, `sub_object()`, `find()`, `find_line()` (1-based line number of the first
  match, 0 if none), `insert_lines()`, `char_length()`, `len()` (number of lines) and
  iteration over lines. Changing `cut_char` splits the current text again.
- `chbaselib.counter`: `Counter` is a signed integer counter (`count`, `add()`, `sub()`,
  `reset()`). `Cumulative` counts up on `add_char` and down on `sub_char`; `update(value)`
  returns the new count. Handy for tracking bracket depth.
- `chbaselib.bit_bool`: `BitBool` packs boolean flags eight to a byte (`set_bit()`,
  `set_true()`, `set_false()`, `get_bit()`, `set_value()`/`get_value()` for whole bytes,
  `clear()`, `resize()`, `size()`, `true_count()`). Out-of-range indexes raise `IndexError`.
- `chbaselib.key_input`: `KeyInputBase` is an abstract base tracking 256 keys. Subclasses
  implement `update()` and report key state with `set_key()`; callers use `is_pushed()`
  (held) and `is_pushed_once()` (true only on the first check after the key goes down).
- `chbaselib.multithread`: `MultiThread` runs a no-argument function on a daemon thread
  (`start()`, `rerun()` once finished, `join()`, `release()`, `is_finished()`), and can be
  used as a context manager that releases on exit. `Initializer` is the mixin that records
  whether it has been started (`is_initialized()`, `bool()`).
- `chbaselib.math_square`: `Rect` is an axis-aligned rectangle with `top` above `bottom`.
  `MathSquare` is an ordered collection of rectangles with `intersect()`, `union()` and
  `subtract()` (static, returning a new collection) and the in-place `and_()`, `or_()` and
  `sub()`.
- `chbaselib.json_base`, `chbaselib.json_scalars`, `chbaselib.json_containers`: a small JSON
  object model — `JsonObject`, `JsonArray`, `JsonString`, `JsonNumber`, `JsonBoolean`,
  `JsonNull` — each with `load(text)` and `dump()`. `parse_value()` reads any value,
  `to_json_value()` wraps Python values, and `format_document()` lays compact JSON out over
  indented lines. Text that does not hold the requested value raises `JsonFormatError`.

## Examples

Parsing and writing JSON:

```python
from chbaselib.json_containers import JsonObject, parse_value

obj = JsonObject()
obj.load('{"name":"box","size":[1,2,3],"visible":true}')
print(obj.get_string("name"))        # box
print(len(obj.get_array("size")))    # 3
obj["visible"] = False
print(obj.dump())   # {"name":"box","size":[1,2,3],"visible":false}

value = parse_value("[1,2,3]")
```

Counting bracket depth:

```python
from chbaselib.counter import Cumulative

depth = Cumulative("{", "}")
for ch in "{{}":
    depth.update(ch)
print(depth.count)  # 1
```

Rectangle arithmetic:

```python
from chbaselib.math_square import MathSquare, Rect

pieces = MathSquare.subtract(Rect(0, 10, 10, 0), Rect(2, 8, 8, 2))
print(len(pieces))  # 8 pieces around the hole
```

## What it does not do

- There is no command-line program; everything is used as a library.
- The JSON model is deliberately lightweight, not a full standard parser: numbers are
  plain decimals without exponents, string escapes cover only quotes, backslash, `\b`,
  `\f`, `\n` and `\r` (no `\t` or `\u` escapes), and object members are always written in
  sorted name order.
- `KeyInputBase` does not read any keyboard itself; a subclass must supply the key state.

## Running the tests

```
pip install .[test]
pytest
```