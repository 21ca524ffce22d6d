# uwlib

Small building blocks for programs that work with loosely typed values.

- `uwlib.array.Array`: a growable array. It keeps track of its capacity
  (`capacity()`, `resize()`), supports negative indexes, `pull()` and `pop()`,
  range deletion with `delete(start, end)`, `slice(start, end)`, and in-place
  `dedent()` of its string items. While the array is being iterated (or inside
  `with array.iterating():`), modifying calls raise `IterationInProgressError`,
  except `delete()` and `clear()`, which then do nothing. Bytes items are
  decoded as UTF-8. Adding an exception object as an item raises `Panic`.
- `uwlib.array.join(separator, array)`: joins the string items of an array.
  Items that are not strings are skipped. The separator may be a string,
  UTF-8 bytes or a code point.
- `uwlib.map.Map`: an insertion-ordered map. Keys are deep-copied when they
  are set with `map[key] = value`. Booleans never match numbers as keys.
  Pairs can be read by position with `Map.item(index)`, and `Map(k1, v1, k2, v2, ...)`
  or `update(...)` take keys and values as alternating arguments. A missing
  final value stands for `None`.
- `uwlib.interfaces`: a registry of named interfaces (`register_interface`,
  `get_interface_name`, `get_interface_methods`, `create_interfaces`,
  `update_interfaces`) and the abstract `LineReader` class, which has
  `start`, `read_line`, `unread_line`, `line_number` and `stop`. A
  `LineReader` can be iterated over, and when it is used in a `with` block it
  calls `start()` on entry and `stop()` on exit.
- `uwlib.iterator.ArrayLineReader`: reads the string items of an `Array` as
  lines and locks the array against changes from `start()` to `stop()`.
- `uwlib.file.File`: a file descriptor with a UTF-8 line reader that keeps
  line breaks and can push back one line. The helpers are `open_file`,
  `file_size`, `basename`, `dirname` and `path`.
- `uwlib.timestamp`: `Timestamp(seconds, nanoseconds)` values that can be
  added and subtracted, and `monotonic()`.
- `uwlib.args.parse_kvargs(argv)`: parses `key=value` arguments into a `Map`.
  `argv[0]` is stored under key `0`, and an argument without `=` maps to
  `None`.
- `uwlib.dump`: `dump(value, fp)` and `dumps(value)` produce a
  human-readable dump of a value for debugging.

Recoverable errors are subclasses of `uwlib.errors.UwError`, and each also
derives from the matching built-in exception. For example,
`IndexOutOfRangeError` is an `IndexError`, `KeyNotFoundError` is a `KeyError`
and `EndOfFileError` is an `EOFError`. Programming errors raise
`uwlib.errors.Panic`.

## Installation

```
pip install .
```

## Examples

```python
from uwlib.array import Array, join

lines = Array("   first line", "  second line", "    third line")
lines.dedent()
print(join(",", lines))        # " first line,second line,  third line"

numbers = Array(*range(10))
print(numbers[-2])              # 8
numbers.delete(2, 5)
print(len(numbers))             # 7
```

```python
from uwlib.map import Map

m = Map("let's", "go!", None, True)
m["answer"] = 42
print(len(m), "answer" in m)    # 3 True
key, value = m.item(0)          # ("let's", "go!")
```

```python
from uwlib.args import parse_kvargs

args = parse_kvargs(["/bin/sh", "foo=bar", "two"])
print(args[0], args["foo"], args["two"])   # /bin/sh bar None
```

```python
from uwlib.file import basename, dirname, path

print(basename("/bin/bash"), dirname("/bin/bash"))  # bash /bin
print(path("", "bin", "bash"))                       # /bin/bash
```

## What it does not do

uwlib is a library only and has no command-line program. It has no string
type of its own, because text values are plain Python `str`. It does not
serialise values to JSON and provides no network helpers.

## Running the tests

```
pip install .[test]
pytest
```