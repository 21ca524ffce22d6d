"""Human-readable dumps of values for debugging."""

import io
import sys

from .array import Array
from .file import File
from .iterator import Iterator
from .map import Map
from .timestamp import Timestamp

_BUILTIN_NAMES = (
    (bool, "Bool"),
    (int, "Int"),
    (float, "Float"),
    (str, "String"),
    ((bytes, bytearray), "CharPtr"),
    (BaseException, "Status"),
)


def _type_name(value):
    if value is None:
        return "Null"
    for types, name in _BUILTIN_NAMES:
        if isinstance(value, types):
            return name
    return type(value).__name__


def _dump(out, value, first_indent, next_indent, chain):
    out.write(" " * first_indent)
    out.write(f"{id(value):#x} {_type_name(value)}")

    if isinstance(value, (Array, Map)):
        out.write("\n" + " " * next_indent)
        if id(value) in chain:
            out.write(f"already dumped: {id(value):#x}\n")
            return
        chain = chain + (id(value),)
        inner = next_indent + 4
        if isinstance(value, Array):
            out.write(f"{len(value)} items, capacity={value.capacity()}\n")
            for item in value:
                _dump(out, item, inner, inner, chain)
        else:
            out.write(f"{len(value)} items\n")
            for key, item in value.items():
                out.write(" " * inner + "Key:   ")
                _dump(out, key, 0, inner + 7, chain)
                out.write(" " * inner + "Value: ")
                _dump(out, item, 0, inner + 7, chain)
    elif isinstance(value, File):
        name = value.name()
        out.write(f" name: {'Null' if name is None else name} fd: {value.fd()}")
        if value._external:
            out.write(" (external)")
        out.write("\n")
    elif isinstance(value, Iterator):
        out.write("\n" + " " * next_indent + "Iterable:\n")
        _dump(out, value.iterable(), next_indent + 4, next_indent + 4, chain)
    elif isinstance(value, Timestamp):
        out.write(f" {value.seconds}.{value.nanoseconds:09d}\n")
    elif isinstance(value, BaseException):
        out.write(f": {type(value).__name__}: {value}\n")
    else:
        out.write(f": {value!r}\n")


def dump(value, fp=None):
    """Write a dump of value to fp (standard output by default)."""
    _dump(sys.stdout if fp is None else fp, value, 0, 0, ())


def dumps(value):
    """Return a dump of value as a string."""
    buf = io.StringIO()
    dump(value, buf)
    return buf.getvalue()