"""A growable array with iteration guards and explicit capacity accounting."""

import copy
import operator
from contextlib import contextmanager

from .errors import (
    DataSizeTooBigError,
    ExtractFromEmptyArrayError,
    IncompatibleTypeError,
    IndexOutOfRangeError,
    IterationInProgressError,
    panic,
)

# both must be powers of two
INITIAL_CAPACITY = 4
CAPACITY_INCREMENT = 16

_UINT_MAX = 0xFFFFFFFF
_INDENT_CHARS = " \t"


def _align(value, alignment):
    return (value + alignment - 1) & ~(alignment - 1)


def _round_capacity(capacity):
    if capacity <= CAPACITY_INCREMENT:
        return _align(capacity, INITIAL_CAPACITY)
    return _align(capacity, CAPACITY_INCREMENT)


def _prepare_item(item):
    if isinstance(item, BaseException):
        panic("Array cannot contain Status values")
    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode("utf-8")
    return item


class Array:
    """Ordered sequence of values that refuses mutation during iteration."""

    def __init__(self, *args):
        self._items = []
        self._capacity = _round_capacity(INITIAL_CAPACITY)
        self._itercount = 0
        if args:
            self.append_all(*args)

    def __repr__(self):
        return f"Array({', '.join(repr(item) for item in self._items)})"

    def _check_not_iterating(self):
        if self._itercount:
            raise IterationInProgressError("iteration in progress")

    def _resize(self, desired_capacity):
        length = len(self._items)
        if desired_capacity < length:
            desired_capacity = length
        elif desired_capacity >= _UINT_MAX - CAPACITY_INCREMENT:
            raise DataSizeTooBigError(f"capacity {desired_capacity} is too big")
        self._capacity = _round_capacity(desired_capacity)

    def _grow(self):
        if len(self._items) == self._capacity:
            if self._capacity <= CAPACITY_INCREMENT:
                self._resize(self._capacity + INITIAL_CAPACITY)
            else:
                self._resize(self._capacity + CAPACITY_INCREMENT)

    def _append_item(self, item):
        item = _prepare_item(item)
        self._grow()
        self._items.append(item)

    def _normalize_index(self, index):
        index = operator.index(index)
        length = len(self._items)
        if index < 0:
            index += length
            if index < 0:
                raise IndexOutOfRangeError(f"index {index - length} out of range")
        elif index >= length:
            raise IndexOutOfRangeError(f"index {index} out of range")
        return index

    def capacity(self):
        """Return the number of items the array can hold before growing."""
        return self._capacity

    def resize(self, desired_capacity):
        """Set capacity, never below the current length."""
        self._check_not_iterating()
        self._resize(desired_capacity)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        self._itercount += 1
        try:
            yield from self._items
        finally:
            self._itercount -= 1

    @contextmanager
    def iterating(self):
        """Guard the array against modification for the duration of the block."""
        self._itercount += 1
        try:
            yield self
        finally:
            self._itercount -= 1

    def __eq__(self, other):
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(("Array", tuple(self._items)))

    def __bool__(self):
        return bool(self._items)

    def __deepcopy__(self, memo):
        result = Array()
        memo[id(self)] = result
        result._resize(len(self._items))
        result._items = [copy.deepcopy(item, memo) for item in self._items]
        return result

    def append(self, item):
        """Append one item."""
        self._check_not_iterating()
        self._append_item(item)

    def append_all(self, *args):
        """Append items in order; an exception among them undoes the call and is raised."""
        self._check_not_iterating()
        start = len(self._items)
        for arg in args:
            if isinstance(arg, BaseException):
                del self._items[start:]
                raise arg
            self._append_item(arg)

    def insert(self, index, item):
        """Insert item before position index (0..len)."""
        item = _prepare_item(item)
        self._check_not_iterating()
        index = operator.index(index)
        if index < 0 or index > len(self._items):
            raise IndexOutOfRangeError(f"index {index} out of range")
        self._grow()
        self._items.insert(index, item)

    def __getitem__(self, index):
        return self._items[self._normalize_index(index)]

    def __setitem__(self, index, item):
        self._check_not_iterating()
        self._items[self._normalize_index(index)] = _prepare_item(item)

    def pull(self):
        """Remove and return the first item."""
        self._check_not_iterating()
        if not self._items:
            raise ExtractFromEmptyArrayError("array is empty")
        return self._items.pop(0)

    def pop(self):
        """Remove and return the last item."""
        self._check_not_iterating()
        if not self._items:
            raise ExtractFromEmptyArrayError("array is empty")
        return self._items.pop()

    def delete(self, start_index, end_index):
        """Delete items in [start_index, end_index); ignored while iterating."""
        if self._itercount:
            return
        if start_index < 0:
            raise IndexOutOfRangeError(f"index {start_index} out of range")
        end_index = min(end_index, len(self._items))
        if start_index >= end_index:
            return
        del self._items[start_index:end_index]

    def clear(self):
        """Delete all items; ignored while iterating."""
        if self._itercount:
            return
        self._items.clear()

    def slice(self, start_index, end_index):
        """Return a new array with items in [start_index, end_index)."""
        if start_index < 0:
            raise IndexOutOfRangeError(f"index {start_index} out of range")
        end_index = min(end_index, len(self._items))
        result = Array()
        if start_index >= end_index:
            return result
        result._resize(end_index - start_index)
        result._items = self._items[start_index:end_index]
        return result

    def dedent(self):
        """Strip the common leading spaces and tabs from string items in place."""
        self._check_not_iterating()
        indents = []
        min_indent = None
        for line in self._items:
            if isinstance(line, str):
                indent = len(line) - len(line.lstrip(_INDENT_CHARS))
                if line and (min_indent is None or indent < min_indent):
                    min_indent = indent
            else:
                indent = 0
            indents.append(indent)
        if not min_indent:
            return
        self._items = [
            line[min_indent:] if indent else line
            for line, indent in zip(self._items, indents)
        ]


def join(separator, array):
    """Join the string items of array with separator, skipping other values."""
    num_items = len(array)
    if num_items == 0:
        return ""
    if num_items == 1:
        item = array[0]
        return item if isinstance(item, str) else ""

    if isinstance(separator, int) and not isinstance(separator, bool):
        separator = chr(separator)
    elif isinstance(separator, (bytes, bytearray)):
        separator = bytes(separator).decode("utf-8")
    if not isinstance(separator, str):
        raise IncompatibleTypeError(
            f"Bad separator type for join: {type(separator).__name__}"
        )

    parts = []
    for i, item in enumerate(array):
        if isinstance(item, str):
            if i:
                parts.append(separator)
            parts.append(item)
    return "".join(parts)