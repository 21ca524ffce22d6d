"""Iterators over values, including a line reader over arrays."""

from .array import Array
from .errors import (
    EndOfFileError,
    IncompatibleTypeError,
    IterationInProgressError,
    panic,
)
from .interfaces import LineReader


class Iterator:
    """Holds the value being iterated over."""

    def __init__(self, iterable):
        self._iterable = iterable

    def iterable(self):
        """Return the value being iterated over."""
        return self._iterable

    def __bool__(self):
        return False

    def __eq__(self, other):
        return False

    def __hash__(self):
        panic("Iterators do not support hashing")


class ArrayLineReader(Iterator, LineReader):
    """Reads the string items of an array as lines, skipping other values."""

    def __init__(self, array):
        if not isinstance(array, Array):
            raise IncompatibleTypeError(
                f"ArrayLineReader needs an Array, got {type(array).__name__}"
            )
        super().__init__(array)
        self._guard = None
        self._index = 0
        self._line_number = 0

    def _start_iteration(self):
        if self._guard is not None:
            return False
        self._index = 0
        self._guard = self._iterable.iterating()
        self._guard.__enter__()
        return True

    def start(self):
        """Begin reading from the first item; the array is locked until stop()."""
        if not self._start_iteration():
            raise IterationInProgressError("iteration in progress")
        self._line_number = 1

    def read_line(self):
        """Return the next string item; raise EndOfFileError when none is left."""
        array = self._iterable
        while self._index < len(array):
            item = array[self._index]
            self._index += 1
            if isinstance(item, str):
                self._line_number += 1
                return item
        raise EndOfFileError("end of array")

    def unread_line(self, line):
        """Step back to the previous string item; return False if there is none."""
        array = self._iterable
        while self._index:
            self._index -= 1
            if isinstance(array[self._index], str):
                self._line_number -= 1
                return True
        return False

    def line_number(self):
        """Return the current line number."""
        return self._line_number

    def stop(self):
        """Finish reading and unlock the array."""
        if self._guard is not None:
            guard, self._guard = self._guard, None
            guard.__exit__(None, None, None)