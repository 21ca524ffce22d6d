"""Error types raised by the uwlib containers and helpers."""


class UwError(Exception):
    """Base class for all recoverable uwlib errors."""


class Panic(RuntimeError):
    """An unrecoverable condition: a programming error in the caller."""


class IndexOutOfRangeError(UwError, IndexError):
    """An index lies outside the valid range of a sequence."""


class IterationInProgressError(UwError, RuntimeError):
    """A container cannot be modified while it is being iterated."""


class ExtractFromEmptyArrayError(UwError, IndexError):
    """An item was requested from an empty array."""


class KeyNotFoundError(UwError, KeyError):
    """A key is missing from a map."""


class EndOfFileError(UwError, EOFError):
    """No more data or lines are available."""


class FileAlreadyOpenedError(UwError):
    """A file object already holds an open descriptor."""


class NotRegularFileError(UwError):
    """A path does not refer to a regular file."""


class IncompatibleTypeError(UwError, TypeError):
    """A value has a type the operation cannot work with."""


class DataSizeTooBigError(UwError, ValueError):
    """A requested size exceeds the supported limit."""


def panic(fmt, *args):
    """Raise Panic with a printf-style formatted message."""
    message = fmt % args if args else fmt
    raise Panic(message)