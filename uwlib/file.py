"""Files opened by descriptor, with a UTF-8 line reader and path helpers."""

import codecs
import os
import stat

from .array import Array, join
from .errors import (
    EndOfFileError,
    FileAlreadyOpenedError,
    IncompatibleTypeError,
    NotRegularFileError,
)
from .interfaces import LineReader

LINE_READER_BUFFER_SIZE = 4096  # typical filesystem block size


def _to_str(value, what="file name"):
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    raise IncompatibleTypeError(f"Bad {what} type: {type(value).__name__}")


class File(LineReader):
    """A file descriptor with an optional name and a line reader on top."""

    def __init__(self):
        self._fd = -1
        self._external = False
        self._error = 0
        self._name = None
        self._decoder = None
        self._pending = ""
        self._eof = False
        self._pushback = None
        self._line_number = 0

    def __repr__(self):
        return f"File(name={self._name!r}, fd={self._fd})"

    def __deepcopy__(self, memo):
        raise TypeError("File objects cannot be deep-copied")

    def __del__(self):
        try:
            self.close()
        except (AttributeError, OSError):
            pass

    def open(self, file_name, flags=os.O_RDONLY, mode=0o666):
        """Open file_name with os.open flags and mode."""
        if self._fd != -1:
            raise FileAlreadyOpenedError("file already opened")
        name = _to_str(file_name)
        try:
            fd = os.open(name, flags, mode)
        except OSError as exc:
            self._error = exc.errno
            raise
        self._fd = fd
        self._name = name
        self._external = False
        self._line_number = 0
        self._pushback = None

    def close(self):
        """Stop reading lines and close the descriptor unless it is external."""
        self.stop()
        if self._fd != -1 and not self._external:
            os.close(self._fd)
        self._fd = -1
        self._error = 0
        self._name = None

    def set_fd(self, fd):
        """Attach an external descriptor that close() will not close.

        Return False if a descriptor is already set.
        """
        if self._fd != -1:
            return False
        self._fd = fd
        self._external = True
        self._line_number = 0
        self._pushback = None
        return True

    def fd(self):
        """Return the file descriptor, or -1 when none is set."""
        return self._fd

    def name(self):
        """Return the file name, or None."""
        return self._name

    def read(self, size):
        """Read at most size bytes."""
        return os.read(self._fd, size)

    def write(self, data):
        """Write data and return the number of bytes written."""
        return os.write(self._fd, data)

    def start(self):
        """Rewind the file and prepare to read lines from the beginning."""
        self._pushback = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")
        self._pending = ""
        self._eof = False
        os.lseek(self._fd, 0, os.SEEK_SET)
        self._line_number = 0

    def read_line(self):
        """Return the next line with its line break; the last may lack one."""
        if self._decoder is None:
            self.start()
        if self._pushback is not None:
            line, self._pushback = self._pushback, None
            self._line_number += 1
            return line
        searched = 0
        while True:
            pos = self._pending.find("\n", searched)
            if pos >= 0:
                line = self._pending[: pos + 1]
                self._pending = self._pending[pos + 1:]
                self._line_number += 1
                return line
            searched = len(self._pending)
            if self._eof:
                if self._pending:
                    line, self._pending = self._pending, ""
                    self._line_number += 1
                    return line
                raise EndOfFileError("end of file")
            chunk = os.read(self._fd, LINE_READER_BUFFER_SIZE)
            if chunk:
                self._pending += self._decoder.decode(chunk)
            else:
                self._pending += self._decoder.decode(b"", final=True)
                self._eof = True

    def unread_line(self, line):
        """Push a line back; only one line can be pending at a time."""
        if self._pushback is not None:
            return False
        self._pushback = line
        self._line_number -= 1
        return True

    def line_number(self):
        """Return the number of the line read last."""
        return self._line_number

    def stop(self):
        """Release the line reader state."""
        self._decoder = None
        self._pending = ""
        self._eof = False
        self._pushback = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def open_file(file_name, flags=os.O_RDONLY, mode=0o666):
    """Create a File and open it."""
    f = File()
    f.open(file_name, flags, mode)
    return f


def file_size(file_name):
    """Return the size of a regular file in bytes."""
    name = _to_str(file_name)
    st = os.stat(name)
    if not stat.S_ISREG(st.st_mode):
        raise NotRegularFileError(f"{name} is not a regular file")
    return st.st_size


def basename(filename):
    """Return the part after the last '/'."""
    return _to_str(filename).rsplit("/", 1)[-1]


def dirname(filename):
    """Return the part before the last '/', or the whole name if there is none."""
    return _to_str(filename).rsplit("/", 1)[0]


def path(*args):
    """Join the string arguments with '/', skipping other values.

    An exception among the arguments is raised.
    """
    parts = Array()
    for arg in args:
        if isinstance(arg, BaseException):
            raise arg
        if isinstance(arg, (str, bytes, bytearray)):
            parts.append(arg)
    return join("/", parts)