import os

import pytest

from uwlib.errors import (
    EndOfFileError,
    FileAlreadyOpenedError,
    IncompatibleTypeError,
    NotRegularFileError,
)
from uwlib.file import (
    File,
    basename,
    dirname,
    file_size,
    open_file,
    path,
)

SAMPLE = '{\n    "one": 1,\n    "two": "สบาย",\n    "three": [1, 2, 3]\n}\n'


def _write(tmp_path, name, data):
    p = tmp_path / name
    p.write_bytes(data)
    return str(p)


def _read_all(f):
    lines = []
    while True:
        try:
            lines.append(f.read_line())
        except EndOfFileError:
            return lines


def test_utf8_crossing_buffer_boundary(tmp_path):
    a = "#" * 99 + "\n"
    b = "#" * 94 + "\n"
    c = "สบาย\n"
    data = (a * 40 + b + c).encode("utf-8")
    assert len((a * 40 + b).encode("utf-8")) == 4095
    name = _write(tmp_path, "utf8-crossing", data)

    f = open_file(name, os.O_RDONLY, 0)
    f.start()
    line = f.read_line()
    while line == a:
        line = f.read_line()
    assert line == b
    assert f.read_line() == c
    with pytest.raises(EndOfFileError):
        f.read_line()
    f.close()


def test_path_functions():
    assert basename("/bin/bash") == "bash"
    assert dirname("/bin/bash") == "/bin"
    assert path(b"", b"bin", b"bash") == "/bin/bash"
    assert path("", "bin", "bash") == "/bin/bash"
    assert basename("blahblahblah") == "blahblahblah"


def test_dirname_without_slash_returns_whole_name():
    assert dirname("blah") == "blah"


def test_path_skips_non_strings_and_raises_errors():
    assert path("a", 5, None, "b") == "a/b"
    with pytest.raises(KeyError):
        path("a", KeyError("boom"), "b")


def test_basename_rejects_bad_type():
    with pytest.raises(IncompatibleTypeError):
        basename(42)


@pytest.mark.parametrize("text", [SAMPLE, SAMPLE.rstrip("\n")])
def test_compare_line_readers(tmp_path, text):
    data = text.encode("utf-8")
    name = _write(tmp_path, "sample.json", data)

    assert file_size(name) == len(data)

    f = open_file(name, os.O_RDONLY, 0)
    content = f.read(len(data) + 1)
    assert content == data
    f.close()

    f = open_file(name, os.O_RDONLY, 0)
    f.start()
    assert _read_all(f) == text.splitlines(keepends=True)
    f.close()


def test_file_size_of_directory(tmp_path):
    with pytest.raises(NotRegularFileError):
        file_size(str(tmp_path))


def test_open_missing_file(tmp_path):
    f = File()
    with pytest.raises(FileNotFoundError):
        f.open(str(tmp_path / "missing"), os.O_RDONLY, 0)
    assert f.fd() == -1


def test_open_twice(tmp_path):
    name = _write(tmp_path, "x", b"x")
    f = open_file(name, os.O_RDONLY, 0)
    with pytest.raises(FileAlreadyOpenedError):
        f.open(name, os.O_RDONLY, 0)
    f.close()


def test_name_and_close(tmp_path):
    name = _write(tmp_path, "x", b"x")
    f = open_file(name.encode("utf-8"), os.O_RDONLY, 0)
    assert f.name() == name
    assert f.fd() >= 0
    f.close()
    assert f.fd() == -1
    assert f.name() is None


def test_unread_line_and_line_numbers(tmp_path):
    name = _write(tmp_path, "lines", b"one\ntwo\nthree")
    with open_file(name, os.O_RDONLY, 0) as f:
        assert f.read_line() == "one\n"
        assert f.line_number() == 1
        line = f.read_line()
        assert line == "two\n"
        assert f.line_number() == 2
        assert f.unread_line(line) is True
        assert f.unread_line(line) is False
        assert f.line_number() == 1
        assert f.read_line() == "two\n"
        assert f.read_line() == "three"
        assert f.line_number() == 3
        with pytest.raises(EndOfFileError):
            f.read_line()
        f.start()
        assert f.read_line() == "one\n"


def test_empty_file_is_eof(tmp_path):
    name = _write(tmp_path, "empty", b"")
    with open_file(name, os.O_RDONLY, 0) as f:
        with pytest.raises(EndOfFileError):
            f.read_line()


def test_iteration_yields_lines(tmp_path):
    name = _write(tmp_path, "lines", b"a\nb\n")
    with open_file(name, os.O_RDONLY, 0) as f:
        assert list(f) == ["a\n", "b\n"]


def test_context_manager_closes(tmp_path):
    name = _write(tmp_path, "x", b"x")
    with open_file(name, os.O_RDONLY, 0) as f:
        assert f.fd() >= 0
    assert f.fd() == -1


def test_write_then_read(tmp_path):
    name = str(tmp_path / "out")
    with open_file(name, os.O_WRONLY | os.O_CREAT, 0o644) as f:
        assert f.write(b"hello\n") == 6
    with open_file(name, os.O_RDONLY, 0) as f:
        assert f.read(100) == b"hello\n"


def test_external_fd_is_not_closed(tmp_path):
    name = _write(tmp_path, "x", b"hello")
    fd = os.open(name, os.O_RDONLY)
    try:
        f = File()
        assert f.set_fd(fd) is True
        assert f.set_fd(fd) is False
        assert f.read_line() == "hello"
        f.close()
        assert f.fd() == -1
        os.lseek(fd, 0, os.SEEK_SET)
        assert os.read(fd, 5) == b"hello"
    finally:
        os.close(fd)