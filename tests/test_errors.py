import pytest

from uwlib.errors import (
    DataSizeTooBigError,
    EndOfFileError,
    ExtractFromEmptyArrayError,
    FileAlreadyOpenedError,
    IncompatibleTypeError,
    IndexOutOfRangeError,
    IterationInProgressError,
    KeyNotFoundError,
    NotRegularFileError,
    Panic,
    UwError,
    panic,
)


def test_panic_formats_message():
    with pytest.raises(Panic) as info:
        panic("Bad charptr subtype %u", 7)
    assert str(info.value) == "Bad charptr subtype 7"


def test_panic_without_args_keeps_percent_signs():
    with pytest.raises(Panic) as info:
        panic("100% broken")
    assert str(info.value) == "100% broken"


def test_panic_is_not_a_recoverable_error():
    with pytest.raises(Panic) as info:
        panic("Array cannot contain Status values")
    assert not isinstance(info.value, UwError)


@pytest.mark.parametrize(
    "error_class",
    [
        IndexOutOfRangeError,
        IterationInProgressError,
        ExtractFromEmptyArrayError,
        KeyNotFoundError,
        EndOfFileError,
        FileAlreadyOpenedError,
        NotRegularFileError,
        IncompatibleTypeError,
        DataSizeTooBigError,
    ],
)
def test_all_errors_caught_by_base(error_class):
    error = error_class("boom")
    assert error.args == ("boom",)
    assert issubclass(error_class, UwError)
    caught = None
    try:
        raise error
    except UwError as exc:
        caught = exc
    assert caught is error


@pytest.mark.parametrize(
    "error_class, builtin",
    [
        (IndexOutOfRangeError, IndexError),
        (ExtractFromEmptyArrayError, IndexError),
        (KeyNotFoundError, KeyError),
        (EndOfFileError, EOFError),
        (IncompatibleTypeError, TypeError),
        (DataSizeTooBigError, ValueError),
    ],
)
def test_errors_match_builtin_families(error_class, builtin):
    error = error_class("x")
    assert error.args == ("x",)
    assert issubclass(error_class, builtin)
    caught = None
    try:
        raise error
    except builtin as exc:
        caught = exc
    assert caught is error