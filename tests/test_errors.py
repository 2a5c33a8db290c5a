import pytest

from robutils.errors import (
    ERROR_STRING_MAX_LENGTH,
    FILE_MAX_LENGTH,
    MESSAGE_MAX_LENGTH,
    BadAllocError,
    InvalidArgumentError,
    NotEnoughSpaceError,
    RcutilsError,
    StringKeyNotFoundError,
    StringMapError,
    format_error_string,
)


def test_format_basic():
    assert format_error_string("something failed", "file.c", 42) == (
        "something failed, at file.c:42"
    )


def test_format_zero_line_number():
    result = format_error_string("msg", "f.c", 0)
    assert result.endswith(":0")
    assert result.startswith("msg, at ")


def test_format_max_line_number():
    result = format_error_string("m", "f", 2**64 - 1)
    assert result.endswith(":" + str(2**64 - 1))


def test_format_empty_parts():
    assert format_error_string("", "", 7) == ", at :7"


def test_message_truncated(capsys):
    long_message = "x" * (MESSAGE_MAX_LENGTH * 2)
    result = format_error_string(long_message, "f.c", 1)
    head, _, tail = result.partition(", at ")
    assert len(head) == MESSAGE_MAX_LENGTH - 1
    assert tail == "f.c:1"
    assert "truncated" in capsys.readouterr().err


def test_file_truncated(capsys):
    long_file = "y" * (FILE_MAX_LENGTH + 10)
    result = format_error_string("m", long_file, 3)
    file_part = result[len("m, at ") : result.rindex(":")]
    assert len(file_part) == FILE_MAX_LENGTH - 1
    assert "truncated" in capsys.readouterr().err


def test_no_warning_when_fits(capsys):
    format_error_string("m", "f", 1)
    assert capsys.readouterr().err == ""


def test_result_never_exceeds_maximum():
    result = format_error_string(
        "a" * 5000, "b" * 5000, 2**64 - 1
    )
    assert len(result) == ERROR_STRING_MAX_LENGTH


@pytest.mark.parametrize("line", [-1, 2**64, 1.5, True, "3"])
def test_invalid_line_number(line):
    with pytest.raises(InvalidArgumentError):
        format_error_string("m", "f", line)


def test_invalid_message_and_file():
    with pytest.raises(InvalidArgumentError):
        format_error_string(None, "f", 1)
    with pytest.raises(InvalidArgumentError):
        format_error_string("m", None, 1)


@pytest.mark.parametrize(
    "cls, builtin",
    [
        (InvalidArgumentError, ValueError),
        (BadAllocError, MemoryError),
        (StringKeyNotFoundError, KeyError),
        (NotEnoughSpaceError, RcutilsError),
        (StringMapError, RcutilsError),
    ],
)
def test_exception_hierarchy(cls, builtin):
    with pytest.raises(RcutilsError) as caught_base:
        raise cls("boom")
    assert caught_base.value.args[0] == "boom"
    with pytest.raises(builtin) as caught_builtin:
        raise cls("boom")
    assert caught_builtin.value.args[0] == "boom"
    assert issubclass(cls, RcutilsError) and issubclass(cls, builtin)


def test_key_not_found_message():
    assert str(StringKeyNotFoundError("key 'a' not found")) == "key 'a' not found"