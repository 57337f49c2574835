from pathlib import Path

import pytest

from singledash.argument import ValueArgument
from singledash.coerce import coerce_bool, coerce_int, coerce_path, stringify_value
from singledash.exceptions import InvalidFormatError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("TRUE", True),
        ("true", True),
        ("True", True),
        ("false", False),
        ("FaLsE", False),
    ],
)
def test_coerce_bool_accepts_true_false(value, expected):
    assert coerce_bool(value) is expected


@pytest.mark.parametrize("value", ["1", "yes", "0", "no", "", " true", "t"])
def test_coerce_bool_rejects_everything_else(value):
    with pytest.raises(InvalidFormatError, match="is not a Boolean"):
        coerce_bool(value)


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("-7", -7), ("+3", 3), ("007", 7), ("0", 0)],
)
def test_coerce_int_accepts_decimal_literals(value, expected):
    assert coerce_int(value) == expected


@pytest.mark.parametrize("value", ["4.2", "forty", "", " 42", "42 ", "4_2", "0x10", "٤٢"])
def test_coerce_int_rejects_everything_else(value):
    with pytest.raises(InvalidFormatError):
        coerce_int(value)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        coerce_int("forty")


def test_coerce_path_does_not_check_existence():
    assert coerce_path("does/not/exist.txt") == Path("does/not/exist.txt")


def test_stringify_relative_path():
    assert stringify_value(Path("rel")) == str(Path.cwd() / "rel")


def test_typed_reads_on_value_argument():
    assert ValueArgument("headless", True).get_boolean() is True
    assert ValueArgument("count", "42").get_int() == 42
    assert ValueArgument("out", "a/b").get_path() == Path("a/b")
    with pytest.raises(InvalidFormatError):
        ValueArgument("count", "forty").get_int()
