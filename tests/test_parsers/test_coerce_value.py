from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from argwright.exceptions import AmbiguousAbbreviationError, UnknownEnumValueError
from argwright.parser.utils import (
    Unsigned,
    coerce_bool,
    coerce_int,
    coerce_value,
    format_value,
    type_name,
)


class Colour(Enum):
    black = 0
    blue = 1
    white = 2


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("true", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("off", bool, False),
        ("-", Path, Path("-")),
        ("images/cat.png", Path, Path("images/cat.png")),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, radix, expected",
    [
        ("10", 10, 10),
        ("10", 16, 16),
        ("ff", 16, 255),
        ("0x10", 10, 16),
        ("0b101", 10, 5),
        ("0o17", 10, 15),
        ("0b1", 16, 1),
        ("-0x1f", 10, -31),
        ("+7", 10, 7),
        ("1_000", 10, 1000),
        ("0X1F", 10, 31),
    ],
)
def test_coerce_int_radix(value, radix, expected):
    assert coerce_int(value, radix) == expected


@pytest.mark.parametrize("value", ["", "0x", "12a", "_1", "1_", "--1", "0x-1", "1.5"])
def test_coerce_int_rejects(value):
    with pytest.raises(ValueError):
        coerce_int(value)


def test_coerce_int_unsigned():
    assert coerce_value("0", Unsigned) == 0
    assert coerce_value("0x20", Unsigned) == 32
    with pytest.raises(ValueError, match="must not be negative"):
        coerce_value("-1", Unsigned)


def test_coerce_int_error_names_base():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("12", int, 2)
    assert "base-2" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_union_falls_through_enum():
    assert coerce_value("5", Colour | int) == 5
    assert coerce_value("bla", Colour | int) is Colour.black
    assert coerce_value("b", Colour | str) == "b"
    with pytest.raises(ValueError):
        coerce_value("grey", Colour | int)


def test_coerce_value_typing_union_equivalent():
    assert coerce_value("123", Union[int, str]) == 123
    assert coerce_value("abc", Union[int, str]) == "abc"
    assert coerce_value("7", Union[int, None]) == 7


def test_coerce_value_edge_cases():
    with pytest.raises(ValueError):
        coerce_value("not-an-int", int | float)

    assert coerce_value("", int | str) == ""
    assert coerce_value("False", bool | str) is False


def test_coerce_bool():
    assert coerce_bool(True) is True
    assert coerce_bool(" Yes ") is True
    assert coerce_bool("0") is False
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_coerce_value_enum_by_name():
    assert coerce_value("black", Colour) is Colour.black
    assert coerce_value("white", Colour) is Colour.white
    assert coerce_value("DEV", Mode) is Mode.DEV
    assert coerce_value(Mode.PROD, Mode) is Mode.PROD


def test_coerce_value_enum_abbreviation():
    assert coerce_value("bla", Colour) is Colour.black
    assert coerce_value("w", Colour) is Colour.white
    with pytest.raises(AmbiguousAbbreviationError) as excinfo:
        coerce_value("bl", Colour)
    assert excinfo.value.candidates == ["black", "blue"]


def test_coerce_value_enum_is_case_sensitive():
    with pytest.raises(UnknownEnumValueError):
        coerce_value("dev", Mode)


def test_coerce_value_enum_unknown():
    with pytest.raises(UnknownEnumValueError) as excinfo:
        coerce_value("yellow", Colour)
    assert excinfo.value.message == (
        "Invalid value 'yellow': should be one of {black, blue, white}"
    )


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    assert coerce_value("p", Literal["dev", "prod"]) == "prod"
    with pytest.raises(UnknownEnumValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_coerce_value_datetime():
    assert coerce_value("2025-03-01 12:30", datetime) == datetime(2025, 3, 1, 12, 30)
    with pytest.raises(ValueError):
        coerce_value("not a date", datetime)


def test_coerce_value_float_error():
    with pytest.raises(ValueError, match="not a valid number"):
        coerce_value("fast", float)


def test_enum_round_trip():
    """Decoding an abbreviated value and re-encoding it gives the canonical name."""
    decoded = coerce_value("bla", Colour)
    assert format_value(decoded, Colour) == "black"


@pytest.mark.parametrize(
    "value, radix, expected",
    [
        (16, 10, "16"),
        (16, 16, "0x10"),
        (-5, 2, "-0b101"),
        (8, 8, "0o10"),
        (None, 10, "none"),
        (False, 10, "false"),
        ("", 10, '""'),
        (datetime(2025, 1, 2, 3, 4), 10, "2025-01-02T03:04:00"),
    ],
)
def test_format_value(value, radix, expected):
    assert format_value(value, radix=radix) == expected


def test_type_name():
    assert type_name(int) == "integer"
    assert type_name(Unsigned) == "unsigned integer"
    assert type_name(bool) == "flag"
    assert type_name(Path) == "path"
    assert type_name(Colour) == "choice"
    assert type_name(Literal["a", "b"]) == "choice"
