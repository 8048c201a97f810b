import pytest

from argwright.parser.tokens import (
    DetachedValue,
    LongOption,
    Positional,
    ShortBundle,
    Terminator,
    TokenScanner,
    classify,
    scan,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("--size", LongOption("size", None, "--size")),
        ("--size=5", LongOption("size", "5", "--size=5")),
        ("--name=", LongOption("name", "", "--name=")),
        ("--name=a=b", LongOption("name", "a=b", "--name=a=b")),
        ("-v", ShortBundle("v", None, "-v")),
        ("-abc", ShortBundle("abc", None, "-abc")),
        ("-t5", ShortBundle("t5", None, "-t5")),
        ("-t=5", ShortBundle("t", "5", "-t=5")),
        ("-", Positional("-")),
        ("file.txt", Positional("file.txt")),
        ("", Positional("")),
        ("--", Terminator()),
    ],
)
def test_classify(text, expected):
    assert classify(text) == expected


def test_terminator_switches_to_positional_mode():
    tokens = scan(["-v", "--", "--notAFlag", "--", "-x"])
    assert tokens == [
        ShortBundle("v", None, "-v"),
        Terminator(),
        Positional("--notAFlag"),
        Positional("--"),
        Positional("-x"),
    ]


def test_scanner_does_not_touch_input():
    args = ["--size", "5"]
    scanner = TokenScanner(args)
    list(scanner)
    assert args == ["--size", "5"]
    assert len(scanner) == 2


def test_take_value_returns_next_string_whatever_its_shape():
    scanner = TokenScanner(["--offset", "-5", "--", "x"])
    assert next(scanner) == LongOption("offset", None, "--offset")
    assert scanner.take_value() == DetachedValue("-5")
    assert scanner.take_value() == DetachedValue("--")
    assert scanner.terminated is False
    assert next(scanner) == Positional("x")
    assert scanner.take_value() is None


def test_restart():
    scanner = TokenScanner(["--", "a"])
    first = list(scanner)
    assert scanner.terminated
    assert scanner.position == 2
    scanner.restart()
    assert scanner.position == 0
    assert not scanner.terminated
    assert list(scanner) == first


def test_empty_vector():
    assert scan([]) == []
