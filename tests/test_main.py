import json
import logging
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

import argwright.__main__ as cli
from argwright.__main__ import get_registry, main
from argwright.themes import get_argwright_theme

RESIZE_YAML = """
program: resize
arguments:
  - name: file
    kind: positional
    type: path
  - name: size
    type: int
    default: 10
    short: s
    range: [1, 64]
"""


@pytest.fixture(autouse=True)
def output(monkeypatch):
    """Capture everything the CLI prints."""
    buffer = StringIO()
    console = Console(
        file=buffer, width=200, color_system=None, theme=get_argwright_theme()
    )
    monkeypatch.setattr(cli, "console", console)
    return buffer


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test from an empty directory with an empty home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv("ARGWRIGHT_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(
        cli, "setup_logging", lambda *args, **kwargs: calls.append((args, kwargs))
    )
    return calls


@pytest.fixture
def definition(workdir):
    path = workdir / "resize.yaml"
    path.write_text(RESIZE_YAML, encoding="UTF-8")
    return path


def test_help(output):
    assert main(["--help"]) == 0
    text = output.getvalue()
    assert text.startswith("usage: argwright [--help] [--summary | --json]")
    assert "--definition, -d DEFINITION" in text


def test_unknown_option(output):
    assert main(["--bogus"]) == 2
    text = output.getvalue()
    assert "error: Unrecognized option '--bogus'." in text
    assert "usage: argwright" in text


def test_summary_and_json_are_exclusive():
    assert main(["-s", "-j"]) == 2


def test_no_definition_found(output):
    assert main([]) == 1
    assert "No definition file given" in output.getvalue()


def test_invalid_definition(workdir, output):
    (workdir / "bad.yaml").write_text("arguments: [", encoding="UTF-8")
    assert main(["-d", "bad.yaml"]) == 1
    assert "error: Could not parse" in output.getvalue()


def test_definition_summary(definition, output):
    assert main(["--summary", "-d", str(definition)]) == 0
    assert "usage: resize [--size SIZE] FILE" in output.getvalue()


def test_parse_prints_table(definition, output):
    assert main(["-d", str(definition), "--", "--size", "0x10", "cat.png"]) == 0
    text = output.getvalue()
    assert "Parsed slots" in text
    assert "cat.png" in text
    assert "16" in text


def test_parse_prints_json(definition, output):
    assert main(["-j", "-d", str(definition), "cat.png"]) == 0
    data = json.loads(output.getvalue())
    assert data == {
        "values": {"file": "cat.png", "size": 10},
        "indicators": {},
        "trailing": [],
    }


def test_parse_error_in_target(definition, output):
    assert main(["-d", str(definition), "--", "--size", "99", "cat.png"]) == 2
    text = output.getvalue()
    assert "error: Invalid value for '--size'" in text
    assert "usage: resize" in text


def test_found_definition_is_used(workdir, output):
    (workdir / "argwright.yaml").write_text(RESIZE_YAML, encoding="UTF-8")
    assert main(["-j", "dog.png"]) == 0
    assert json.loads(output.getvalue())["values"]["file"] == "dog.png"


def test_logging_is_left_alone_by_default(definition, logging_calls):
    main(["-d", str(definition), "cat.png"])
    assert logging_calls == []


@pytest.mark.parametrize(
    "flags, mode, level",
    [
        (["-v"], None, logging.INFO),
        (["-vv"], None, logging.DEBUG),
        (["--log-mode", "json"], "json", logging.WARNING),
    ],
)
def test_logging_options(definition, logging_calls, flags, mode, level):
    main([*flags, "-d", str(definition), "cat.png"])
    assert logging_calls == [((mode,), {"console_log_level": level})]


def test_cli_registry_shape():
    registry = get_registry()
    assert registry.positionals == ()
    assert registry.get_argument("d").canonical == "definition"
