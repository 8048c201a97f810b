import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from argwright.utils import running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging("cli", console_log_level=logging.INFO)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO


def test_setup_logging_json_with_file(tmp_path):
    log_file = tmp_path / "argwright.log"
    setup_logging("json", log_filename=str(log_file), json_log_to_file=True)
    console_handler, file_handler = logging.getLogger().handlers
    assert isinstance(console_handler.formatter, JsonFormatter)
    assert isinstance(file_handler, logging.FileHandler)
    assert isinstance(file_handler.formatter, JsonFormatter)
    logging.getLogger("argwright").debug("hello")
    file_handler.close()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_mode_from_environment(monkeypatch):
    monkeypatch.setenv("ARGWRIGHT_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging("xml")


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)
