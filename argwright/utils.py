# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root logger's handlers with argwright's.

    `mode` is one of `LOG_MODES`. When omitted it comes from
    `ARGWRIGHT_LOG_MODE`, else "json" inside a container and "cli" elsewhere.
    A file handler is added only when `log_filename` is given.

    Raises:
        ValueError: For an unknown mode.
    """
    mode = mode or os.getenv("ARGWRIGHT_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            if json_log_to_file
            else logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(file_handler)

    logging.getLogger("argwright").debug("Logging initialized in '%s' mode.", mode)
