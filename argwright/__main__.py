"""
Argwright Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Literal, Sequence

from rich.markup import escape
from rich.table import Table

from argwright.config import find_config, load_registry
from argwright.console import console
from argwright.exceptions import ArgumentParseError, ConfigError
from argwright.parser import ArgumentRegistry, ParseResult, ParserConfig
from argwright.parser.utils import format_value
from argwright.utils import LOG_MODES, setup_logging

VERBOSITY = {0: logging.WARNING, 1: logging.INFO}


def get_registry() -> ArgumentRegistry:
    """Arguments of the `argwright` command itself."""
    registry = ArgumentRegistry(
        program="argwright",
        description="Parse arguments against a YAML or TOML registry definition.",
        epilog=(
            "Positional arguments are parsed with the definition. Put them after "
            "'--' when they start with a dash: "
            "argwright -d resize.yaml -- --size 0x10 cat.png"
        ),
    )
    registry.named("help", type=bool, description="Show this summary and exit").short(
        "h"
    )
    registry.named(
        "summary",
        type=bool,
        description="Show the syntax summary of DEFINITION and exit",
    ).short("s")
    registry.named(
        "json", type=bool, description="Print the parsed slots as JSON"
    ).short("j")
    registry.incremental(
        "verbose", description="Log more detail (-vv for debug)"
    ).short("v")
    registry.named(
        "log-mode",
        type=Literal[LOG_MODES],  # type: ignore[valid-type]
        default=None,
        description="Log output format",
    )
    registry.named(
        "definition",
        type=Path,
        default=None,
        description="Registry definition file (searched for when omitted)",
    ).short("d")
    registry.group("output", "mutually-exclusive", "summary", "json")
    return registry


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return format_value(value)


def print_result(result: ParseResult, as_json: bool = False) -> None:
    slots = {slot: result[slot] for slot in result}
    if as_json:
        console.print_json(
            data={
                "values": {slot: _jsonable(value) for slot, value in result.values.items()},
                "indicators": result.indicators,
                "trailing": result.trailing,
            }
        )
        return
    table = Table(title="Parsed slots", show_lines=False)
    table.add_column("Slot", style="argwright.slot")
    table.add_column("Value", style="argwright.value")
    table.add_column("Type", style="argwright.muted")
    for slot, value in slots.items():
        table.add_row(slot, escape(format_value(value)), type(value).__name__)
    console.print(table)
    if result.trailing:
        console.print(f"[argwright.muted]trailing:[/] {escape(' '.join(result.trailing))}")


def report_error(error: ArgumentParseError, registry: ArgumentRegistry) -> None:
    console.print(f"[argwright.error]error:[/] {escape(error.message)}\n")
    registry.render_help(console)


def main(argv: Sequence[str] | None = None) -> int:
    registry = get_registry()
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = registry.parse(args, ParserConfig(allow_trailing_positional=True))
    except ArgumentParseError as error:
        report_error(error, registry)
        return 2

    if options["help"]:
        registry.render_help(console)
        return 0

    if options["verbose"] or options["log_mode"]:
        setup_logging(
            options["log_mode"],
            console_log_level=VERBOSITY.get(options["verbose"], logging.DEBUG),
        )

    path = options["definition"] or find_config()
    if path is None:
        console.print(
            "[argwright.error]error:[/] No definition file given and none found "
            "(argwright.yaml, argwright.toml or $ARGWRIGHT_CONFIG)."
        )
        return 1

    try:
        target, config = load_registry(path)
    except ConfigError as error:
        console.print(f"[argwright.error]error:[/] {escape(str(error))}")
        return 1

    if options["summary"]:
        target.render_help(console)
        return 0

    try:
        result = target.parse(options.trailing, config.parser_config())
    except ArgumentParseError as error:
        report_error(error, target)
        return 2

    print_result(result, as_json=options["json"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
