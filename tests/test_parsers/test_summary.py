from enum import Enum
from io import StringIO

from rich.console import Console

from argwright.parser import ArgumentRegistry, build_summary
from argwright.parser.summary import collect_summary, get_usage


class Colour(Enum):
    black = 0
    blue = 1
    white = 2


def make_registry() -> ArgumentRegistry:
    registry = ArgumentRegistry(
        program="resize", description="Resize an image.", epilog="Bye."
    )
    registry.positional("file", description="Image to resize")
    registry.positional("output", default=None, description="Where to write")
    registry.named("size", type=int, default=10, description="Output size").short(
        "s"
    ).range(1, 20)
    registry.named("colour", type=Colour, default=Colour.white)
    registry.named("json", type=bool)
    registry.named("table", type=bool)
    registry.incremental("verbose").short("v")
    registry.named("secret", default="").undocumented()
    registry.group("format", "mutually-exclusive", "json", "table")
    return registry


def line(name: str, text: str) -> str:
    return f"  {name:<30} {text}"


def test_usage_line():
    assert get_usage(make_registry()) == (
        "resize [--size SIZE] [--colour {black,blue,white}] [--json | --table] "
        "[--verbose ...] FILE [OUTPUT]"
    )


def test_full_summary():
    summary = build_summary(make_registry())
    assert summary.splitlines() == [
        "usage: resize [--size SIZE] [--colour {black,blue,white}] "
        "[--json | --table] [--verbose ...] FILE [OUTPUT]",
        "",
        "Resize an image.",
        "",
        "positional arguments:",
        line("file", "Image to resize (required)"),
        line("output", "Where to write (optional; default: none)"),
        "options:",
        line(
            "--size, -s SIZE",
            "Output size (optional; default: 10; "
            "radix: 10, accepts 0b/0o/0x prefixes; range: 1..20)",
        ),
        line("--colour {black,blue,white}", "(optional; default: white)"),
        line("--json", "(optional)"),
        line("--table", "(optional)"),
        line("--verbose, -v", "(repeatable; starts at 0)"),
        "groups:",
        line("format (mutually-exclusive)", "--json, --table"),
        "",
        "Bye.",
    ]


def test_undocumented_arguments_are_hidden():
    registry = make_registry()
    assert "secret" not in build_summary(registry)
    assert registry.parse(["x", "--secret", "s"])["secret"] == "s"


def test_summary_is_idempotent_and_independent_of_parsing():
    registry = make_registry()
    first = build_summary(registry)
    assert build_summary(registry) == first
    registry.parse(["cat.png", "-vv", "--json"])
    assert build_summary(registry) == first


def test_program_override():
    assert build_summary(make_registry(), program="shrink").startswith(
        "usage: shrink [--size SIZE]"
    )


def test_empty_registry():
    assert build_summary(ArgumentRegistry()) == "usage:"


def test_long_names_wrap_to_next_line():
    registry = ArgumentRegistry()
    registry.named("a-really-long-option-name", default="x", description="Long one")
    summary = build_summary(registry)
    assert (
        "  --a-really-long-option-name A_REALLY_LONG_OPTION_NAME \n"
        f"{'':<33}Long one (optional; default: x)"
    ) in summary


def test_group_notation():
    registry = ArgumentRegistry(program="p")
    for name in ("host", "port", "user"):
        registry.named(name, default=None)
    registry.named("a", default=None)
    registry.named("b", default=None)
    registry.named("json", type=bool)
    registry.named("yaml", type=bool)
    registry.group("address", "first-or-none", "host", "port", "user")
    registry.group("pair", "all-or-none", "a", "b")
    registry.group("output", "exactly-one", "json", "yaml")
    assert get_usage(registry) == (
        "p [--host HOST [--port PORT [--user USER]]] [-a A -b B] (--json | --yaml)"
    )


def test_radix_and_validators_are_described():
    registry = ArgumentRegistry()
    registry.named("mask", type=int, default=0xFF).radix(16)
    registry.named("tag", default="v1").length(2, 10).match(r"v\d+")
    summary = build_summary(registry)
    assert "(optional; default: 0xff; radix: 16, accepts 0b/0o/0x prefixes)" in summary
    assert "(optional; default: v1; length: 2..10; pattern: v\\d+)" in summary


def test_collect_summary_sections():
    summary = collect_summary(make_registry())
    assert [heading for heading, _ in summary.sections] == [
        "positional arguments",
        "options",
        "groups",
    ]


def test_render_summary_escapes_markup():
    output = StringIO()
    console = Console(file=output, width=200, color_system=None)
    make_registry().render_help(console)
    text = output.getvalue()
    assert "usage: resize [--size SIZE] [--colour {black,blue,white}]" in text
    assert "positional arguments:" in text
    assert "[--json | --table]" in text
    assert "Bye." in text
