# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Syntax summary generation for an `ArgumentRegistry`.

The summary is a pure function of the registry's metadata: it never looks at a
parse, so it can be produced before, after or between parses and always yields
the same text for the same registry.

Layout:

    usage: resize [--size SIZE] [--verbose] FILE

    Resize an image.

    positional arguments:
      file                           Image to resize (required)
    options:
      --size, -s SIZE                Output size (optional; default: 10; range: 1..20)
    groups:
      output (mutually-exclusive)    --json, --table

Usage line notation:
- mandatory items are bare, optional items are in `[...]`
- MUTUALLY_EXCLUSIVE groups: `[a | b]`
- EXACTLY_ONE and AT_LEAST_ONE groups: `(a | b)`
- ALL_OR_NONE groups: `[a b]`
- FIRST_OR_NONE groups: `[a [b [c]]]`

Specs marked undocumented are left out everywhere.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from argwright.parser.argument import MISSING, ArgumentSpec
from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.groups import ArgumentGroup, GroupPolicy
from argwright.parser.utils import RADIX_PREFIXES

if TYPE_CHECKING:
    from argwright.parser.registry import ArgumentRegistry

NAME_WIDTH = 30


@dataclass
class SyntaxSummary:
    """Structured summary; `build_summary` and `render_summary` lay it out."""

    usage: str
    description: str = ""
    sections: list[tuple[str, list[tuple[str, str]]]] = field(default_factory=list)
    epilog: str = ""


def _usage_item(spec: ArgumentSpec) -> str:
    if spec.positional:
        return spec.get_metavar()
    metavar = spec.get_metavar()
    item = f"{spec.display_name()} {metavar}" if metavar else spec.display_name()
    if spec.kind is ArgumentKind.INCREMENTAL:
        item = f"{item} ..."
    return item


def _optional(spec: ArgumentSpec, item: str) -> str:
    return item if spec.mandatory else f"[{item}]"


def _group_usage(group: ArgumentGroup, items: list[str]) -> str:
    policy = group.policy
    if len(items) == 1 and policy not in (
        GroupPolicy.EXACTLY_ONE,
        GroupPolicy.AT_LEAST_ONE,
    ):
        return f"[{items[0]}]"
    if policy is GroupPolicy.MUTUALLY_EXCLUSIVE:
        return f"[{' | '.join(items)}]"
    if policy in (GroupPolicy.EXACTLY_ONE, GroupPolicy.AT_LEAST_ONE):
        return f"({' | '.join(items)})"
    if policy is GroupPolicy.ALL_OR_NONE:
        return f"[{' '.join(items)}]"
    nested = ""
    for item in reversed(items):
        nested = f"[{item} {nested}]" if nested else f"[{item}]"
    return nested


def get_usage(registry: ArgumentRegistry, program: str | None = None) -> str:
    """Return the one-line usage synopsis, without the `usage:` prefix."""
    program = registry.program if program is None else program
    documented = [spec for spec in registry.arguments if spec.documented]
    owner: dict[str, ArgumentGroup] = {}
    for group in registry.groups:
        for member in group.members:
            owner.setdefault(member, group)

    items: list[str] = [program] if program else []
    rendered: set[str] = set()
    ordered = [spec for spec in documented if not spec.positional] + [
        spec for spec in documented if spec.positional
    ]
    for spec in ordered:
        if spec.canonical in rendered:
            continue
        group = owner.get(spec.canonical)
        if group is None:
            items.append(_optional(spec, _usage_item(spec)))
            rendered.add(spec.canonical)
            continue
        members = [
            member
            for member in documented
            if member.canonical in group.members
            and owner.get(member.canonical) is group
        ]
        members.sort(key=lambda member: group.members.index(member.canonical))
        items.append(_group_usage(group, [_usage_item(member) for member in members]))
        rendered.update(member.canonical for member in members)
    return " ".join(items)


def _details(spec: ArgumentSpec) -> str:
    notes: list[str] = []
    if spec.kind is ArgumentKind.INCREMENTAL:
        notes.append("repeatable")
        notes.append(f"starts at {spec.get_default_text()}")
    elif spec.mandatory:
        notes.append("required")
    else:
        notes.append("optional")
        if spec.type is not bool and spec.default is not MISSING:
            notes.append(f"default: {spec.get_default_text()}")
    if spec.is_integer and spec.kind is not ArgumentKind.INCREMENTAL:
        prefixes = "/".join(RADIX_PREFIXES)
        notes.append(f"radix: {spec.radix}, accepts {prefixes} prefixes")
    for validator in spec.validators:
        described = validator.describe()
        if described:
            notes.append(described)

    text = f"({'; '.join(notes)})"
    if spec.description:
        text = f"{spec.description} {text}"
    return text


def _option_label(spec: ArgumentSpec) -> str:
    label = ", ".join(spec.option_strings())
    metavar = spec.get_metavar()
    return f"{label} {metavar}" if metavar else label


def collect_summary(
    registry: ArgumentRegistry, program: str | None = None
) -> SyntaxSummary:
    """Gather the summary contents for `registry` without laying them out."""
    documented = [spec for spec in registry.arguments if spec.documented]
    summary = SyntaxSummary(
        usage=get_usage(registry, program),
        description=registry.description,
        epilog=registry.epilog,
    )

    positional = [
        (spec.canonical, _details(spec)) for spec in documented if spec.positional
    ]
    if positional:
        summary.sections.append(("positional arguments", positional))
    options = [
        (_option_label(spec), _details(spec))
        for spec in documented
        if not spec.positional
    ]
    if options:
        summary.sections.append(("options", options))

    visible = {spec.canonical: spec for spec in documented}
    groups = []
    for group in registry.groups:
        members = [visible[name] for name in group.members if name in visible]
        if not members:
            continue
        groups.append(
            (
                f"{group.name} ({group.policy})",
                ", ".join(member.display_name() for member in members),
            )
        )
    if groups:
        summary.sections.append(("groups", groups))
    return summary


def _entry_line(name: str, text: str) -> str:
    line = f"  {name:<{NAME_WIDTH}} "
    if text and len(name) > NAME_WIDTH:
        text = f"\n{'':<{NAME_WIDTH + 3}}{text}"
    return f"{line}{text}".rstrip()


def build_summary(registry: ArgumentRegistry, program: str | None = None) -> str:
    """Return the plain-text syntax summary of `registry`."""
    summary = collect_summary(registry, program)
    lines = [f"usage: {summary.usage}".rstrip()]
    if summary.description:
        lines.extend(["", summary.description])
    if summary.sections:
        lines.append("")
    for heading, entries in summary.sections:
        lines.append(f"{heading}:")
        lines.extend(_entry_line(name, text) for name, text in entries)
    if summary.epilog:
        lines.extend(["", summary.epilog])
    return "\n".join(lines)


def render_summary(
    registry: ArgumentRegistry,
    console: Console | None = None,
    program: str | None = None,
) -> None:
    """Print the syntax summary of `registry` using Rich output."""
    if console is None:
        from argwright.console import console as default_console

        console = default_console
    summary = collect_summary(registry, program)
    console.print(f"[bold]usage:[/bold] {escape(summary.usage)}\n")
    if summary.description:
        console.print(escape(summary.description) + "\n")
    for heading, entries in summary.sections:
        console.print(f"[bold]{heading}:[/bold]")
        for name, text in entries:
            console.print(escape(_entry_line(name, text)))
    if summary.epilog:
        console.print("\n" + escape(summary.epilog), style="dim")
