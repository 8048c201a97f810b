# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass used by `ArgumentRegistry` to describe one
expected command-line argument.

A spec is identified by an ordered list of names (the first is canonical; named
and incremental specs may add single-character short names), writes to a
destination slot, and optionally records whether the user supplied it in an
indicator slot. Specs are built through `ArgumentRegistry.positional()`,
`.named()` and `.incremental()` and are treated as read-only once parsing starts.

Key Attributes:
- `kind`: `ArgumentKind` (positional, named or incremental)
- `names`: canonical name followed by any short names
- `dest`: destination slot name in the parse result
- `type`: destination semantic type (str, int, Unsigned, float, bool, Path,
  datetime, Enum subclass, Literal[...])
- `default`: value used when absent; `MISSING` makes the argument mandatory unless
  it is named and has an indicator
- `indicator`: optional slot set to whether the argument was supplied
- `validators`: checks applied in declaration order after decoding
- `radix`: default base for integer destinations
- `documented`: False hides the argument from syntax summaries
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.utils import (
    choice_names,
    format_value,
    is_integer_type,
    type_name,
)
from argwright.validators import ArgumentValidator


class _Missing:
    """Sentinel type for "no default value"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass
class ArgumentSpec:
    """
    Represents one registered command-line argument.

    Attributes:
        kind (ArgumentKind): How the argument is recognised.
        names (list[str]): Canonical name first, then short names.
        dest (str): Destination slot for the decoded value.
        type (Any): Destination semantic type.
        default (Any): Default value, or MISSING for none.
        indicator (str | None): Slot that records whether the argument was supplied.
        validators (list[ArgumentValidator]): Checks run after decoding.
        description (str): Help text for syntax summaries.
        documented (bool): Whether syntax summaries list this argument.
        radix (int): Default base for integer destinations.
    """

    kind: ArgumentKind
    names: list[str]
    dest: str
    type: Any = str
    default: Any = MISSING
    indicator: str | None = None
    validators: list[ArgumentValidator] = field(default_factory=list)
    description: str = ""
    documented: bool = True
    radix: int = 10

    @property
    def canonical(self) -> str:
        return self.names[0]

    @property
    def long_names(self) -> list[str]:
        return [name for name in self.names if len(name) > 1]

    @property
    def short_names(self) -> list[str]:
        return [name for name in self.names if len(name) == 1]

    @property
    def positional(self) -> bool:
        return self.kind is ArgumentKind.POSITIONAL

    @property
    def mandatory(self) -> bool:
        """
        True if parsing fails when the argument is absent.

        A named argument without a default but with an indicator is optional:
        when absent its indicator is False and its slot is left unwritten.
        """
        if self.kind is ArgumentKind.INCREMENTAL or self.default is not MISSING:
            return False
        return self.positional or self.indicator is None

    @property
    def takes_value(self) -> bool:
        """True if the argument consumes a value from the command line."""
        if self.kind is ArgumentKind.INCREMENTAL:
            return False
        return self.positional or self.type is not bool

    @property
    def is_integer(self) -> bool:
        return is_integer_type(self.type)

    @property
    def choices(self) -> list[str] | None:
        return choice_names(self.type)

    @property
    def capture_slots(self) -> list[str]:
        slots: list[str] = []
        for validator in self.validators:
            slots.extend(getattr(validator, "captures", {}).values())
        return slots

    def option_strings(self) -> list[str]:
        """Return the names as typed on the command line, long names first."""
        if self.positional:
            return [self.canonical]
        return [f"--{name}" for name in self.long_names] + [
            f"-{name}" for name in self.short_names
        ]

    def display_name(self) -> str:
        """Name used when referring to this argument in messages."""
        if self.positional:
            return self.canonical
        return f"-{self.canonical}" if len(self.canonical) == 1 else f"--{self.canonical}"

    def get_metavar(self) -> str:
        """Return the placeholder shown for this argument's value."""
        if self.choices is not None:
            return f"{{{','.join(self.choices)}}}"
        if not self.takes_value:
            return ""
        if self.positional:
            return self.canonical.upper().replace("-", "_")
        return self.dest.upper()

    def get_default_text(self) -> str:
        if self.default is MISSING:
            return ""
        return format_value(self.default, self.type, self.radix)

    def get_type_text(self) -> str:
        return type_name(self.type)

    def __str__(self) -> str:
        return (
            f"ArgumentSpec({self.kind}, names={self.names}, dest='{self.dest}', "
            f"type={self.get_type_text()}, mandatory={self.mandatory})"
        )
