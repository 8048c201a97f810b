# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the enum naming the three flavours of argument an
`ArgumentRegistry` understands.

Supports alias coercion for shorthand or config-friendly values, so definition
files can say `kind: option` or `kind: count`.

Example:
    ArgumentKind("named")      → ArgumentKind.NAMED
    ArgumentKind("option")     → ArgumentKind.NAMED (via alias)
    ArgumentKind("count")      → ArgumentKind.INCREMENTAL (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """
    Identifies how an argument is recognised on the command line.

    Members:
        POSITIONAL: Matched by position, in declaration order.
        NAMED: Matched by `--long` or `-s` name, supplied at most once.
        INCREMENTAL: Named counter, incremented on every occurrence.

    Aliases:
        - "argument" → "positional"
        - "option", "flag" → "named"
        - "count", "counter" → "incremental"
    """

    POSITIONAL = "positional"
    NAMED = "named"
    INCREMENTAL = "incremental"

    @classmethod
    def choices(cls) -> list[ArgumentKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "argument": "positional",
            "option": "named",
            "flag": "named",
            "count": "incremental",
            "counter": "incremental",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_named(self) -> bool:
        """True for kinds matched by option name."""
        return self is not ArgumentKind.POSITIONAL

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
