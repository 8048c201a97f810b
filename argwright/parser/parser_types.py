# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration, transient state and result models for one parse.

Contents:
- `ParserConfig`: caller-selected parse options.
- `ParsePhase`: the orchestrator's state machine states.
- `ParseState`: everything one parse run tracks; created per run, never shared.
- `ParseResult`: the populated destination and indicator slots.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from argwright.parser.argument import ArgumentSpec
from argwright.parser.tokens import TokenScanner


@dataclass(frozen=True)
class ParserConfig:
    """
    Options recognised by `ArgumentRegistry.parse()`.

    Attributes:
        allow_trailing_positional (bool): Return positional values beyond the
            registered ones in `ParseResult.trailing` instead of failing.
    """

    allow_trailing_positional: bool = False


class ParsePhase(Enum):
    SCANNING = "scanning"
    RESOLVING = "resolving"
    ASSIGNING = "assigning"
    VALIDATING = "validating"
    GROUP_CHECKING = "group_checking"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (ParsePhase.SUCCEEDED, ParsePhase.FAILED)


@dataclass
class ParseState:
    """Tracks the progress of a single parse."""

    scanner: TokenScanner
    phase: ParsePhase = ParsePhase.SCANNING
    positional_buffer: list[str] = field(default_factory=list)
    supplied: set[str] = field(default_factory=set)
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def terminator_seen(self) -> bool:
        return self.scanner.terminated

    def mark_supplied(self, spec: ArgumentSpec) -> None:
        self.supplied.add(spec.canonical)


@dataclass
class ParseResult:
    """
    Destination slots written by a successful parse.

    Attributes:
        values (dict[str, Any]): Slot name → value. Holds supplied values,
            defaults of absent arguments, incremental counters and regex
            captures. Absent arguments without a default have no entry.
        indicators (dict[str, bool]): Indicator slot → whether supplied.
        trailing (list[str]): Pass-through positional values.
        supplied (frozenset[str]): Canonical names of the supplied arguments.
    """

    values: dict[str, Any] = field(default_factory=dict)
    indicators: dict[str, bool] = field(default_factory=dict)
    trailing: list[str] = field(default_factory=list)
    supplied: frozenset[str] = frozenset()

    def __getitem__(self, slot: str) -> Any:
        if slot in self.values:
            return self.values[slot]
        return self.indicators[slot]

    def __contains__(self, slot: object) -> bool:
        return slot in self.values or slot in self.indicators

    def __iter__(self) -> Iterator[str]:
        yield from self.values
        yield from self.indicators

    def get(self, slot: str, default: Any = None) -> Any:
        return self[slot] if slot in self else default

    def apply_to(self, namespace: Any) -> Any:
        """Write every slot onto `namespace` with setattr and return it."""
        for slot, value in self.values.items():
            setattr(namespace, slot, value)
        for slot, value in self.indicators.items():
            setattr(namespace, slot, value)
        return namespace
