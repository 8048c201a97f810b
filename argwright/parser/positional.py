# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Assigns buffered positional values to positional specs.

Positional specs are matched strictly in declaration order, one value each.
The registry guarantees that every mandatory positional is declared before the
first optional one, so the specs left without a value always form a tail of
the sequence: optional ones fall back to their default, and the first mandatory
one aborts the parse.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from argwright.exceptions import (
    MissingMandatoryArgumentError,
    UnexpectedTrailingPositionalError,
)
from argwright.logger import logger
from argwright.parser.argument import ArgumentSpec


@dataclass
class PositionalAssignment:
    """Outcome of matching positional values to positional specs."""

    assigned: list[ArgumentSpec] = field(default_factory=list)
    unfilled: list[ArgumentSpec] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)


def assign_positionals(
    specs: Sequence[ArgumentSpec],
    values: Sequence[str],
    consume: Callable[[ArgumentSpec, str], None],
    allow_trailing: bool = False,
) -> PositionalAssignment:
    """
    Match `values` to `specs` in order, handing each pair to `consume`.

    Args:
        specs: Positional specs in declaration order.
        values: Positional texts in command-line order.
        consume: Decodes, validates and stores one value; called immediately
            for each assigned pair so the first bad value aborts the pass.
        allow_trailing: Return extra values instead of failing on them.

    Raises:
        MissingMandatoryArgumentError: If a mandatory spec gets no value.
        UnexpectedTrailingPositionalError: If values remain and
            `allow_trailing` is False.
    """
    outcome = PositionalAssignment()
    for index, spec in enumerate(specs):
        if index >= len(values):
            if spec.mandatory:
                raise MissingMandatoryArgumentError(
                    f"Missing required argument '{spec.canonical}'.",
                    spec=spec.canonical,
                )
            outcome.unfilled.append(spec)
            continue
        consume(spec, values[index])
        outcome.assigned.append(spec)

    extra = list(values[len(specs) :])
    if extra:
        if not allow_trailing:
            plural = "s" if len(extra) > 1 else ""
            raise UnexpectedTrailingPositionalError(
                f"Unexpected positional argument{plural}: {', '.join(extra)}",
                token=extra[0],
            )
        logger.debug("Passing through %d trailing positional value(s)", len(extra))
        outcome.trailing = extra
    return outcome
