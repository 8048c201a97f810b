# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prefix matching for long option names and enumerated value names.

The same rules govern both uses, so `--win` against `--windows`/`--winged` and
`bl` against `black`/`blue` fail in exactly the same way:

1. An exact match always wins, even if it is also a prefix of other names.
2. Otherwise the single name starting with the fragment is returned.
3. Two or more candidates raise `AmbiguousAbbreviationError`.
4. No candidate raises `UnknownOptionError` or `UnknownEnumValueError`.

Matching is case-sensitive.
"""
from __future__ import annotations

from typing import Iterable, Literal

from argwright.exceptions import (
    AmbiguousAbbreviationError,
    UnknownEnumValueError,
    UnknownOptionError,
)

AbbreviationKind = Literal["option", "value"]


def matching_names(fragment: str, candidates: Iterable[str]) -> list[str]:
    """Return the sorted candidates that start with `fragment`."""
    return sorted(name for name in set(candidates) if name.startswith(fragment))


def resolve_abbreviation(
    fragment: str,
    candidates: Iterable[str],
    kind: AbbreviationKind = "option",
) -> str:
    """
    Resolve `fragment` to the one full name it abbreviates.

    Args:
        fragment (str): What the user typed, without any leading dashes.
        candidates (Iterable[str]): The full names to choose from.
        kind (str): "option" for long option names, "value" for enumerated values.

    Returns:
        str: The matching full name.

    Raises:
        AmbiguousAbbreviationError: If more than one name starts with `fragment`.
        UnknownOptionError: If `kind` is "option" and nothing matches.
        UnknownEnumValueError: If `kind` is "value" and nothing matches.
    """
    names = set(candidates)
    if fragment in names:
        return fragment

    possibilities = matching_names(fragment, names) if fragment else []
    if len(possibilities) == 1:
        return possibilities[0]

    if kind == "option":
        shown = f"--{fragment}"
        if possibilities:
            listed = ", ".join(f"--{name}" for name in possibilities)
            raise AmbiguousAbbreviationError(
                f"Option '{shown}' is ambiguous. Did you mean one of: {listed}?",
                candidates=possibilities,
                token=shown,
            )
        raise UnknownOptionError(f"Unrecognized option '{shown}'.", token=shown)

    if possibilities:
        raise AmbiguousAbbreviationError(
            f"Value '{fragment}' is ambiguous. "
            f"Did you mean one of: {', '.join(possibilities)}?",
            candidates=possibilities,
            token=fragment,
        )
    allowed = ", ".join(sorted(names))
    raise UnknownEnumValueError(
        f"Invalid value '{fragment}': should be one of {{{allowed}}}", token=fragment
    )
