# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion and display helpers for Argwright argument parsing.

This module converts raw command-line text into the semantic type of an
argument's destination slot, and back into text for help output.

Functions:
- coerce_int: Radix-aware integer decoding with `0b`/`0o`/`0x` prefix override.
- coerce_bool: Truthy/falsy word decoding.
- coerce_enum: Resolve an Enum member from an (abbreviated) member name.
- coerce_choice: Resolve one of a `Literal[...]` type's strings by abbreviation.
- coerce_value: General-purpose coercion to a target type.
- format_value: Re-encode a decoded value for display.
- type_name: Human-readable name of a destination type.
"""
from __future__ import annotations

import types
from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argwright.exceptions import ArgumentParseError
from argwright.parser.abbreviation import resolve_abbreviation

RADIXES = (2, 8, 10, 16)
RADIX_PREFIXES = {"0b": 2, "0o": 8, "0x": 16}
_PREFIX_FOR_RADIX = {radix: prefix for prefix, radix in RADIX_PREFIXES.items()}


class Unsigned(int):
    """Marker type for destinations that only accept non-negative integers."""


def is_integer_type(target_type: Any) -> bool:
    return isinstance(target_type, type) and issubclass(target_type, int) and (
        target_type is not bool
    )


def is_numeric_type(target_type: Any) -> bool:
    return is_integer_type(target_type) or target_type is float


def is_text_type(target_type: Any) -> bool:
    return target_type in (str, Path)


def choice_names(target_type: Any) -> list[str] | None:
    """Return the value names of an enumerated type, or None for other types."""
    if isinstance(target_type, EnumMeta):
        return [member.name for member in target_type]  # type: ignore[var-annotated]
    if get_origin(target_type) is Literal:
        return [str(arg) for arg in get_args(target_type)]
    return None


def coerce_int(value: str, radix: int = 10, unsigned: bool = False) -> int:
    """
    Convert text to an integer.

    A `0b`, `0o` or `0x` prefix (after an optional sign) overrides `radix`.
    Underscores between digits are accepted, as in Python literals.

    Raises:
        ValueError: If the text is not a valid integer, or is negative while
            `unsigned` is set.
    """
    text = value.strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign, text = text[0], text[1:]
    base = radix
    prefix = text[:2].lower()
    if prefix in RADIX_PREFIXES:
        base = RADIX_PREFIXES[prefix]
        text = text[2:]
    if not text or text[0] in "+-_" or text[-1] == "_":
        raise ValueError(f"'{value}' is not a valid base-{base} integer")
    try:
        number = int(f"{sign}{text}", base)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid base-{base} integer") from None
    if unsigned and number < 0:
        raise ValueError(f"'{value}' must not be negative")
    return number


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a string to a boolean.

    Accepts the usual truthy and falsy words such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the text is none of them.
    """
    if isinstance(value, bool):
        return value
    text = value.strip().lower()
    if text in {"true", "t", "1", "yes", "y", "on"}:
        return True
    if text in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert an (abbreviated) member name to an Enum instance.

    Raises:
        AmbiguousAbbreviationError: If the name abbreviates several members.
        UnknownEnumValueError: If no member name starts with the text.
    """
    if isinstance(value, enum_type):
        return value
    name = resolve_abbreviation(str(value), choice_names(enum_type) or [], "value")
    return enum_type[name]


def coerce_choice(value: str, literal_type: Any) -> Any:
    """Resolve one of the strings of a `Literal[...]` type by abbreviation."""
    allowed = {str(arg): arg for arg in get_args(literal_type)}
    return allowed[resolve_abbreviation(value, allowed, "value")]


def coerce_value(value: str, target_type: Any, radix: int = 10) -> Any:
    """
    Attempt to convert a string to the given target type.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.
        radix (int): Default base for integer types.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails.
        UnknownEnumValueError, AmbiguousAbbreviationError: For enumerated types.
    """
    if get_origin(target_type) is Literal:
        return coerce_choice(value, target_type)

    if isinstance(target_type, types.UnionType) or get_origin(target_type) is Union:
        for arg in get_args(target_type):
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg, radix)
            except (ValueError, ArgumentParseError):
                continue
        raise ValueError(
            f"'{value}' could not be coerced to any of {get_args(target_type)}"
        )

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if is_integer_type(target_type):
        return coerce_int(value, radix, unsigned=issubclass(target_type, Unsigned))

    if target_type is float:
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"'{value}' is not a valid number") from None

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    if target_type is str:
        return value

    return target_type(value)


def format_value(value: Any, target_type: Any = None, radix: int = 10) -> str:
    """Render a decoded value the way a user would type it."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool) or value is None:
        return str(value).lower()
    if isinstance(value, int) and radix != 10:
        prefix = _PREFIX_FOR_RADIX[radix]
        digits = format(abs(value), {2: "b", 8: "o", 16: "x"}[radix])
        return f"{'-' if value < 0 else ''}{prefix}{digits}"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, str) and value == "":
        return '""'
    return str(value)


def type_name(target_type: Any) -> str:
    """Return a short, human-readable name for a destination type."""
    if target_type is Unsigned:
        return "unsigned integer"
    if is_integer_type(target_type):
        return "integer"
    if target_type is float:
        return "number"
    if target_type is bool:
        return "flag"
    if target_type in (str, Path):
        return "text" if target_type is str else "path"
    if target_type is datetime:
        return "datetime"
    if choice_names(target_type) is not None:
        return "choice"
    return getattr(target_type, "__name__", str(target_type))
