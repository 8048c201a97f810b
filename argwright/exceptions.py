# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argwright.

Two families are kept apart:

- `RegistrationError` signals a programmer error while building an
  `ArgumentRegistry` (duplicate names, malformed validators, ...). It is raised
  immediately at registration time and should never be caught to recover.
- `ArgumentParseError` and its subclasses signal bad user input. Exactly one is
  raised per failed parse and it carries a `kind`, the offending token and spec
  name, and a human-readable message ready to be printed.

Exception Hierarchy:
- ArgwrightError
    ├── RegistrationError
    ├── ConfigError
    └── ArgumentParseError
          ├── UnknownOptionError
          ├── UnknownEnumValueError
          ├── AmbiguousAbbreviationError
          ├── MissingMandatoryArgumentError
          ├── MissingValueError
          ├── UnexpectedValueError
          ├── DuplicateNamedArgumentError
          ├── TypeCoercionError
          ├── ValidationFailedError
          ├── GroupConstraintError
          └── UnexpectedTrailingPositionalError
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence


class ParseErrorKind(Enum):
    """Classifies user-input failures raised while parsing."""

    UNKNOWN_OPTION = "unknown_option"
    UNKNOWN_ENUM_VALUE = "unknown_enum_value"
    AMBIGUOUS_ABBREVIATION = "ambiguous_abbreviation"
    MISSING_MANDATORY_ARGUMENT = "missing_mandatory_argument"
    MISSING_VALUE = "missing_value"
    UNEXPECTED_VALUE = "unexpected_value"
    DUPLICATE_NAMED_ARGUMENT = "duplicate_named_argument"
    TYPE_COERCION_FAILED = "type_coercion_failed"
    VALIDATION_FAILED = "validation_failed"
    GROUP_CONSTRAINT_VIOLATED = "group_constraint_violated"
    UNEXPECTED_TRAILING_POSITIONAL = "unexpected_trailing_positional"

    def __str__(self) -> str:
        return self.value


class ArgwrightError(Exception):
    """Base exception for Argwright."""


class RegistrationError(ArgwrightError):
    """Exception raised when an argument registry is built incorrectly."""


class ConfigError(ArgwrightError):
    """Exception raised when a registry definition file cannot be loaded."""


class ArgumentParseError(ArgwrightError):
    """
    Base class for failures caused by the parsed argument vector.

    Attributes:
        kind (ParseErrorKind): What went wrong.
        message (str): User-facing description of the failure.
        token (str | None): The offending command-line text, if any.
        spec (str | None): Canonical name of the offending argument, if any.
    """

    kind: ParseErrorKind

    def __init__(
        self, message: str, *, token: str | None = None, spec: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.spec = spec

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind}, message={self.message!r}, "
            f"token={self.token!r}, spec={self.spec!r})"
        )


class UnknownOptionError(ArgumentParseError):
    """Raised when an option name matches no registered argument."""

    kind = ParseErrorKind.UNKNOWN_OPTION


class UnknownEnumValueError(ArgumentParseError):
    """Raised when an enumerated value matches none of the allowed names."""

    kind = ParseErrorKind.UNKNOWN_ENUM_VALUE


class AmbiguousAbbreviationError(ArgumentParseError):
    """Raised when a prefix matches more than one option or value name."""

    kind = ParseErrorKind.AMBIGUOUS_ABBREVIATION

    def __init__(
        self,
        message: str,
        *,
        candidates: Sequence[str] = (),
        token: str | None = None,
        spec: str | None = None,
    ) -> None:
        super().__init__(message, token=token, spec=spec)
        self.candidates: list[str] = list(candidates)


class MissingMandatoryArgumentError(ArgumentParseError):
    """Raised when an argument without a default was never supplied."""

    kind = ParseErrorKind.MISSING_MANDATORY_ARGUMENT


class MissingValueError(ArgumentParseError):
    """Raised when an option that takes a value ends the argument vector."""

    kind = ParseErrorKind.MISSING_VALUE


class UnexpectedValueError(ArgumentParseError):
    """Raised when a value is attached to an option that takes none."""

    kind = ParseErrorKind.UNEXPECTED_VALUE


class DuplicateNamedArgumentError(ArgumentParseError):
    """Raised when a non-incremental option is supplied more than once."""

    kind = ParseErrorKind.DUPLICATE_NAMED_ARGUMENT


class TypeCoercionError(ArgumentParseError):
    """Raised when a value cannot be decoded into the destination type."""

    kind = ParseErrorKind.TYPE_COERCION_FAILED


class ValidationFailedError(ArgumentParseError):
    """Raised when a decoded value is rejected by one of its validators."""

    kind = ParseErrorKind.VALIDATION_FAILED


class GroupConstraintError(ArgumentParseError):
    """Raised when the supplied arguments break a group's membership policy."""

    kind = ParseErrorKind.GROUP_CONSTRAINT_VIOLATED

    def __init__(
        self,
        message: str,
        *,
        group: str,
        members: Sequence[str] = (),
    ) -> None:
        super().__init__(message, spec=group)
        self.group = group
        self.members: list[str] = list(members)


class UnexpectedTrailingPositionalError(ArgumentParseError):
    """Raised when positional values remain and pass-through is disabled."""

    kind = ParseErrorKind.UNEXPECTED_TRAILING_POSITIONAL
