# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value validators attached to argument specs with `ArgumentBuilder.range()`,
`.length()` and `.match()`.

Each validator is a Prompt Toolkit `Validator`, so the very same object that
checks a parsed command-line value can guard an interactive prompt:

    session.prompt("size> ", validator=RangeValidator(1, 20))

During parsing the engine calls `check(value)` with the already decoded value.
`check()` raises `prompt_toolkit.validation.ValidationError` on failure and
returns a mapping of auxiliary slot -> captured text (only `RegexValidator`
ever captures anything).

Included Validators:
- RangeValidator: inclusive numeric bounds.
- LengthValidator: inclusive bounds on text length.
- RegexValidator: full-match against a pattern, optionally binding groups.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from argwright.exceptions import RegistrationError


class ArgumentValidator(Validator):
    """Base class for validators that run on decoded argument values."""

    def check(self, value: Any) -> dict[str, Any]:
        raise NotImplementedError

    def convert(self, text: str) -> Any:
        """Turn raw prompt text into the value `check()` expects."""
        return text

    def describe(self) -> str:
        """Short description used in syntax summaries."""
        return ""

    def validate(self, document: Document) -> None:
        text = document.text
        try:
            value = self.convert(text)
        except ValueError:
            raise ValidationError(
                cursor_position=len(text), message=f"Invalid input '{text}'."
            ) from None
        self.check(value)


def _check_bounds(minimum: Any, maximum: Any, what: str) -> None:
    if minimum is not None and maximum is not None and minimum > maximum:
        raise RegistrationError(
            f"Invalid {what}: minimum {minimum!r} is greater than maximum {maximum!r}"
        )


class RangeValidator(ArgumentValidator):
    """Accept numbers between `minimum` and `maximum`, both inclusive.

    Either bound may be None to leave that side open.
    """

    def __init__(self, minimum: float | None = None, maximum: float | None = None):
        if minimum is None and maximum is None:
            raise RegistrationError("A range needs at least one bound")
        _check_bounds(minimum, maximum, "range")
        self.minimum = minimum
        self.maximum = maximum
        super().__init__()

    def convert(self, text: str) -> float:
        text = text.strip()
        try:
            return int(text, 0)
        except ValueError:
            return float(text)

    def _expectation(self) -> str:
        if self.minimum is None:
            return f"a number no greater than {self.maximum}"
        if self.maximum is None:
            return f"a number no less than {self.minimum}"
        return f"a number between {self.minimum} and {self.maximum}"

    def check(self, value: Any) -> dict[str, Any]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(message=f"Value {value!r} is not a number.")
        if (
            (isinstance(value, float) and math.isnan(value))
            or (self.minimum is not None and value < self.minimum)
            or (self.maximum is not None and value > self.maximum)
        ):
            raise ValidationError(
                message=f"Value {value} is out of range. Enter {self._expectation()}."
            )
        return {}

    def describe(self) -> str:
        low = "" if self.minimum is None else self.minimum
        high = "" if self.maximum is None else self.maximum
        return f"range: {low}..{high}"

    def __repr__(self) -> str:
        return f"RangeValidator({self.minimum!r}, {self.maximum!r})"


class LengthValidator(ArgumentValidator):
    """Accept text whose length lies between `minimum` and `maximum`."""

    def __init__(self, minimum: int = 0, maximum: int | None = None):
        if minimum < 0:
            raise RegistrationError(f"Invalid length limit: minimum {minimum} < 0")
        _check_bounds(minimum, maximum, "length limit")
        self.minimum = minimum
        self.maximum = maximum
        super().__init__()

    def check(self, value: Any) -> dict[str, Any]:
        length = len(str(value))
        if length < self.minimum:
            raise ValidationError(
                message=f"Value '{value}' is too short: "
                f"expected at least {self.minimum} characters, got {length}."
            )
        if self.maximum is not None and length > self.maximum:
            raise ValidationError(
                message=f"Value '{value}' is too long: "
                f"expected at most {self.maximum} characters, got {length}."
            )
        return {}

    def describe(self) -> str:
        high = "" if self.maximum is None else self.maximum
        return f"length: {self.minimum}..{high}"

    def __repr__(self) -> str:
        return f"LengthValidator({self.minimum!r}, {self.maximum!r})"


class RegexValidator(ArgumentValidator):
    """
    Accept text that fully matches `pattern`.

    Args:
        pattern (str | re.Pattern): Regular expression the whole value must match.
        message (str): Error shown when the value does not match.
        captures (Mapping[str | int, str] | None): Maps a group name or index to an
            auxiliary destination slot that receives the captured text.
    """

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        message: str = "",
        captures: Mapping[str | int, str] | None = None,
    ):
        try:
            self.pattern = re.compile(pattern)
        except re.error as error:
            raise RegistrationError(f"Invalid pattern {pattern!r}: {error}") from error
        self.message = message
        self.captures: dict[str | int, str] = dict(captures or {})
        for group, slot in self.captures.items():
            if isinstance(group, int):
                known = 0 <= group <= self.pattern.groups
            else:
                known = group in self.pattern.groupindex
            if not known:
                raise RegistrationError(
                    f"Pattern {self.pattern.pattern!r} has no group {group!r} "
                    f"to capture into '{slot}'"
                )
        super().__init__()

    def check(self, value: Any) -> dict[str, Any]:
        text = str(value)
        match = self.pattern.fullmatch(text)
        if match is None:
            raise ValidationError(
                message=self.message
                or f"Value '{text}' does not match pattern '{self.pattern.pattern}'."
            )
        return {slot: match.group(group) for group, slot in self.captures.items()}

    def describe(self) -> str:
        return f"pattern: {self.pattern.pattern}"

    def __repr__(self) -> str:
        return f"RegexValidator({self.pattern.pattern!r})"
