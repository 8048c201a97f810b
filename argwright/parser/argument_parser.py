# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the single-use orchestrator that turns
one argument vector into a `ParseResult` against an `ArgumentRegistry`.

A run walks a small state machine:

    SCANNING → RESOLVING → ASSIGNING → VALIDATING → GROUP_CHECKING → SUCCEEDED
                                 (any failure) ────────────────────→ FAILED

- RESOLVING: tokens are pulled from the `TokenScanner`. Named and incremental
  options are resolved (with abbreviation) and decoded immediately; positional
  values are buffered, because how many there are is only known at the end.
- ASSIGNING: buffered values are matched to positional specs in order.
- VALIDATING: mandatory named options are checked and defaults are filled in.
- GROUP_CHECKING: every group policy is checked against the supplied arguments.

The first error aborts the run. Slots are collected in the run's private state
and only handed to the caller (and optionally written onto a namespace) once the
run has succeeded, so a failed parse never leaves partial writes behind.
"""
from __future__ import annotations

import re
from copy import deepcopy
from typing import TYPE_CHECKING, Any, Sequence

from prompt_toolkit.validation import ValidationError

from argwright.exceptions import (
    ArgumentParseError,
    DuplicateNamedArgumentError,
    MissingMandatoryArgumentError,
    MissingValueError,
    TypeCoercionError,
    UnexpectedValueError,
    UnknownOptionError,
    ValidationFailedError,
)
from argwright.logger import logger
from argwright.parser.argument import MISSING, ArgumentSpec
from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.parser_types import (
    ParseResult,
    ParserConfig,
    ParsePhase,
    ParseState,
)
from argwright.parser.positional import assign_positionals
from argwright.parser.tokens import (
    LongOption,
    Positional,
    ShortBundle,
    Terminator,
    TokenScanner,
)
from argwright.parser.utils import coerce_value, is_text_type

if TYPE_CHECKING:
    from argwright.parser.registry import ArgumentRegistry

_NEGATIVE_NUMBER = re.compile(
    r"-(0[box][0-9a-f_]+|\d[\d_]*(\.\d*)?(e[+-]?\d+)?|\.\d+(e[+-]?\d+)?)",
    re.IGNORECASE,
)


class ArgumentParser:
    """
    Runs exactly one parse of an argument vector against a registry.

    Instances are created by `ArgumentRegistry.parse()`; a second call to `run()`
    on the same instance raises `RuntimeError`.

    Args:
        registry (ArgumentRegistry): The specs to parse against. Sealed on run.
        config (ParserConfig | None): Parse options.
    """

    def __init__(
        self, registry: ArgumentRegistry, config: ParserConfig | None = None
    ) -> None:
        self.registry = registry
        self.config: ParserConfig = config or ParserConfig()
        self.state: ParseState | None = None

    @property
    def phase(self) -> ParsePhase | None:
        return self.state.phase if self.state else None

    def run(self, args: Sequence[str], namespace: Any = None) -> ParseResult:
        """
        Parse `args` and return the populated slots.

        Raises:
            ArgumentParseError: The first user-input error encountered.
            RuntimeError: If this parser has already run.
        """
        if self.state is not None:
            raise RuntimeError(
                "ArgumentParser instances are single-use; call registry.parse() again"
            )
        self.registry.seal()
        self.state = ParseState(scanner=TokenScanner(args))
        logger.debug("Parsing %d argument(s): %s", len(args), list(args))
        try:
            self._resolve_tokens()
            self._transition(ParsePhase.ASSIGNING)
            trailing = self._assign_positionals()
            self._transition(ParsePhase.VALIDATING)
            self._apply_defaults()
            self._transition(ParsePhase.GROUP_CHECKING)
            for group in self.registry.groups:
                group.check(self.state.supplied)
        except ArgumentParseError as error:
            self._transition(ParsePhase.FAILED)
            logger.debug("Parse failed: %r", error)
            raise

        result = ParseResult(
            values=dict(self.state.values),
            indicators={
                spec.indicator: spec.canonical in self.state.supplied
                for spec in self.registry.arguments
                if spec.indicator is not None
            },
            trailing=trailing,
            supplied=frozenset(self.state.supplied),
        )
        self._transition(ParsePhase.SUCCEEDED)
        if namespace is not None:
            result.apply_to(namespace)
        return result

    def _transition(self, phase: ParsePhase) -> None:
        assert self.state is not None, "run() must create the parse state"
        logger.debug("Parse phase %s -> %s", self.state.phase.value, phase.value)
        self.state.phase = phase

    def _resolve_tokens(self) -> None:
        assert self.state is not None
        self._transition(ParsePhase.RESOLVING)
        for token in self.state.scanner:
            if isinstance(token, Terminator):
                logger.debug("Terminator seen; remaining arguments are positional")
            elif isinstance(token, LongOption):
                self._handle_long(token)
            elif isinstance(token, ShortBundle):
                self._handle_short(token)
            elif isinstance(token, Positional):
                self.state.positional_buffer.append(token.text)

    def _handle_long(self, token: LongOption) -> None:
        if not token.name or token.name.startswith("-"):
            raise UnknownOptionError(
                f"Unrecognized option '{token.raw}'.", token=token.raw
            )
        spec = self.registry.resolve_long(token.name)
        self._dispatch(spec, token.inline_value, f"--{spec.canonical}")

    def _handle_short(self, token: ShortBundle) -> None:
        assert self.state is not None
        chars = token.chars
        if (
            token.inline_value is None
            and self.registry.resolve_short(chars[0]) is None
            and _NEGATIVE_NUMBER.fullmatch(token.raw)
        ):
            self.state.positional_buffer.append(token.raw)
            return

        for index, char in enumerate(chars):
            spec = self.registry.resolve_short(char)
            if spec is None:
                raise UnknownOptionError(
                    f"Unrecognized option '-{char}'.", token=token.raw
                )
            rest = chars[index + 1 :]
            if spec.takes_value:
                if rest:
                    value: str | None = rest[1:] if rest.startswith("=") else rest
                else:
                    value = token.inline_value
                self._dispatch(spec, value, f"-{char}")
                return
            if rest.startswith("="):
                raise UnexpectedValueError(
                    f"Option '-{char}' does not take a value.",
                    token=token.raw,
                    spec=spec.canonical,
                )
            if not rest and token.inline_value is not None:
                raise UnexpectedValueError(
                    f"Option '-{char}' does not take a value.",
                    token=token.raw,
                    spec=spec.canonical,
                )
            self._dispatch(spec, None, f"-{char}")

    def _dispatch(self, spec: ArgumentSpec, value: str | None, shown: str) -> None:
        """Apply one occurrence of a named or incremental option."""
        assert self.state is not None
        logger.debug("Resolved %s to '%s'", shown, spec.canonical)

        if spec.kind is ArgumentKind.INCREMENTAL:
            if value is not None:
                raise UnexpectedValueError(
                    f"Option '{shown}' does not take a value.",
                    token=shown,
                    spec=spec.canonical,
                )
            self.state.values[spec.dest] = (
                self.state.values.get(spec.dest, spec.default) + 1
            )
            self.state.mark_supplied(spec)
            return

        if spec.canonical in self.state.supplied:
            raise DuplicateNamedArgumentError(
                f"Option '{shown}' was given more than once.",
                token=shown,
                spec=spec.canonical,
            )

        if not spec.takes_value:
            if value is not None:
                raise UnexpectedValueError(
                    f"Option '{shown}' does not take a value.",
                    token=shown,
                    spec=spec.canonical,
                )
            self.state.values[spec.dest] = True
        else:
            if value is None:
                detached = self.state.scanner.take_value()
                if detached is None:
                    raise MissingValueError(
                        f"Option '{shown}' requires a value.",
                        token=shown,
                        spec=spec.canonical,
                    )
                value = detached.text
            self._store(spec, value)
        self.state.mark_supplied(spec)

    def _store(self, spec: ArgumentSpec, text: str) -> None:
        """Decode and validate `text`, then record it in the parse state."""
        assert self.state is not None
        try:
            decoded = coerce_value(text, spec.type, spec.radix)
        except ValueError as error:
            raise TypeCoercionError(
                f"Invalid value for '{spec.display_name()}': {error}",
                token=text,
                spec=spec.canonical,
            ) from error
        except ArgumentParseError as error:
            error.spec = spec.canonical
            raise

        # Text and path validators see the argument exactly as typed.
        checked = text if is_text_type(spec.type) else decoded
        captured: dict[str, Any] = {}
        for validator in spec.validators:
            try:
                captured.update(validator.check(checked))
            except ValidationError as error:
                if getattr(validator, "message", ""):
                    message = error.message
                else:
                    message = f"Invalid value for '{spec.display_name()}': {error.message}"
                raise ValidationFailedError(
                    message, token=text, spec=spec.canonical
                ) from error

        self.state.values[spec.dest] = decoded
        self.state.values.update(captured)

    def _assign_positionals(self) -> list[str]:
        assert self.state is not None

        def consume(spec: ArgumentSpec, text: str) -> None:
            self._store(spec, text)
            self.state.mark_supplied(spec)  # type: ignore[union-attr]

        outcome = assign_positionals(
            self.registry.positionals,
            self.state.positional_buffer,
            consume,
            allow_trailing=self.config.allow_trailing_positional,
        )
        return outcome.trailing

    def _apply_defaults(self) -> None:
        assert self.state is not None
        for spec in self.registry.arguments:
            if spec.canonical in self.state.supplied:
                continue
            if spec.kind is ArgumentKind.NAMED and spec.mandatory:
                raise MissingMandatoryArgumentError(
                    f"Missing required option '{spec.display_name()}'.",
                    spec=spec.canonical,
                )
            if spec.default is not MISSING:
                self.state.values[spec.dest] = deepcopy(spec.default)
