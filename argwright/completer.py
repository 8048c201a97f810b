# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArgumentCompleter`, a Prompt Toolkit completer driven by an
`ArgumentRegistry`.

This completer supports:
- Long option completion (`--si` → `--size`), skipping options already given
- Enumerated value completion after an option that takes one
  (`--format p` → `--format png`), including the `--format=p` form
- Quoting completions that contain whitespace

Suggestions come from the same name sets the abbreviation resolver matches
against, so anything offered here is accepted by `ArgumentRegistry.parse()`.
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from argwright.exceptions import ArgumentParseError
from argwright.parser.argument import ArgumentSpec
from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.tokens import TERMINATOR

if TYPE_CHECKING:
    from argwright.parser.registry import ArgumentRegistry


class ArgumentCompleter(Completer):
    """
    Prompt Toolkit completer for command lines parsed by an `ArgumentRegistry`.

    Args:
        registry (ArgumentRegistry): The argument specs to complete against.
    """

    def __init__(self, registry: ArgumentRegistry):
        self.registry = registry

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = not text or text.endswith((" ", "\t"))
        args = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]
        yield from self._yield_lcp_completions(self.suggest_next(args, stub), stub)

    def _lookup(self, text: str) -> ArgumentSpec | None:
        """Resolve an option token without raising, for completion purposes."""
        if text.startswith("--"):
            name = text[2:].partition("=")[0]
            try:
                return self.registry.resolve_long(name)
            except ArgumentParseError:
                return None
        if text.startswith("-") and len(text) == 2:
            return self.registry.resolve_short(text[1])
        return None

    def suggest_next(self, args: list[str], stub: str = "") -> list[str]:
        """
        Return the candidate texts for the token being typed.

        Args:
            args (list[str]): The complete tokens before the cursor.
            stub (str): The partial token under the cursor.
        """
        if TERMINATOR in args:
            return []

        supplied: set[str] = set()
        pending: ArgumentSpec | None = None
        for arg in args:
            if pending is not None:
                pending = None
                continue
            spec = self._lookup(arg)
            if spec is None:
                continue
            supplied.add(spec.canonical)
            if spec.takes_value and "=" not in arg:
                pending = spec

        if pending is not None:
            return pending.choices or []

        if stub.startswith("--") and "=" in stub:
            option, _, _ = stub.partition("=")
            spec = self._lookup(option)
            if spec is None or not spec.choices:
                return []
            return [f"{option}={choice}" for choice in spec.choices]

        if stub and not stub.startswith("-"):
            return []
        suggestions = []
        for spec in self.registry.named_arguments:
            if not spec.documented:
                continue
            if spec.canonical in supplied and spec.kind is not ArgumentKind.INCREMENTAL:
                continue
            suggestions.extend(f"--{name}" for name in spec.long_names)
        return suggestions

    def _ensure_quote(self, text: str) -> str:
        """Quote a suggestion that contains whitespace."""
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(
        self, suggestions: list[str], stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
