# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical scanning of a raw argument vector.

`TokenScanner` knows nothing about registered arguments. It classifies each
string purely by shape:

- `--`                  → Terminator (first occurrence only); everything after it
                          is a Positional, whatever it looks like.
- `--name`, `--name=v`  → LongOption(name, inline_value)
- `-abc`, `-c=v`        → ShortBundle(chars, inline_value)
- `-`, anything else    → Positional(text)

Splitting a bundle like `-wi5` into `-w -i 5` needs to know which short names
take values, so it is left to the orchestrator. When an option needs a value
that is not attached, the orchestrator calls `take_value()`, which hands back the
next raw string as a `DetachedValue` no matter its shape (so `--offset -5` works).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

TERMINATOR = "--"


@dataclass(frozen=True)
class LongOption:
    name: str
    inline_value: str | None
    raw: str


@dataclass(frozen=True)
class ShortBundle:
    chars: str
    inline_value: str | None
    raw: str


@dataclass(frozen=True)
class DetachedValue:
    text: str


@dataclass(frozen=True)
class Positional:
    text: str


@dataclass(frozen=True)
class Terminator:
    raw: str = TERMINATOR


Token = Union[LongOption, ShortBundle, DetachedValue, Positional, Terminator]


def classify(text: str) -> Token:
    """Classify a single argument string outside of positional-only mode."""
    if text == TERMINATOR:
        return Terminator()
    if text.startswith("--"):
        name, sep, value = text[2:].partition("=")
        return LongOption(name=name, inline_value=value if sep else None, raw=text)
    if text.startswith("-") and len(text) > 1:
        body = text[1:]
        if len(body) > 1 and body[1] == "=":
            return ShortBundle(chars=body[0], inline_value=body[2:], raw=text)
        return ShortBundle(chars=body, inline_value=None, raw=text)
    return Positional(text)


class TokenScanner:
    """
    Lazy, restartable token stream over an argument vector.

    The scanner copies the input, so the caller's list is never touched and the
    stream can be replayed from the start with `restart()`.
    """

    def __init__(self, args: Sequence[str]) -> None:
        self._args: tuple[str, ...] = tuple(args)
        self._index = 0
        self.terminated = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._index >= len(self._args):
            raise StopIteration
        text = self._args[self._index]
        self._index += 1
        if self.terminated:
            return Positional(text)
        token = classify(text)
        if isinstance(token, Terminator):
            self.terminated = True
        return token

    def take_value(self) -> DetachedValue | None:
        """Consume the next raw string as an option value, or None at end of input."""
        if self._index >= len(self._args):
            return None
        text = self._args[self._index]
        self._index += 1
        return DetachedValue(text)

    def restart(self) -> None:
        self._index = 0
        self.terminated = False

    @property
    def position(self) -> int:
        """Index of the next raw string to be scanned."""
        return self._index

    def __len__(self) -> int:
        return len(self._args)


def scan(args: Sequence[str]) -> list[Token]:
    """Scan the whole vector eagerly, treating every string as a token."""
    return list(TokenScanner(args))
