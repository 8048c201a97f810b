# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentRegistry`, the table of argument specs a program
declares before parsing, and `ArgumentBuilder`, the fluent handle returned by
each registration call.

Registration fails fast: duplicate names, clashing slots, malformed validators
and impossible orderings raise `RegistrationError` immediately, never at parse
time. Once the first parse starts the registry is sealed and can be shared by
any number of later parses.

Public Interface:
- `positional(...)`, `named(...)`, `incremental(...)`: Register an argument and
  return its `ArgumentBuilder`.
- `group(...)`: Declare a membership policy over registered arguments.
- `parse(...)`: Parse an argument vector into a `ParseResult`.
- `summary()` / `render_help()`: Plain-text and Rich syntax summaries.

Example Usage:
    registry = ArgumentRegistry(program="resize")
    registry.positional("file", description="Image to resize")
    registry.named("size", type=int, default=10).short("s").range(1, 20)
    registry.incremental("verbose").short("v")

    result = registry.parse(["-vv", "--size", "0x10", "cat.png"])
    # result.values == {'size': 16, 'verbose': 2, 'file': 'cat.png'}
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

from rich.console import Console

from argwright.exceptions import RegistrationError
from argwright.logger import logger
from argwright.parser.abbreviation import resolve_abbreviation
from argwright.parser.argument import MISSING, ArgumentSpec
from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.argument_parser import ArgumentParser
from argwright.parser.groups import ArgumentGroup, GroupPolicy
from argwright.parser.parser_types import ParserConfig, ParseResult
from argwright.parser.summary import build_summary, render_summary
from argwright.parser.utils import (
    RADIXES,
    is_integer_type,
    is_numeric_type,
    is_text_type,
)
from argwright.validators import (
    ArgumentValidator,
    LengthValidator,
    RangeValidator,
    RegexValidator,
)


class ArgumentBuilder:
    """
    Fluent configuration handle for one registered argument.

    Every method returns the builder itself so calls can be chained:

        registry.named("level", type=int).short("l").radix(16).range(0, 0xFF)
    """

    def __init__(self, registry: ArgumentRegistry, spec: ArgumentSpec) -> None:
        self._registry = registry
        self.spec = spec

    def short(self, name: str) -> ArgumentBuilder:
        """Add a single-character short name, used as `-n`."""
        self._registry._ensure_open()
        if self.spec.positional:
            raise RegistrationError(
                f"Positional argument '{self.spec.canonical}' cannot have short names"
            )
        if not isinstance(name, str) or len(name) != 1:
            raise RegistrationError(f"Short name {name!r} must be a single character")
        self._registry._claim_name(name, self.spec)
        self.spec.names.append(name)
        return self

    def describe(self, description: str) -> ArgumentBuilder:
        self._registry._ensure_open()
        self.spec.description = description.strip()
        return self

    def validator(self, validator: ArgumentValidator) -> ArgumentBuilder:
        """Attach a validator; validators run in the order they are attached."""
        self._registry._ensure_open()
        if not isinstance(validator, ArgumentValidator):
            raise RegistrationError(
                f"Validator for '{self.spec.canonical}' must be an ArgumentValidator, "
                f"got {type(validator).__name__}"
            )
        if not self.spec.takes_value:
            raise RegistrationError(
                f"Argument '{self.spec.canonical}' takes no value and cannot be validated"
            )
        owner = f"capture of '{self.spec.canonical}'"
        slots = list(getattr(validator, "captures", {}).values())
        if len(set(slots)) != len(slots):
            raise RegistrationError(f"Duplicate slot in {owner}: {slots}")
        for slot in slots:
            self._registry._check_slot(slot, owner)
        for slot in slots:
            self._registry._claim_slot(slot, owner)
        self.spec.validators.append(validator)
        return self

    def range(
        self, minimum: float | None = None, maximum: float | None = None
    ) -> ArgumentBuilder:
        """Accept only values between `minimum` and `maximum`, inclusive."""
        if not is_numeric_type(self.spec.type):
            raise RegistrationError(
                f"range() needs a numeric argument, '{self.spec.canonical}' is "
                f"{self.spec.get_type_text()}"
            )
        return self.validator(RangeValidator(minimum, maximum))

    def length(self, minimum: int = 0, maximum: int | None = None) -> ArgumentBuilder:
        """Accept only text between `minimum` and `maximum` characters long."""
        if not is_text_type(self.spec.type):
            raise RegistrationError(
                f"length() needs a text argument, '{self.spec.canonical}' is "
                f"{self.spec.get_type_text()}"
            )
        return self.validator(LengthValidator(minimum, maximum))

    def match(
        self,
        pattern: str,
        message: str = "",
        captures: Mapping[str | int, str] | None = None,
    ) -> ArgumentBuilder:
        """
        Accept only text fully matching `pattern`.

        `captures` binds regex groups (by name or index) to auxiliary slots that
        receive the captured text when the value matches.
        """
        if not is_text_type(self.spec.type):
            raise RegistrationError(
                f"match() needs a text argument, '{self.spec.canonical}' is "
                f"{self.spec.get_type_text()}"
            )
        return self.validator(RegexValidator(pattern, message, captures))

    def radix(self, base: int) -> ArgumentBuilder:
        """Set the default base for integer values (2, 8, 10 or 16)."""
        self._registry._ensure_open()
        if not is_integer_type(self.spec.type):
            raise RegistrationError(
                f"radix() needs an integer argument, '{self.spec.canonical}' is "
                f"{self.spec.get_type_text()}"
            )
        if base not in RADIXES:
            raise RegistrationError(
                f"Invalid radix {base!r}: must be one of {', '.join(map(str, RADIXES))}"
            )
        self.spec.radix = base
        return self

    def undocumented(self) -> ArgumentBuilder:
        """Hide the argument from syntax summaries; it still parses normally."""
        self._registry._ensure_open()
        self.spec.documented = False
        return self

    def __repr__(self) -> str:
        return f"ArgumentBuilder({self.spec})"


class ArgumentRegistry:
    """
    Ordered table of argument specs and groups.

    Registration order fixes the order positional arguments are matched in,
    the order groups are checked in, and the order of the syntax summary.

    Args:
        program (str): Program name used in the usage line.
        description (str): Text shown under the usage line.
        epilog (str): Text shown at the end of the summary.
    """

    def __init__(self, program: str = "", description: str = "", epilog: str = ""):
        self.program: str = program
        self.description: str = description
        self.epilog: str = epilog
        self._arguments: list[ArgumentSpec] = []
        self._positional: list[ArgumentSpec] = []
        self._named: list[ArgumentSpec] = []
        self._name_map: dict[str, ArgumentSpec] = {}
        self._long_map: dict[str, ArgumentSpec] = {}
        self._short_map: dict[str, ArgumentSpec] = {}
        self._slots: dict[str, str] = {}
        self._groups: list[ArgumentGroup] = []
        self._sealed: bool = False

    @property
    def arguments(self) -> tuple[ArgumentSpec, ...]:
        return tuple(self._arguments)

    @property
    def positionals(self) -> tuple[ArgumentSpec, ...]:
        return tuple(self._positional)

    @property
    def named_arguments(self) -> tuple[ArgumentSpec, ...]:
        """Named and incremental specs, in declaration order."""
        return tuple(self._named)

    @property
    def groups(self) -> tuple[ArgumentGroup, ...]:
        return tuple(self._groups)

    @property
    def long_names(self) -> list[str]:
        return list(self._long_map)

    def _ensure_open(self) -> None:
        if self._sealed:
            raise RegistrationError(
                "The registry is sealed: arguments cannot be changed after parsing"
            )

    def _validate_name(self, name: Any) -> str:
        if not isinstance(name, str) or not name:
            raise RegistrationError(f"Argument name {name!r} must be a non-empty string")
        if name.startswith("-"):
            raise RegistrationError(
                f"Argument name '{name}' must be given without leading dashes"
            )
        if "=" in name or any(char.isspace() for char in name):
            raise RegistrationError(
                f"Argument name '{name}' must not contain '=' or whitespace"
            )
        return name

    def _check_name(self, name: str, spec: ArgumentSpec) -> None:
        self._validate_name(name)
        if name in self._name_map:
            existing = self._name_map[name]
            raise RegistrationError(
                f"Name '{name}' is already used by argument '{existing.canonical}'"
            )
        if spec.kind.is_named and len(name) == 1 and (name.isdigit() or name == "."):
            raise RegistrationError(
                f"Short name '{name}' would be confused with a negative number"
            )

    def _claim_name(self, name: str, spec: ArgumentSpec) -> None:
        self._check_name(name, spec)
        self._name_map[name] = spec
        if spec.kind.is_named:
            if len(name) == 1:
                self._short_map[name] = spec
            else:
                self._long_map[name] = spec

    def _check_slot(self, slot: Any, owner: str) -> None:
        if not isinstance(slot, str) or not slot.isidentifier():
            raise RegistrationError(
                f"Slot {slot!r} for {owner} must be a valid identifier "
                "(letters, digits, and underscores only)"
            )
        if slot in self._slots:
            raise RegistrationError(
                f"Slot '{slot}' for {owner} is already used by {self._slots[slot]}"
            )

    def _claim_slot(self, slot: Any, owner: str) -> None:
        self._check_slot(slot, owner)
        self._slots[slot] = owner

    def _get_dest(self, name: str, dest: str | None) -> str:
        return dest if dest is not None else name.replace("-", "_")

    def _register(self, spec: ArgumentSpec) -> ArgumentBuilder:
        owner = f"argument '{spec.canonical}'"
        self._check_name(spec.canonical, spec)
        self._check_slot(spec.dest, owner)
        if spec.indicator is not None:
            if spec.indicator == spec.dest:
                raise RegistrationError(
                    f"Indicator of '{spec.canonical}' cannot share its destination slot"
                )
            self._check_slot(spec.indicator, f"indicator of '{spec.canonical}'")

        self._claim_name(spec.canonical, spec)
        self._claim_slot(spec.dest, owner)
        if spec.indicator is not None:
            self._claim_slot(spec.indicator, f"indicator of '{spec.canonical}'")
        self._arguments.append(spec)
        if spec.positional:
            self._positional.append(spec)
        else:
            self._named.append(spec)
        logger.debug("Registered %s", spec)
        return ArgumentBuilder(self, spec)

    def positional(
        self,
        name: str,
        dest: str | None = None,
        *,
        type: Any = str,
        default: Any = MISSING,
        indicator: str | None = None,
        description: str = "",
    ) -> ArgumentBuilder:
        """
        Register a positional argument.

        Positional arguments are matched in registration order. An argument
        without a default is mandatory, and every mandatory positional argument
        must be registered before the first optional one.

        Args:
            name (str): Canonical name, shown in summaries and messages.
            dest (str | None): Destination slot; defaults to `name` with dashes
                replaced by underscores.
            type (Any): Destination semantic type.
            default (Any): Value used when the argument is absent.
            indicator (str | None): Slot recording whether the argument was given.
            description (str): Help text.
        """
        self._ensure_open()
        if type is bool:
            raise RegistrationError(
                f"Positional argument '{name}' cannot be a boolean flag"
            )
        if default is MISSING:
            optional = next((spec for spec in self._positional if not spec.mandatory), None)
            if optional is not None:
                raise RegistrationError(
                    f"Mandatory positional argument '{name}' cannot follow "
                    f"optional positional argument '{optional.canonical}'"
                )
        spec = ArgumentSpec(
            kind=ArgumentKind.POSITIONAL,
            names=[self._validate_name(name)],
            dest=self._get_dest(name, dest),
            type=type,
            default=default,
            indicator=indicator,
            description=description.strip(),
        )
        return self._register(spec)

    def named(
        self,
        name: str,
        dest: str | None = None,
        *,
        type: Any = str,
        default: Any = MISSING,
        indicator: str | None = None,
        description: str = "",
    ) -> ArgumentBuilder:
        """
        Register a named argument (`--name value`, `-n value`, or a flag).

        With `type=bool` the argument is a presence flag: it takes no value,
        defaults to False and is never mandatory. Otherwise an argument without
        a default is mandatory. A single-character `name` is a short-only option.
        """
        self._ensure_open()
        if type is bool:
            if default is MISSING:
                default = False
            elif not isinstance(default, bool):
                raise RegistrationError(
                    f"Default value {default!r} for flag '{name}' must be a boolean"
                )
        spec = ArgumentSpec(
            kind=ArgumentKind.NAMED,
            names=[self._validate_name(name)],
            dest=self._get_dest(name, dest),
            type=type,
            default=default,
            indicator=indicator,
            description=description.strip(),
        )
        return self._register(spec)

    def incremental(
        self,
        name: str,
        dest: str | None = None,
        *,
        start: int = 0,
        indicator: str | None = None,
        description: str = "",
    ) -> ArgumentBuilder:
        """Register a counter incremented each time the option appears (`-vvv`)."""
        self._ensure_open()
        if isinstance(start, bool) or not isinstance(start, int):
            raise RegistrationError(
                f"Start value {start!r} for counter '{name}' must be an integer"
            )
        spec = ArgumentSpec(
            kind=ArgumentKind.INCREMENTAL,
            names=[self._validate_name(name)],
            dest=self._get_dest(name, dest),
            type=int,
            default=start,
            indicator=indicator,
            description=description.strip(),
        )
        return self._register(spec)

    def group(
        self, name: str, policy: GroupPolicy | str, *members: str
    ) -> ArgumentGroup:
        """
        Declare a group over already registered arguments.

        Args:
            name (str): Group name used in messages and summaries.
            policy (GroupPolicy | str): Membership policy.
            *members (str): Names of the member arguments, in the order the
                policy should consider them.
        """
        self._ensure_open()
        if not isinstance(policy, GroupPolicy):
            try:
                policy = GroupPolicy(policy)
            except ValueError as error:
                raise RegistrationError(str(error)) from error
        if any(group.name == name for group in self._groups):
            raise RegistrationError(f"Group '{name}' is already defined")
        if not members:
            raise RegistrationError(f"Group '{name}' needs at least one member")
        canonical: list[str] = []
        for member in members:
            spec = self._name_map.get(member)
            if spec is None:
                raise RegistrationError(
                    f"Group '{name}' refers to unknown argument '{member}'"
                )
            if spec.canonical in canonical:
                raise RegistrationError(
                    f"Group '{name}' lists argument '{spec.canonical}' twice"
                )
            canonical.append(spec.canonical)
        group = ArgumentGroup(name=name, policy=policy, members=tuple(canonical))
        self._groups.append(group)
        logger.debug("Registered group %s", group)
        return group

    def get_argument(self, name: str) -> ArgumentSpec | None:
        """Return the ArgumentSpec owning `name` (canonical or short), if any."""
        return self._name_map.get(name)

    def resolve_long(self, fragment: str) -> ArgumentSpec:
        """
        Resolve a possibly abbreviated long option name.

        Raises:
            AmbiguousAbbreviationError, UnknownOptionError
        """
        return self._long_map[resolve_abbreviation(fragment, self._long_map, "option")]

    def resolve_short(self, name: str) -> ArgumentSpec | None:
        return self._short_map.get(name)

    def seal(self) -> None:
        if not self._sealed:
            logger.debug("Sealing registry with %d argument(s)", len(self._arguments))
        self._sealed = True

    def parse(
        self,
        args: Sequence[str] | None = None,
        config: ParserConfig | None = None,
        namespace: Any = None,
    ) -> ParseResult:
        """
        Parse an argument vector (without the program name).

        Args:
            args: The command-line strings to parse.
            config: Parse options; defaults to `ParserConfig()`.
            namespace: Optional object whose attributes receive the slots, only
                once the whole parse has succeeded.

        Returns:
            ParseResult: The populated slots.

        Raises:
            ArgumentParseError: The first user-input error encountered.
        """
        return ArgumentParser(self, config).run(args or [], namespace)

    def summary(self, program: str | None = None) -> str:
        """Return the plain-text syntax summary."""
        return build_summary(self, program)

    def render_help(self, console: Console | None = None) -> None:
        """Print the syntax summary with Rich."""
        render_summary(self, console)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """Convert argument metadata into a serializable list of dicts."""
        return [
            {
                "kind": str(spec.kind),
                "names": list(spec.names),
                "dest": spec.dest,
                "type": spec.get_type_text(),
                "mandatory": spec.mandatory,
                "default": None if spec.default is MISSING else spec.default,
                "indicator": spec.indicator,
                "description": spec.description,
                "documented": spec.documented,
                "radix": spec.radix,
                "validators": [repr(validator) for validator in spec.validators],
            }
            for spec in self._arguments
        ]

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __str__(self) -> str:
        mandatory = sum(spec.mandatory for spec in self._arguments)
        return (
            f"ArgumentRegistry(args={len(self._arguments)}, "
            f"positional={len(self._positional)}, named={len(self._named)}, "
            f"mandatory={mandatory}, groups={len(self._groups)})"
        )

    def __repr__(self) -> str:
        return str(self)
