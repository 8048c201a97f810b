# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads an `ArgumentRegistry` definition from a YAML or TOML file.

Example (YAML):

    program: resize
    description: Resize an image.
    arguments:
      - name: file
        kind: positional
        description: Image to resize
      - name: size
        type: int
        default: 10
        short: s
        range: [1, 20]
      - name: format
        type: choice
        choices: [png, jpeg, webp]
        default: png
      - name: verbose
        kind: incremental
        short: v
    groups:
      - name: output
        policy: mutually-exclusive
        members: [json, table]
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from argwright.exceptions import ArgwrightError, ConfigError
from argwright.logger import logger
from argwright.parser.argument import MISSING
from argwright.parser.argument_kind import ArgumentKind
from argwright.parser.groups import GroupPolicy
from argwright.parser.parser_types import ParserConfig
from argwright.parser.registry import ArgumentRegistry
from argwright.parser.utils import Unsigned, coerce_value

TYPE_NAMES: dict[str, Any] = {
    "str": str,
    "int": int,
    "uint": Unsigned,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class RawArgument(BaseModel):
    """One argument entry of a registry definition file."""

    name: str
    kind: ArgumentKind = ArgumentKind.NAMED
    dest: str | None = None
    type: str = "str"
    choices: list[str] = Field(default_factory=list)
    default: Any = None
    start: int = 0
    indicator: str | None = None
    description: str = ""
    short: list[str] = Field(default_factory=list)
    radix: int | None = None
    range: tuple[int | float | None, int | float | None] | None = None
    length: tuple[int, int | None] | None = None
    match: str | None = None
    message: str = ""
    captures: dict[str, str] = Field(default_factory=dict)
    documented: bool = True

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @field_validator("short", mode="before")
    @classmethod
    def validate_short(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("captures", mode="before")
    @classmethod
    def validate_captures(cls, value: Any) -> dict[str, str]:
        if isinstance(value, dict):
            return {str(group): slot for group, slot in value.items()}
        return value

    @model_validator(mode="after")
    def validate_type(self) -> RawArgument:
        if self.type == "choice":
            if not self.choices:
                raise ValueError(f"Argument '{self.name}': type 'choice' needs choices")
        elif self.type not in TYPE_NAMES:
            valid = ", ".join([*TYPE_NAMES, "choice"])
            raise ValueError(
                f"Argument '{self.name}': unknown type '{self.type}'. "
                f"Must be one of: {valid}"
            )
        elif self.choices:
            raise ValueError(
                f"Argument '{self.name}': choices are only allowed with type 'choice'"
            )
        return self

    def get_type(self) -> Any:
        if self.type == "choice":
            return Literal[tuple(self.choices)]  # type: ignore[valid-type]
        return TYPE_NAMES[self.type]

    def get_default(self) -> Any:
        if "default" not in self.model_fields_set:
            return MISSING
        target_type = self.get_type()
        if isinstance(self.default, str) and target_type is not str:
            try:
                return coerce_value(self.default, target_type, self.radix or 10)
            except (ValueError, ArgwrightError) as error:
                raise ConfigError(
                    f"Argument '{self.name}': invalid default {self.default!r}: {error}"
                ) from error
        return self.default

    def get_captures(self) -> dict[str | int, str]:
        return {
            int(group) if group.isdigit() else group: slot
            for group, slot in self.captures.items()
        }

    def register(self, registry: ArgumentRegistry) -> None:
        if self.kind is ArgumentKind.INCREMENTAL:
            builder = registry.incremental(
                self.name,
                self.dest,
                start=self.start,
                indicator=self.indicator,
                description=self.description,
            )
        else:
            register = (
                registry.positional
                if self.kind is ArgumentKind.POSITIONAL
                else registry.named
            )
            builder = register(
                self.name,
                self.dest,
                type=self.get_type(),
                default=self.get_default(),
                indicator=self.indicator,
                description=self.description,
            )
        for short in self.short:
            builder.short(short)
        if self.radix is not None:
            builder.radix(self.radix)
        if self.range is not None:
            builder.range(*self.range)
        if self.length is not None:
            builder.length(*self.length)
        if self.match is not None:
            builder.match(self.match, self.message, self.get_captures())
        if not self.documented:
            builder.undocumented()


class RawGroup(BaseModel):
    """One group entry of a registry definition file."""

    name: str
    policy: GroupPolicy
    members: list[str]

    @field_validator("policy", mode="before")
    @classmethod
    def validate_policy(cls, value: Any) -> GroupPolicy:
        if isinstance(value, GroupPolicy):
            return value
        return GroupPolicy(value)


class RegistryConfig(BaseModel):
    """Argwright registry definition model."""

    program: str = ""
    description: str = ""
    epilog: str = ""
    allow_trailing_positional: bool = False
    arguments: list[RawArgument] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)

    def to_registry(self) -> ArgumentRegistry:
        registry = ArgumentRegistry(
            program=self.program, description=self.description, epilog=self.epilog
        )
        try:
            for argument in self.arguments:
                argument.register(registry)
            for group in self.groups:
                registry.group(group.name, group.policy, *group.members)
        except ConfigError:
            raise
        except ArgwrightError as error:
            raise ConfigError(f"Invalid registry definition: {error}") from error
        return registry

    def parser_config(self) -> ParserConfig:
        return ParserConfig(allow_trailing_positional=self.allow_trailing_positional)


def loader(file_path: Path | str) -> RegistryConfig:
    """
    Load a registry definition from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        RegistryConfig: The validated definition.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, cannot
            be parsed, or does not describe a valid registry.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "program: 'resize'\n"
            "arguments:\n"
            "  - name: 'size'\n"
            "    type: 'int'\n"
            "    default: 10"
        )

    try:
        config = RegistryConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid registry definition in {path}:\n{error}") from error
    logger.debug(
        "Loaded %d argument(s) and %d group(s) from %s",
        len(config.arguments),
        len(config.groups),
        path,
    )
    return config


def load_registry(file_path: Path | str) -> tuple[ArgumentRegistry, RegistryConfig]:
    """Load a definition file and build its registry."""
    config = loader(file_path)
    return config.to_registry(), config


def find_config() -> Path | None:
    """Return the first registry definition found in the usual locations."""
    candidates = [
        Path.cwd() / "argwright.yaml",
        Path.cwd() / "argwright.toml",
        Path(os.environ.get("ARGWRIGHT_CONFIG", "argwright.yaml")),
        Path.home() / ".config" / "argwright" / "argwright.yaml",
        Path.home() / ".config" / "argwright" / "argwright.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)
