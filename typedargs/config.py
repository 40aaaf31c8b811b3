# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration file loader for typedargs parsers.

A declaration file describes one `ArgumentParser` in YAML or TOML:

    command: shipyard
    description: Create new space ship(s)
    combine_switches: true
    arguments:
      - dest: speed
        name: -s
        type: float
        alt_switches: [--speed]
        default: 1000.0
        accept: ">0<299792458"

The document shape is validated with pydantic; the argument rules themselves
(names, actions, nargs, defaults, acceptance sets) are enforced by
`ArgumentParser` and surface as `ArgumentError`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from typedargs.logger import logger
from typedargs.parser.argument import Argument
from typedargs.parser.argument_action import ArgumentAction
from typedargs.parser.argument_parser import ArgumentParser
from typedargs.parser.values import ValueType

Scalar = bool | int | float | str


class ArgumentConfig(BaseModel):
    """One argument entry of a declaration file."""

    dest: str
    name: str
    type: ValueType = ValueType.STRING
    action: ArgumentAction = ArgumentAction.DEFAULT
    alt_switches: list[str] = Field(default_factory=list)
    nargs: int = 1
    help: str = ""
    default: Scalar | list[Scalar] | None = None
    accept: str | list[str] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType:
        if isinstance(value, ValueType):
            return value
        return ValueType(value)

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: Any) -> ArgumentAction:
        if isinstance(value, ArgumentAction):
            return value
        return ArgumentAction(value)

    @field_validator("alt_switches", mode="before")
    @classmethod
    def validate_alt_switches(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def apply(self, parser: ArgumentParser) -> Argument:
        """Register this argument on `parser`, then its acceptance set and defaults."""
        argument = parser.add_argument(
            dest=self.dest,
            name=self.name,
            help=self.help,
            value_type=self.type,
            action=self.action,
            alt_switches=self.alt_switches,
            nargs=self.nargs,
        )
        if self.accept is not None:
            argument.set_accept_set(self.accept)
        if isinstance(self.default, list):
            argument.set_default_vals(self.default)
        elif self.default is not None:
            argument.set_default_val(self.default)
        return argument


class ParserConfig(BaseModel):
    """A whole declaration file."""

    command: str = ""
    description: str = ""
    combine_switches: bool = False
    arguments: list[ArgumentConfig] = Field(default_factory=list)

    def to_parser(self) -> ArgumentParser:
        parser = ArgumentParser(command=self.command, description=self.description)
        for argument in self.arguments:
            argument.apply(parser)
        if self.combine_switches:
            parser.set_combine_switches(True)
        logger.debug(
            "[%s] Built parser with %d argument(s)", self.command, len(self.arguments)
        )
        return parser


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Build an `ArgumentParser` from a YAML or TOML declaration file.

    Args:
        file_path (Path | str): Path to the declaration file.

    Returns:
        ArgumentParser: A fully configured parser.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the document is not a mapping.
        pydantic.ValidationError: If the document does not match the schema.
        ArgumentError: If an argument violates a registration rule.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "command: 'shipyard'\n"
            "arguments:\n"
            "  - dest: 'speed'\n"
            "    name: '-s'\n"
            "    type: 'float'"
        )

    logger.debug("Loading parser declaration from %s", path)
    return ParserConfig.model_validate(raw_config).to_parser()
