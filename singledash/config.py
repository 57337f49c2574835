# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration loader for Singledash argument parsers."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from singledash.argument import Argument, ArgumentKind, ValueArgument
from singledash.exceptions import ArgumentConfigError
from singledash.logger import logger
from singledash.parser import ArgumentParser


class RawArgument(BaseModel):
    """Raw argument declaration as read from a config file."""

    name: str
    kind: ArgumentKind = ArgumentKind.VALUE
    description: str = ""
    alias: str | None = None
    default: Any = ""
    path: bool = False
    required: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        if value.startswith("-"):
            raise ValueError("name must be given without the leading '-'")
        return value

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @model_validator(mode="after")
    def validate_flag_fields(self) -> RawArgument:
        if self.kind == ArgumentKind.FLAG:
            invalid = [
                field
                for field in ("default", "path", "required")
                if field in self.model_fields_set
            ]
            if invalid:
                raise ValueError(f"flag '{self.name}' cannot set: {', '.join(invalid)}")
        return self

    def to_argument(self) -> Argument:
        if self.kind == ArgumentKind.FLAG:
            return Argument(self.name, self.description, alias=self.alias)
        default = Path(str(self.default)) if self.path else self.default
        return ValueArgument(
            self.name,
            default,
            self.description,
            alias=self.alias,
            required=self.required,
        )


class ParserConfig(BaseModel):
    """Singledash parser configuration model."""

    program: str | None = None
    exit_on_help: bool = True
    exit_on_missing: bool = True
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> ArgumentParser:
        parser = ArgumentParser(
            program=self.program,
            exit_on_help=self.exit_on_help,
            exit_on_missing=self.exit_on_missing,
        )
        for raw_argument in self.arguments:
            parser.add(raw_argument.to_argument())
        return parser


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Load argument declarations from a YAML or TOML file.

    The file should contain a mapping with an `arguments` list. Each entry
    needs at least a `name`; see `RawArgument` for the other keys.

    Example:
        program: translate
        arguments:
          - name: lang
            default: en:de
            alias: language
          - name: verbose
            kind: flag

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        ArgumentParser: A parser with the declared arguments registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ArgumentConfigError: If the content is not a valid declaration set.
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
        raise ArgumentConfigError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "program: 'translate'\n"
            "arguments:\n"
            "  - name: 'lang'\n"
            "    default: 'en:de'"
        )

    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ArgumentConfigError(f"Invalid config file '{path}':\n{error}") from error

    logger.debug("Loaded %d argument(s) from '%s'", len(config.arguments), path)
    return config.to_parser()
