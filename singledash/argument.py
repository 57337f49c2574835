# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the argument types registered on an `ArgumentParser`.

Two kinds of argument exist, tagged by `ArgumentKind`:

- `Argument` (`ArgumentKind.FLAG`): a named switch with no value. It only
  records whether it appeared on the command line.
- `ValueArgument` (`ArgumentKind.VALUE`): a named option carrying a string
  value, initialised from a default and optionally required.

Names and aliases are matched case-insensitively. Values are always stored as
strings; typed reads (`get_boolean`, `get_int`, `get_path`) convert on access
and raise `InvalidFormatError` on malformed content.

Example:
    verbose = Argument("verbose").describe("Print more output.")
    driver = (
        ValueArgument("driverpath", Path("geckodriver.exe"), "Path to the driver.")
        .with_alias("path")
        .mark_required()
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from singledash.coerce import coerce_bool, coerce_int, coerce_path, stringify_value
from singledash.exceptions import ArgumentConfigError, MissingRequiredValueError

T = TypeVar("T", bound="Argument")


class ArgumentKind(Enum):
    """
    Tags an argument as a value-less flag or a value-bearing option.

    Aliases:
        - "switch" → "flag"
        - "option" → "value"

    Example:
        ArgumentKind("switch") → ArgumentKind.FLAG
    """

    FLAG = "flag"
    VALUE = "value"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "switch": "flag",
            "option": "value",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass
class Argument:
    """
    Represents a flag argument.

    Attributes:
        name (str): Primary name, matched case-insensitively.
        description (str): Help text for the argument.
        alias (str | None): Secondary name, checked after all primary names.
        is_set (bool): True once the argument was seen on the command line.
    """

    name: str
    description: str = ""
    alias: str | None = None
    is_set: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self._validate_name()

    def _validate_name(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ArgumentConfigError("Argument name must be a non-empty string")

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.FLAG

    @property
    def usage(self) -> str:
        """The flag as it is written on the command line."""
        return f"-{self.name}"

    def describe(self: T, text: str) -> T:
        """Set the help text and return the argument for chaining."""
        self.description = text
        return self

    def with_alias(self: T, text: str) -> T:
        """Set the alias and return the argument for chaining."""
        self.alias = text
        return self

    def mark_set(self) -> None:
        self.is_set = True

    def matches_name(self, candidate: str) -> bool:
        return self.name.lower() == candidate.lower()

    def matches_alias(self, candidate: str) -> bool:
        return self.alias is not None and self.alias.lower() == candidate.lower()

    def matches(self, candidate: str) -> bool:
        """Return True if `candidate` equals the name or alias, ignoring case."""
        return self.matches_name(candidate) or self.matches_alias(candidate)

    def _optionality_text(self) -> str:
        return "This Argument is optional."

    def render_help(self) -> str:
        """Return the help block for this argument."""
        return "\n".join([self._optionality_text(), self.usage, self.description])


@dataclass(init=False)
class ValueArgument(Argument):
    """
    Represents an argument carrying a value.

    The default is converted to its stored string form on construction
    without marking the argument as set.

    Attributes:
        value (str): Current value, the stringified default until parsed.
        required (bool): Reading an unset required value raises
            `MissingRequiredValueError`.
    """

    value: str = ""
    required: bool = False

    def __init__(
        self,
        name: str,
        default: Any = "",
        description: str = "",
        alias: str | None = None,
        required: bool = False,
    ) -> None:
        self.name = name
        self.description = description
        self.alias = alias
        self.required = required
        self.value = stringify_value(default)
        self.is_set = False
        self._validate_name()

    @property
    def kind(self) -> ArgumentKind:
        return ArgumentKind.VALUE

    @property
    def usage(self) -> str:
        return f"-{self.name} <Value>"

    @property
    def is_optional(self) -> bool:
        return not self.required

    def mark_required(self) -> ValueArgument:
        """Mark this argument as required and return it for chaining."""
        self.required = True
        return self

    def set_value(self, value: Any) -> None:
        """Store `value` in its string form and mark the argument as set."""
        self.value = stringify_value(value)
        self.mark_set()

    def get_value(self) -> str:
        """
        Return the current value.

        Raises:
            MissingRequiredValueError: If the argument is required and unset.
        """
        if self.required and not self.is_set:
            raise MissingRequiredValueError(self)
        return self.value

    def get_string(self) -> str:
        return self.get_value()

    def get_boolean(self) -> bool:
        return coerce_bool(self.get_value())

    def get_int(self) -> int:
        return coerce_int(self.get_value())

    def get_path(self) -> Path:
        return coerce_path(self.get_value())

    def _optionality_text(self) -> str:
        if self.required:
            return "This Argument is required."
        return super()._optionality_text()

    def render_help(self) -> str:
        return "\n".join(
            [super().render_help(), f"Example: -{self.name} {self.value}"]
        )
