# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a small single-dash argument parser.

Callers declare flags and value arguments, parse a raw argument vector, then
read resolved values through typed getters.

Parsing rules:
- A first token containing "-help" (any case) prints help and stops.
- A token starting with "-" names an argument. If the next token exists and
  does not start with "-", it is consumed as that argument's value.
  Otherwise the argument is a flag and is marked set immediately.
- Flags and values that were never declared are registered on the fly.
- Other tokens are ignored.
- Repeated value arguments keep the last value.

Public Interface:
- `add(argument)`: Register an `Argument` or `ValueArgument`.
- `parse(argv)`: Apply an argument vector to the registered arguments.
- `find(name)` / `find_value_argument(name)` / `is_set(name)`: Lookups.
- `get_string/get_boolean/get_int/get_path(name)`: Typed reads.
- `format_help()` / `print_help()`: Help rendering.

Example Usage:
    parser = ArgumentParser()
    parser.add(ValueArgument("lang", "en:de", "Language pair.").with_alias("language"))
    parser.add(Argument("verbose").describe("Print more output."))
    parser.parse(["-language", "de:en", "-verbose"])

    parser.get_string("lang")   # "de:en"
    parser.is_set("verbose")    # True
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Sequence, TypeVar

from rich.console import Console

from singledash.argument import Argument, ValueArgument
from singledash.console import console as default_console
from singledash.exceptions import MissingRequiredValueError
from singledash.logger import logger
from singledash.utils import get_program_invocation

R = TypeVar("R")

HELP_FLAG = "-help"
HELP_DESCRIPTION = "Displays this help message."


class ArgumentParser:
    """
    Parser for single-dash command-line arguments.

    Arguments are kept in registration order, which is also the order used
    when rendering help. Lookups by name are case-insensitive and always
    prefer a primary name over an alias.

    Attributes:
        program (str): Program invocation shown in the usage line.
        exit_on_help (bool): Exit with status 0 after printing help.
        exit_on_missing (bool): Exit with status 1 when a required value is
            read unset, instead of raising `MissingRequiredValueError`.
    """

    def __init__(
        self,
        program: str | None = None,
        exit_on_help: bool = True,
        exit_on_missing: bool = True,
        console: Console | None = None,
    ) -> None:
        self.program: str = program or get_program_invocation()
        self.exit_on_help: bool = exit_on_help
        self.exit_on_missing: bool = exit_on_missing
        self.console: Console = console or default_console
        self._arguments: list[Argument] = []

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return tuple(self._arguments)

    def add(self, argument: Argument) -> ArgumentParser:
        """
        Register an argument unless one with the same name already exists.

        The new argument's name is checked against existing names and aliases.
        The first registration wins.

        Returns:
            ArgumentParser: The parser, for chaining.
        """
        if self.has_argument(argument.name):
            logger.debug("Ignoring duplicate argument '%s'", argument.name)
            return self
        self._arguments.append(argument)
        logger.debug("Registered %s argument '%s'", argument.kind, argument.name)
        return self

    def find(self, name: str) -> Argument | None:
        """
        Return the argument registered under `name`.

        All primary names are checked before any alias.

        Args:
            name (str): Name or alias, compared case-insensitively.

        Returns:
            Argument | None: The matching argument, if any.
        """
        for argument in self._arguments:
            if argument.matches_name(name):
                return argument
        for argument in self._arguments:
            if argument.matches_alias(name):
                return argument
        return None

    def has_argument(self, name: str) -> bool:
        return self.find(name) is not None

    def is_set(self, name: str) -> bool:
        argument = self.find(name)
        return argument is not None and argument.is_set

    def find_value_argument(self, name: str) -> ValueArgument | None:
        """Return the value argument for `name`, or None if absent or a flag."""
        argument = self.find(name)
        if isinstance(argument, ValueArgument):
            return argument
        return None

    def set_raw(self, name: str, value: Any) -> None:
        """
        Set the value of `name`, registering a new value argument if needed.

        A newly registered argument keeps `is_set` False, like any freshly
        constructed value argument.

        Args:
            name (str): Name or alias of the argument.
            value (Any): The value, stored in its string form.
        """
        argument = self.find_value_argument(name)
        if argument is None:
            argument = ValueArgument(name, value)
            self._arguments.append(argument)
            logger.debug("Registered undeclared value argument '%s'", name)
        else:
            argument.set_value(value)
        logger.debug("Set '%s' to %r", argument.name, argument.value)

    def _set_flag(self, name: str) -> None:
        argument = self.find(name)
        if argument is None:
            argument = Argument(name)
            self._arguments.append(argument)
            logger.debug("Registered undeclared flag '%s'", name)
        argument.mark_set()

    def parse(self, argv: Sequence[str]) -> None:
        """
        Apply an argument vector to the registered arguments.

        No validation happens here; malformed values surface when they are
        read. Arguments already applied stay applied.

        Args:
            argv (Sequence[str]): Raw arguments, without the program name.
        """
        args = list(argv)
        if args and HELP_FLAG in args[0].lower():
            self.print_help()
            if self.exit_on_help:
                sys.exit(0)
            return

        values: dict[str, str] = {}
        i = 0
        while i < len(args):
            token = args[i]
            if not token.startswith("-"):
                i += 1
                continue
            name = token[1:].strip()
            has_value = i + 1 < len(args) and not args[i + 1].startswith("-")
            if not name:
                logger.debug("Ignoring bare '-' at position %d", i)
            elif has_value:
                values[name] = args[i + 1]
            else:
                self._set_flag(name)
            i += 2 if has_value else 1

        for name, value in values.items():
            self.set_raw(name, value)
        logger.debug("Parsed %d token(s), %d value(s)", len(args), len(values))

    def _read(self, name: str, read: Callable[[ValueArgument], R]) -> R | None:
        argument = self.find_value_argument(name)
        if argument is None:
            logger.debug("No value argument named '%s'", name)
            return None
        try:
            return read(argument)
        except MissingRequiredValueError:
            if not self.exit_on_missing:
                raise
            logger.debug("Required argument '%s' was not set", argument.name)
            self._write(argument.render_help())
            sys.exit(1)

    def get_string(self, name: str) -> str | None:
        return self._read(name, ValueArgument.get_string)

    def get_boolean(self, name: str) -> bool | None:
        """
        Return the value of `name` as a boolean.

        Raises:
            InvalidFormatError: If the value is not "true" or "false".
        """
        return self._read(name, ValueArgument.get_boolean)

    def get_int(self, name: str) -> int | None:
        """
        Return the value of `name` as an int.

        Raises:
            InvalidFormatError: If the value is not a base-10 integer.
        """
        return self._read(name, ValueArgument.get_int)

    def get_path(self, name: str) -> Path | None:
        return self._read(name, ValueArgument.get_path)

    def format_help(self) -> str:
        """
        Render the full help listing.

        Returns:
            str: Usage line, options header, one block per argument in
            registration order and the built-in -help entry.
        """
        lines = [f"Usage: {self.program} [OPTIONS]", "", "Options:", ""]
        for argument in self._arguments:
            lines.append(argument.render_help())
            lines.append("")
        lines.append(HELP_FLAG)
        lines.append(HELP_DESCRIPTION)
        return "\n".join(lines)

    def print_help(self) -> None:
        self._write(self.format_help())

    def _write(self, text: str) -> None:
        self.console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def __str__(self) -> str:
        flags = sum(not isinstance(arg, ValueArgument) for arg in self._arguments)
        required = sum(
            isinstance(arg, ValueArgument) and arg.required for arg in self._arguments
        )
        return (
            f"ArgumentParser(args={len(self._arguments)}, flags={flags}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
