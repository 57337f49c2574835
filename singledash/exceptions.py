# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Singledash.

Exception Hierarchy:
- SingledashError
    ├── InvalidFormatError
    ├── MissingRequiredValueError
    └── ArgumentConfigError

Unknown argument names are not an error: lookups return `None` instead.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from singledash.argument import ValueArgument


class SingledashError(Exception):
    """Base exception for Singledash."""


class InvalidFormatError(SingledashError, ValueError):
    """Raised when a stored value cannot be read as the requested type."""


class MissingRequiredValueError(SingledashError):
    """Raised when a required value argument is read before it was set."""

    def __init__(self, argument: ValueArgument):
        self.argument = argument
        super().__init__(f"Missing required value for '-{argument.name}'")


class ArgumentConfigError(SingledashError):
    """Raised when an argument declaration is invalid."""
