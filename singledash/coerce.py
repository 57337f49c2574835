# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value stringification and strict typed conversions for Singledash arguments.

Value arguments always store their value as a string. This module turns
arbitrary defaults into that stored form and converts the stored form back
into typed values on read.

Functions:
- stringify_value: Convert a default or parsed value into its stored string form.
- coerce_bool: Convert a string to a boolean ("true"/"false" only).
- coerce_int: Convert a base-10 integer literal to an int.
- coerce_path: Wrap a string as a filesystem path.
"""
import os
import re
from pathlib import Path
from typing import Any

from singledash.exceptions import InvalidFormatError

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def stringify_value(value: Any) -> str:
    """
    Convert a value into the string form stored by a value argument.

    Path-like values become their absolute path, booleans become lowercase
    "true"/"false", `None` becomes an empty string and everything else uses
    `str()`.

    Args:
        value (Any): The value to convert.

    Returns:
        str: The stored string form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        return str(Path(value).absolute())
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only "true" and "false" are accepted, compared case-insensitively.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        InvalidFormatError: If the value is neither "true" nor "false".
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    elif lowered == "false":
        return False
    raise InvalidFormatError(f'"{value}" is not a Boolean!')


def coerce_int(value: str) -> int:
    """
    Convert a base-10 integer literal to an int.

    An optional leading sign is allowed. Whitespace, underscores, decimal
    points and non-ASCII digits are rejected.

    Raises:
        InvalidFormatError: If the value is not an integer literal.
    """
    if not _INT_LITERAL.fullmatch(value):
        raise InvalidFormatError(f'"{value}" is not an Integer!')
    return int(value)


def coerce_path(value: str) -> Path:
    """Wrap a string as a filesystem path without checking that it exists."""
    return Path(value)
