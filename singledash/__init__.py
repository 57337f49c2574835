"""
Singledash CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, ArgumentKind, ValueArgument
from .exceptions import (
    ArgumentConfigError,
    InvalidFormatError,
    MissingRequiredValueError,
    SingledashError,
)
from .logger import logger
from .parser import ArgumentParser

__all__ = [
    "Argument",
    "ArgumentKind",
    "ArgumentParser",
    "ValueArgument",
    "SingledashError",
    "InvalidFormatError",
    "MissingRequiredValueError",
    "ArgumentConfigError",
    "logger",
]
