"""
Typedargs CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import loader
from .exceptions import ArgumentError, ErrorKind, PredicateSyntaxError, TypedArgsError
from .parser import Argument, ArgumentAction, ArgumentParser, ValueType
from .version import __version__

logger = logging.getLogger("typedargs")


__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentError",
    "ArgumentParser",
    "ErrorKind",
    "PredicateSyntaxError",
    "TypedArgsError",
    "ValueType",
    "loader",
    "__version__",
]
