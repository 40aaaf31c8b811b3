"""
Typedargs CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_action import ArgumentAction
from .argument_parser import ArgumentParser
from .help_formatter import HelpFormatter
from .parser_types import ParsePhase, ParseState
from .predicate import evaluate, is_numeric, parse_predicate
from .values import ValueType

__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentParser",
    "HelpFormatter",
    "ParsePhase",
    "ParseState",
    "ValueType",
    "evaluate",
    "is_numeric",
    "parse_predicate",
]
