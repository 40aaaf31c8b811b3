# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception types raised by the typedargs package.

Instead of one exception class per failure, argument problems are reported
through a single `ArgumentError` that carries a closed `ErrorKind`. Callers can
branch exhaustively on `error.kind` and use the structured payload (`dest`,
`token`, `expected`) to render their own diagnostics.

Exception Hierarchy:
- TypedArgsError
    ├── ArgumentError
    └── PredicateSyntaxError

Nothing in typedargs prints or exits when raising these; rendering the error
is left to the caller (see `typedargs.__main__` for one way to do it).
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """
    Closed set of failure kinds reported by `ArgumentError`.

    Members are grouped by the stage in which they occur, available through
    the `stage` property:

    - construction: raised while building or registering an argument.
    - configuration: raised by default and acceptance-set setters.
    - value: raised while converting, validating or reading values.
    - parse: raised by the token scanner.
    - lookup: raised when querying a parser for an unknown destination.
    """

    ILLEGAL_NAME = "illegal_name"
    ILLEGAL_ACTION = "illegal_action"
    ILLEGAL_NARGS = "illegal_nargs"
    ILLEGAL_ALT_SWITCHES = "illegal_alt_switches"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    DUPLICATE_SWITCH = "duplicate_switch"
    INCOMPATIBLE_SWITCHES = "incompatible_switches"
    EMPTY_DESTINATION_NAME = "empty_destination_name"

    ACCEPT_SET_SIZE_MISMATCH = "accept_set_size_mismatch"
    DEFAULT_ON_POSITIONAL = "default_on_positional"
    TYPE_MISMATCH = "type_mismatch"
    LOGICAL_CONFLICT = "logical_conflict"

    UNRECOGNIZED_BOOLEAN = "unrecognized_boolean"
    UNRECOGNIZED_NUMBER = "unrecognized_number"
    OUTSIDE_ACCEPTANCE_SET = "outside_acceptance_set"
    NOT_SET = "not_set"
    VALUE_COUNT_MISMATCH = "value_count_mismatch"

    UNRECOGNIZED_SWITCH = "unrecognized_switch"
    REPEATED_ARGUMENT = "repeated_argument"
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    TOO_MANY_POSITIONAL = "too_many_positional"
    MISSING_POSITIONAL = "missing_positional"

    ARGUMENT_NOT_FOUND = "argument_not_found"

    @property
    def stage(self) -> str:
        """Return the stage name this kind belongs to."""
        return _STAGES[self]

    def __str__(self) -> str:
        return self.value


_STAGES: dict[ErrorKind, str] = {
    ErrorKind.ILLEGAL_NAME: "construction",
    ErrorKind.ILLEGAL_ACTION: "construction",
    ErrorKind.ILLEGAL_NARGS: "construction",
    ErrorKind.ILLEGAL_ALT_SWITCHES: "construction",
    ErrorKind.DUPLICATE_ARGUMENT: "construction",
    ErrorKind.DUPLICATE_SWITCH: "construction",
    ErrorKind.INCOMPATIBLE_SWITCHES: "construction",
    ErrorKind.EMPTY_DESTINATION_NAME: "construction",
    ErrorKind.ACCEPT_SET_SIZE_MISMATCH: "configuration",
    ErrorKind.DEFAULT_ON_POSITIONAL: "configuration",
    ErrorKind.TYPE_MISMATCH: "configuration",
    ErrorKind.LOGICAL_CONFLICT: "configuration",
    ErrorKind.UNRECOGNIZED_BOOLEAN: "value",
    ErrorKind.UNRECOGNIZED_NUMBER: "value",
    ErrorKind.OUTSIDE_ACCEPTANCE_SET: "value",
    ErrorKind.NOT_SET: "value",
    ErrorKind.VALUE_COUNT_MISMATCH: "value",
    ErrorKind.UNRECOGNIZED_SWITCH: "parse",
    ErrorKind.REPEATED_ARGUMENT: "parse",
    ErrorKind.INSUFFICIENT_ARGUMENTS: "parse",
    ErrorKind.TOO_MANY_POSITIONAL: "parse",
    ErrorKind.MISSING_POSITIONAL: "parse",
    ErrorKind.ARGUMENT_NOT_FOUND: "lookup",
}


class TypedArgsError(Exception):
    """Base exception for the typedargs package."""


class ArgumentError(TypedArgsError):
    """
    Raised for every argument declaration, configuration, value or parse failure.

    Attributes:
        kind (ErrorKind): Which rule failed.
        dest (str | None): Destination key of the argument involved, if any.
        token (str | None): The offending command-line token or value, if any.
        expected (Any): What was expected instead (e.g. a cardinality), if known.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        dest: str | None = None,
        token: str | None = None,
        expected: Any = None,
    ) -> None:
        super().__init__(message)
        self.kind: ErrorKind = kind
        self.message: str = message
        self.dest: str | None = dest
        self.token: str | None = token
        self.expected: Any = expected

    def __repr__(self) -> str:
        return (
            f"ArgumentError(kind={self.kind.name}, message={self.message!r}, "
            f"dest={self.dest!r}, token={self.token!r}, expected={self.expected!r})"
        )


class PredicateSyntaxError(TypedArgsError):
    """Raised when a numeric range predicate such as '>10<=20' cannot be parsed."""

    def __init__(self, predicate: str, position: int, reason: str) -> None:
        super().__init__(
            f"Illegal predicate string {predicate!r} at offset {position}: {reason}"
        )
        self.predicate: str = predicate
        self.position: int = position
        self.reason: str = reason
