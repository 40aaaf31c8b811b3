# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass: one typed, cardinality-bound value slot of an
`ArgumentParser`.

Each `Argument` describes a single CLI input and also holds its current value.
Its name decides whether it is positional (`"class"`) or optional (`"-s"`,
`"--speed"`); its `ValueType` fixes the type of every one of its `nargs` value
slots for its whole lifetime.

Key Attributes:
- `name`: Primary name; a positional label or a switch spelling.
- `dest`: Destination key used by the parser to store and retrieve the value.
- `value_type`: `ValueType` shared by all value slots.
- `action`: `ArgumentAction` (default, store_true, store_false).
- `alt_switches`: Alternate switch spellings (optional arguments only).
- `nargs`: Number of values the argument holds (>= 1).
- `positional`: Derived from `name`.

Values are validated twice: tokens must convert to the value type, and the
converted values must satisfy the per-position acceptance set. An acceptance
set entry is a comma separated list of alternatives. For Int/Float arguments
each alternative is either a literal (`"3"`) or a range predicate
(`">10<=20"`); for Bool/String arguments each alternative is a literal.

Example:
    speed = Argument("-s", ValueType.FLOAT, alt_switches=["--speed"], dest="speed")
    speed.set_accept_set(">0<299792458")
    speed.set_default_val(1000.0)
    speed.as_float()      # 1000.0
    speed.set_val("3000")
    speed.as_float()      # 3000.0

Arguments are usually created through `ArgumentParser.add_argument()` or
declared in YAML/TOML files loaded by `typedargs.config.loader`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from typedargs.exceptions import ArgumentError, ErrorKind, PredicateSyntaxError
from typedargs.logger import logger
from typedargs.parser.argument_action import ArgumentAction
from typedargs.parser.predicate import evaluate, is_numeric, parse_predicate
from typedargs.parser.utils import coerce_number, coerce_token, interpret_bool
from typedargs.parser.values import (
    ArgumentValues,
    BoolValues,
    FloatValues,
    IntValues,
    StringValues,
    ValueType,
    make_values,
)


def leading_dashes(text: str) -> int:
    """Return the number of '-' characters at the start of `text`."""
    return len(text) - len(text.lstrip("-"))


def is_switch_spelling(text: str) -> bool:
    """True for '-x...' or '--x...' where x is not a dash."""
    dashes = leading_dashes(text)
    return dashes in (1, 2) and len(text) > dashes


@dataclass(eq=False)
class Argument:
    """
    Represents a command-line argument and its current value.

    Attributes:
        name (str): Primary name; positional label or switch such as "-s".
        value_type (ValueType): The type of every value slot.
        help (str): Help text for the argument.
        action (ArgumentAction): What a switch does when encountered.
        alt_switches (list[str]): Alternate spellings of an optional switch.
        nargs (int): Number of values held. Must be 1 for positional arguments.
        dest (str): Destination key; derived from `name` when empty.
        positional (bool): True if `name` is not a switch spelling.

    Raises:
        ArgumentError: On construction, with kind ILLEGAL_NAME, ILLEGAL_ACTION,
            ILLEGAL_NARGS or ILLEGAL_ALT_SWITCHES.
    """

    name: str
    value_type: ValueType = ValueType.STRING
    help: str = ""
    action: ArgumentAction = ArgumentAction.DEFAULT
    alt_switches: list[str] = field(default_factory=list)
    nargs: int = 1
    dest: str = ""
    positional: bool = field(init=False)
    _values: ArgumentValues | None = field(init=False, default=None, repr=False)
    _defaults: ArgumentValues | None = field(init=False, default=None, repr=False)
    _accept_set: list[str] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.positional = self._validate_name(self.name)
        if not self.dest:
            self.dest = self.name.lstrip("-")
        self.value_type = self._validate_value_type(self.value_type)
        self.action = self._validate_action(self.action)
        self._validate_nargs()
        self.alt_switches = self._validate_alt_switches(self.alt_switches)
        self.reset()

    def _error(self, kind: ErrorKind, message: str, **payload: Any) -> ArgumentError:
        return ArgumentError(
            kind, f"[{self.dest or self.name}] {message}", dest=self.dest, **payload
        )

    def _validate_name(self, name: str) -> bool:
        if not isinstance(name, str) or not name:
            raise ArgumentError(
                ErrorKind.ILLEGAL_NAME,
                "Argument name must be a non-empty string",
                token=name if isinstance(name, str) else None,
            )
        if leading_dashes(name) == 0:
            return True
        if not is_switch_spelling(name):
            raise ArgumentError(
                ErrorKind.ILLEGAL_NAME,
                f"Illegal argument name '{name}': switches must look like '-x' or '--name'",
                token=name,
            )
        return False

    def _validate_value_type(self, value_type: ValueType | str) -> ValueType:
        if isinstance(value_type, ValueType):
            return value_type
        try:
            return ValueType(value_type)
        except ValueError as error:
            raise self._error(ErrorKind.TYPE_MISMATCH, str(error)) from error

    def _validate_action(self, action: ArgumentAction | str) -> ArgumentAction:
        if not isinstance(action, ArgumentAction):
            try:
                action = ArgumentAction(action)
            except ValueError as error:
                raise self._error(ErrorKind.ILLEGAL_ACTION, str(error)) from error
        if self.positional and action is not ArgumentAction.DEFAULT:
            raise self._error(
                ErrorKind.ILLEGAL_ACTION,
                f"Action '{action}' cannot be used with positional arguments",
            )
        if action.is_binary and self.value_type is not ValueType.BOOL:
            raise self._error(
                ErrorKind.ILLEGAL_ACTION,
                f"Action '{action}' requires a bool argument, got {self.value_type}",
            )
        return action

    def _validate_nargs(self) -> None:
        if not isinstance(self.nargs, int) or isinstance(self.nargs, bool):
            raise self._error(
                ErrorKind.ILLEGAL_NARGS, f"nargs must be an int, got {self.nargs!r}"
            )
        if self.action.is_binary and self.nargs > 1:
            raise self._error(
                ErrorKind.ILLEGAL_NARGS,
                f"Action '{self.action}' allows only one value",
                expected=1,
            )
        if self.positional and self.nargs > 1:
            raise self._error(
                ErrorKind.ILLEGAL_NARGS,
                "Positional arguments cannot hold more than one value",
                expected=1,
            )
        if self.nargs <= 0:
            raise self._error(ErrorKind.ILLEGAL_NARGS, "nargs must be a positive integer")

    def _validate_alt_switches(self, alt_switches: Sequence[str] | None) -> list[str]:
        if not alt_switches:
            return []
        if isinstance(alt_switches, str):
            raise self._error(
                ErrorKind.ILLEGAL_ALT_SWITCHES,
                "alt_switches must be a list of switch spellings, not a string",
            )
        if self.positional:
            raise self._error(
                ErrorKind.ILLEGAL_ALT_SWITCHES,
                "Positional arguments cannot have alternate switches",
            )
        switches = list(alt_switches)
        for switch in switches:
            if not isinstance(switch, str) or not is_switch_spelling(switch):
                raise self._error(
                    ErrorKind.ILLEGAL_ALT_SWITCHES,
                    f"Illegal alternate switch {switch!r}",
                    token=str(switch),
                )
        return switches

    @property
    def is_set(self) -> bool:
        """True once a value has been parsed, defaulted or preset by the action."""
        return self._values is not None

    @property
    def switches(self) -> tuple[str, ...]:
        """All spellings of an optional argument, primary first."""
        if self.positional:
            return ()
        return (self.name, *self.alt_switches)

    @property
    def accept_set(self) -> list[str]:
        return list(self._accept_set)

    @property
    def defaults(self) -> list[Any] | None:
        if self._defaults is None:
            return None
        return list(self._defaults.slots)

    @property
    def value(self) -> Any:
        """The typed value: a scalar when nargs == 1, a list otherwise, None if unset."""
        if self._values is None:
            return None
        if self.nargs == 1:
            return self._values.slots[0]
        return list(self._values.slots)

    def reset(self) -> None:
        """Restore the value to what it was right after configuration."""
        if self._defaults is not None:
            self._values = self._defaults
        elif self.action.is_binary:
            untriggered = self.action is ArgumentAction.STORE_FALSE
            self._values = make_values(ValueType.BOOL, [untriggered] * self.nargs)
        else:
            self._values = None

    def set_accept_set(self, accept: str | Sequence[str]) -> None:
        """
        Set the acceptance set.

        A single string applies to every value position; a sequence must have
        exactly `nargs` entries, one per position. Entries are checked up front
        so malformed predicates are rejected here rather than mid-parse.

        Raises:
            ArgumentError: ACCEPT_SET_SIZE_MISMATCH, LOGICAL_CONFLICT, or
                OUTSIDE_ACCEPTANCE_SET when an existing default would no longer pass.
        """
        if isinstance(accept, str):
            entries = [accept] * self.nargs
        else:
            entries = list(accept)
            if len(entries) != self.nargs:
                raise self._error(
                    ErrorKind.ACCEPT_SET_SIZE_MISMATCH,
                    f"Expected {self.nargs} acceptance entries, got {len(entries)}",
                    expected=self.nargs,
                )
        for entry in entries:
            if not isinstance(entry, str):
                raise self._error(
                    ErrorKind.TYPE_MISMATCH,
                    f"Acceptance entries must be strings, got {entry!r}",
                )
            self._check_accept_entry(entry)
        if self._defaults is not None and not self._accepts(self._defaults, entries):
            raise self._error(
                ErrorKind.OUTSIDE_ACCEPTANCE_SET,
                f"Default {self.defaults} is outside the acceptance set {entries}",
                token=" ".join(str(item) for item in self._defaults.slots),
                expected=entries,
            )
        self._accept_set = entries
        logger.debug("[%s] Acceptance set: %s", self.dest, entries)

    def _check_accept_entry(self, entry: str) -> None:
        if not entry or self.value_type is ValueType.STRING:
            return
        for clause in entry.split(","):
            if self.value_type is ValueType.BOOL:
                if interpret_bool(clause) is None:
                    raise self._error(
                        ErrorKind.LOGICAL_CONFLICT,
                        f"'{clause}' is not a boolean literal",
                        token=clause,
                    )
            elif not is_numeric(clause):
                try:
                    parse_predicate(clause)
                except PredicateSyntaxError as error:
                    raise self._error(
                        ErrorKind.LOGICAL_CONFLICT, str(error), token=clause
                    ) from error

    def set_default_val(self, value: bool | int | float | str) -> None:
        """
        Set a single default value (nargs == 1 only).

        Raises:
            ArgumentError: VALUE_COUNT_MISMATCH, plus everything `set_default_vals` raises.
        """
        if self.nargs != 1:
            raise self._error(
                ErrorKind.VALUE_COUNT_MISMATCH,
                f"set_default_val() needs nargs == 1; use set_default_vals() for {self.nargs} values",
                expected=self.nargs,
            )
        self.set_default_vals([value])

    def set_default_vals(self, values: Sequence[bool | int | float | str]) -> None:
        """
        Set default values, one per position.

        If the argument is not set yet, the defaults also become its value.
        Every check runs before anything is stored.

        Raises:
            ArgumentError: DEFAULT_ON_POSITIONAL, VALUE_COUNT_MISMATCH,
                TYPE_MISMATCH, LOGICAL_CONFLICT or OUTSIDE_ACCEPTANCE_SET.
        """
        if self.positional:
            raise self._error(
                ErrorKind.DEFAULT_ON_POSITIONAL,
                "Positional arguments cannot have default values",
            )
        if isinstance(values, (str, bytes)):
            raise self._error(
                ErrorKind.TYPE_MISMATCH,
                "set_default_vals() expects a sequence of values, not a string",
            )
        items = list(values)
        if len(items) != self.nargs:
            raise self._error(
                ErrorKind.VALUE_COUNT_MISMATCH,
                f"Expected {self.nargs} default values, got {len(items)}",
                expected=self.nargs,
            )
        for item in items:
            if not self.value_type.accepts(item):
                raise self._error(
                    ErrorKind.TYPE_MISMATCH,
                    f"Default {item!r} is not a {self.value_type.label} value",
                    expected=self.value_type,
                )
        if self.action.is_binary:
            triggered = self.action is ArgumentAction.STORE_TRUE
            if any(item is triggered for item in items):
                raise self._error(
                    ErrorKind.LOGICAL_CONFLICT,
                    f"Default {triggered} contradicts action '{self.action}'",
                )

        defaults = make_values(self.value_type, items)
        if not self._accepts(defaults):
            raise self._error(
                ErrorKind.OUTSIDE_ACCEPTANCE_SET,
                f"Default {items} is outside the acceptance set {self._accept_set}",
                token=" ".join(str(item) for item in items),
                expected=self.accept_set,
            )
        if self._values is None:
            self._values = defaults
        self._defaults = defaults
        logger.debug("[%s] Defaults: %s", self.dest, items)

    def set_val(self, token: str) -> None:
        """
        Set the value from one token (nargs == 1 only).

        Raises:
            ArgumentError: VALUE_COUNT_MISMATCH, plus everything `set_vals` raises.
        """
        if self.nargs != 1:
            raise self._error(
                ErrorKind.VALUE_COUNT_MISMATCH,
                f"Expected {self.nargs} values, got 1",
                token=token,
                expected=self.nargs,
            )
        self.set_vals([token])

    def set_vals(self, tokens: Sequence[str]) -> None:
        """
        Set all value slots from exactly `nargs` tokens.

        Tokens are converted first; only when every token converts are the
        slots replaced. The acceptance check runs afterwards, and a rejected
        value stays stored: treat the raised error as authoritative.

        Raises:
            ArgumentError: VALUE_COUNT_MISMATCH, UNRECOGNIZED_BOOLEAN,
                UNRECOGNIZED_NUMBER, OUTSIDE_ACCEPTANCE_SET or LOGICAL_CONFLICT.
        """
        items, values = self._convert(tokens)
        self._values = values
        logger.debug("[%s] Value set: %s", self.dest, list(values.slots))
        if not self.val_accept():
            raise self._rejected(items)

    def check_vals(self, tokens: Sequence[str]) -> None:
        """
        Run every `set_vals` check on `tokens` without storing anything.

        Raises:
            ArgumentError: Everything `set_vals` raises.
        """
        items, values = self._convert(tokens)
        if not self._accepts(values):
            raise self._rejected(items)

    def _convert(self, tokens: Sequence[str]) -> tuple[list[str], ArgumentValues]:
        if isinstance(tokens, str):
            tokens = [tokens]
        items = list(tokens)
        if len(items) != self.nargs:
            raise self._error(
                ErrorKind.VALUE_COUNT_MISMATCH,
                f"Expected {self.nargs} values, got {len(items)}",
                token=" ".join(items),
                expected=self.nargs,
            )
        converted = [self._coerce(token) for token in items]
        return items, make_values(self.value_type, converted)

    def _rejected(self, items: list[str]) -> ArgumentError:
        return self._error(
            ErrorKind.OUTSIDE_ACCEPTANCE_SET,
            f"Value {' '.join(items)!r} is outside the acceptance set {self._accept_set}",
            token=" ".join(items),
            expected=self.accept_set,
        )

    def _coerce(self, token: str) -> bool | int | float | str:
        if not isinstance(token, str):
            raise self._error(
                ErrorKind.TYPE_MISMATCH, f"Tokens must be strings, got {token!r}"
            )
        try:
            return coerce_token(token, self.value_type)
        except ValueError as error:
            kind = (
                ErrorKind.UNRECOGNIZED_BOOLEAN
                if self.value_type is ValueType.BOOL
                else ErrorKind.UNRECOGNIZED_NUMBER
            )
            raise self._error(kind, str(error), token=token) from error

    def val_accept(self) -> bool:
        """
        Test whether the current values satisfy the acceptance set.

        Returns False when the value is not set.

        Raises:
            ArgumentError: LOGICAL_CONFLICT for an unusable acceptance entry.
        """
        if self._values is None:
            return False
        return self._accepts(self._values)

    def _accepts(
        self, values: ArgumentValues, accept_set: list[str] | None = None
    ) -> bool:
        entries = self._accept_set if accept_set is None else accept_set
        for position, entry in enumerate(entries):
            if not entry:
                continue
            slot = values.slots[position]
            if not any(self._clause_matches(slot, clause) for clause in entry.split(",")):
                return False
        return True

    def _clause_matches(self, slot: Any, clause: str) -> bool:
        if self.value_type is ValueType.BOOL:
            expected = interpret_bool(clause)
            if expected is None:
                raise self._error(
                    ErrorKind.LOGICAL_CONFLICT,
                    f"'{clause}' is not a boolean literal",
                    token=clause,
                )
            return slot is expected
        if self.value_type is ValueType.STRING:
            return slot == clause
        if is_numeric(clause):
            return slot == coerce_number(clause, self.value_type)
        try:
            return evaluate(slot, clause)
        except PredicateSyntaxError as error:
            raise self._error(
                ErrorKind.LOGICAL_CONFLICT, str(error), token=clause
            ) from error

    def _slots(self, container: type, single: bool = False) -> tuple[Any, ...]:
        if single and self.nargs != 1:
            raise self._error(
                ErrorKind.VALUE_COUNT_MISMATCH,
                f"Argument holds {self.nargs} values; use the list accessor",
                expected=self.nargs,
            )
        if self._values is None:
            raise self._error(ErrorKind.NOT_SET, "Value has not been set")
        if not isinstance(self._values, container):
            raise self._error(
                ErrorKind.TYPE_MISMATCH,
                f"Argument is {self.value_type.label}, not {container.value_type.label}",
                expected=self.value_type,
            )
        return self._values.slots

    def as_bool(self) -> bool:
        return self._slots(BoolValues, single=True)[0]

    def as_int(self) -> int:
        return self._slots(IntValues, single=True)[0]

    def as_float(self) -> float:
        return self._slots(FloatValues, single=True)[0]

    def as_string(self) -> str:
        return self._slots(StringValues, single=True)[0]

    def as_bools(self) -> list[bool]:
        return list(self._slots(BoolValues))

    def as_ints(self) -> list[int]:
        return list(self._slots(IntValues))

    def as_floats(self) -> list[float]:
        return list(self._slots(FloatValues))

    def as_strings(self) -> list[str]:
        return list(self._slots(StringValues))

    def get_value_names(self) -> list[str]:
        """Placeholder names for each value slot, e.g. ["alliCorp1", "alliCorp2"]."""
        if self.nargs == 1:
            return [self.dest]
        return [f"{self.dest}{index}" for index in range(1, self.nargs + 1)]

    def get_usage_text(self) -> str:
        """Get the usage text for the argument, e.g. "-s speed" or "class"."""
        if self.positional:
            return self.name
        if self.action.is_binary:
            return self.name
        return " ".join([self.name, *self.get_value_names()])

    def get_type_text(self) -> str:
        """Get the type tag shown in help, e.g. "[float]" or "[string x 2]"."""
        if self.nargs > 1:
            return f"[{self.value_type.label} x {self.nargs}]"
        return f"[{self.value_type.label}]"

    def to_definition(self) -> dict[str, Any]:
        """Return the argument metadata as a plain dict."""
        return {
            "name": self.name,
            "dest": self.dest,
            "type": self.value_type,
            "action": self.action,
            "nargs": self.nargs,
            "alt_switches": list(self.alt_switches),
            "positional": self.positional,
            "help": self.help,
            "accept": self.accept_set,
            "default": self.defaults,
        }
