# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a small typed alternative to argparse.

Every argument has exactly one value type (bool, int, float or string), a fixed
number of values (`nargs`), and optional per-position acceptance predicates such
as `">0<299792458"` or `"frigate,cruiser"`. Values are validated when they are
parsed, so a successful `parse()` hands back values that already satisfy every
declared constraint.

Key Features:
- Declarative argument registration via `add_argument()`
- Positional arguments filled in registration order
- Optional switches with alternate spellings (`-s` / `--speed`)
- Binary switches via `store_true` / `store_false`
- Combined single-letter boolean switches (`-cd` for `-c -d`)
- Rich-powered help rendering, plain or styled

Public Interface:
- `add_argument(...)`: Register a new argument and return it for further setup.
- `parse(tokens)`: Parse a token list into a `dict[str, Any]`.
- `parse_args(argv=None)`: Same as `parse`, defaulting to `sys.argv[1:]`.
- `get_help_string(...)`: Help as plain text of a fixed width.
- `render_help()`: Print the help on the shared Rich console.

Example Usage:
    parser = ArgumentParser("shipyard", "Create new space ship(s)")
    parser.add_argument("class", "class", "Ship class")
    speed = parser.add_argument("speed", "-s", "Ship speed", ValueType.FLOAT,
                                alt_switches=["--speed"])
    speed.set_accept_set(">0<299792458")
    speed.set_default_val(1000.0)

    args = parser.parse(["frigate", "--speed", "3000"])

    # args == {'class': 'frigate', 'speed': 3000.0}

Errors are raised as `ArgumentError` with an `ErrorKind`; the parser never
prints or exits on its own.
"""
from __future__ import annotations

import sys
from typing import Any, Iterator, Sequence

from rich.console import Console

from typedargs.console import console
from typedargs.exceptions import ArgumentError, ErrorKind
from typedargs.logger import logger
from typedargs.parser.argument import Argument, leading_dashes
from typedargs.parser.argument_action import ArgumentAction
from typedargs.parser.help_formatter import HelpFormatter
from typedargs.parser.parser_types import ParsePhase, ParseState
from typedargs.parser.switch_registry import SwitchRegistry
from typedargs.parser.values import ValueType


class ArgumentParser:
    """
    Typed command-line argument parser.

    Features:
    - One value type per argument, enforced on every value.
    - Fixed value counts per argument.
    - Acceptance predicates checked at parse time.
    - Default values for optional arguments.
    - Single-dash and double-dash switch namespaces.
    - Optional combining of single-letter boolean switches.
    - Render Help using Rich library.
    """

    def __init__(
        self,
        command: str = "",
        description: str = "",
        combine_switches: bool = False,
    ) -> None:
        """Initialize the ArgumentParser."""
        self.console: Console = console
        self.command: str = command
        self.description: str = description
        self._combine_switches: bool = bool(combine_switches)
        self._arguments: dict[str, Argument] = {}
        self._positional: list[str] = []
        self._switches: SwitchRegistry = SwitchRegistry()
        self.last_state: ParseState | None = None

    @property
    def combine_switches(self) -> bool:
        return self._combine_switches

    def set_combine_switches(self, enabled: bool) -> None:
        """
        Turn combine-mode on or off.

        Turning it on re-checks every registered argument first; if any Bool
        argument has a primary name other than '-x', the mode stays unchanged.

        Raises:
            ArgumentError: INCOMPATIBLE_SWITCHES.
        """
        if enabled:
            SwitchRegistry.check_combinable(self._arguments.values())
        self._combine_switches = bool(enabled)
        logger.debug("[%s] combine_switches=%s", self.command, self._combine_switches)

    @property
    def arguments(self) -> list[Argument]:
        """Registered arguments in registration order."""
        return list(self._arguments.values())

    @property
    def positional_dests(self) -> list[str]:
        return list(self._positional)

    def _validate_dest(self, dest: str) -> None:
        if not isinstance(dest, str) or not dest:
            raise ArgumentError(
                ErrorKind.EMPTY_DESTINATION_NAME,
                "Destination name must be a non-empty string",
            )
        if dest in self._arguments:
            raise ArgumentError(
                ErrorKind.DUPLICATE_ARGUMENT,
                f"Destination '{dest}' is already defined. "
                "Define a unique dest for each argument.",
                dest=dest,
            )

    def _register_argument(self, argument: Argument) -> None:
        self._switches.register(argument)
        self._arguments[argument.dest] = argument
        if argument.positional:
            self._positional.append(argument.dest)
        logger.debug(
            "[%s] Registered %s argument '%s' (%s x %d, %s)",
            self.command,
            "positional" if argument.positional else "optional",
            argument.dest,
            argument.value_type,
            argument.nargs,
            argument.action,
        )

    def add_argument(
        self,
        dest: str,
        name: str,
        help: str = "",
        value_type: ValueType | str = ValueType.STRING,
        action: ArgumentAction | str = ArgumentAction.DEFAULT,
        alt_switches: Sequence[str] | None = None,
        nargs: int = 1,
    ) -> Argument:
        """
        Define a new argument for the parser.

        Nothing is registered unless every check passes.

        Args:
            dest (str): Destination key in the result dict.
            name (str): Positional label ("class") or primary switch ("-s").
            help (str): Help text for rendering in command help.
            value_type (ValueType | str): Type of every value slot.
            action (ArgumentAction | str): Switch behavior (default: "default").
            alt_switches (Sequence[str] | None): Alternate switch spellings.
            nargs (int): Number of values the argument holds.

        Returns:
            Argument: The registered argument, for setting defaults and
            acceptance sets.

        Raises:
            ArgumentError: EMPTY_DESTINATION_NAME, DUPLICATE_ARGUMENT,
                DUPLICATE_SWITCH, INCOMPATIBLE_SWITCHES, or any kind raised by
                `Argument` construction.
        """
        self._validate_dest(dest)
        argument = Argument(
            name=name,
            value_type=value_type,
            help=help,
            action=action,
            alt_switches=alt_switches or [],  # type: ignore[arg-type]
            nargs=nargs,
            dest=dest,
        )
        self._switches.check(argument)
        if self._combine_switches:
            SwitchRegistry.check_combinable([argument])
        self._register_argument(argument)
        return argument

    def remove_argument(self, dest: str) -> Argument:
        """
        Unregister an argument and release its switch spellings.

        Raises:
            ArgumentError: ARGUMENT_NOT_FOUND.
        """
        argument = self[dest]
        self._switches.unregister(argument)
        del self._arguments[dest]
        if argument.positional:
            self._positional.remove(dest)
        logger.debug("[%s] Removed argument '%s'", self.command, dest)
        return argument

    def get_argument(self, dest: str) -> Argument | None:
        """
        Return the Argument object for a given destination name.

        Args:
            dest (str): Destination key of the argument.

        Returns:
            Argument or None: Matching Argument instance, if defined.
        """
        return self._arguments.get(dest)

    def __getitem__(self, dest: str) -> Argument:
        argument = self._arguments.get(dest)
        if argument is None:
            raise ArgumentError(
                ErrorKind.ARGUMENT_NOT_FOUND,
                f"No argument with destination '{dest}'",
                dest=dest,
            )
        return argument

    def has_switch(self, spelling: str) -> bool:
        """True if `spelling` is a registered primary or alternate switch."""
        return spelling in self._switches

    def __contains__(self, dest: object) -> bool:
        return dest in self._arguments

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments.values())

    def __len__(self) -> int:
        return len(self._arguments)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in config introspection, documentation, or export.
        """
        return [argument.to_definition() for argument in self._arguments.values()]

    def get_results(self) -> dict[str, Any]:
        """Current value of every argument by destination key (None when unset)."""
        return {dest: argument.value for dest, argument in self._arguments.items()}

    @staticmethod
    def _is_switch_token(token: str) -> bool:
        return len(token) > 1 and token.startswith("-")

    def _unrecognized(self, token: str, state: ParseState) -> ArgumentError:
        remaining_flags = [
            spelling
            for argument in self._arguments.values()
            if argument.dest not in state.addressed
            for spelling in argument.switches
            if spelling.startswith(token)
        ]
        if remaining_flags:
            return ArgumentError(
                ErrorKind.UNRECOGNIZED_SWITCH,
                f"Unrecognized option '{token}'. Did you mean one of: "
                f"{', '.join(remaining_flags)}?",
                token=token,
            )
        return ArgumentError(
            ErrorKind.UNRECOGNIZED_SWITCH,
            f"Unrecognized option '{token}'. Use --help to see available options.",
            token=token,
        )

    def _resolve_combined(self, token: str) -> list[str] | None:
        """
        Trial-resolve a combined token like '-cd' to destination keys.

        Nothing is mutated here. Returns None when the token does not qualify.
        """
        if leading_dashes(token) != 1 or len(token) < 3:
            return None
        dests: list[str] = []
        for char in token[1:]:
            dest = self._switches.resolve_primary(f"-{char}")
            if dest is None:
                return None
            if not self._arguments[dest].action.is_binary:
                raise ArgumentError(
                    ErrorKind.UNRECOGNIZED_SWITCH,
                    f"Option '-{char}' takes values and cannot be combined in '{token}'",
                    dest=dest,
                    token=token,
                )
            dests.append(dest)
        return dests

    def _resolve_switch(self, token: str, state: ParseState) -> list[str]:
        dest = self._switches.resolve(token)
        if dest is not None:
            return [dest]
        if self._combine_switches:
            dests = self._resolve_combined(token)
            if dests:
                logger.debug("[%s] Expanded '%s' -> %s", self.command, token, dests)
                return dests
        raise self._unrecognized(token, state)

    @staticmethod
    def _check_repeats(token: str, dests: list[str], state: ParseState) -> None:
        seen: set[str] = set()
        for dest in dests:
            if dest in state.addressed or dest in seen:
                raise ArgumentError(
                    ErrorKind.REPEATED_ARGUMENT,
                    f"Argument '{dest}' was given more than once (at '{token}')",
                    dest=dest,
                    token=token,
                )
            seen.add(dest)

    def _consume_switch(self, token: str, dests: list[str], state: ParseState) -> None:
        if len(dests) == 1 and not self._arguments[dests[0]].action.is_binary:
            argument = self._arguments[dests[0]]
            available = state.remaining - 1
            if available < argument.nargs:
                raise ArgumentError(
                    ErrorKind.INSUFFICIENT_ARGUMENTS,
                    f"Option '{token}' expects {argument.nargs} value(s), "
                    f"got {available}",
                    dest=argument.dest,
                    token=token,
                    expected=argument.nargs,
                )
            start = state.position + 1
            values = state.tokens[start : start + argument.nargs]
            state.mark_addressed(argument.dest)
            argument.set_vals(values)
            state.advance(argument.nargs + 1)
            return

        # all flags of a combined token pass, or none is stored
        forced = {
            dest: (
                "true"
                if self._arguments[dest].action is ArgumentAction.STORE_TRUE
                else "false"
            )
            for dest in dests
        }
        for dest, token_value in forced.items():
            self._arguments[dest].check_vals([token_value])
        for dest, token_value in forced.items():
            state.mark_addressed(dest)
            self._arguments[dest].set_val(token_value)
        state.advance()

    def _consume_positional(self, token: str, state: ParseState) -> None:
        if state.positional_filled >= len(self._positional):
            raise ArgumentError(
                ErrorKind.TOO_MANY_POSITIONAL,
                f"Unexpected positional argument '{token}' "
                f"(expected {len(self._positional)})",
                token=token,
                expected=len(self._positional),
            )
        dest = self._positional[state.positional_filled]
        state.positional_filled += 1
        state.mark_addressed(dest)
        self._arguments[dest].set_val(token)
        state.advance()

    def _handle_token(self, state: ParseState) -> None:
        token = state.current
        if not isinstance(token, str):
            raise ArgumentError(
                ErrorKind.TYPE_MISMATCH, f"Tokens must be strings, got {token!r}"
            )
        if self._is_switch_token(token):
            dests = self._resolve_switch(token, state)
            self._check_repeats(token, dests, state)
            self._consume_switch(token, dests, state)
        else:
            self._consume_positional(token, state)

    def parse(self, tokens: Sequence[str]) -> dict[str, Any]:
        """
        Parse a token list (program name excluded) into typed values.

        Every argument is reset to its configured state first, so repeated
        calls never see values from an earlier parse. The first error aborts
        the parse.

        Args:
            tokens (Sequence[str]): The command-line tokens.

        Returns:
            dict[str, Any]: Destination key to value; scalars for nargs == 1,
            lists otherwise, None for unset optional arguments.

        Raises:
            ArgumentError: Any value or parse stage error.
        """
        if isinstance(tokens, str):
            raise TypeError("parse() expects a sequence of tokens, not a string")
        for argument in self._arguments.values():
            argument.reset()
        state = ParseState(tokens=list(tokens))
        self.last_state = state
        logger.debug("[%s] Parsing %s", self.command, state.tokens)
        try:
            while not state.exhausted:
                self._handle_token(state)
            if state.positional_filled < len(self._positional):
                missing = self._positional[state.positional_filled :]
                raise ArgumentError(
                    ErrorKind.MISSING_POSITIONAL,
                    f"Missing positional argument(s): {', '.join(missing)}",
                    dest=missing[0],
                    expected=len(self._positional),
                )
        except ArgumentError as error:
            state.phase = ParsePhase.FAILED
            logger.debug("[%s] Parse failed (%s): %s", self.command, error.kind, error)
            raise
        state.phase = ParsePhase.DONE
        results = self.get_results()
        logger.debug("[%s] Parsed: %s", self.command, results)
        return results

    def parse_args(self, argv: Sequence[str] | None = None) -> dict[str, Any]:
        """Parse `argv`, or `sys.argv[1:]` when omitted."""
        if argv is None:
            argv = sys.argv[1:]
        return self.parse(argv)

    def _formatter(self) -> HelpFormatter:
        return HelpFormatter(self.command, self.description, self._arguments.values())

    def get_usage(self) -> str:
        return self._formatter().get_usage()

    def get_help_string(self, console_width: int = 80, left_width: int = 24) -> str:
        """
        Return the full help as plain text.

        Raises:
            ValueError: Unless 0 < left_width < console_width.
        """
        return self._formatter().format(console_width, left_width)

    def render_help(self, left_width: int = 24) -> None:
        """Print the help on the parser's Rich console."""
        self._formatter().render(self.console, left_width)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = len(self._positional)
        return (
            f"ArgumentParser(command={self.command!r}, args={len(self._arguments)}, "
            f"switches={len(self._switches)}, positional={positional}, "
            f"combine_switches={self._combine_switches})"
        )

    def __repr__(self) -> str:
        return str(self)
