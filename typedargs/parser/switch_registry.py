# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Bookkeeping of switch spellings for an `ArgumentParser`.

Every optional argument contributes its primary name and its alternate
switches. Spellings live in two disjoint namespaces, single-dash (`-v`) and
double-dash (`--verbose`), and each spelling may belong to one argument only.

The registry also knows the combine-mode rule: when several single-letter
boolean switches may be written together (`-cd` for `-c -d`), every Bool
argument's primary name must be exactly a dash plus one character.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from typedargs.exceptions import ArgumentError, ErrorKind
from typedargs.logger import logger
from typedargs.parser.argument import Argument, leading_dashes
from typedargs.parser.values import ValueType


@dataclass(frozen=True)
class SwitchEntry:
    """Where a registered spelling points."""

    dest: str
    primary: bool


class SwitchRegistry:
    """Maps switch spellings to destination keys."""

    def __init__(self) -> None:
        self._single_dash: dict[str, SwitchEntry] = {}
        self._double_dash: dict[str, SwitchEntry] = {}

    def _namespace(self, spelling: str) -> dict[str, SwitchEntry]:
        if leading_dashes(spelling) == 1:
            return self._single_dash
        return self._double_dash

    @property
    def single_dash_switches(self) -> list[str]:
        return list(self._single_dash)

    @property
    def double_dash_switches(self) -> list[str]:
        return list(self._double_dash)

    def check(self, argument: Argument) -> None:
        """
        Verify that `argument` could be registered without collisions.

        Raises:
            ArgumentError: DUPLICATE_SWITCH, naming the spelling and its owner.
        """
        seen: set[str] = set()
        for spelling in argument.switches:
            if spelling in seen:
                raise ArgumentError(
                    ErrorKind.DUPLICATE_SWITCH,
                    f"Switch '{spelling}' is listed twice for argument '{argument.dest}'",
                    dest=argument.dest,
                    token=spelling,
                )
            existing = self._namespace(spelling).get(spelling)
            if existing is not None:
                raise ArgumentError(
                    ErrorKind.DUPLICATE_SWITCH,
                    f"Switch '{spelling}' is already used by argument '{existing.dest}'",
                    dest=argument.dest,
                    token=spelling,
                )
            seen.add(spelling)

    def register(self, argument: Argument) -> None:
        """Register all spellings of `argument`, or none of them."""
        self.check(argument)
        for index, spelling in enumerate(argument.switches):
            self._namespace(spelling)[spelling] = SwitchEntry(
                dest=argument.dest, primary=index == 0
            )
        if argument.switches:
            logger.debug(
                "Registered switches %s -> '%s'", argument.switches, argument.dest
            )

    def unregister(self, argument: Argument) -> None:
        """Release every spelling owned by `argument`."""
        for spelling in argument.switches:
            namespace = self._namespace(spelling)
            entry = namespace.get(spelling)
            if entry is not None and entry.dest == argument.dest:
                del namespace[spelling]

    def resolve(self, token: str) -> str | None:
        """Return the destination key for a primary or alternate spelling."""
        entry = self._namespace(token).get(token)
        return entry.dest if entry else None

    def resolve_primary(self, token: str) -> str | None:
        """Return the destination key only if `token` is a primary name."""
        entry = self._namespace(token).get(token)
        if entry is None or not entry.primary:
            return None
        return entry.dest

    @staticmethod
    def check_combinable(arguments: Iterable[Argument]) -> None:
        """
        Enforce the combine-mode rule on every Bool argument.

        Raises:
            ArgumentError: INCOMPATIBLE_SWITCHES for the first offender.
        """
        for argument in arguments:
            if argument.value_type is not ValueType.BOOL:
                continue
            if leading_dashes(argument.name) != 1 or len(argument.name) != 2:
                raise ArgumentError(
                    ErrorKind.INCOMPATIBLE_SWITCHES,
                    f"Combined switches need single-letter bool switches like '-v'; "
                    f"'{argument.name}' ({argument.dest}) does not qualify",
                    dest=argument.dest,
                    token=argument.name,
                )

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._single_dash or spelling in self._double_dash

    def __len__(self) -> int:
        return len(self._single_dash) + len(self._double_dash)
