# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction`, the enum describing what happens when an optional
argument's switch is encountered on the command line.

Supports alias coercion for shorthand or config-friendly values.

Example:
    ArgumentAction("store_true") → ArgumentAction.STORE_TRUE
    ArgumentAction("true")       → ArgumentAction.STORE_TRUE (via alias)
    ArgumentAction("store")      → ArgumentAction.DEFAULT (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        DEFAULT: Consume the next `nargs` tokens as the value.
        STORE_TRUE: Store `True` if the switch is present (Bool, optional only).
        STORE_FALSE: Store `False` if the switch is present (Bool, optional only).

    Aliases:
        - "store" → "default"
        - "true" → "store_true"
        - "false" → "store_false"
    """

    DEFAULT = "default"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "store": "default",
            "true": "store_true",
            "false": "store_false",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def is_binary(self) -> bool:
        """True for actions that take no value tokens."""
        return self in (ArgumentAction.STORE_TRUE, ArgumentAction.STORE_FALSE)

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
