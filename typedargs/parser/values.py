# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types and typed slot containers for `Argument`.

An argument holds its `nargs` values in exactly one of four immutable
containers, selected by its `ValueType`:

- `BoolValues`   → tuple[bool, ...]
- `IntValues`    → tuple[int, ...]
- `FloatValues`  → tuple[float, ...]
- `StringValues` → tuple[str, ...]

`ArgumentValues` is the union of the four. Readers check the container class
(the tag) before touching the slots, so a value is never read back as the
wrong type.

`ValueType` also accepts config-friendly aliases:

    ValueType("integer") → ValueType.INT
    ValueType("str")     → ValueType.STRING
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, Union


class ValueType(Enum):
    """
    The type of every value slot of an argument.

    Members:
        BOOL: true/false values.
        INT: integers.
        FLOAT: real numbers.
        STRING: free text.
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"

    @classmethod
    def choices(cls) -> list[ValueType]:
        """Return a list of all value types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "integer": "int",
            "double": "float",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
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
    def label(self) -> str:
        """Human readable name used in help output."""
        return {
            ValueType.BOOL: "Boolean",
            ValueType.INT: "integer",
            ValueType.FLOAT: "float",
            ValueType.STRING: "string",
        }[self]

    def accepts(self, value: Any) -> bool:
        """Return True if a Python object may be stored in a slot of this type."""
        if self is ValueType.BOOL:
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self is ValueType.INT:
            return isinstance(value, int)
        if self is ValueType.FLOAT:
            return isinstance(value, (int, float))
        return isinstance(value, str)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BoolValues:
    slots: tuple[bool, ...]
    value_type: ClassVar[ValueType] = ValueType.BOOL


@dataclass(frozen=True)
class IntValues:
    slots: tuple[int, ...]
    value_type: ClassVar[ValueType] = ValueType.INT


@dataclass(frozen=True)
class FloatValues:
    slots: tuple[float, ...]
    value_type: ClassVar[ValueType] = ValueType.FLOAT


@dataclass(frozen=True)
class StringValues:
    slots: tuple[str, ...]
    value_type: ClassVar[ValueType] = ValueType.STRING


ArgumentValues = Union[BoolValues, IntValues, FloatValues, StringValues]

_CONTAINERS: dict[ValueType, type] = {
    ValueType.BOOL: BoolValues,
    ValueType.INT: IntValues,
    ValueType.FLOAT: FloatValues,
    ValueType.STRING: StringValues,
}


def make_values(value_type: ValueType, slots: Iterable[Any]) -> ArgumentValues:
    """
    Build the container for `value_type` from already-typed slot values.

    Float containers widen integers to float.
    """
    items = tuple(slots)
    if value_type is ValueType.FLOAT:
        items = tuple(float(item) for item in items)
    return _CONTAINERS[value_type](items)
