# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token coercion helpers for typedargs argument values.

Converts raw command-line strings into `bool`, `int`, `float` or `str`
according to a `ValueType`. Unlike a permissive `bool("...")`, booleans only
accept a fixed vocabulary, and numbers must pass `is_numeric` (no exponents,
no embedded signs).

Functions:
- interpret_bool: Map a token to True/False, or None if unrecognized.
- coerce_bool: Convert a token to a boolean or raise ValueError.
- coerce_number: Convert a token to an int or float or raise ValueError.
- coerce_token: General-purpose coercion to a `ValueType`.
"""
from typedargs.parser.predicate import is_numeric
from typedargs.parser.values import ValueType

TRUE_TOKENS: frozenset[str] = frozenset({"true", "True", "TRUE", "T", "t", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"false", "False", "FALSE", "F", "f", "0"})


def interpret_bool(token: str) -> bool | None:
    """Return True or False for a recognized boolean token, else None."""
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def coerce_bool(token: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts true/True/TRUE/T/t/1 and false/False/FALSE/F/f/0 only.

    Raises:
        ValueError: If the token is not in the vocabulary.
    """
    result = interpret_bool(token)
    if result is None:
        raise ValueError(f"'{token}' is not a recognized boolean value")
    return result


def coerce_number(token: str, value_type: ValueType) -> int | float:
    """
    Convert a numeric literal to `int` or `float`.

    Integers truncate a fractional part toward zero ("3.9" → 3, "-.5" → 0).

    Raises:
        ValueError: If the token is not a plain decimal literal.
    """
    if not is_numeric(token):
        raise ValueError(f"'{token}' is not a recognized number")
    if value_type is ValueType.INT:
        whole, _, _ = token.partition(".")
        if whole in ("", "-"):
            return 0
        return int(whole)
    return float(token)


def coerce_token(token: str, value_type: ValueType) -> bool | int | float | str:
    """
    Attempt to convert a string to the given value type.

    Raises:
        ValueError: If conversion fails.
    """
    if value_type is ValueType.BOOL:
        return coerce_bool(token)
    if value_type in (ValueType.INT, ValueType.FLOAT):
        return coerce_number(token, value_type)
    return token
